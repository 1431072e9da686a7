# inflexion/adapters/__init__.py
