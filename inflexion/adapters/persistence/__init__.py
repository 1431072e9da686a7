# inflexion/adapters/persistence/__init__.py
