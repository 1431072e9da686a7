# inflexion/shared/__init__.py
