# inflexion/core/domain/__init__.py
