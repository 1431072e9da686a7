# inflexion/core/__init__.py
"""
Core domain layer.

Pure inflection logic: the noun rule engine, English number and article
helpers, and the template markup compiler/executor. Nothing here reads files
or configures logging; rule data arrives through an Environment.
"""
