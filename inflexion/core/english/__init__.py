# inflexion/core/english/__init__.py
"""English-specific helpers: number words and indefinite articles."""
