# inflexion/core/markup/__init__.py
"""Template markup: tokenizer, option parser, compiler and executor."""
