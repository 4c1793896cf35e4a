"""specscope - structure, attribute impact and compiled-output diffs for modular specs."""

__version__ = "0.1.0"

__all__ = ["__version__"]
