"""A small Git-like version control tool: objects, refs, HEAD, a staging index and a command line."""

__version__ = "0.1.0"

__all__ = ["__version__"]