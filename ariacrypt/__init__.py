"""ARIA block cipher, block-file helpers and an interactive tool for .txt files."""

__version__ = "0.1.0"
__all__ = ["__version__"]