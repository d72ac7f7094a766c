"""Local-first volunteer hours log."""

__version__ = "0.1.0"
