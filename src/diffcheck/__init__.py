"""DiffCheck — function-level code comparison with style-insensitive matching."""

__version__ = "0.8.0"
