"""Generate shopping lists from recipe files."""

__version__ = "0.1.0"
