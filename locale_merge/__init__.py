"""Build-time merger for per-component translation files."""

__version__ = "0.1.0"
