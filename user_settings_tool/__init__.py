"""User Settings Tool: a flat ``key=value`` settings file store."""

__version__ = "1.0.0"
