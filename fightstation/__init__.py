"""Fight Station translation service: cached translation of user-generated content."""

__version__ = "1.0.0"
