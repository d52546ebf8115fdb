"""In-memory record stores and user, student and teacher providers for gateway samples."""

__version__ = "0.1.0"