"""DocSeek - local full-text search for text files."""

__version__ = "0.1.0"
