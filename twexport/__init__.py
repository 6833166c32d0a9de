"""Export library strings into translation-platform projects."""

__version__ = "0.1.0"
