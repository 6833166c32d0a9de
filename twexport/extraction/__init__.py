"""String extraction and cache reading modules."""

from .extractor import LibraryExtractor
from .strings_reader import StringsCacheReader

__all__ = ["LibraryExtractor", "StringsCacheReader"]
