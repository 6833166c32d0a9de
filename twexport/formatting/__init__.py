"""Per-string transformations applied during export."""

from .placeholder_rewriter import PlaceholderRewriter
from .string_keyer import string_key
from .usage_context import build_context

__all__ = ["PlaceholderRewriter", "string_key", "build_context"]
