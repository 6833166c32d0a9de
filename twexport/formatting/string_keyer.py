"""Content-addressed keys for extracted strings."""

import hashlib

KEY_LENGTH = 16


def string_key(string: str) -> str:
    """Return the first 16 hex digits of the SHA-1 digest of the string."""
    return hashlib.sha1(string.encode("utf-8")).hexdigest()[:KEY_LENGTH]
