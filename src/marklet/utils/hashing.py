"""Hashing utilities for cache keys.

Example:
    >>> from marklet.utils.hashing import hash_str
    >>> hash_str("hello")
    '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
"""

import hashlib


def hash_str(content: str) -> str:
    """Return the SHA-256 hex digest of content encoded as UTF-8."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
