"""
Hashing — Content-addressed names for generated example images

The same example code and description always produce the same name, so
image files can be cached between documentation builds without keeping a
registry. Any textual change to the code or the description changes the
name.

Usage:
    content_hash("(rect canvas 10 10 100 100)Description")
    # -> 32 lowercase hex characters, always the same for this input
"""

import xxhash


HASH_LENGTH = 32  # xxh128 hexdigest length


def content_hash(s: str) -> str:
    """
    Return a fixed-length hex digest for a string.

    Uses xxhash (xxh128) for fast, deterministic hashing. Intended for
    naming files, not for security.

    Args:
        s: Any string, empty string included

    Returns:
        32-character lowercase hex string
    """
    return xxhash.xxh128(s.encode("utf-8")).hexdigest()
