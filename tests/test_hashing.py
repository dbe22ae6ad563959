"""
Tests for content_hash — stable names for generated images
"""

import re

from metadoc.core.hashing import content_hash, HASH_LENGTH


HEX_32 = re.compile(r'^[0-9a-f]{32}$')


class TestContentHash:
    """Fixed-length, deterministic digests."""

    def test_returns_32_hex_characters(self):
        """Digest is 32 lowercase hex characters."""
        assert HEX_32.match(content_hash("(md5 \"abc\")\nDescription"))
        assert HASH_LENGTH == 32

    def test_empty_string_is_valid(self):
        """Empty input still yields a full digest."""
        assert HEX_32.match(content_hash(""))

    def test_is_deterministic(self):
        """Same input always produces the same digest."""
        assert content_hash("abc") == content_hash("abc")

    def test_different_inputs_differ(self):
        """Changing one character changes the digest."""
        assert content_hash("abc") != content_hash("abd")

    def test_unicode_input(self):
        """Non-ASCII text is hashed as UTF-8."""
        assert HEX_32.match(content_hash("σχήμα ✓"))
