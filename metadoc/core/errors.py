"""
Errors — Shared exception base for metadoc

Each module defines its own specific errors next to the code that raises
them; they all derive from MetaDocError so callers (the CLI in particular)
can catch the whole family at once.
"""


class MetaDocError(Exception):
    """Base class for all metadoc errors."""
