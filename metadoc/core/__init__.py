"""
Core — Data layer for metadoc

Contains the foundational pieces:
- Forms: Expression trees, plain source text, reader
- Printer: Block-aware layout of forms
- Hashing: Content-addressed image names
- Examples: Regular / generated-image / static-image examples
- Store: Per-symbol metadata and the Namespace registry
"""

from .errors import MetaDocError
from .forms import Symbol, Keyword, Form, Vector, Map, HashSet, ReadError, read_forms, to_source
from .printer import BLOCK_FORMS, format_forms
from .hashing import content_hash
from .examples import (
    DrawType, ImageParams,
    RegularExample, GeneratedImageExample, StaticImageExample, Example,
    example, example_gen_image, example_image,
)
from .store import (
    MISSING, SymbolMeta, Namespace, UnknownSymbolError,
    add_examples, with_examples, generate_graph_examples,
)

__all__ = [
    # Errors
    'MetaDocError', 'ReadError', 'UnknownSymbolError',
    # Forms
    'Symbol', 'Keyword', 'Form', 'Vector', 'Map', 'HashSet', 'read_forms', 'to_source',
    # Printer
    'BLOCK_FORMS', 'format_forms',
    # Hashing
    'content_hash',
    # Examples
    'DrawType', 'ImageParams',
    'RegularExample', 'GeneratedImageExample', 'StaticImageExample', 'Example',
    'example', 'example_gen_image', 'example_image',
    # Store
    'MISSING', 'SymbolMeta', 'Namespace',
    'add_examples', 'with_examples', 'generate_graph_examples',
]
