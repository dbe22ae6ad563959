"""
metadoc — Examples and generated sections for API docs

Attach worked examples to documented symbols, then append Examples,
Additional info, Categories and Constants sections to their docs.

Usage:
    from metadoc import Namespace, example, alter_docs

    ns = Namespace("geometry", doc="Geometry helpers.")
    ns.define("area", "Area of a rectangle.", category="shape")
    ns.add_examples("area", example("Unit square", "(area 1 1)", fn=lambda: 1))
    alter_docs(ns)
    print(ns.get_doc("area"))

    metadoc render geometry.yaml
    metadoc module mypackage.shapes --format json
"""

__version__ = "0.1.0"

# Core layer (data)
from .core.errors import MetaDocError
from .core.forms import Symbol, Keyword, Form, Vector, Map, HashSet, ReadError, read_forms, to_source
from .core.printer import BLOCK_FORMS, format_forms
from .core.hashing import content_hash
from .core.examples import (
    DrawType, ImageParams,
    RegularExample, GeneratedImageExample, StaticImageExample,
    example, example_gen_image, example_image,
)
from .core.store import (
    Namespace, SymbolMeta, UnknownSymbolError,
    add_examples, with_examples, generate_graph_examples,
)

# Presentation layer
from .presentation.markdown import UnknownExampleError, example_markdown, examples_info

# Services layer
from .services.aggregator import AlterStatus, alter_docs, alter_docs_in_all
from .services.loader import LoaderError, load_namespace
from .services.discovery import namespace_from_module

# Config (stays at root)
from .config import Config, ConfigManager, DocsConfig, get_config

__all__ = [
    # Core
    'MetaDocError', 'ReadError', 'UnknownSymbolError',
    'Symbol', 'Keyword', 'Form', 'Vector', 'Map', 'HashSet', 'read_forms', 'to_source',
    'BLOCK_FORMS', 'format_forms', 'content_hash',
    'DrawType', 'ImageParams',
    'RegularExample', 'GeneratedImageExample', 'StaticImageExample',
    'example', 'example_gen_image', 'example_image',
    'Namespace', 'SymbolMeta',
    'add_examples', 'with_examples', 'generate_graph_examples',
    # Presentation
    'UnknownExampleError', 'example_markdown', 'examples_info',
    # Services
    'AlterStatus', 'alter_docs', 'alter_docs_in_all',
    'LoaderError', 'load_namespace', 'namespace_from_module',
    # Config
    'Config', 'ConfigManager', 'DocsConfig', 'get_config',
]
