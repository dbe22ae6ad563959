"""
Presentation — Markdown output for metadoc

- Markdown: per-example fragments, namespace pages, JSON-ready views
"""

from .markdown import (
    UnknownExampleError,
    example_markdown, examples_info,
    render_namespace, namespace_to_dict,
)

__all__ = [
    "UnknownExampleError",
    "example_markdown", "examples_info",
    "render_namespace", "namespace_to_dict",
]
