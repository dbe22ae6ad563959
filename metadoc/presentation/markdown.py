"""
Markdown — Example and namespace rendering

Each example becomes a blockquoted description followed by its body:

    > Description

    ```
    (md5 "abc") ;; => 900150983cd24fb0d6963f7d28e17f72
    ```

Regular examples are evaluated here (their value_fn is called and the
result appended to the last code line). Generated images are not drawn;
only the expected image link is emitted.

Usage:
    from metadoc.presentation.markdown import example_markdown, examples_info

    fragment = example_markdown(ex)
    section = examples_info(meta.examples)
"""

from typing import Any, Iterable, List

from ..core.errors import MetaDocError
from ..core.examples import GeneratedImageExample, RegularExample, StaticImageExample
from ..core.store import Namespace


NEW_LINE = "\n"
SEPARATOR = NEW_LINE + NEW_LINE
CODE_FENCE = "```"
RESULT_MARKER = " ;; => "


class UnknownExampleError(MetaDocError):
    """Object passed for rendering is not one of the example types."""

    def __init__(self, obj: Any):
        self.obj = obj
        kind = getattr(obj, "type", type(obj).__name__)
        super().__init__(f"Unknown example type: {kind!r}")


def example_format(doc: str, body: str) -> str:
    """Common layout: blank line, blockquoted description, blank line, body."""
    return SEPARATOR + "> " + doc + SEPARATOR + body


def _with_result(code: str, result: Any) -> str:
    """Append the evaluation result to the last line of code."""
    return code.rstrip(NEW_LINE) + RESULT_MARKER + str(result) + NEW_LINE


def example_markdown(example: Any) -> str:
    """
    Render one example as markdown.

    Raises:
        UnknownExampleError: If example is not a known example type
        Exception: Anything a regular example's value_fn raises, unchanged
    """
    if isinstance(example, RegularExample):
        code = example.example
        if example.value_fn is not None:
            code = _with_result(code, example.value_fn())
        return example_format(example.doc, CODE_FENCE + NEW_LINE + code + CODE_FENCE)

    if isinstance(example, GeneratedImageExample):
        block = CODE_FENCE + NEW_LINE + example.example + CODE_FENCE
        return example_format(example.doc, block + SEPARATOR + example.value)

    if isinstance(example, StaticImageExample):
        return example_format(example.doc, example.value)

    raise UnknownExampleError(example)


def examples_info(examples: Iterable[Any]) -> str:
    """Render all examples in order and concatenate them."""
    return "".join(example_markdown(e) for e in examples)


# =============================================================================
# Page rendering
# =============================================================================

def render_namespace(namespace: Namespace) -> str:
    """
    Render a namespace and its symbols as one markdown page.

    Used by the CLI to show the result of a run; the documentation site
    generator normally reads the doc fields directly.
    """
    lines: List[str] = [f"# {namespace.name}", ""]
    if namespace.doc:
        lines.extend([namespace.doc.strip(NEW_LINE), ""])

    for meta in namespace.symbols():
        lines.extend([f"## {meta.name}", ""])
        if meta.doc:
            lines.extend([meta.doc.strip(NEW_LINE), ""])

    return NEW_LINE.join(lines)


def namespace_to_dict(namespace: Namespace) -> dict:
    """Plain data view of a namespace's docs, for JSON output."""
    return {
        "namespace": namespace.name,
        "doc": namespace.doc,
        "symbols": {meta.name: meta.doc for meta in namespace.symbols()},
    }
