"""
Printer — Block-aware layout of example code

Turns a sequence of forms into readable, re-readable source text. The
result is shown in code blocks and is also the hash input for generated
image names, so the output must be stable for a given input.

Layout rules, per top-level element:
- String atom: wrapped in quotation marks as-is
- Form with more than two elements whose head is a block form
  (->, do, let, ...): head and second element on the first line, the rest
  on following lines aligned just past "(" + head + " "
- Anything else: plain flat source text

Usage:
    from metadoc.core.printer import format_forms

    format_forms('(let [x 1] (inc x) (dec x))')
    # '(let [x 1]\\n     (inc x)\\n     (dec x))\\n'
"""

from typing import Any, FrozenSet, Iterable, Optional

from .forms import Form, Keyword, Symbol, as_forms, to_source


NEW_LINE = "\n"

# Heads whose forms get block layout
BLOCK_FORMS: FrozenSet[str] = frozenset({
    "->",
    "do",
    "doseq",
    "example",
    "add-examples",
    "example-gen-image",
    "example-image",
    "let",
})


def maybe_wrap_string(expr: Any) -> str:
    """Wrap a string atom in quotation marks; other values print flat."""
    if isinstance(expr, str) and not isinstance(expr, (Symbol, Keyword)):
        return '"' + expr + '"'
    return to_source(expr)


def is_block(expr: Any, block_forms: Iterable[str] = BLOCK_FORMS) -> bool:
    """True when expr gets block layout."""
    return (
        isinstance(expr, Form)
        and len(expr) > 2
        and isinstance(expr.head, Symbol)
        and expr.head in block_forms
    )


def _render(expr: Any, indent: str, block_forms: FrozenSet[str]) -> str:
    if not is_block(expr, block_forms):
        return maybe_wrap_string(expr)

    name = str(expr.head)
    child_indent = indent + " " * (len(name) + 2)
    rest = _format(expr[2:], child_indent, block_forms)
    return "(" + name + " " + maybe_wrap_string(expr[1]) + NEW_LINE + rest + ")"


def _format(forms: Iterable[Any], indent: str, block_forms: FrozenSet[str]) -> str:
    return NEW_LINE.join(indent + _render(e, indent, block_forms) for e in forms)


def format_forms(
    forms: Any,
    indent: Optional[str] = None,
    block_forms: Optional[Iterable[str]] = None,
) -> str:
    """
    Format forms as indented source text.

    Args:
        forms: Sequence of forms, or source text to read first
        indent: Prefix for every line. When omitted the result is formatted
                with no indent and a trailing newline is appended.
        block_forms: Heads that trigger block layout (default: BLOCK_FORMS)

    Returns:
        Formatted source text

    Examples:
        format_forms(["abc"])                       -> '"abc"\\n'
        format_forms('(do x)')                      -> '(do x)\\n'
        format_forms('(-> c (rect 1 2) (line 3))')  -> '(-> c\\n    (rect 1 2)\\n    (line 3))\\n'
    """
    heads = BLOCK_FORMS if block_forms is None else frozenset(block_forms)
    forms = as_forms(forms)

    if indent is None:
        return _format(forms, "", heads) + NEW_LINE
    return _format(forms, indent, heads)
