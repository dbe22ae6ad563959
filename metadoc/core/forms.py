"""
Forms — Expression trees for example code

Example bodies are kept as data, not as Python code. An expression is
either an atom or a container of expressions:

- Atoms: str, Symbol, Keyword, int, float, bool, None
- Containers: Form (parenthesised), Vector (square brackets, a plain
  list prints the same way), Map (braces, a dict prints the same way),
  HashSet (#{...}, a Python set prints sorted by its source text)

The reader builds Map and HashSet, never dict or set: elements keep their
source order and equal-comparing elements ("a", :a, a) are not merged.

Only Form is a candidate for block layout in the printer; the other
containers always print flat.

Usage:
    from metadoc.core.forms import Form, Symbol, read_forms, to_source

    body = read_forms('(let [x 1] (inc x) (dec x))')
    to_source(body[0])    # '(let [x 1] (inc x) (dec x))'

    Form(Symbol("md5"), "abc")   # (md5 "abc")
"""

import re
from typing import Any, List, Sequence

from .errors import MetaDocError


class ReadError(MetaDocError, ValueError):
    """Source text could not be read into forms."""


# =============================================================================
# Atoms
# =============================================================================

class Symbol(str):
    """A bare name (md5, ->, rect). Prints without quotes."""

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


class Keyword(str):
    """A keyword (:simple). Stored without the leading colon."""

    def __new__(cls, name: str):
        return super().__new__(cls, name[1:] if name.startswith(":") else name)

    def __repr__(self) -> str:
        return f"Keyword({str.__repr__(self)})"


# =============================================================================
# Containers
# =============================================================================

class Form(tuple):
    """A parenthesised expression: Form(Symbol("+"), 1, 2) -> (+ 1 2)."""

    def __new__(cls, *items):
        return super().__new__(cls, items)

    @property
    def head(self) -> Any:
        """First element, or None for the empty form."""
        return self[0] if self else None

    def __repr__(self) -> str:
        return f"Form{tuple.__repr__(self)}"


class Vector(tuple):
    """A square-bracket expression: Vector(Symbol("x"), 1) -> [x 1]."""

    def __new__(cls, *items):
        return super().__new__(cls, items)

    def __repr__(self) -> str:
        return f"Vector{tuple.__repr__(self)}"


class Map(tuple):
    """A brace expression kept as ordered (key, value) pairs: Map((Keyword("w"), 200)) -> {:w 200}."""

    def __new__(cls, *pairs):
        return super().__new__(cls, (tuple(p) for p in pairs))

    def __repr__(self) -> str:
        return f"Map{tuple.__repr__(self)}"


class HashSet(tuple):
    """A set literal in source order: HashSet(1, 2) -> #{1 2}."""

    def __new__(cls, *items):
        return super().__new__(cls, items)

    def __repr__(self) -> str:
        return f"HashSet{tuple.__repr__(self)}"


# =============================================================================
# Plain source text
# =============================================================================

def quote_string(s: str) -> str:
    """Quote a string the way the reader expects it back."""
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_source(expr: Any) -> str:
    """
    Plain structural text of an expression.

    Strings are quoted and escaped, containers are printed flat with single
    spaces between elements. No layout is applied here; see
    metadoc.core.printer for block formatting.
    """
    # Symbol/Keyword subclass str, so they must be checked first
    if isinstance(expr, Symbol):
        return str(expr)
    if isinstance(expr, Keyword):
        return ":" + str(expr)
    if isinstance(expr, str):
        return quote_string(expr)
    if expr is None:
        return "nil"
    if isinstance(expr, bool):
        return "true" if expr else "false"
    if isinstance(expr, Form):
        return "(" + " ".join(to_source(e) for e in expr) + ")"
    if isinstance(expr, Map):
        return "{" + ", ".join(f"{to_source(k)} {to_source(v)}" for k, v in expr) + "}"
    if isinstance(expr, HashSet):
        return "#{" + " ".join(to_source(e) for e in expr) + "}"
    if isinstance(expr, (Vector, list)):
        return "[" + " ".join(to_source(e) for e in expr) + "]"
    if isinstance(expr, dict):
        pairs = (f"{to_source(k)} {to_source(v)}" for k, v in expr.items())
        return "{" + ", ".join(pairs) + "}"
    if isinstance(expr, (set, frozenset)):
        # Iteration order of a set varies between processes
        return "#{" + " ".join(sorted(to_source(e) for e in expr)) + "}"
    return str(expr)


# =============================================================================
# Reader
# =============================================================================

# Strings first so that brackets inside them are not split out
TOKEN_PATTERN = re.compile(
    r'''
    (?P<ws>[\s,]+)
  | (?P<comment>;[^\n]*)
  | (?P<string>"(?:\\.|[^"\\])*")
  | (?P<unterminated>")
  | (?P<set>\#\{)
  | (?P<open>[(\[{])
  | (?P<close>[)\]}])
  | (?P<atom>[^\s,;()\[\]{}"]+)
    ''',
    re.VERBOSE,
)

INT_PATTERN = re.compile(r'^[+-]?\d+$')
FLOAT_PATTERN = re.compile(r'^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$')

_CLOSERS = {"(": ")", "[": "]", "{": "}", "#{": "}"}
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}


def _tokenize(text: str) -> List[tuple]:
    tokens = []
    for match in TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        if kind in ("ws", "comment"):
            continue
        if kind == "unterminated":
            raise ReadError(f"Unterminated string at offset {match.start()}")
        tokens.append((kind, match.group(), match.start()))
    return tokens


def _read_string(token: str) -> str:
    body = token[1:-1]
    return re.sub(r'\\(.)', lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


def _read_atom(token: str) -> Any:
    if token == "nil":
        return None
    if token == "true":
        return True
    if token == "false":
        return False
    if token.startswith(":") and len(token) > 1:
        return Keyword(token)
    if INT_PATTERN.match(token):
        return int(token)
    if FLOAT_PATTERN.match(token):
        return float(token)
    return Symbol(token)


def _build(opener: str, items: list, offset: int) -> Any:
    if opener == "(":
        return Form(*items)
    if opener == "[":
        return Vector(*items)
    if opener == "#{":
        return HashSet(*items)
    if len(items) % 2:
        raise ReadError(f"Map literal at offset {offset} has an odd number of elements")
    return Map(*zip(items[::2], items[1::2]))


def read_forms(text: str) -> List[Any]:
    """
    Read every top-level form from source text.

    Supports the subset of reader syntax that example code uses: lists,
    vectors, maps, sets, strings, numbers, keywords, symbols, nil/true/false
    and ; comments. Reader macros (quote, deref, tagged literals) are not
    supported; a leading ' is kept as part of the symbol.

    Raises:
        ReadError: On unbalanced delimiters or unterminated strings
    """
    # Stack of (opener, offset, items); the bottom entry collects top-level forms
    stack: List[tuple] = [(None, 0, [])]

    for kind, token, offset in _tokenize(text):
        if kind in ("open", "set"):
            stack.append((token, offset, []))
        elif kind == "close":
            opener, start, items = stack[-1]
            if opener is None or _CLOSERS[opener] != token:
                raise ReadError(f"Unexpected '{token}' at offset {offset}")
            stack.pop()
            stack[-1][2].append(_build(opener, items, start))
        elif kind == "string":
            stack[-1][2].append(_read_string(token))
        else:
            stack[-1][2].append(_read_atom(token))

    if len(stack) > 1:
        opener, start, _ = stack[-1]
        raise ReadError(f"Unclosed '{opener}' at offset {start}")
    return stack[0][2]


def as_forms(body: Any) -> Sequence[Any]:
    """Accept either source text or an already-built sequence of forms."""
    if isinstance(body, str) and not isinstance(body, (Symbol, Keyword)):
        return read_forms(body)
    if isinstance(body, Form):
        # A single form is a one-element body, not a body of its elements
        return [body]
    return list(body)
