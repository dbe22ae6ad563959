"""
Store — Per-symbol documentation metadata for one namespace

The Namespace is the registry the rest of metadoc works against:
definitions register symbols and append examples, the aggregator reads that
metadata and appends generated sections to the doc text.

Doc text is append-only: nothing here replaces or trims an existing doc.
There is no locking; a single writer per namespace is assumed.

Usage:
    from metadoc.core.store import Namespace

    ns = Namespace("geometry", doc="Geometry helpers.")
    ns.define("area", "Area of a rectangle.", category="shape")
    ns.define("PI", "Pi.", const=3.14159, tag=float)
    ns.add_examples("area", example("Unit square", "(area 1 1)"))

    ns.append_doc("area", "\\n\\nSee also [[perimeter]].")
    ns.append_doc(None, "\\n\\nNamespace footer.")
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from rapidfuzz import process

from .errors import MetaDocError
from .examples import Example, GeneratedImageExample, example_image


logger = logging.getLogger(__name__)


class _Missing:
    """Marker for 'no constant value' (None and 0 are valid constants)."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class UnknownSymbolError(MetaDocError, KeyError):
    """Symbol is not registered in the namespace."""

    def __init__(self, name: str, namespace: str, suggestions: Optional[List[str]] = None):
        self.name = name
        self.namespace = namespace
        self.suggestions = suggestions or []
        message = f"Unknown symbol '{name}' in namespace '{namespace}'"
        if self.suggestions:
            message += f". Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


@dataclass
class SymbolMeta:
    """Documentation metadata for one public symbol."""
    name: str
    doc: str = ""
    examples: List[Example] = field(default_factory=list)
    const_value: Any = MISSING
    tag: Any = None
    category: Optional[str] = None

    @property
    def is_const(self) -> bool:
        return self.const_value is not MISSING

    @property
    def has_tag(self) -> bool:
        return self.tag is not None


def normalize_category(key: Any) -> Optional[str]:
    """Category keys are plain strings: Keyword('alpha') and ':alpha' -> 'alpha'."""
    if key is None:
        return None
    return str(key).lstrip(":")


class Namespace:
    """
    Registry of public symbols and their metadata, plus the namespace's
    own doc text and category labels.

    Symbols iterate in registration order.
    """

    def __init__(
        self,
        name: str,
        doc: str = "",
        categories: Optional[Mapping[Any, str]] = None,
    ):
        """
        Initialize namespace.

        Args:
            name: Namespace name (e.g., "geometry.shapes")
            doc: Namespace doc text
            categories: Category key -> display label
        """
        self.name = name
        self.doc = doc or ""
        self.categories: Dict[str, str] = {
            normalize_category(k): v for k, v in (categories or {}).items()
        }
        self._symbols: Dict[str, SymbolMeta] = {}

    def __repr__(self) -> str:
        return f"Namespace({self.name!r}, symbols={len(self._symbols)})"

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    # =========================================================================
    # Definitions
    # =========================================================================

    def define(
        self,
        name: str,
        doc: Optional[str] = None,
        *,
        const: Any = MISSING,
        tag: Any = None,
        category: Any = None,
        examples: Tuple[Example, ...] = (),
    ) -> SymbolMeta:
        """
        Register a public symbol, or update an existing one.

        Only the fields that are passed are updated on re-definition;
        examples are appended.

        Returns:
            The symbol's metadata record
        """
        meta = self._symbols.get(name)
        if meta is None:
            meta = SymbolMeta(name=name)
            self._symbols[name] = meta

        if doc is not None:
            meta.doc = doc
        if const is not MISSING:
            meta.const_value = const
        if tag is not None:
            meta.tag = tag
        if category is not None:
            meta.category = normalize_category(category)
        if examples:
            meta.examples.extend(examples)
        return meta

    def symbol(self, name: str) -> SymbolMeta:
        """
        Look up a symbol.

        Raises:
            UnknownSymbolError: With close matches when the name is unknown
        """
        try:
            return self._symbols[name]
        except KeyError:
            matches = process.extract(name, list(self._symbols), limit=3, score_cutoff=60)
            raise UnknownSymbolError(name, self.name, [m[0] for m in matches]) from None

    def symbols(self) -> Iterator[SymbolMeta]:
        """Public symbols in registration order."""
        return iter(list(self._symbols.values()))

    def add_examples(self, name: str, *examples: Example) -> List[Example]:
        """
        Append examples to a symbol. Repeated calls grow the list.

        Returns:
            The symbol's full example list
        """
        meta = self.symbol(name)
        meta.examples.extend(examples)
        return meta.examples

    # =========================================================================
    # Doc text (append-only)
    # =========================================================================

    def get_doc(self, name: Optional[str] = None) -> str:
        """Doc of a symbol, or of the namespace itself when name is None."""
        if name is None:
            return self.doc
        return self.symbol(name).doc

    def append_doc(self, name: Optional[str], text: str) -> None:
        """Append text to a symbol's doc, or the namespace's when name is None."""
        if name is None:
            self.doc = (self.doc or "") + text
            return
        meta = self.symbol(name)
        meta.doc = (meta.doc or "") + text

    # =========================================================================
    # Queries
    # =========================================================================

    def examples(self) -> Dict[str, List[Example]]:
        """Symbols that carry examples, with their example lists."""
        return {m.name: m.examples for m in self._symbols.values() if m.examples}

    def generated_images(self) -> List[Tuple[str, GeneratedImageExample]]:
        """(symbol name, example) for every image the drawing collaborator has to produce."""
        return [
            (m.name, ex)
            for m in self._symbols.values()
            for ex in m.examples
            if isinstance(ex, GeneratedImageExample)
        ]


# =============================================================================
# Definition-time helpers
# =============================================================================

def add_examples(namespace: Namespace, name: str, *examples: Example, config: Any = None) -> None:
    """
    Attach examples to a symbol unless examples are switched off.

    Args:
        namespace: Target namespace
        name: Registered symbol name
        examples: Examples to append
        config: Optional DocsConfig; examples_enabled=False skips registration
    """
    if config is not None and not config.examples_enabled:
        logger.debug("Examples disabled, not attaching %d to %s/%s", len(examples), namespace.name, name)
        return
    if not examples:
        return
    namespace.add_examples(name, *examples)


def with_examples(*examples: Example) -> Callable:
    """
    Decorator attaching examples to a function or class.

    The examples are stored on the object's __examples__ list and picked up
    by metadoc.services.discovery.namespace_from_module().

        @with_examples(example("Sum", "(add 1 2)", fn=lambda: add(1, 2)))
        def add(a, b):
            return a + b
    """
    def decorate(obj):
        existing = list(getattr(obj, "__examples__", None) or [])
        obj.__examples__ = existing + list(examples)
        return obj
    return decorate


def generate_graph_examples(namespace: Namespace, prefix: str, suffix: str, *names: str) -> None:
    """
    Attach a pre-made graph image to each named symbol.

    The image for `name` is prefix + name + suffix, described as "`name` graph".
    """
    for name in names:
        namespace.add_examples(name, example_image(f"`{name}` graph", f"{prefix}{name}{suffix}"))
