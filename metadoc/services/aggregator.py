"""
Aggregator — Generate additional documentation for a namespace

Walks the namespace's public symbols once, in registration order, and
appends generated sections to their doc text:

- Examples: every stored example rendered as markdown
- Additional info: constant value and/or type, for constants and tagged symbols
- Otherwise the symbol is listed under its category

Then appends two indices to the namespace's own doc:

- Categories: category label followed by [[name]] links, categories sorted
  by key, uncategorised symbols under "Other functions"
- Constants: [[name]] = `value`, sorted by name

Every run appends again. Running twice duplicates every section; callers
that need a clean result must start from fresh metadata.

Usage:
    from metadoc.services.aggregator import alter_docs

    status = alter_docs(namespace, DocsConfig(examples_enabled=False))
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config import DocsConfig
from ..core.store import Namespace, SymbolMeta
from ..presentation.markdown import NEW_LINE, SEPARATOR, examples_info


logger = logging.getLogger(__name__)


# Sorts after ordinary category keys. A key that sorts after this one
# lists after "Other functions".
UNCATEGORIZED = "zzzzzz"
UNCATEGORIZED_LABEL = "Other functions"

ESCAPE_MAP = {
    "\uffff": "\\0xffff",
    "\r": "\\r",
    "\n": "\\n",
}


class AlterStatus(Enum):
    """Outcome of alter_docs()."""
    DONE = "done"
    SKIPPED = "skipped"


def escape(s: str) -> str:
    """Replace newline, carriage return and U+FFFF with visible escapes."""
    return "".join(ESCAPE_MAP.get(c, c) for c in s)


def type_name(tag: Any) -> str:
    """Display name of a type tag: classes and functions by name, anything else as text."""
    if isinstance(tag, type):
        return tag.__name__
    if callable(tag):
        return getattr(tag, "__name__", type(tag).__name__)
    return str(tag)


# =============================================================================
# Per-symbol sections
# =============================================================================

def _examples_section(meta: SymbolMeta) -> str:
    return SEPARATOR + "#### Examples" + NEW_LINE + examples_info(meta.examples)


def _additional_info_section(meta: SymbolMeta) -> str:
    text = SEPARATOR + "##### Additional info" + NEW_LINE
    if meta.is_const:
        text += NEW_LINE + escape(f"* Constant value `{meta.name} = {meta.const_value}`")
    if meta.has_tag:
        text += NEW_LINE + "* Type: " + type_name(meta.tag)
    return text


# =============================================================================
# Namespace indices
# =============================================================================

def categories_section(categories: Dict[str, List[str]], labels: Dict[str, str]) -> str:
    """Render the Categories index; categories sorted by key."""
    lines = []
    for key in sorted(categories):
        label = labels.get(key, key)
        links = " ".join(f"[[{name}]]" for name in sorted(categories[key]))
        lines.append(f"  * {label}: {links}")
    return SEPARATOR + "  #### Categories" + SEPARATOR + NEW_LINE.join(lines)


def constants_section(constants: Dict[str, str]) -> str:
    """Render the Constants index; constants sorted by name."""
    lines = [f"  * [[{name}]] = `{constants[name]}`" for name in sorted(constants)]
    return SEPARATOR + "  #### Constants" + SEPARATOR + NEW_LINE.join(lines)


# =============================================================================
# Entry point
# =============================================================================

def alter_docs(namespace: Namespace, config: Optional[DocsConfig] = None) -> AlterStatus:
    """
    Generate additional documentation for every public symbol of a namespace.

    Args:
        namespace: Namespace whose doc text is extended in place
        config: Run flags (default: DocsConfig(), both flags on)

    Returns:
        AlterStatus.DONE, or AlterStatus.SKIPPED when aggregation is disabled

    Raises:
        Exception: Whatever an example's value_fn raises; docs already
                   appended before the failure stay appended
    """
    config = config or DocsConfig()
    if not config.aggregation_enabled:
        logger.debug("Doc alteration disabled, skipping %s", namespace.name)
        return AlterStatus.SKIPPED

    constants: Dict[str, str] = {}
    categories: Dict[str, List[str]] = {}
    labels = dict(namespace.categories)
    labels[UNCATEGORIZED] = UNCATEGORIZED_LABEL

    for meta in namespace.symbols():
        if config.examples_enabled and meta.examples:
            namespace.append_doc(meta.name, _examples_section(meta))

        if meta.is_const or meta.has_tag:
            namespace.append_doc(meta.name, _additional_info_section(meta))
            if meta.is_const:
                constants[meta.name] = escape(str(meta.const_value))
        else:
            key = meta.category or UNCATEGORIZED
            categories.setdefault(key, []).append(meta.name)

    if categories:
        namespace.append_doc(None, categories_section(categories, labels))
    if constants:
        namespace.append_doc(None, constants_section(constants))

    logger.debug(
        "Altered docs of %s: %d symbols, %d categories, %d constants",
        namespace.name, len(namespace), len(categories), len(constants),
    )
    return AlterStatus.DONE


def alter_docs_in_all(namespaces, config: Optional[DocsConfig] = None) -> Dict[str, AlterStatus]:
    """Run alter_docs() over several namespaces; returns status per namespace name."""
    return {ns.name: alter_docs(ns, config) for ns in namespaces}
