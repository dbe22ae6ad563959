"""
Discovery — Documentation metadata from an imported Python module

Reads a module's public surface into a Namespace so the aggregator can run
over ordinary Python code:

- Public names: __all__ when defined, otherwise names without a leading
  underscore (imported modules, classes and functions excluded)
- Doc: inspect.getdoc() of the module and of each class or function;
  plain values get no doc (their type's docstring is not theirs)
- Constants: UPPER_CASE public names bound to non-callable values
- Type tag: the module-level annotation for the name, if any
- Category: the object's __category__ attribute
- Category labels: the module's __categories__ mapping
- Examples: the object's __examples__ list (see core.store.with_examples)

The module itself is never modified.
"""

import importlib
import inspect
import logging
import re
from types import ModuleType
from typing import Any, List, Union

from ..core.store import MISSING, Namespace


logger = logging.getLogger(__name__)

CONSTANT_NAME = re.compile(r'^[A-Z][A-Z0-9_]*$')


def get_public_names(module: ModuleType) -> List[str]:
    """Exported names of a module, in __all__ order or definition order."""
    exports = getattr(module, "__all__", None)
    if exports is not None:
        return [name for name in exports if hasattr(module, name)]
    return [
        name for name, value in vars(module).items()
        if not name.startswith("_") and not inspect.ismodule(value) and _defined_in(value, module)
    ]


def _defined_in(value: Any, module: ModuleType) -> bool:
    """False for classes and functions imported from another module."""
    if inspect.isclass(value) or inspect.isroutine(value):
        return getattr(value, "__module__", module.__name__) == module.__name__
    return True


def _own_doc(value: Any) -> str:
    """Docstring of a class, routine or module; plain values have none of their own."""
    if inspect.isclass(value) or inspect.isroutine(value) or inspect.ismodule(value):
        return inspect.getdoc(value) or ""
    return ""


def _is_constant(name: str, value: Any) -> bool:
    return bool(CONSTANT_NAME.match(name)) and not callable(value)


def namespace_from_module(module: Union[ModuleType, str]) -> Namespace:
    """
    Build a Namespace from a module object or an importable module name.

    Raises:
        ImportError: If a module name cannot be imported
    """
    if isinstance(module, str):
        module = importlib.import_module(module)

    annotations = getattr(module, "__annotations__", {}) or {}
    namespace = Namespace(
        module.__name__,
        doc=inspect.getdoc(module) or "",
        categories=getattr(module, "__categories__", None),
    )

    for name in get_public_names(module):
        value = getattr(module, name)
        constant = _is_constant(name, value)

        doc = "" if constant else _own_doc(value)

        namespace.define(
            name,
            doc,
            const=value if constant else MISSING,
            tag=annotations.get(name),
            category=getattr(value, "__category__", None),
            examples=tuple(getattr(value, "__examples__", None) or ()),
        )

    logger.debug("Discovered %d public symbols in %s", len(namespace), module.__name__)
    return namespace
