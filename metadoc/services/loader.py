"""
Loader — Namespace definitions from YAML

Lets documentation metadata live in a file instead of code:

    namespace: geometry
    doc: Geometry helpers.
    categories:
      shape: Shapes
    symbols:
      area:
        doc: Area of a rectangle.
        category: shape
        examples:
          - type: regular
            doc: Unit square
            code: (area 1 1)
          - type: gen-image
            draw: simple
            doc: Square
            code: (rect canvas 10 10 100 100)
            params: {w: 200, h: 200}
          - type: image
            doc: Area graph
            filename: area.png
      PI:
        doc: Pi.
        const: 3.14159
        tag: double

Examples read from YAML have no value function, so regular examples show
their code only.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from ..core.errors import MetaDocError
from ..core.examples import Example, example, example_gen_image, example_image
from ..core.forms import ReadError
from ..core.store import MISSING, Namespace


logger = logging.getLogger(__name__)

EXAMPLE_TYPES = ("regular", "gen-image", "image")


class LoaderError(MetaDocError):
    """Namespace definition file is missing, malformed or inconsistent."""


def _require(entry: Dict[str, Any], key: str, where: str) -> Any:
    if key not in entry or entry[key] is None:
        raise LoaderError(f"{where}: missing '{key}'")
    return entry[key]


def example_from_dict(entry: Dict[str, Any], where: str = "example",
                      block_forms: Optional[Iterable[str]] = None) -> Example:
    """
    Build one example from its mapping.

    Raises:
        LoaderError: Unknown type, missing keys or unreadable code
    """
    if not isinstance(entry, dict):
        raise LoaderError(f"{where}: expected a mapping, got {type(entry).__name__}")

    kind = str(entry.get("type", "regular")).lstrip(":")
    doc = str(_require(entry, "doc", where))

    try:
        if kind == "regular":
            return example(doc, str(_require(entry, "code", where)), block_forms=block_forms)
        if kind == "gen-image":
            params = entry.get("params")
            if params is not None and not isinstance(params, dict):
                raise LoaderError(f"{where}: 'params' must be a mapping")
            return example_gen_image(
                entry.get("draw", "simple"),
                doc,
                str(_require(entry, "code", where)),
                params=params,
                block_forms=block_forms,
            )
        if kind == "image":
            return example_image(doc, str(_require(entry, "filename", where)))
    except ReadError as e:
        raise LoaderError(f"{where}: {e}") from e
    except ValueError as e:
        # Unknown draw type
        raise LoaderError(f"{where}: {e}") from e

    raise LoaderError(f"{where}: unknown example type '{kind}'. Valid: {', '.join(EXAMPLE_TYPES)}")


def namespace_from_dict(data: Dict[str, Any], block_forms: Optional[Iterable[str]] = None) -> Namespace:
    """
    Build a Namespace from parsed YAML data.

    Raises:
        LoaderError: On structural problems
    """
    if not isinstance(data, dict):
        raise LoaderError("Namespace definition must be a mapping")

    name = str(_require(data, "namespace", "definition"))
    categories = data.get("categories") or {}
    if not isinstance(categories, dict):
        raise LoaderError(f"{name}: 'categories' must be a mapping")

    namespace = Namespace(name, doc=data.get("doc") or "", categories=categories)

    symbols = data.get("symbols") or {}
    if not isinstance(symbols, dict):
        raise LoaderError(f"{name}: 'symbols' must be a mapping of name to definition")

    for sym_name, entry in symbols.items():
        entry = entry or {}
        where = f"{name}/{sym_name}"
        if not isinstance(entry, dict):
            raise LoaderError(f"{where}: expected a mapping")

        raw_examples = entry.get("examples") or []
        if not isinstance(raw_examples, list):
            raise LoaderError(f"{where}: 'examples' must be a list")

        namespace.define(
            str(sym_name),
            entry.get("doc") or "",
            const=entry["const"] if "const" in entry else MISSING,
            tag=entry.get("tag"),
            category=entry.get("category"),
            examples=tuple(
                example_from_dict(ex, f"{where} example {i + 1}", block_forms)
                for i, ex in enumerate(raw_examples)
            ),
        )

    logger.debug("Loaded namespace %s with %d symbols", name, len(namespace))
    return namespace


def load_namespace(path: Path, block_forms: Optional[Iterable[str]] = None) -> Namespace:
    """
    Load a namespace definition from a YAML file.

    Raises:
        LoaderError: File missing, invalid YAML or invalid structure
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise LoaderError(f"File not found: {path}") from e
    except yaml.YAMLError as e:
        raise LoaderError(f"Invalid YAML in {path}: {e}") from e

    return namespace_from_dict(data, block_forms)
