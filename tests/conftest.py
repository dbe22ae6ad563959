"""
Shared pytest fixtures for the metadoc test suite.

Usage in tests:
    def test_something(sample_namespace):
        alter_docs(sample_namespace)
        assert "#### Examples" in sample_namespace.get_doc("md5")

    def test_loading(namespace_file):
        ns = load_namespace(namespace_file)
"""

import pytest

from metadoc.config import ConfigManager
from metadoc.core.examples import example, example_gen_image, example_image
from metadoc.core.hashing import content_hash
from metadoc.core.store import Namespace


SAMPLE_YAML = """\
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
        code: '(area 1 1)'
      - type: gen-image
        draw: simple
        doc: Square
        code: '(-> canvas (rect 10 10 100 100) (fill))'
        params: {w: 200, h: 100}
      - type: image
        doc: Area graph
        filename: area.png
  perimeter:
    doc: Perimeter of a rectangle.
  PI:
    doc: Pi.
    const: 3.14159
    tag: double
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the real user config and METADOC_* variables out of every test."""
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_FILE", tmp_path / "no-user-config.yaml")
    monkeypatch.delenv("METADOC_LOAD_EXAMPLES", raising=False)
    monkeypatch.delenv("METADOC_ALTER_DOCS", raising=False)


@pytest.fixture
def sample_namespace():
    """
    Namespace modelled on a small hashing module.

    Contains:
    - md5: two regular examples (one evaluated) and a static image, no category
    - canvas-demo: one generated image, category "drawing"
    - DIGEST_SIZE: constant 32 with a type tag
    """
    ns = Namespace("meta-doc.core", doc="Examples for docs.", categories={"drawing": "Drawing"})
    ns.define("md5", "Return hash for given string.")
    ns.add_examples(
        "md5",
        example("Hash of a string", '(md5 "abc")', fn=lambda: content_hash("abc")),
        example("Hash of another string", '(md5 "Another string")', evaluate=False),
        example_image("Just an example of an image.", "meta_doc/md5.jpg"),
    )
    ns.define("canvas-demo", "Draws a square.", category="drawing")
    ns.add_examples(
        "canvas-demo",
        example_gen_image("simple", "Square", "(rect canvas 10 10 100 100)"),
    )
    ns.define("DIGEST_SIZE", "Length of a digest.", const=32, tag=int)
    return ns


@pytest.fixture
def namespace_file(tmp_path):
    """YAML namespace definition on disk (geometry: area, perimeter, PI)."""
    path = tmp_path / "geometry.yaml"
    path.write_text(SAMPLE_YAML)
    return path
