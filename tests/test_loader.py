"""
Tests for YAML namespace definitions
"""

import pytest

from metadoc.core.examples import (
    DrawType, GeneratedImageExample, RegularExample, StaticImageExample,
)
from metadoc.services.loader import LoaderError, example_from_dict, load_namespace, namespace_from_dict


class TestLoadNamespace:
    """Loading a definition file builds a populated Namespace."""

    def test_symbols_in_file_order(self, namespace_file):
        ns = load_namespace(namespace_file)
        assert ns.name == "geometry"
        assert ns.get_doc() == "Geometry helpers."
        assert [m.name for m in ns.symbols()] == ["area", "perimeter", "PI"]
        assert ns.categories == {"shape": "Shapes"}

    def test_examples(self, namespace_file):
        ns = load_namespace(namespace_file)
        regular, image, static = ns.symbol("area").examples

        assert isinstance(regular, RegularExample)
        assert regular.example == "(area 1 1)\n"
        assert regular.value_fn is None

        assert isinstance(image, GeneratedImageExample)
        assert image.draw_type is DrawType.SIMPLE
        assert image.example == "(-> canvas\n    (rect 10 10 100 100)\n    (fill))\n"
        assert image.params.width == 200
        assert image.params.height == 100

        assert isinstance(static, StaticImageExample)
        assert static.value == '![area.png](../images/area.png "Area graph")'

    def test_constant_and_tag(self, namespace_file):
        meta = load_namespace(namespace_file).symbol("PI")
        assert meta.is_const
        assert meta.const_value == 3.14159
        assert meta.tag == "double"

    def test_plain_symbol(self, namespace_file):
        meta = load_namespace(namespace_file).symbol("perimeter")
        assert not meta.is_const
        assert meta.category is None
        assert meta.examples == []

    def test_extra_block_forms(self, tmp_path):
        path = tmp_path / "ns.yaml"
        path.write_text(
            "namespace: n\n"
            "symbols:\n"
            "  f:\n"
            "    examples:\n"
            "      - doc: When\n"
            "        code: '(when x (a) (b))'\n"
        )
        ns = load_namespace(path, block_forms={"when"})
        assert ns.symbol("f").examples[0].example == "(when x\n      (a)\n      (b))\n"

    def test_null_const_is_constant(self):
        ns = namespace_from_dict({"namespace": "n", "symbols": {"NOTHING": {"const": None}}})
        meta = ns.symbol("NOTHING")
        assert meta.is_const
        assert meta.const_value is None


class TestLoadErrors:
    """Problems are reported as LoaderError with the location."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoaderError, match="File not found"):
            load_namespace(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("namespace: [unclosed\n")
        with pytest.raises(LoaderError, match="Invalid YAML"):
            load_namespace(path)

    def test_top_level_not_mapping(self):
        with pytest.raises(LoaderError):
            namespace_from_dict(["a", "b"])

    def test_missing_namespace_name(self):
        with pytest.raises(LoaderError, match="namespace"):
            namespace_from_dict({"symbols": {}})

    def test_symbols_not_mapping(self):
        with pytest.raises(LoaderError, match="symbols"):
            namespace_from_dict({"namespace": "n", "symbols": ["f"]})

    def test_unknown_example_type(self):
        with pytest.raises(LoaderError, match="unknown example type"):
            example_from_dict({"type": "video", "doc": "Clip"})

    def test_missing_doc(self):
        with pytest.raises(LoaderError, match="missing 'doc'"):
            example_from_dict({"type": "regular", "code": "(a)"})

    def test_missing_filename(self):
        with pytest.raises(LoaderError, match="missing 'filename'"):
            example_from_dict({"type": "image", "doc": "Pic"})

    def test_unreadable_code(self):
        with pytest.raises(LoaderError, match="n/f example 1"):
            namespace_from_dict({
                "namespace": "n",
                "symbols": {"f": {"examples": [{"doc": "Broken", "code": "(f 1"}]}},
            })

    def test_unknown_draw_type(self):
        with pytest.raises(LoaderError):
            example_from_dict({"type": "gen-image", "draw": "spiral", "doc": "D", "code": "(f)"})

    @pytest.mark.parametrize("params", [[200, 100], "large", 7])
    def test_params_not_mapping(self, params):
        with pytest.raises(LoaderError, match="'params' must be a mapping"):
            example_from_dict({"type": "gen-image", "doc": "D", "code": "(f)", "params": params})
