"""
Tests for alter_docs — generated sections appended to namespace docs
"""

import functools

import pytest

from metadoc.config import DocsConfig
from metadoc.core.examples import example
from metadoc.core.hashing import content_hash
from metadoc.core.store import Namespace
from metadoc.services.aggregator import (
    UNCATEGORIZED, AlterStatus, alter_docs, alter_docs_in_all,
    categories_section, constants_section, escape, type_name,
)


class TestConstants:
    """Constants get an additional info section and an index entry."""

    def test_constant_with_tag(self):
        ns = Namespace("numbers")
        ns.define("answer", "Answer.", const=42, tag=int)

        assert alter_docs(ns) is AlterStatus.DONE
        assert ns.get_doc("answer") == (
            "Answer.\n\n##### Additional info\n\n* Constant value `answer = 42`\n* Type: int"
        )
        assert ns.get_doc() == "\n\n  #### Constants\n\n  * [[answer]] = `42`"

    def test_constants_sorted_by_name(self):
        ns = Namespace("numbers")
        ns.define("B", const=2)
        ns.define("A", const=1)
        alter_docs(ns)
        assert ns.get_doc().endswith("  * [[A]] = `1`\n  * [[B]] = `2`")

    def test_constant_value_escaped(self):
        ns = Namespace("text")
        ns.define("SEP", const="a\nb\r")
        alter_docs(ns)
        assert "* Constant value `SEP = a\\nb\\r`" in ns.get_doc("SEP")
        assert "  * [[SEP]] = `a\\nb\\r`" in ns.get_doc()

    def test_none_constant_is_still_constant(self):
        ns = Namespace("numbers")
        ns.define("NOTHING", const=None)
        alter_docs(ns)
        assert "##### Additional info" in ns.get_doc("NOTHING")
        assert "#### Categories" not in ns.get_doc()
        assert "[[NOTHING]]" in ns.get_doc()


class TestTaggedSymbols:
    """A type tag alone produces additional info and no category entry."""

    def test_tag_only(self):
        ns = Namespace("numbers")
        ns.define("ratio", "Ratio.", tag="double")
        alter_docs(ns)
        assert ns.get_doc("ratio") == "Ratio.\n\n##### Additional info\n\n* Type: double"
        assert ns.get_doc() == ""


class TestCategories:
    """Plain symbols are listed in the Categories index."""

    def test_uncategorised_symbol(self):
        ns = Namespace("util")
        ns.define("f", "F.")
        alter_docs(ns)
        assert ns.get_doc("f") == "F."
        assert ns.get_doc() == "\n\n  #### Categories\n\n  * Other functions: [[f]]"

    def test_categories_sorted_with_other_last(self):
        ns = Namespace("util", categories={"alpha": "Alpha things"})
        ns.define("g")
        ns.define("f", category="alpha")
        alter_docs(ns)
        assert ns.get_doc() == (
            "\n\n  #### Categories\n\n"
            "  * Alpha things: [[f]]\n"
            "  * Other functions: [[g]]"
        )

    def test_names_sorted_within_category(self):
        ns = Namespace("util")
        for name in ("zeta", "alpha", "mid"):
            ns.define(name)
        alter_docs(ns)
        assert "[[alpha]] [[mid]] [[zeta]]" in ns.get_doc()

    def test_missing_label_falls_back_to_key(self):
        ns = Namespace("util")
        ns.define("f", category="beta")
        alter_docs(ns)
        assert "  * beta: [[f]]" in ns.get_doc()

    def test_section_helpers(self):
        assert categories_section({"b": ["y"], "a": ["x"]}, {"a": "A"}) == (
            "\n\n  #### Categories\n\n  * A: [[x]]\n  * b: [[y]]"
        )
        assert constants_section({"X": "1"}) == "\n\n  #### Constants\n\n  * [[X]] = `1`"
        assert UNCATEGORIZED == "zzzzzz"


class TestExamples:
    """Stored examples are rendered into the symbol doc."""

    def test_full_namespace(self, sample_namespace):
        alter_docs(sample_namespace)

        md5_doc = sample_namespace.get_doc("md5")
        assert md5_doc.startswith(
            "Return hash for given string.\n\n#### Examples\n"
            "\n\n> Hash of a string\n\n```\n"
            f'(md5 "abc") ;; => {content_hash("abc")}\n```'
        )
        assert '\n\n> Hash of another string\n\n```\n(md5 "Another string")\n```' in md5_doc
        assert md5_doc.endswith('(../images/meta_doc/md5.jpg "Just an example of an image.")')

        demo_doc = sample_namespace.get_doc("canvas-demo")
        assert "#### Examples" in demo_doc
        assert "../images/" in demo_doc

        assert sample_namespace.get_doc("DIGEST_SIZE") == (
            "Length of a digest.\n\n##### Additional info\n\n"
            "* Constant value `DIGEST_SIZE = 32`\n* Type: int"
        )
        assert sample_namespace.get_doc() == (
            "Examples for docs."
            "\n\n  #### Categories\n\n"
            "  * Drawing: [[canvas-demo]]\n"
            "  * Other functions: [[md5]]"
            "\n\n  #### Constants\n\n"
            "  * [[DIGEST_SIZE]] = `32`"
        )

    def test_examples_disabled(self, sample_namespace):
        alter_docs(sample_namespace, DocsConfig(examples_enabled=False))
        assert sample_namespace.get_doc("md5") == "Return hash for given string."
        assert "#### Categories" in sample_namespace.get_doc()

    def test_constant_with_examples_gets_both_sections(self):
        ns = Namespace("numbers")
        ns.define("answer", "Answer.", const=42, examples=(example("Use", "(inc answer)"),))
        alter_docs(ns)
        doc = ns.get_doc("answer")
        assert doc.index("#### Examples") < doc.index("##### Additional info")

    def test_value_fn_error_propagates(self):
        def boom():
            raise RuntimeError("evaluation failed")

        ns = Namespace("broken")
        ns.define("ok", "Fine.")
        ns.define("bad", "Bad.", examples=(example("Fails", "(bad)", fn=boom),))

        with pytest.raises(RuntimeError):
            alter_docs(ns)
        assert ns.get_doc("bad") == "Bad."
        assert ns.get_doc() == ""


class TestRuns:
    """Run flags and repeated runs."""

    def test_disabled_aggregation_changes_nothing(self, sample_namespace):
        status = alter_docs(sample_namespace, DocsConfig(aggregation_enabled=False))
        assert status is AlterStatus.SKIPPED
        assert sample_namespace.get_doc() == "Examples for docs."
        assert sample_namespace.get_doc("md5") == "Return hash for given string."

    def test_second_run_appends_again(self, sample_namespace):
        alter_docs(sample_namespace)
        alter_docs(sample_namespace)
        assert sample_namespace.get_doc("md5").count("#### Examples") == 2
        assert sample_namespace.get_doc().count("#### Categories") == 2

    def test_empty_namespace(self):
        ns = Namespace("empty", doc="Nothing here.")
        assert alter_docs(ns) is AlterStatus.DONE
        assert ns.get_doc() == "Nothing here."

    def test_alter_docs_in_all(self, sample_namespace):
        other = Namespace("util")
        other.define("f")
        result = alter_docs_in_all([sample_namespace, other], DocsConfig(aggregation_enabled=False))
        assert result == {"meta-doc.core": AlterStatus.SKIPPED, "util": AlterStatus.SKIPPED}

        result = alter_docs_in_all([other])
        assert result == {"util": AlterStatus.DONE}
        assert "[[f]]" in other.get_doc()


class TestHelpers:
    """escape() and type_name()."""

    def test_escape(self):
        assert escape("a\nb\rc\uffffd") == "a\\nb\\rc\\0xffffd"

    def test_escape_leaves_other_text(self):
        assert escape("plain `text`") == "plain `text`"

    @pytest.mark.parametrize("tag,expected", [
        (int, "int"),
        (float, "float"),
        ("double", "double"),
        (len, "len"),
    ])
    def test_type_name(self, tag, expected):
        assert type_name(tag) == expected

    def test_type_name_of_callable_instance(self):
        assert type_name(functools.partial(int, base=2)) == "partial"
