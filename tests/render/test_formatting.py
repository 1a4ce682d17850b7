"""Tests for lfe.render.formatting."""

from __future__ import annotations

from conftest import make_feature
from lfe.graph.feature import Feature, Visibility
from lfe.render.formatting import (
    decoration,
    distinct,
    feature_sort_key,
    format_feature,
    heading,
    with_headings,
)
from lfe.render.options import DisplayOptions

SINGLETON = Feature.from_manifest({
    "Subsystem-SymbolicName": "com.ibm.x; visibility:=public; singleton:=true",
    "IBM-ShortName": "x",
})
AUTO = Feature.from_manifest({
    "Subsystem-SymbolicName": "com.ibm.y; superseded:=true",
    "IBM-Provision-Capability": "osgi.identity",
})


class TestDecoration:
    def test_off_by_default(self):
        assert decoration(SINGLETON, DisplayOptions()) == ""
        assert format_feature("  ", SINGLETON, DisplayOptions()) == "  x"

    def test_space_delimited(self):
        line = format_feature("", SINGLETON, DisplayOptions(decorate=True))
        assert line == "  " + "public    " + " " + "    " + " " + "          " + " " + "singleton" + " " + "x"

    def test_auto_and_superseded(self):
        columns = decoration(AUTO, DisplayOptions(decorate=True))
        assert columns == "  default    auto superseded " + " " * 9 + " "

    def test_tab_delimited(self):
        line = format_feature("", SINGLETON, DisplayOptions(decorate=True, tabs=True))
        assert line.split("\t") == ["public", "    ", "          ", "singleton", "x"]

    def test_full_names(self):
        assert format_feature("", SINGLETON, DisplayOptions(full_names=True)) == "com.ibm.x"


class TestOrdering:
    def test_visibility_then_name(self):
        features = [
            make_feature("p2", visibility=Visibility.PRIVATE),
            make_feature("z", visibility=Visibility.PUBLIC),
            make_feature("p1", visibility=Visibility.PRIVATE),
            make_feature("a", visibility=Visibility.DEFAULT),
        ]
        ordered = sorted(features, key=feature_sort_key(DisplayOptions()))
        assert [f.full_name for f in ordered] == ["z", "p1", "p2", "a"]

    def test_simple_sort_ignores_visibility(self):
        features = [make_feature("b", visibility=Visibility.PUBLIC), make_feature("a", visibility=Visibility.PRIVATE)]
        ordered = sorted(features, key=feature_sort_key(DisplayOptions(simple_sort=True)))
        assert [f.full_name for f in ordered] == ["a", "b"]

    def test_short_name_sorts(self):
        features = [make_feature("com.a", short_name="zz"), make_feature("com.b", short_name="aa")]
        ordered = sorted(features, key=feature_sort_key(DisplayOptions()))
        assert [f.full_name for f in ordered] == ["com.b", "com.a"]

    def test_distinct_keeps_first(self):
        assert list(distinct(["a", "B", "b", "A"], str.lower)) == ["a", "B"]


class TestHeadings:
    def test_heading_text(self):
        assert heading(Visibility.PUBLIC) == "[PUBLIC FEATURES]"
        assert heading(Visibility.INSTALL) == "[INSTALL FEATURES]"

    def test_heading_on_each_change(self):
        features = [
            make_feature("a", visibility=Visibility.PUBLIC),
            make_feature("b", visibility=Visibility.PUBLIC),
            make_feature("c", visibility=Visibility.PRIVATE),
        ]
        lines = list(with_headings(features, lambda f: f, lambda f: [f.full_name]))
        assert lines == ["[PUBLIC FEATURES]", "a", "b", "[PRIVATE FEATURES]", "c"]

    def test_no_items_no_headings(self):
        assert list(with_headings([], lambda f: f, lambda f: [f.full_name])) == []
