"""Tests for lfe.query.elements: query compilation and matching."""

from __future__ import annotations

import pytest

from conftest import make_feature
from lfe.query.elements import (
    LiteralGlob,
    MultiWildcard,
    SingleWildcard,
    compile_queries,
    compile_query,
    format_query,
    glob_to_regex,
    is_stretchy,
    matches,
)

CDI = make_feature("com.ibm.websphere.appserver.cdi-2.0", short_name="cdi-2.0")
EL = make_feature("com.ibm.websphere.appserver.el-3.0")


class TestGlobToRegex:
    def test_wildcards(self):
        assert glob_to_regex("a?b*") == "a.b.*"

    def test_regex_metacharacters_escaped(self):
        assert glob_to_regex("cdi-2.0") == r"cdi\-2\.0"
        assert LiteralGlob("cdi-2.0").pattern.fullmatch("cdi-2x0") is None

    def test_brackets_are_literal(self):
        glob = LiteralGlob("[a]")
        assert glob.pattern.fullmatch("[a]")
        assert not glob.pattern.fullmatch("a")


class TestMatches:
    @pytest.mark.parametrize(
        "glob",
        ["cdi-2.0", "CDI-2.0", "cdi*", "cdi-?.0", "*", "com.ibm.websphere.appserver.cdi-2.0", "*appserver.cdi*"],
    )
    def test_glob_matches(self, glob):
        assert matches(LiteralGlob(glob), CDI)

    @pytest.mark.parametrize("glob", ["cdi", "cdi-2.0x", "cdi-??.0", "appserver", ""])
    def test_glob_rejects(self, glob):
        assert not matches(LiteralGlob(glob), CDI)

    @pytest.mark.parametrize(
        "glob, name, expected",
        [
            ("cdi*", "cdi-3.0", True),
            ("cdi*", "CDI-3.0", True),
            ("cdi*", "xcdi-3.0", False),
            ("jsonb-?.0", "jsonb-1.0", True),
            ("jsonb-?.0", "jsonb-2.0", True),
            ("jsonb-?.0", "jsonb-10.0", False),
        ],
    )
    def test_short_name_globs(self, glob, name, expected):
        feature = make_feature(f"com.ibm.websphere.appserver.{name}", short_name=name)
        assert matches(LiteralGlob(glob), feature) is expected

    def test_whole_string_only(self):
        assert not matches(LiteralGlob("di-2.0"), CDI)

    def test_full_name_used_without_short_name(self):
        assert matches(LiteralGlob("*el-3.0"), EL)
        assert not matches(LiteralGlob("el-3.0"), EL)

    def test_wildcards_match_anything(self):
        assert matches(SingleWildcard(), EL)
        assert matches(MultiWildcard(), EL)

    def test_rejects_non_element(self):
        with pytest.raises(TypeError):
            matches("cdi-2.0", CDI)


class TestCompile:
    def test_segments(self):
        assert compile_query("javaee-8.0/*/**/cdi-?.0") == (
            LiteralGlob("javaee-8.0"),
            SingleWildcard(),
            MultiWildcard(),
            LiteralGlob("cdi-?.0"),
        )

    def test_star_inside_segment_is_a_glob(self):
        assert compile_query("***") == (LiteralGlob("***"),)
        assert compile_query("a*") == (LiteralGlob("a*"),)

    def test_empty_segments_dropped(self):
        assert compile_query("/a//b/") == (LiteralGlob("a"), LiteralGlob("b"))

    @pytest.mark.parametrize("text", ["", "/", "//"])
    def test_empty_query(self, text):
        assert compile_query(text) == (LiteralGlob(""),)

    def test_compile_queries(self):
        assert compile_queries(["a", "*"]) == ((LiteralGlob("a"),), (SingleWildcard(),))

    def test_format_round_trip(self):
        assert format_query(compile_query("a/*/**/b?")) == "a/*/**/b?"

    def test_stretchy(self):
        assert is_stretchy(MultiWildcard())
        assert not is_stretchy(SingleWildcard())
        assert not is_stretchy(LiteralGlob("**x"))
