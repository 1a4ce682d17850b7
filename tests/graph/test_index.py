"""Tests for lfe.graph.index: dense ids and bitset adjacency."""

from __future__ import annotations

import pytest

from conftest import make_feature
from lfe.core.errors import InvariantViolation
from lfe.graph.index import DependencyIndex, iter_bits


class TestIterBits:
    def test_ascending(self):
        assert list(iter_bits(0b101001)) == [0, 3, 5]

    def test_empty(self):
        assert list(iter_bits(0)) == []

    def test_wide(self):
        assert list(iter_bits(1 << 200 | 1)) == [0, 200]


class TestBuild:
    def test_ids_follow_full_name_order(self, diamond_registry):
        index = diamond_registry.index
        assert [f.full_name for f in index.features] == ["a", "b", "c", "d", "e"]
        assert index.id_of("a") == 0
        assert index.id_of(index.feature(3)) == 3

    def test_adjacency(self, diamond_registry):
        index = diamond_registry.index
        assert index.bitset(0) == 0b01110
        assert list(index.dependency_ids(1)) == [3]
        assert index.bitset(4) == 0

    def test_depends_on(self, diamond_registry):
        index = diamond_registry.index
        assert index.depends_on("a", "d")
        assert not index.depends_on("d", "a")
        assert not index.depends_on("e", "e")

    def test_dependencies_of(self, simple_registry):
        names = [f.full_name for f in simple_registry.index.dependencies_of("a")]
        assert names == ["b", "c"]

    def test_unknown_dependency_dropped(self):
        index = DependencyIndex.build([make_feature("a", "ghost", "b"), make_feature("b")])
        assert [f.full_name for f in index.dependencies_of("a")] == ["b"]

    def test_non_feature_content_not_followed(self):
        index = DependencyIndex.build([make_feature("a", bundles=("b",)), make_feature("b")])
        assert index.bitset(0) == 0

    def test_empty(self):
        index = DependencyIndex.build([])
        assert len(index) == 0
        assert list(index.all_ids()) == []


class TestInvariants:
    def test_unknown_name(self, simple_registry):
        with pytest.raises(InvariantViolation, match="ghost"):
            simple_registry.index.id_of("ghost")

    @pytest.mark.parametrize("bad_id", [-1, 3, 99])
    def test_out_of_range(self, simple_registry, bad_id):
        with pytest.raises(InvariantViolation):
            simple_registry.index.bitset(bad_id)

    def test_mismatched_rows(self):
        with pytest.raises(InvariantViolation):
            DependencyIndex((make_feature("a"),), ())
