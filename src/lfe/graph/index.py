"""
Dense dependency index.

Features are sorted by full name and addressed by their position in that
order (the dense id). Each feature's direct dependencies are one bitset,
held as a Python ``int`` whose bit ``j`` is set iff the feature depends on
feature ``j``.

Manifesto:
    Feature sets hold hundreds of entries, not millions. An N x N bit
    matrix is a few kilobytes, answers "does F depend on D" in O(1), and
    iterates dependencies in ascending dense id order for free. Everything
    downstream addresses features by integer handle instead of by record.

Architecture:
    ::

        features (sorted by full_name)     adjacency (one int per row)
        ┌────┬─────────────────┐           ┌────┬──────────────┐
        │ 0  │ a               │           │ 0  │ 0b0110  {1,2}│
        │ 1  │ b               │           │ 1  │ 0b1000  {3}  │
        │ 2  │ c               │           │ 2  │ 0b1000  {3}  │
        │ 3  │ d               │           │ 3  │ 0b0000  {}   │
        └────┴─────────────────┘           └────┴──────────────┘
        id_of: {"a": 0, "b": 1, "c": 2, "d": 3}

Guardrails:
    - Immutable after build(); safe to share between queries
    - Dependencies on unknown features are dropped here, never raised;
      reporting them is the registry's warn_missing_features() pass
    - Looking up an id that was never assigned is an InvariantViolation

Tags:
    graph, bitset, adjacency-matrix, dense-id, lfe

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from lfe.core.errors import InvariantViolation
from lfe.core.logging import get_logger
from lfe.graph.feature import Feature

logger = get_logger(__name__)


def iter_bits(bits: int) -> Iterator[int]:
    """Yield the positions of the set bits in ascending order."""
    while bits:
        low = bits & -bits
        yield low.bit_length() - 1
        bits ^= low


class DependencyIndex:
    """Read-only adjacency structure over a fixed feature set."""

    def __init__(self, features: tuple[Feature, ...], adjacency: tuple[int, ...]):
        if len(features) != len(adjacency):
            raise InvariantViolation("adjacency rows do not match the feature count")
        self._features = features
        self._adjacency = adjacency
        self._ids: Mapping[str, int] = {f.full_name: i for i, f in enumerate(features)}

    @classmethod
    def build(cls, features: Iterable[Feature]) -> DependencyIndex:
        """Sort, number and link ``features``.

        ``features`` must already have unique full names.
        """
        ordered = tuple(sorted(features, key=lambda f: f.full_name))
        ids = {f.full_name: i for i, f in enumerate(ordered)}
        adjacency = [0] * len(ordered)
        for i, feature in enumerate(ordered):
            for dependency_id in feature.dependency_ids:
                j = ids.get(dependency_id)
                if j is not None:
                    adjacency[i] |= 1 << j
        logger.debug(
            "dependency_index_built",
            features=len(ordered),
            edges=sum(row.bit_count() for row in adjacency),
        )
        return cls(ordered, tuple(adjacency))

    def __len__(self) -> int:
        return len(self._features)

    @property
    def features(self) -> tuple[Feature, ...]:
        """All features in dense id order."""
        return self._features

    def all_ids(self) -> range:
        return range(len(self._features))

    def id_of(self, feature: Feature | str) -> int:
        """Dense id of a feature, by record or by full name."""
        name = feature if isinstance(feature, str) else feature.full_name
        try:
            return self._ids[name]
        except KeyError:
            raise InvariantViolation(f"no dense id assigned to feature '{name}'") from None

    def feature(self, feature_id: int) -> Feature:
        self._check(feature_id)
        return self._features[feature_id]

    def bitset(self, feature_id: int) -> int:
        self._check(feature_id)
        return self._adjacency[feature_id]

    def dependency_ids(self, feature_id: int) -> Iterator[int]:
        """Dense ids of the direct dependencies, ascending."""
        return iter_bits(self.bitset(feature_id))

    def dependencies_of(self, feature: Feature | str) -> tuple[Feature, ...]:
        return tuple(self._features[j] for j in self.dependency_ids(self.id_of(feature)))

    def depends_on(self, feature: Feature | str, dependency: Feature | str) -> bool:
        return bool(self.bitset(self.id_of(feature)) >> self.id_of(dependency) & 1)

    def _check(self, feature_id: int) -> None:
        if not 0 <= feature_id < len(self._features):
            raise InvariantViolation(
                f"dense id {feature_id} outside 0..{len(self._features) - 1}"
            )


__all__ = ["DependencyIndex", "iter_bits"]
