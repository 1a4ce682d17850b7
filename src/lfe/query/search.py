"""
Path search engine.

Enumerates every dependency path that satisfies a compiled query: element 0
matches the first feature, and each following element matches a direct
dependency of the feature before it.

Manifesto:
    The search is a depth-first backtracking walk over
    (search space, query position, path so far), threading dense ids from
    the :class:`~lfe.graph.index.DependencyIndex`. Results are produced
    lazily, one path at a time, in a deterministic order.

Architecture:
    ::

        _walk(space, position, path)
          position == len(query)  ──► emit path (never an empty one)
          element is ``**``       ──► _walk(space, position + 1, path)       zero hops
                                      for F in space, F not on path:
                                          _walk(deps(F), position, path + F) one more hop
          otherwise               ──► for F in space matching the element:
                                          _walk(deps(F), position + 1, path + F)

Guardrails:
    - Search space is "all features" or "dependencies of F", both in
      ascending dense id (sorted by full name) order
    - A ``**`` hop never revisits a feature already on the path, so cyclic
      feature graphs terminate; fixed-length steps are bounded by the query
      length and may revisit
    - No de-duplication: several queries, ``**/**`` or diamond graphs may
      yield the same path more than once; presentation removes duplicates

Examples:
    For a -> {b, c, d}, b -> {d}, c -> {d}, ``a/**/d`` yields
    ``(a, d)``, ``(a, b, d)``, ``(a, c, d)`` in that order.

Tags:
    search, backtracking, glob, wildcard, graph-traversal, lfe

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from lfe.graph.feature import Feature
from lfe.graph.index import DependencyIndex
from lfe.query.elements import Query, is_stretchy, matches

Path = tuple[Feature, ...]


def search(index: DependencyIndex, queries: Iterable[Query]) -> Iterator[Path]:
    """Search each query against the whole index and chain the results."""
    for query in queries:
        yield from find_paths(index, query)


def find_paths(index: DependencyIndex, query: Query) -> Iterator[Path]:
    """All paths satisfying one query, in traversal order."""
    if not query:
        return
    for ids in _walk(index, query, index.all_ids(), 0, ()):
        yield tuple(index.feature(i) for i in ids)


def _walk(
    index: DependencyIndex,
    query: Query,
    space: Sequence[int],
    position: int,
    path: tuple[int, ...],
) -> Iterator[tuple[int, ...]]:
    if position == len(query):
        if path:
            yield path
        return

    element = query[position]

    if is_stretchy(element):
        yield from _walk(index, query, space, position + 1, path)
        for feature_id in space:
            if feature_id in path:
                continue
            yield from _walk(index, query, _dependencies(index, feature_id), position, path + (feature_id,))
        return

    for feature_id in space:
        if matches(element, index.feature(feature_id)):
            yield from _walk(index, query, _dependencies(index, feature_id), position + 1, path + (feature_id,))


def _dependencies(index: DependencyIndex, feature_id: int) -> tuple[int, ...]:
    return tuple(index.dependency_ids(feature_id))


__all__ = ["Path", "search", "find_paths"]
