"""
Feature formatting and ordering.

Visibility headings are a fold over the sorted output: :func:`with_headings`
carries the previous feature's visibility from one item to the next and
emits a ``[PUBLIC FEATURES]`` style line whenever it changes.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TypeVar

from lfe.graph.feature import Feature, Visibility
from lfe.render.options import DisplayOptions

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

DECORATION_HEADER = (
    "# VISIBILITY AUTO SUPERSEDED SINGLETON FEATURE NAME",
    "# ========== ==== ========== ========= ============",
)


def feature_name(feature: Feature, options: DisplayOptions) -> str:
    return feature.full_name if options.full_names else feature.name


def feature_sort_key(options: DisplayOptions) -> Callable[[Feature], tuple]:
    """Sort by name, or by visibility then name."""
    if options.simple_sort:
        return lambda f: (feature_name(f, options), f.full_name)
    return lambda f: (f.visibility.rank, feature_name(f, options), f.full_name)


def path_sort_key(options: DisplayOptions) -> Callable[[tuple[Feature, ...]], tuple]:
    """Compare paths feature by feature; a prefix sorts first."""
    key = feature_sort_key(options)
    return lambda path: tuple(key(f) for f in path)


def distinct(items: Iterable[T], key: Callable[[T], K]) -> Iterator[T]:
    """Drop repeats, keeping the first occurrence."""
    seen: set[K] = set()
    for item in items:
        k = key(item)
        if k not in seen:
            seen.add(k)
            yield item


def decoration(feature: Feature, options: DisplayOptions) -> str:
    """The qualifier columns that precede a decorated feature."""
    if not options.decorate:
        return ""
    delimiter = "\t" if options.tabs else " "
    columns = [
        feature.visibility.format(options.tabs),
        "auto" if feature.is_auto else "    ",
        "superseded" if feature.is_superseded else "          ",
        "singleton" if feature.is_singleton else "         ",
    ]
    indent = "" if options.tabs else "  "
    return indent + delimiter.join(columns) + delimiter


def format_feature(prefix: str, feature: Feature, options: DisplayOptions) -> str:
    return decoration(feature, options) + prefix + feature_name(feature, options)


def heading(visibility: Visibility) -> str:
    return f"[{visibility.name} FEATURES]"


def with_headings(
    items: Iterable[T],
    feature_of: Callable[[T], Feature],
    render: Callable[[T], Iterable[str]],
) -> Iterator[str]:
    """Render ``items``, inserting a heading before each new visibility."""
    current: Visibility | None = None
    for item in items:
        visibility = feature_of(item).visibility
        if visibility is not current:
            yield heading(visibility)
            current = visibility
        yield from render(item)


__all__ = [
    "DECORATION_HEADER",
    "feature_name",
    "feature_sort_key",
    "path_sort_key",
    "distinct",
    "decoration",
    "format_feature",
    "heading",
    "with_headings",
]
