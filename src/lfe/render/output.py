"""
Result rendering.

Turns the raw stream of search paths into output lines for one of three
modes:

    =========  ===========================================================
    Mode       Output
    =========  ===========================================================
    default    the last feature of every path, sorted and de-duplicated
    --tree     paths merged into a tree; with --tabs, ``a/b/`` prefixes
    --paths    every path slash-joined, grouped by the visibility of its
               first feature (takes precedence over --tree)
    =========  ===========================================================
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from lfe.graph.feature import Feature
from lfe.render.formatting import (
    DECORATION_HEADER,
    distinct,
    feature_name,
    feature_sort_key,
    format_feature,
    path_sort_key,
    with_headings,
)
from lfe.render.options import DisplayOptions
from lfe.render.tree import TreeNode, render_tree

Path = tuple[Feature, ...]


def _path_identity(path: Path) -> tuple[str, ...]:
    return tuple(f.full_name for f in path)


def sorted_paths(paths: Iterable[Path], options: DisplayOptions) -> list[Path]:
    ordered = sorted(paths, key=path_sort_key(options))
    return list(distinct(ordered, _path_identity))


def sorted_features(paths: Iterable[Path], options: DisplayOptions) -> list[Feature]:
    ordered = sorted((path[-1] for path in paths), key=feature_sort_key(options))
    return list(distinct(ordered, lambda f: f.full_name))


def _render_features(features: list[Feature], options: DisplayOptions) -> Iterator[str]:
    indent = options.initial_indent
    if options.headings:
        return with_headings(features, lambda f: f, lambda f: [format_feature(indent, f, options)])
    return (format_feature(indent, f, options) for f in features)


def _render_slash_paths(paths: list[Path], options: DisplayOptions) -> Iterator[str]:
    indent = options.initial_indent

    def render_path(path: Path) -> list[str]:
        prefix = indent + "".join(feature_name(f, options) + "/" for f in path[:-1])
        return [format_feature(prefix, path[-1], options)]

    if options.headings:
        return with_headings(paths, lambda p: p[0], render_path)
    return (line for path in paths for line in render_path(path))


def render(paths: Iterable[Path], options: DisplayOptions) -> Iterator[str]:
    """All output lines for a set of search results."""
    if options.decorate and not options.tabs:
        yield from DECORATION_HEADER

    if options.paths or (options.tree and options.tabs):
        yield from _render_slash_paths(sorted_paths(paths, options), options)
    elif options.tree:
        yield from render_tree(TreeNode.from_paths(sorted_paths(paths, options)), options)
    else:
        yield from _render_features(sorted_features(paths, options), options)


__all__ = ["sorted_paths", "sorted_features", "render"]
