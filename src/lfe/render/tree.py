"""
Dependency tree rendering.

Sorted paths are merged into a prefix tree and drawn with box characters::

    [PUBLIC FEATURES]
      javaee-8.0
      ╠═cdi-2.0
      ║ ╚═el-3.0
      ╚═jsonb-1.0
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from lfe.graph.feature import Feature
from lfe.render.formatting import format_feature, with_headings
from lfe.render.options import DisplayOptions

BRANCH = "╠═"
LAST_BRANCH = "╚═"
CONTINUATION = "║ "
SPACER = "  "


@dataclass
class TreeNode:
    """A node of the path tree. The root has no feature."""

    feature: Feature | None = None
    children: dict[str, TreeNode] = field(default_factory=dict)

    def child(self, feature: Feature) -> TreeNode:
        node = self.children.get(feature.full_name)
        if node is None:
            node = self.children[feature.full_name] = TreeNode(feature)
        return node

    def add_path(self, path: Iterable[Feature]) -> None:
        node = self
        for feature in path:
            node = node.child(feature)

    @classmethod
    def from_paths(cls, paths: Iterable[Iterable[Feature]]) -> TreeNode:
        root = cls()
        for path in paths:
            root.add_path(path)
        return root


def _descendants(node: TreeNode, prefix: str, options: DisplayOptions) -> Iterator[str]:
    children = list(node.children.values())
    for i, child in enumerate(children):
        last = i == len(children) - 1
        yield format_feature(prefix + (LAST_BRANCH if last else BRANCH), child.feature, options)
        yield from _descendants(child, prefix + (SPACER if last else CONTINUATION), options)


def render_tree(root: TreeNode, options: DisplayOptions) -> Iterator[str]:
    """Draw every top-level feature followed by its subtree."""
    indent = options.initial_indent

    def render(node: TreeNode) -> Iterator[str]:
        yield format_feature(indent, node.feature, options)
        yield from _descendants(node, indent, options)

    roots = root.children.values()
    if options.headings:
        return with_headings(roots, lambda n: n.feature, render)
    return (line for node in roots for line in render(node))


__all__ = ["TreeNode", "render_tree"]
