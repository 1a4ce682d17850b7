"""
Presentation: ordering, de-duplication and formatting of search results.
"""

from lfe.render.formatting import feature_name, format_feature, with_headings
from lfe.render.options import DisplayOptions, Flag, expand
from lfe.render.output import render, sorted_features, sorted_paths
from lfe.render.tree import TreeNode, render_tree

__all__ = [
    "feature_name",
    "format_feature",
    "with_headings",
    "DisplayOptions",
    "Flag",
    "expand",
    "render",
    "sorted_features",
    "sorted_paths",
    "TreeNode",
    "render_tree",
]
