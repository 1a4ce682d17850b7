"""
Feature graph: records, the registry that loads them, and the dense
dependency index built over them.
"""

from lfe.graph.feature import Feature, Visibility
from lfe.graph.index import DependencyIndex, iter_bits
from lfe.graph.registry import FEATURES_SUBDIR, FeatureRegistry

__all__ = [
    "Feature",
    "Visibility",
    "DependencyIndex",
    "iter_bits",
    "FEATURES_SUBDIR",
    "FeatureRegistry",
]
