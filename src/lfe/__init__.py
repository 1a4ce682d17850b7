"""
lfe - explore the feature manifests of a modular runtime install.

Loads every feature manifest under ``lib/features``, builds the dependency
graph between features, and answers glob/path queries over it:

    >>> from pathlib import Path
    >>> from lfe import FeatureRegistry, compile_queries
    >>> registry = FeatureRegistry.load(Path("/opt/wlp"))
    >>> for path in registry.find_paths(compile_queries(["javaee-8.0/*"])):
    ...     print("/".join(f.name for f in path))
"""

__version__ = "0.1.0"

from lfe.graph import DependencyIndex, Feature, FeatureRegistry, Visibility  # noqa: E402
from lfe.query import compile_queries, compile_query, find_paths, search  # noqa: E402

__all__ = [
    "__version__",
    "DependencyIndex",
    "Feature",
    "FeatureRegistry",
    "Visibility",
    "compile_queries",
    "compile_query",
    "find_paths",
    "search",
]
