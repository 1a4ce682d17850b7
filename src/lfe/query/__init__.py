"""
Query language and path search.
"""

from lfe.query.elements import (
    LiteralGlob,
    MultiWildcard,
    Query,
    QueryElement,
    SingleWildcard,
    compile_queries,
    compile_query,
    format_query,
    glob_to_regex,
    is_stretchy,
    matches,
)
from lfe.query.search import Path, find_paths, search

__all__ = [
    "LiteralGlob",
    "MultiWildcard",
    "Query",
    "QueryElement",
    "SingleWildcard",
    "compile_queries",
    "compile_query",
    "format_query",
    "glob_to_regex",
    "is_stretchy",
    "matches",
    "Path",
    "find_paths",
    "search",
]
