"""
Query language.

A query is a slash-separated path of segments, each compiled to one
element:

    ===========  =================  =========================================
    Segment      Element            Matches
    ===========  =================  =========================================
    ``*``        SingleWildcard     any feature, exactly one hop
    ``**``       MultiWildcard      any run of zero or more hops
    otherwise    LiteralGlob        short name, else full name, against the
                                    glob (``?`` one char, ``*`` any run),
                                    whole string, case-insensitive
    ===========  =================  =========================================

Examples:
    >>> compile_query("javaee-8.0/*")
    (LiteralGlob(glob='javaee-8.0'), SingleWildcard())
    >>> compile_query("**/cdi-?.0")
    (MultiWildcard(), LiteralGlob(glob='cdi-?.0'))
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from lfe.core.errors import QuerySyntaxError
from lfe.graph.feature import Feature

SEPARATOR = "/"
_GLOB_TOKENS = re.compile(r"[?*]|[^?*]+")


def glob_to_regex(glob: str) -> str:
    """Translate a shell-style glob to an (unanchored) regex source."""
    parts = []
    for token in _GLOB_TOKENS.findall(glob):
        if token == "?":
            parts.append(".")
        elif token == "*":
            parts.append(".*")
        else:
            parts.append(re.escape(token))
    return "".join(parts)


@dataclass(frozen=True)
class LiteralGlob:
    glob: str
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(glob_to_regex(self.glob), re.IGNORECASE | re.DOTALL)
        except re.error as e:
            raise QuerySyntaxError(self.glob, cause=e) from e
        object.__setattr__(self, "pattern", compiled)

    def __str__(self) -> str:
        return self.glob


@dataclass(frozen=True)
class SingleWildcard:
    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True)
class MultiWildcard:
    def __str__(self) -> str:
        return "**"


QueryElement = Union[LiteralGlob, SingleWildcard, MultiWildcard]
Query = tuple[QueryElement, ...]


def matches(element: QueryElement, feature: Feature) -> bool:
    """Does ``feature`` satisfy ``element``?"""
    match element:
        case LiteralGlob(pattern=pattern):
            if feature.short_name is not None and pattern.fullmatch(feature.short_name):
                return True
            return pattern.fullmatch(feature.full_name) is not None
        case SingleWildcard() | MultiWildcard():
            return True
    raise TypeError(f"not a query element: {element!r}")


def is_stretchy(element: QueryElement) -> bool:
    """Can ``element`` span a variable number of hops?"""
    match element:
        case MultiWildcard():
            return True
        case _:
            return False


def compile_segment(segment: str) -> QueryElement:
    match segment:
        case "*":
            return SingleWildcard()
        case "**":
            return MultiWildcard()
        case _:
            return LiteralGlob(segment)


def compile_query(text: str) -> Query:
    """Compile one query string.

    Empty segments (``a//b``, a leading or trailing slash) are dropped. A
    query with no segments left becomes a single empty glob, which matches
    no real feature.
    """
    segments = [s for s in text.split(SEPARATOR) if s]
    if not segments:
        return (LiteralGlob(""),)
    try:
        return tuple(compile_segment(s) for s in segments)
    except QuerySyntaxError as e:
        e.with_context(query=text)
        raise


def compile_queries(texts: Iterable[str]) -> tuple[Query, ...]:
    return tuple(compile_query(t) for t in texts)


def format_query(query: Query) -> str:
    return SEPARATOR.join(str(e) for e in query)


__all__ = [
    "LiteralGlob",
    "SingleWildcard",
    "MultiWildcard",
    "QueryElement",
    "Query",
    "glob_to_regex",
    "matches",
    "is_stretchy",
    "compile_segment",
    "compile_query",
    "compile_queries",
    "format_query",
]
