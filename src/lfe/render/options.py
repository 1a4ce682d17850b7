"""
Display flags.

Some flags imply others: ``--tabs`` turns on ``--decorate`` and
``--simple-sort`` turns on ``--full-names``. :func:`expand` closes a flag
set over those implications, and :class:`DisplayOptions` is the resolved,
immutable view the renderers read.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Flag(str, Enum):
    DECORATE = "decorate"
    FULL_NAMES = "full-names"
    TREE = "tree"
    PATHS = "paths"
    TABS = "tabs"
    SIMPLE_SORT = "simple-sort"
    WARN_MISSING = "warn-missing"
    IGNORE_DUPLICATES = "ignore-duplicates"

    @property
    def implied(self) -> tuple[Flag, ...]:
        match self:
            case Flag.TABS:
                return (Flag.DECORATE,)
            case Flag.SIMPLE_SORT:
                return (Flag.FULL_NAMES,)
            case _:
                return ()

    def to_arg(self) -> str:
        return f"--{self.value}"


def expand(flags: Iterable[Flag]) -> frozenset[Flag]:
    """Add every flag implied by ``flags``, transitively."""
    result: set[Flag] = set()
    pending = list(flags)
    while pending:
        flag = pending.pop()
        if flag not in result:
            result.add(flag)
            pending.extend(flag.implied)
    return frozenset(result)


@dataclass(frozen=True)
class DisplayOptions:
    decorate: bool = False
    full_names: bool = False
    tree: bool = False
    paths: bool = False
    tabs: bool = False
    simple_sort: bool = False

    @classmethod
    def from_flags(cls, flags: Iterable[Flag]) -> DisplayOptions:
        flags = expand(flags)
        return cls(
            decorate=Flag.DECORATE in flags,
            full_names=Flag.FULL_NAMES in flags,
            tree=Flag.TREE in flags,
            paths=Flag.PATHS in flags,
            tabs=Flag.TABS in flags,
            simple_sort=Flag.SIMPLE_SORT in flags,
        )

    @property
    def headings(self) -> bool:
        """Group output under visibility headings?"""
        return not self.simple_sort and not self.decorate

    @property
    def initial_indent(self) -> str:
        return "  " if self.headings else ""


__all__ = ["Flag", "expand", "DisplayOptions"]
