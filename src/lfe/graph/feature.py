"""
Feature records.

A :class:`Feature` is the immutable content of one manifest: its symbolic
(full) name, optional short name, visibility, the raw headers, and the
parsed ``Subsystem-Content`` elements. Only content elements typed
``osgi.subsystem.feature`` are dependencies the graph follows; bundles and
other content are kept for display but never traversed.

Examples:
    >>> feature = Feature.from_manifest({
    ...     "Subsystem-SymbolicName": "com.ibm.websphere.appserver.cdi-2.0; visibility:=public",
    ...     "IBM-ShortName": "cdi-2.0",
    ... })
    >>> feature.name, feature.visibility
    ('cdi-2.0', <Visibility.PUBLIC: 'public'>)

Tags:
    feature, manifest, model, lfe

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from lfe.core.diagnostics import Diagnostics
from lfe.core.errors import FeatureManifestError
from lfe.manifest.headers import Header, HeaderElement, parse_header


class Visibility(str, Enum):
    """Declared visibility of a feature, in display order."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    INSTALL = "install"
    DEFAULT = "default"

    @property
    def rank(self) -> int:
        return _VISIBILITY_ORDER.index(self)

    @classmethod
    def parse(cls, value: str | None) -> Visibility:
        """Parse a ``visibility`` qualifier; absent or unknown means DEFAULT."""
        if value is None:
            return cls.DEFAULT
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.DEFAULT

    def format(self, tabs: bool = False) -> str:
        return self.value if tabs else f"{self.value:<10}"


_VISIBILITY_ORDER = list(Visibility)


@dataclass(frozen=True)
class Feature:
    """One feature manifest.

    Equality and hashing use the names and visibility only; the registry
    guarantees full names are unique.
    """

    full_name: str
    short_name: str | None = None
    visibility: Visibility = Visibility.DEFAULT
    attributes: Mapping[str, str] = field(default_factory=dict, compare=False, repr=False)
    content: tuple[HeaderElement, ...] = field(default=(), compare=False, repr=False)
    symbolic_name: HeaderElement | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_manifest(
        cls,
        attributes: Mapping[str, str],
        diagnostics: Diagnostics | None = None,
        ignore_duplicates: bool = False,
    ) -> Feature:
        """Build a feature from a parsed manifest header mapping.

        Raises:
            FeatureManifestError: the manifest has no symbolic name
        """
        names = parse_header(
            Header.SUBSYSTEM_SYMBOLICNAME.get(attributes), diagnostics, ignore_duplicates
        )
        if not names:
            raise FeatureManifestError("Manifest declares no Subsystem-SymbolicName")
        symbolic_name = names[0]
        short_name = Header.IBM_SHORTNAME.get(attributes)
        return cls(
            full_name=symbolic_name.id,
            short_name=short_name.strip() if short_name else None,
            visibility=Visibility.parse(symbolic_name.get_qualifier("visibility")),
            attributes=dict(attributes),
            content=parse_header(
                Header.SUBSYSTEM_CONTENT.get(attributes), diagnostics, ignore_duplicates
            ),
            symbolic_name=symbolic_name,
        )

    @property
    def name(self) -> str:
        """Short name if there is one, else the full name."""
        return self.short_name or self.full_name

    @property
    def dependencies(self) -> tuple[HeaderElement, ...]:
        """Content elements that name other features."""
        return tuple(e for e in self.content if e.is_feature)

    @property
    def dependency_ids(self) -> tuple[str, ...]:
        return tuple(e.id for e in self.dependencies)

    @property
    def is_auto(self) -> bool:
        return Header.IBM_PROVISION_CAPABILITY.is_present(self.attributes)

    @property
    def is_superseded(self) -> bool:
        return self.symbolic_name is not None and self.symbolic_name.flag("superseded")

    @property
    def is_singleton(self) -> bool:
        return self.symbolic_name is not None and self.symbolic_name.flag("singleton")

    def __str__(self) -> str:
        return self.full_name


__all__ = ["Visibility", "Feature"]
