"""
Manifest header names and header value parsing.

A header value is a comma-separated list of elements. Each element is an id
followed by ``;``-separated qualifiers written ``key=value`` (attributes) or
``key:=value`` (directives)::

    Subsystem-Content: com.ibm.ws.cdi.internal; version="[1.0,2.0)",
     com.ibm.websphere.appserver.javaeeCompatible-8.0; type="osgi.subsystem.feature"

Commas and semicolons inside double quotes, or escaped with a backslash, do
not split.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from lfe.core.diagnostics import DiagnosticCode, Diagnostics
from lfe.core.errors import ManifestParseError

ELEMENT_PATTERN = re.compile(r'(?:(?:[^",\\]|\\.)+|"(?:[^\\"]|\\.)*")+')
ATOM_PATTERN = re.compile(r'(?:(?:[^";\\]|\\.)+|"(?:[^\\"]|\\.)*")+')
_QUALIFIER_SPLIT = re.compile(r":?=")
_QUOTED = re.compile(r'^"(.*)"$', re.DOTALL)

FEATURE_TYPE = "osgi.subsystem.feature"
TOLERATES = "ibm.tolerates"


class Header(str, Enum):
    """Manifest headers the explorer knows by name."""

    CREATED_BY = "Created-By"
    IBM_API_PACKAGE = "IBM-API-Package"
    IBM_API_SERVICE = "IBM-API-Service"
    IBM_APP_FORCERESTART = "IBM-App-ForceRestart"
    IBM_APPLIESTO = "IBM-AppliesTo"
    IBM_FEATURE_VERSION = "IBM-Feature-Version"
    IBM_INSTALL_POLICY = "IBM-Install-Policy"
    IBM_INSTALLTO = "IBM-InstallTo"
    IBM_LICENSE_AGREEMENT = "IBM-License-Agreement"
    IBM_PROCESS_TYPES = "IBM-Process-Types"
    IBM_PRODUCTID = "IBM-ProductID"
    IBM_PROVISION_CAPABILITY = "IBM-Provision-Capability"
    IBM_SPI_PACKAGE = "IBM-SPI-Package"
    IBM_SHORTNAME = "IBM-ShortName"
    IBM_TEST_FEATURE = "IBM-Test-Feature"
    SUBSYSTEM_CATEGORY = "Subsystem-Category"
    SUBSYSTEM_CONTENT = "Subsystem-Content"
    SUBSYSTEM_DESCRIPTION = "Subsystem-Description"
    SUBSYSTEM_LICENSE = "Subsystem-License"
    SUBSYSTEM_LOCALIZATION = "Subsystem-Localization"
    SUBSYSTEM_MANIFESTVERSION = "Subsystem-ManifestVersion"
    SUBSYSTEM_NAME = "Subsystem-Name"
    SUBSYSTEM_SYMBOLICNAME = "Subsystem-SymbolicName"
    SUBSYSTEM_TYPE = "Subsystem-Type"
    SUBSYSTEM_VENDOR = "Subsystem-Vendor"
    SUBSYSTEM_VERSION = "Subsystem-Version"
    TOOL = "Tool"
    WLP_ACTIVATION_TYPE = "WLP-Activation-Type"

    def get(self, attributes: Mapping[str, str]) -> str | None:
        return attributes.get(self.value)

    def is_present(self, attributes: Mapping[str, str]) -> bool:
        return self.value in attributes

    @classmethod
    def canonical_name(cls, name: str) -> str:
        """Return the declared spelling of a known header, else ``name``."""
        return _CANONICAL.get(name.lower(), name)


_CANONICAL = {h.value.lower(): h.value for h in Header}


@dataclass(frozen=True)
class HeaderElement:
    """One comma-separated element of a header value: an id plus qualifiers."""

    id: str
    qualifiers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def get_qualifier(self, key: str) -> str | None:
        return self.qualifiers.get(key)

    def has_qualifier(self, key: str) -> bool:
        return key in self.qualifiers

    def flag(self, key: str) -> bool:
        """True iff the qualifier is present and spells ``true``."""
        return (self.qualifiers.get(key) or "").lower() == "true"

    @property
    def is_feature(self) -> bool:
        return self.qualifiers.get("type") == FEATURE_TYPE

    @property
    def tolerated_versions(self) -> tuple[str, ...]:
        """Versions listed in ``ibm.tolerates``. Never used to resolve dependencies."""
        value = self.qualifiers.get(TOLERATES) or ""
        return tuple(v.strip() for v in value.split(",") if v.strip())

    def __str__(self) -> str:
        return f"{self.id:>88} : {dict(self.qualifiers)}"


def parse_element(
    text: str,
    diagnostics: Diagnostics | None = None,
    ignore_duplicates: bool = False,
) -> HeaderElement:
    """Split one element into its id and qualifiers."""
    atoms = [m.group() for m in ATOM_PATTERN.finditer(text)]
    if not atoms or not atoms[0].strip():
        raise ManifestParseError(
            f"Unable to parse manifest value into constituent parts: {text}"
        )
    qualifiers: dict[str, str] = {}
    for atom in atoms[1:]:
        parts = _QUALIFIER_SPLIT.split(atom, maxsplit=1)
        key = parts[0].strip()
        value = _QUOTED.sub(r"\1", parts[1].strip()) if len(parts) > 1 else ""
        if key in qualifiers and diagnostics is not None and not ignore_duplicates:
            diagnostics.warn(
                DiagnosticCode.DUPLICATE_QUALIFIER,
                f"duplicate metadata key '{key}' detected in string '{text}'",
                subject=key,
            )
        qualifiers[key] = value
    return HeaderElement(id=atoms[0].strip(), qualifiers=qualifiers)


def parse_header(
    value: str | None,
    diagnostics: Diagnostics | None = None,
    ignore_duplicates: bool = False,
) -> tuple[HeaderElement, ...]:
    """Split a header value into its elements. A missing header has none."""
    if value is None:
        return ()
    return tuple(
        parse_element(m.group(), diagnostics, ignore_duplicates)
        for m in ELEMENT_PATTERN.finditer(value)
        if m.group().strip()
    )


__all__ = [
    "FEATURE_TYPE",
    "TOLERATES",
    "Header",
    "HeaderElement",
    "parse_element",
    "parse_header",
]
