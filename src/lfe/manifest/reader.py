"""
Feature manifest reader.

Reads the main section of a JAR-style manifest::

    Manifest-Version: 1.0
    Subsystem-SymbolicName: com.ibm.websphere.appserver.cdi-2.0; visibility:=public
    Subsystem-Content: com.ibm.ws.cdi.internal, com.ibm.websphere.appserver.j
     avaeeCompatible-8.0; type="osgi.subsystem.feature"

A line starting with a single space continues the previous header. The
main section ends at the first blank line; per-entry sections after it are
ignored.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from lfe.core.errors import ManifestParseError
from lfe.core.logging import get_logger
from lfe.manifest.headers import Header

logger = get_logger(__name__)

MANIFEST_SUFFIX = ".mf"


def parse_manifest(lines: Iterable[str]) -> dict[str, str]:
    """Parse manifest lines into a header mapping.

    Header names are matched case-insensitively against :class:`Header` and
    stored with the declared spelling. Unknown headers keep their spelling.
    """
    headers: dict[str, str] = {}
    name: str | None = None
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            break
        if line.startswith(" "):
            if name is None:
                raise ManifestParseError(f"continuation line {number} has no header to continue")
            headers[name] += line[1:]
            continue
        key, sep, value = line.partition(":")
        if not sep or not key.strip():
            raise ManifestParseError(f"invalid header field on line {number}: {line!r}")
        name = Header.canonical_name(key.strip())
        headers[name] = value[1:] if value.startswith(" ") else value
    return headers


def read_manifest(path: Path) -> dict[str, str]:
    """Read and parse one manifest file.

    Raises:
        ManifestParseError: the file cannot be read as UTF-8 text, or is
            not a well-formed manifest
    """
    try:
        with open(path, encoding="utf-8-sig") as f:
            return parse_manifest(f)
    except ManifestParseError as e:
        e.with_context(path=str(path))
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(
            f"Unable to read manifest {path}: {e}", cause=e
        ).with_context(path=str(path)) from e


def manifest_paths(directory: Path) -> Iterator[Path]:
    """Yield the manifest files in ``directory``, in filesystem order."""
    for path in directory.iterdir():
        if path.is_file() and path.name.endswith(MANIFEST_SUFFIX):
            yield path


def read_manifests(directory: Path) -> Iterator[tuple[Path, dict[str, str]]]:
    """Read every manifest in ``directory``."""
    count = 0
    for path in manifest_paths(directory):
        count += 1
        yield path, read_manifest(path)
    logger.debug("manifests_read", directory=str(directory), count=count)


__all__ = [
    "MANIFEST_SUFFIX",
    "parse_manifest",
    "read_manifest",
    "manifest_paths",
    "read_manifests",
]
