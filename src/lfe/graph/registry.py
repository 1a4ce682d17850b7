"""
Feature registry.

Loads every feature manifest under ``<root>/lib/features`` once, indexes the
records by full name and short name, and builds the dependency index. The
registry is never modified after construction.

Manifesto:
    Loading tolerates messy installs. Duplicate names and dependencies on
    absent features are reported as diagnostics and the later record wins;
    only a missing install directory (or an unreadable manifest) stops the
    run.

Architecture:
    ::

        lib/features/*.mf ──► read_manifests() ──► Feature.from_manifest()
                                                        │
                              ┌─────────────────────────┤
                              ▼                         ▼
                        by_full_name              by_short_name
                              │
                              ▼
                     DependencyIndex.build()  (sorted, bitsets)

Examples:
    >>> registry = FeatureRegistry.load(Path("/opt/wlp"))
    >>> registry.get("cdi-2.0").full_name
    'com.ibm.websphere.appserver.cdi-2.0'
    >>> paths = registry.find_paths(compile_queries(["cdi-2.0/*"]))

Tags:
    registry, feature, manifest, index, lfe

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from lfe.core.diagnostics import DiagnosticCode, Diagnostics
from lfe.core.errors import InstallRootError, ManifestError
from lfe.core.logging import get_logger
from lfe.graph.feature import Feature
from lfe.graph.index import DependencyIndex
from lfe.manifest.reader import read_manifests

if TYPE_CHECKING:
    from lfe.query.elements import Query
    from lfe.query.search import Path as FeaturePath

logger = get_logger(__name__)

FEATURES_SUBDIR = Path("lib/features")


class FeatureRegistry:
    """The complete, read-only feature set plus its lookup structures."""

    def __init__(
        self,
        features: Iterable[Feature],
        *,
        ignore_duplicates: bool = False,
        diagnostics: Diagnostics | None = None,
    ):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.ignore_duplicates = ignore_duplicates
        by_full_name: dict[str, Feature] = {}
        by_short_name: dict[str, Feature] = {}
        for feature in features:
            if feature.full_name in by_full_name and not ignore_duplicates:
                self.diagnostics.warn(
                    DiagnosticCode.DUPLICATE_SYMBOLIC_NAME,
                    f"duplicate symbolic name found: {feature.full_name}",
                    subject=feature.full_name,
                )
            by_full_name[feature.full_name] = feature
            if feature.short_name is None:
                continue
            if feature.short_name in by_short_name and not ignore_duplicates:
                self.diagnostics.warn(
                    DiagnosticCode.DUPLICATE_SHORT_NAME,
                    f"duplicate short name found: {feature.short_name}",
                    subject=feature.short_name,
                )
            by_short_name[feature.short_name] = feature
        self.by_full_name: Mapping[str, Feature] = MappingProxyType(by_full_name)
        self.by_short_name: Mapping[str, Feature] = MappingProxyType(by_short_name)
        self.index = DependencyIndex.build(by_full_name.values())

    @classmethod
    def load(
        cls,
        root: Path,
        *,
        features_subdir: Path = FEATURES_SUBDIR,
        ignore_duplicates: bool = False,
        diagnostics: Diagnostics | None = None,
    ) -> FeatureRegistry:
        """Load every manifest under ``root / features_subdir``.

        Raises:
            InstallRootError: ``root`` or the feature subdirectory is missing
            ManifestError: a manifest cannot be parsed or has no symbolic name
        """
        root = Path(root)
        if not root.is_dir():
            raise InstallRootError(
                str(root.absolute()), f"Not a valid directory: {root.absolute()}"
            )
        directory = root / features_subdir
        if not directory.is_dir():
            raise InstallRootError(str(directory.absolute()))

        diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        features = []
        for path, attributes in read_manifests(directory):
            try:
                features.append(
                    Feature.from_manifest(attributes, diagnostics, ignore_duplicates)
                )
            except ManifestError as e:
                e.with_context(path=str(path))
                raise
        registry = cls(features, ignore_duplicates=ignore_duplicates, diagnostics=diagnostics)
        logger.info("registry_loaded", directory=str(directory), features=len(registry))
        return registry

    def __len__(self) -> int:
        return len(self.by_full_name)

    def __contains__(self, name: object) -> bool:
        return name in self.by_full_name or name in self.by_short_name

    def __iter__(self) -> Iterator[Feature]:
        """Features in dense id (full name) order."""
        return iter(self.index.features)

    def get(self, name: str) -> Feature | None:
        """Look a feature up by full name, then by short name."""
        return self.by_full_name.get(name) or self.by_short_name.get(name)

    def dependencies(self, feature: Feature | str) -> tuple[Feature, ...]:
        """Direct feature dependencies that exist in this registry."""
        return self.index.dependencies_of(feature)

    def missing_dependencies(self) -> Iterator[tuple[Feature, str]]:
        """Each (feature, dependency id) naming an absent feature."""
        for feature in self.index.features:
            for dependency_id in feature.dependency_ids:
                if dependency_id not in self.by_full_name:
                    yield feature, dependency_id

    def warn_missing_features(self) -> int:
        """Report dependencies on absent features. Changes nothing."""
        count = 0
        for feature, dependency_id in self.missing_dependencies():
            self.diagnostics.warn(
                DiagnosticCode.MISSING_DEPENDENCY,
                f"feature '{feature.full_name}' depends on absent feature "
                f"'{dependency_id}'. This dependency will be ignored.",
                subject=dependency_id,
            )
            count += 1
        return count

    def find_paths(self, queries: Iterable[Query]) -> Iterator[FeaturePath]:
        """Lazily search every query against the whole registry."""
        from lfe.query.search import search

        return search(self.index, queries)


__all__ = ["FEATURES_SUBDIR", "FeatureRegistry"]
