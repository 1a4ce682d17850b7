"""
Shared pytest fixtures for lfe tests.

This module provides:
- ``make_feature`` for building feature records in memory
- Small fixture graphs (``simple`` a -> {b, c}, ``diamond``)
- ``install_root`` for writing manifests into a temporary install

Usage:
    def test_something(diamond_registry):
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

from lfe.core.settings import clear_settings_cache
from lfe.graph.feature import Feature, Visibility
from lfe.graph.registry import FeatureRegistry
from lfe.manifest.headers import FEATURE_TYPE, HeaderElement


def make_feature(
    full_name: str,
    *depends_on: str,
    short_name: str | None = None,
    visibility: Visibility = Visibility.DEFAULT,
    bundles: tuple[str, ...] = (),
) -> Feature:
    """Build a feature that depends on ``depends_on`` (feature-type content)."""
    content = tuple(HeaderElement(d, {"type": FEATURE_TYPE}) for d in depends_on)
    content += tuple(HeaderElement(b, {"version": "[1.0,2.0)"}) for b in bundles)
    return Feature(
        full_name=full_name,
        short_name=short_name,
        visibility=visibility,
        content=content,
        symbolic_name=HeaderElement(full_name, {"visibility": visibility.value}),
    )


def names(paths) -> list[list[str]]:
    """Full names of every feature on every path."""
    return [[f.full_name for f in path] for path in paths]


# =============================================================================
# Settings isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep LFE_* variables and stray .env files out of every test."""
    for var in ("LFE_ROOT", "LFE_FEATURES_SUBDIR", "LFE_IGNORE_DUPLICATES",
                "LFE_WARN_MISSING", "LFE_LOG_LEVEL", "LFE_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()
    structlog.reset_defaults()


# =============================================================================
# Fixture graphs
# =============================================================================


@pytest.fixture
def simple_registry() -> FeatureRegistry:
    """a -> {b, c}."""
    return FeatureRegistry([
        make_feature("a", "b", "c"),
        make_feature("b"),
        make_feature("c"),
    ])


@pytest.fixture
def diamond_registry() -> FeatureRegistry:
    """a -> {b, c, d}, b -> {d}, c -> {d}, e isolated."""
    return FeatureRegistry([
        make_feature("d"),
        make_feature("c", "d"),
        make_feature("a", "b", "c", "d"),
        make_feature("e"),
        make_feature("b", "d"),
    ])


@pytest.fixture
def cyclic_registry() -> FeatureRegistry:
    """a -> b -> c -> a, c -> d."""
    return FeatureRegistry([
        make_feature("a", "b"),
        make_feature("b", "c"),
        make_feature("c", "a", "d"),
        make_feature("d"),
    ])


# =============================================================================
# Manifests on disk
# =============================================================================


def manifest_text(
    symbolic_name: str,
    *,
    short_name: str | None = None,
    content: str | None = None,
    extra: dict[str, str] | None = None,
) -> str:
    lines = ["Manifest-Version: 1.0", f"Subsystem-SymbolicName: {symbolic_name}"]
    if short_name:
        lines.append(f"IBM-ShortName: {short_name}")
    if content:
        lines.append(f"Subsystem-Content: {content}")
    for key, value in (extra or {}).items():
        lines.append(f"{key}: {value}")
    return "\n".join(lines) + "\n\n"


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """An install root with an empty ``lib/features`` directory."""
    root = tmp_path / "wlp"
    (root / "lib" / "features").mkdir(parents=True)
    return root


@pytest.fixture
def write_manifest(install_root: Path) -> Callable[..., Path]:
    """Write ``<file_name>`` into the install's feature directory."""

    def _write(file_name: str, text: str) -> Path:
        path = install_root / "lib" / "features" / file_name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_install(install_root: Path, write_manifest) -> Path:
    """A small but realistic install.

    javaee-8.0 -> {cdi-2.0, jsonb-1.0}; cdi-2.0 -> el-3.0 (private);
    jsonb-1.0 -> absent feature; plus a bundle and a non-manifest file.
    """
    feature = 'type="osgi.subsystem.feature"'
    write_manifest("javaee-8.0.mf", manifest_text(
        "com.ibm.websphere.appserver.javaee-8.0; visibility:=public; singleton:=true",
        short_name="javaee-8.0",
        content=(
            f"com.ibm.websphere.appserver.cdi-2.0; {feature},\n"
            f" com.ibm.websphere.appserver.jsonb-1.0; {feature}"
        ),
    ))
    write_manifest("cdi-2.0.mf", manifest_text(
        "com.ibm.websphere.appserver.cdi-2.0; visibility:=public",
        short_name="cdi-2.0",
        content=f'com.ibm.ws.cdi.internal; version="[1.0,2.0)", com.ibm.websphere.appserver.el-3.0; {feature}',
    ))
    write_manifest("el-3.0.mf", manifest_text(
        "com.ibm.websphere.appserver.el-3.0; visibility:=private",
    ))
    write_manifest("jsonb-1.0.mf", manifest_text(
        "com.ibm.websphere.appserver.jsonb-1.0; visibility:=public; superseded:=true",
        short_name="jsonb-1.0",
        content=f"com.ibm.websphere.appserver.jsonp-1.1; {feature}",
        extra={"IBM-Provision-Capability": "osgi.identity; filter:=\"(type=osgi.subsystem.feature)\""},
    ))
    (install_root / "lib" / "features" / "README.txt").write_text("not a manifest\n")
    return install_root
