"""
Manifest input adapter: reads ``*.mf`` files and parses header values.
"""

from lfe.manifest.headers import FEATURE_TYPE, Header, HeaderElement, parse_element, parse_header
from lfe.manifest.reader import manifest_paths, parse_manifest, read_manifest, read_manifests

__all__ = [
    "FEATURE_TYPE",
    "Header",
    "HeaderElement",
    "parse_element",
    "parse_header",
    "manifest_paths",
    "parse_manifest",
    "read_manifest",
    "read_manifests",
]
