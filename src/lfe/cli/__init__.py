"""
CLI layer for lfe.

Provides a Typer application that wires settings, the feature registry, the
query engine and the renderers together. It handles only terminal
transport: argument parsing and output.

Entry point::

    lfe --help
"""

from lfe.cli.app import app

__all__ = ["app"]
