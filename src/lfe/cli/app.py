"""
Typer application for the lfe command.

    lfe [flags] [--] <pattern> [pattern ...]

Run from an install root (or pass ``--root``). Patterns are globs matched
against short names and symbolic names; slashes walk the dependency graph.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from pathlib import Path

import typer

from lfe import __version__
from lfe.cli.utils import echo_lines, fail
from lfe.core.errors import LfeError
from lfe.core.logging import configure_logging, get_logger
from lfe.core.settings import get_settings
from lfe.graph.registry import FeatureRegistry
from lfe.query.elements import compile_queries
from lfe.render.options import DisplayOptions, Flag
from lfe.render.output import render

logger = get_logger(__name__)

EXAMPLES = """\
Examples:

  lfe '*jms*'           List all features with jms in their symbolic name or short name.

  lfe javaee-8.0/*      List all features that javaee-8.0 depends on.

  lfe --paths 'javaee-8.0/**/cdi-*'   Show every dependency chain from javaee-8.0 to a cdi feature.
"""

app = typer.Typer(
    name="lfe",
    help=(
        "Prints information about features when run from a Liberty root directory. "
        "The patterns are treated as file glob patterns. "
        "Asterisks match any text, and question marks match a single character. "
        "Slashes can be added to navigate dependency hierarchies; a ** segment "
        "matches any number of hops. "
        "If multiple patterns are given, features matching any pattern are listed."
    ),
    add_completion=False,
    rich_markup_mode=None,
)


def _version_callback(value: bool) -> None:
    if value:
        try:
            v = pkg_version("lfe")
        except PackageNotFoundError:
            v = __version__
        typer.echo(f"lfe {v}")
        raise typer.Exit()


@app.command(epilog=EXAMPLES)
def main(
    patterns: list[str] = typer.Argument(
        None, help="Feature patterns, e.g. 'cdi*' or 'javaee-8.0/*'.", show_default=False
    ),
    decorate: bool = typer.Option(
        False,
        "--decorate",
        help="Mark features with their visibility and the auto, superseded and singleton qualifiers.",
    ),
    full_names: bool = typer.Option(
        False,
        "--full-names",
        help="Always use the symbolic name of the feature, even if it has a short name.",
    ),
    tree: bool = typer.Option(False, "--tree", help="Display all matching dependency trees."),
    paths: bool = typer.Option(False, "--paths", help="Display all matching paths (supersedes --tree)."),
    tabs: bool = typer.Option(
        False,
        "--tabs",
        help="Suppress headers and use tabs to delimit fields to aid scripting. Implies --decorate.",
    ),
    simple_sort: bool = typer.Option(
        False,
        "--simple-sort",
        help="Sort by full name. Do not categorise by visibility. Implies --full-names.",
    ),
    warn_missing: bool = typer.Option(
        False, "--warn-missing", help="Warn if any features are referenced but not present."
    ),
    ignore_duplicates: bool = typer.Option(
        False,
        "--ignore-duplicates",
        help="Do NOT report duplicate feature attributes (e.g. short names).",
    ),
    root: Path | None = typer.Option(
        None, "--root", "-r", help="Install root directory. Defaults to $LFE_ROOT or the current directory."
    ),
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Query installed features and their dependencies."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)

    selected = {
        Flag.DECORATE: decorate,
        Flag.FULL_NAMES: full_names,
        Flag.TREE: tree,
        Flag.PATHS: paths,
        Flag.TABS: tabs,
        Flag.SIMPLE_SORT: simple_sort,
    }
    options = DisplayOptions.from_flags(flag for flag, on in selected.items() if on)

    try:
        queries = compile_queries(patterns or [])
        registry = FeatureRegistry.load(
            root or settings.root,
            features_subdir=settings.features_subdir,
            ignore_duplicates=ignore_duplicates or settings.ignore_duplicates,
        )
    except LfeError as e:
        raise fail(e) from e

    if warn_missing or settings.warn_missing:
        registry.warn_missing_features()

    count = echo_lines(render(registry.find_paths(queries), options))
    logger.debug("query_complete", patterns=list(patterns or []), lines=count)
