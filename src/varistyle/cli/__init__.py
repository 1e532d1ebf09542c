"""
varistyle CLI Package.

This package contains the CLI components:

- primitives.py: list, resolve and gallery commands
- catalog.py: check and export commands
- utils.py: Shared utilities
"""

from __future__ import annotations

from pathlib import Path

import typer

from varistyle.cli.catalog import check_command, export_command
from varistyle.cli.primitives import gallery_command, list_command, resolve_command
from varistyle.cli.utils import configure_logging, get_version, version_callback
from varistyle.core.catalog_loader import (
    catalog_exists,
    catalog_path_from_env,
    get_catalog_path,
    load_catalog,
)
from varistyle.core.errors import VaristyleError
from varistyle.ui.primitives import build_registry

app = typer.Typer(
    help="""varistyle - style variant resolution for presentation primitives

Commands:
  • list, gallery: browse primitives and their axes
  • resolve: produce the class string for a selection
  • check, export: validate and write variants.yaml catalogs
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    catalog: Path | None = typer.Option(
        None,
        "--catalog",
        help="Extra variants.yaml catalog (default: $VARISTYLE_CATALOG, then ./variants.yaml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """varistyle CLI main callback for global options."""
    configure_logging(verbose)

    catalog_path = catalog or catalog_path_from_env()
    if catalog_path is None and catalog_exists(Path.cwd()):
        catalog_path = get_catalog_path(Path.cwd())
    extra = {}
    if catalog_path is not None:
        try:
            extra = load_catalog(catalog_path)
        except VaristyleError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    ctx.obj = {"registry": build_registry(extra)}


app.command(name="list")(list_command)
app.command(name="resolve")(resolve_command)
app.command(name="gallery")(gallery_command)
app.command(name="check")(check_command)
app.command(name="export")(export_command)


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main", "get_version", "version_callback"]
