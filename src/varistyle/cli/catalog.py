"""
Catalog CLI commands.

Commands for validating and exporting descriptor catalogs.
"""

from __future__ import annotations

from pathlib import Path

import typer

from varistyle.cli.utils import get_registry
from varistyle.core.catalog_loader import dump_catalog, load_catalog, save_catalog
from varistyle.core.errors import VaristyleError


def check_command(
    catalog: Path = typer.Argument(..., help="Path to a variants.yaml catalog"),
) -> None:
    """Validate a catalog file."""
    try:
        descriptors = load_catalog(catalog)
    except VaristyleError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not descriptors:
        typer.echo(f"OK: {catalog} defines no primitives.")
        return
    typer.echo(f"OK: {len(descriptors)} primitive(s): {', '.join(descriptors)}")


def export_command(
    ctx: typer.Context,
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """Export all known primitives as a catalog."""
    registry = get_registry(ctx)
    if output is None:
        typer.echo(dump_catalog(registry), nl=False)
        return
    save_catalog(output, registry)
    typer.echo(f"Exported {len(registry)} primitive(s) to {output}")
