"""
Primitive CLI commands.

Commands for listing primitives, resolving class strings and browsing
every value of every axis.
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from varistyle.cli.utils import get_registry, parse_assignments
from varistyle.core.ir import VariantDescriptor
from varistyle.core.resolver import effective_selection, join_tokens, resolve
from varistyle.ui.primitives import get_descriptor
from varistyle.ui.primitives.input import ERROR_VARIANT, input_forced_values

console = Console()


def _lookup(ctx: typer.Context, primitive: str) -> VariantDescriptor:
    try:
        return get_descriptor(primitive, get_registry(ctx))
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(code=1)


def list_command(ctx: typer.Context) -> None:
    """List primitives with their axes and defaults."""
    table = Table(title="Primitives")
    table.add_column("Primitive", style="bold cyan")
    table.add_column("Axes")
    table.add_column("Defaults", style="green")

    for name, descriptor in get_registry(ctx).items():
        axes = "\n".join(
            f"{axis.name}: {', '.join(axis.value_names)}" for axis in descriptor.axes
        )
        defaults = "\n".join(f"{axis}={value}" for axis, value in descriptor.defaults.items())
        table.add_row(name, axes, defaults)

    console.print(table)


def resolve_command(
    ctx: typer.Context,
    primitive: str = typer.Argument(..., help="Primitive name (button, badge, card, input)"),
    select: list[str] | None = typer.Option(
        None, "--select", "-s", help="Axis selection as axis=value (repeatable)"
    ),
    class_name: str = typer.Option("", "--class", "-c", help="Override tokens appended last"),
    force: list[str] | None = typer.Option(
        None, "--force", "-f", help="Forced axis value as axis=value (repeatable)"
    ),
    error: str = typer.Option(
        "", "--error", "-e", help="Error message; forces the error variant where one exists"
    ),
    as_json: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Resolve a primitive into its class string."""
    descriptor = _lookup(ctx, primitive)
    selection = parse_assignments(select, "--select")
    forced = parse_assignments(force, "--force")

    if error:
        variant_axis = descriptor.get_axis("variant")
        if variant_axis is not None and variant_axis.has_value(ERROR_VARIANT):
            forced = {**forced, **input_forced_values(error)}
        else:
            typer.echo(
                f"Warning: --error has no effect on '{descriptor.name or primitive}'", err=True
            )

    tokens = resolve(descriptor, selection, class_name, forced)

    if as_json:
        payload = {
            "primitive": descriptor.name or primitive,
            "selection": effective_selection(descriptor, selection, forced),
            "tokens": tokens,
            "class_name": join_tokens(tokens),
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(join_tokens(tokens))


def gallery_command(
    ctx: typer.Context,
    primitive: str = typer.Argument(..., help="Primitive name (button, badge, card, input)"),
) -> None:
    """Show every value of every axis with the tokens it contributes."""
    descriptor = _lookup(ctx, primitive)

    console.print(f"[bold]{descriptor.name or primitive}[/bold]")
    console.print(f"[dim]base:[/dim] {' '.join(descriptor.base_tokens)}")

    for axis in descriptor.axes:
        table = Table(title=f"{axis.name}")
        table.add_column("Value", style="bold cyan", no_wrap=True)
        table.add_column("Tokens")
        for value, tokens in axis.values.items():
            label = f"{value} (default)" if value == axis.default_value else value
            table.add_row(label, " ".join(tokens))
        console.print(table)
