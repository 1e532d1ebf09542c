"""
varistyle CLI Utilities.

Shared utility functions used across CLI modules.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping

import typer

from varistyle.core.ir import VariantDescriptor

def get_version() -> str:
    """Get the varistyle version."""
    from varistyle import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        typer.echo(f"varistyle version {get_version()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Send library logs to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
    )


def parse_assignments(items: list[str] | None, option: str) -> dict[str, str]:
    """
    Parse repeated ``axis=value`` options into a mapping.

    Args:
        items: Raw option values
        option: Option name for error messages

    Returns:
        Axis name to value name, later assignments winning

    Raises:
        typer.BadParameter: If an item has no ``=`` or an empty axis name
    """
    result: dict[str, str] = {}
    for item in items or []:
        axis, sep, value = item.partition("=")
        axis = axis.strip()
        if not sep or not axis:
            raise typer.BadParameter(f"expected axis=value, got '{item}'", param_hint=option)
        result[axis] = value.strip()
    return result


def get_registry(ctx: typer.Context) -> Mapping[str, VariantDescriptor]:
    """Get the descriptor registry prepared by the main callback."""
    from varistyle.ui.primitives import PRIMITIVES

    if isinstance(ctx.obj, dict) and "registry" in ctx.obj:
        registry: Mapping[str, VariantDescriptor] = ctx.obj["registry"]
        return registry
    return PRIMITIVES
