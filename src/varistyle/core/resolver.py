"""
Variant resolution.

Resolves a descriptor plus call-time selection, forced values and
overrides into one ordered token list:

    base tokens ++ axis tokens (axes in declaration order) ++ overrides

Later tokens are positioned to win under "last rule wins" semantics, so
caller overrides always come last. Per axis, the effective value is
chosen with this precedence:

    forced value > explicit selection > axis default

Unknown selection values are not errors; they fall back to the axis
default. Resolution is a pure function of its inputs and never raises
for call-time data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .ir import Axis, VariantDescriptor

logger = logging.getLogger(__name__)

Selection = Mapping[str, object]
Overrides = str | Iterable[str] | None


def _as_value_name(value: object) -> str:
    return value if isinstance(value, str) else str(value)


def effective_value(
    axis: Axis,
    selection: Selection | None = None,
    forced: Mapping[str, str | None] | None = None,
) -> str:
    """
    Pick the value an axis resolves to.

    Args:
        axis: Axis being resolved
        selection: Caller's chosen values (partial, possibly invalid)
        forced: Rule-driven values that beat the selection

    Returns:
        A value name guaranteed to exist in ``axis.values``
    """
    if forced:
        forced_value = forced.get(axis.name)
        if forced_value is not None:
            if forced_value in axis.values:
                return forced_value
            logger.warning(
                "Ignoring forced value %r for axis %r (not one of: %s)",
                forced_value,
                axis.name,
                ", ".join(axis.values),
            )

    chosen = selection.get(axis.name) if selection else None
    if chosen is None:
        return axis.default_value

    value_name = _as_value_name(chosen)
    if value_name in axis.values:
        return value_name

    logger.debug(
        "Unknown value %r for axis %r, using default %r",
        value_name,
        axis.name,
        axis.default_value,
    )
    return axis.default_value


def effective_selection(
    descriptor: VariantDescriptor,
    selection: Selection | None = None,
    forced: Mapping[str, str | None] | None = None,
) -> dict[str, str]:
    """Map every axis of the descriptor to the value it resolves to."""
    return {axis.name: effective_value(axis, selection, forced) for axis in descriptor.axes}


def override_tokens(overrides: Overrides) -> list[str]:
    """Normalize caller overrides; strings are split on whitespace, sequences kept verbatim."""
    if overrides is None:
        return []
    if isinstance(overrides, str):
        return overrides.split()
    return list(overrides)


def resolve(
    descriptor: VariantDescriptor,
    selection: Selection | None = None,
    overrides: Overrides = None,
    forced: Mapping[str, str | None] | None = None,
) -> list[str]:
    """
    Resolve a descriptor into its ordered token list.

    Args:
        descriptor: Validated variant descriptor
        selection: Axis name to chosen value name; omitted axes, ``None``
            values and unknown value names use the axis default
        overrides: Extra tokens appended after all axis tokens
        forced: Axis name to value name, beating the selection

    Returns:
        Token list, base tokens first and overrides last

    Examples:
        >>> from varistyle.core.descriptor import define_descriptor
        >>> button = define_descriptor(
        ...     ["btn"],
        ...     {
        ...         "kind": {"default": ["base-kind"], "destructive": ["dest-kind"]},
        ...         "size": {"sm": ["pad-sm"], "lg": ["pad-lg"]},
        ...     },
        ...     {"kind": "default", "size": "sm"},
        ... )
        >>> resolve(button, {"kind": "destructive"}, ["custom-class"])
        ['btn', 'dest-kind', 'pad-sm', 'custom-class']
    """
    if selection and logger.isEnabledFor(logging.DEBUG):
        unknown = [key for key in selection if descriptor.get_axis(key) is None]
        if unknown:
            logger.debug(
                "Ignoring selection for undeclared axis %s of %s",
                ", ".join(unknown),
                descriptor.name or "<anonymous>",
            )

    tokens = list(descriptor.base_tokens)
    for axis in descriptor.axes:
        tokens.extend(axis.values[effective_value(axis, selection, forced)])
    tokens.extend(override_tokens(overrides))
    return tokens


def resolve_class_name(
    descriptor: VariantDescriptor,
    selection: Selection | None = None,
    overrides: Overrides = None,
    forced: Mapping[str, str | None] | None = None,
) -> str:
    """Resolve and join into a single space-separated class string."""
    return join_tokens(resolve(descriptor, selection, overrides, forced))


def join_tokens(*parts: Overrides) -> str:
    """
    Join token parts in order, skipping empty and missing parts.

    Examples:
        >>> join_tokens("p-6 pt-0", None, ["mt-4"])
        'p-6 pt-0 mt-4'
    """
    tokens: list[str] = []
    for part in parts:
        tokens.extend(token for token in override_tokens(part) if token)
    return " ".join(tokens)
