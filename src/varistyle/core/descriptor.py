"""
Descriptor definition.

``define_descriptor`` is the only supported way to build a
VariantDescriptor from declarative data. All validation happens here,
eagerly, so a misconfigured primitive fails when it is defined rather
than when it is first resolved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from pydantic import ValidationError

from .errors import ConfigurationError, make_configuration_error
from .ir import Axis, TokenSpec, VariantDescriptor

logger = logging.getLogger(__name__)

AxisDeclaration = Axis | tuple[str, Mapping[str, TokenSpec]]
AxesDeclaration = Mapping[str, Mapping[str, TokenSpec]] | Sequence[AxisDeclaration]


def _axis_pair(declaration: object, context: str | None) -> tuple[str, Mapping[str, TokenSpec]]:
    """Unpack an ``(axis, {value: tokens})`` declaration, checking its shape."""
    if (
        isinstance(declaration, tuple | list)
        and len(declaration) == 2
        and isinstance(declaration[0], str)
        and isinstance(declaration[1], Mapping)
    ):
        return declaration[0], declaration[1]
    raise ConfigurationError(
        f"axis declaration must be an Axis or an (axis, {{value: tokens}}) pair, "
        f"got {declaration!r}",
        context,
    )


def define_descriptor(
    base_tokens: TokenSpec,
    axes: AxesDeclaration,
    defaults: Mapping[str, str],
    *,
    name: str = "",
) -> VariantDescriptor:
    """
    Build and validate a variant descriptor.

    Args:
        base_tokens: Tokens applied unconditionally (string or list)
        axes: Ordered axes, either ``{axis: {value: tokens}}`` or a
            sequence of Axis objects / ``(axis, {value: tokens})`` pairs
        defaults: Axis name to default value name, covering every axis
        name: Primitive name, used in error messages

    Returns:
        Immutable VariantDescriptor

    Raises:
        ConfigurationError: If an axis has no values, a default is missing
            or unknown, a default names an undeclared axis, two axes
            share a name, or a declaration has the wrong shape

    Examples:
        >>> button = define_descriptor(
        ...     "btn",
        ...     {"kind": {"default": "base-kind", "destructive": "dest-kind"}},
        ...     {"kind": "default"},
        ... )
        >>> button.axis_names
        ('kind',)
    """
    context = name or None
    if not isinstance(defaults, Mapping):
        raise ConfigurationError(
            f"defaults must be a mapping, got {type(defaults).__name__}", context
        )
    if isinstance(axes, Mapping):
        declarations: Iterable[AxisDeclaration] = list(axes.items())
    elif isinstance(axes, Sequence) and not isinstance(axes, str):
        declarations = list(axes)
    else:
        raise ConfigurationError(
            f"axes must be a mapping or a sequence, got {type(axes).__name__}", context
        )

    built: list[Axis] = []
    try:
        for declaration in declarations:
            if isinstance(declaration, Axis):
                # Re-validated copy of the caller's axis
                built.append(
                    Axis(
                        name=declaration.name,
                        values=declaration.values,
                        default_value=declaration.default_value,
                    )
                )
                continue

            axis_name, values = _axis_pair(declaration, context)
            if axis_name not in defaults:
                raise ConfigurationError(f"no default for axis: {axis_name}", context)
            built.append(Axis(name=axis_name, values=values, default_value=defaults[axis_name]))

        descriptor = VariantDescriptor(
            name=name,
            base_tokens=base_tokens,
            axes=tuple(built),
            defaults=dict(defaults),
        )
    except ValidationError as e:
        raise make_configuration_error(e, context) from e

    logger.debug("Defined descriptor %s with axes %s", name or "<anonymous>", descriptor.axis_names)
    return descriptor
