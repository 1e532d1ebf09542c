"""
Built-in presentation primitives.

Each primitive is a VariantDescriptor defined once at import time. The
registry below is complete as soon as this package is imported and is
never mutated afterwards; ``build_registry`` returns a new mapping when
external descriptors are added.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from varistyle.core.ir import VariantDescriptor

from .badge import BADGE
from .button import BUTTON
from .card import CARD, CARD_SLOTS, card_slot_class
from .input import INPUT, InputField, input_field, input_forced_values

PRIMITIVES: Mapping[str, VariantDescriptor] = MappingProxyType(
    {
        "button": BUTTON,
        "badge": BADGE,
        "card": CARD,
        "input": INPUT,
    }
)


def build_registry(
    extra: Mapping[str, VariantDescriptor] | None = None,
) -> dict[str, VariantDescriptor]:
    """Combine the built-in primitives with external descriptors (external wins)."""
    registry = dict(PRIMITIVES)
    if extra:
        registry.update(extra)
    return registry


def get_descriptor(
    name: str,
    registry: Mapping[str, VariantDescriptor] | None = None,
) -> VariantDescriptor:
    """Get a descriptor by primitive name (case-insensitive).

    Args:
        name: Primitive name, e.g. "button"
        registry: Mapping to search; defaults to the built-ins

    Returns:
        The VariantDescriptor

    Raises:
        KeyError: If no primitive has that name

    Examples:
        >>> get_descriptor("Button").name
        'button'
    """
    source = PRIMITIVES if registry is None else registry
    key = name.strip().lower()
    if key in source:
        return source[key]
    if name in source:
        return source[name]
    raise KeyError(f"Unknown primitive '{name}' (expected one of: {', '.join(sorted(source))})")


__all__ = [
    "PRIMITIVES",
    "build_registry",
    "get_descriptor",
    "BUTTON",
    "BADGE",
    "CARD",
    "CARD_SLOTS",
    "card_slot_class",
    "INPUT",
    "InputField",
    "input_field",
    "input_forced_values",
]
