"""
varistyle UI module.

Presentation primitives (button, badge, card, input) defined as variant
descriptors.
"""

from varistyle.ui.primitives import (
    PRIMITIVES,
    build_registry,
    card_slot_class,
    get_descriptor,
    input_field,
)

__all__ = [
    "PRIMITIVES",
    "build_registry",
    "get_descriptor",
    "card_slot_class",
    "input_field",
]
