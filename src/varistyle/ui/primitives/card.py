"""
Card primitive.

The card container resolves through the ``variant`` and ``padding`` axes.
Its inner slots (header, title, description, content, footer) have fixed
tokens; caller overrides are appended after them.
"""

from varistyle.core.descriptor import define_descriptor
from varistyle.core.resolver import Overrides, join_tokens

CARD = define_descriptor(
    "rounded-xl border bg-white text-gray-900 transition-all duration-300 ease-out group",
    {
        "variant": {
            "default": [
                "border-gray-200 shadow-lg shadow-gray-900/5",
                "hover:shadow-xl hover:shadow-gray-900/10 hover:translate-y-[-2px]",
            ],
            "outlined": [
                "border-2 border-gray-200 shadow-sm",
                "hover:border-blue-300 hover:shadow-md transition-all duration-300",
            ],
            "elevated": [
                "border-gray-200 shadow-xl shadow-gray-900/10",
                "hover:shadow-2xl hover:shadow-gray-900/15 hover:translate-y-[-4px]",
            ],
            "glass": [
                "backdrop-blur-xl bg-white/80 border-white/20 shadow-xl shadow-gray-900/10",
                "hover:shadow-2xl hover:shadow-gray-900/15",
            ],
            "gradient": [
                "bg-gradient-to-br from-gray-50 to-gray-100 border-gray-200 shadow-lg shadow-gray-900/5",
                "hover:shadow-xl hover:shadow-gray-900/10",
            ],
        },
        "padding": {
            "none": "p-0",
            "sm": "p-4",
            "default": "p-6",
            "lg": "p-8",
            "xl": "p-10",
        },
    },
    {"variant": "default", "padding": "default"},
    name="card",
)

# Fixed tokens per card slot
CARD_SLOTS: dict[str, str] = {
    "header": "flex flex-col space-y-2 p-6",
    "title": (
        "text-xl font-semibold leading-tight tracking-tight text-gray-900 "
        "group-hover:text-blue-700 transition-colors duration-200"
    ),
    "description": "text-sm text-gray-600 leading-relaxed",
    "content": "p-6 pt-0",
    "footer": "flex items-center justify-between p-6 pt-0 border-t border-border/50 mt-4",
}


def card_slot_class(slot: str, overrides: Overrides = None) -> str:
    """Get the class string for a card slot.

    Args:
        slot: One of header, title, description, content, footer
        overrides: Caller tokens appended after the slot tokens

    Returns:
        Space-separated class string

    Raises:
        KeyError: If the slot is unknown

    Examples:
        >>> card_slot_class("content", "text-sm")
        'p-6 pt-0 text-sm'
    """
    if slot not in CARD_SLOTS:
        raise KeyError(f"Unknown card slot '{slot}' (expected one of: {', '.join(CARD_SLOTS)})")
    return join_tokens(CARD_SLOTS[slot], overrides)


__all__ = ["CARD", "CARD_SLOTS", "card_slot_class"]
