"""
Input primitive.

The input resolves through ``size`` then ``variant``. An error message
forces the variant to ``error`` regardless of the caller's selection:

    error present > selected variant > default variant

``input_field`` gathers everything a rendering surface needs to draw the
field (id, classes, label, status icon, message) without rendering it.
"""

from __future__ import annotations

from dataclasses import dataclass

from varistyle.core.descriptor import define_descriptor
from varistyle.core.identity import ensure_identity
from varistyle.core.resolver import Overrides, effective_selection, resolve_class_name

INPUT = define_descriptor(
    (
        "flex w-full rounded-lg border bg-white px-3 py-2 text-sm ring-offset-white "
        "file:border-0 file:bg-transparent file:text-sm file:font-medium "
        "placeholder:text-gray-500 focus-visible:outline-none focus-visible:ring-2 "
        "focus-visible:ring-offset-2 disabled:cursor-not-allowed disabled:opacity-50 "
        "transition-all duration-200 ease-in-out"
    ),
    {
        "size": {
            "sm": "h-8 px-3 text-xs rounded-md",
            "default": "h-10 px-3 text-sm rounded-lg",
            "lg": "h-12 px-4 text-base rounded-lg",
        },
        "variant": {
            "default": [
                "border-gray-200 focus-visible:ring-blue-500 focus-visible:border-blue-500",
                "hover:border-gray-300 shadow-sm hover:shadow-md",
            ],
            "error": [
                "border-red-300 text-red-900 focus-visible:ring-red-500 focus-visible:border-red-500",
                "hover:border-red-400 bg-red-50/50",
            ],
            "success": [
                "border-green-300 text-green-900 focus-visible:ring-green-500 focus-visible:border-green-500",
                "hover:border-green-400 bg-green-50/50",
            ],
            "warning": [
                "border-amber-300 text-amber-900 focus-visible:ring-amber-500 focus-visible:border-amber-500",
                "hover:border-amber-400 bg-amber-50/50",
            ],
        },
    },
    {"size": "default", "variant": "default"},
    name="input",
)

ERROR_VARIANT = "error"

LABEL_CLASS = (
    "block text-sm font-medium text-gray-900 mb-2 transition-colors duration-200 "
    "group-hover:text-blue-700"
)
REQUIRED_MARKER_CLASS = "text-red-500 ml-1"
ERROR_MESSAGE_CLASS = "text-sm text-destructive"
HELPER_TEXT_CLASS = "mt-2 text-sm text-muted-foreground leading-relaxed"

# Status icon name to icon tokens; the error icon wins over the others
STATUS_ICON_CLASSES: dict[str, str] = {
    "error": "h-4 w-4 text-destructive",
    "success": "h-4 w-4 text-success",
    "warning": "h-4 w-4 text-warning",
}


def input_forced_values(error: str | None) -> dict[str, str]:
    """Forced axis values for the input: any error message forces the error variant."""
    if error:
        return {"variant": ERROR_VARIANT}
    return {}


@dataclass(frozen=True)
class InputField:
    """Presentation state for one input field."""

    id: str
    class_name: str
    variant: str  # effective variant after the error rule
    label: str | None = None
    label_class_name: str = LABEL_CLASS
    required_marker: bool = False
    required_marker_class_name: str = REQUIRED_MARKER_CLASS
    status_icon: str | None = None
    icon_class_name: str | None = None
    message: str | None = None
    message_role: str | None = None  # "alert" for error messages
    message_class_name: str | None = None


def _status_icon(error: str | None, variant: str | None) -> str | None:
    if error:
        return "error"
    if variant in ("success", "warning"):
        return variant
    return None


def input_field(
    *,
    id: str | None = None,
    size: str | None = None,
    variant: str | None = None,
    label: str | None = None,
    error: str | None = None,
    helper_text: str | None = None,
    required: bool = False,
    class_name: Overrides = None,
) -> InputField:
    """Compose the presentation state for an input field.

    Args:
        id: Caller-supplied element id; generated when missing or empty
        size: Selected size
        variant: Selected variant (ignored for styling when ``error`` is set)
        label: Label text
        error: Error message; forces the error variant and replaces helper text
        helper_text: Shown only when there is no error
        required: Show the required marker next to the label
        class_name: Caller tokens appended last

    Returns:
        InputField

    Examples:
        >>> field = input_field(id="email", variant="success", error="Required")
        >>> field.variant, field.status_icon, field.message_role
        ('error', 'error', 'alert')
    """
    selection = {"size": size, "variant": variant}
    forced = input_forced_values(error)

    icon = _status_icon(error, variant)
    if error:
        message, role, message_class = error, "alert", ERROR_MESSAGE_CLASS
    elif helper_text:
        message, role, message_class = helper_text, None, HELPER_TEXT_CLASS
    else:
        message, role, message_class = None, None, None

    return InputField(
        id=ensure_identity(id, prefix="input"),
        class_name=resolve_class_name(INPUT, selection, class_name, forced),
        variant=effective_selection(INPUT, selection, forced)["variant"],
        label=label or None,
        required_marker=bool(label) and required,
        status_icon=icon,
        icon_class_name=STATUS_ICON_CLASSES[icon] if icon else None,
        message=message,
        message_role=role,
        message_class_name=message_class,
    )


__all__ = [
    "INPUT",
    "ERROR_VARIANT",
    "InputField",
    "input_field",
    "input_forced_values",
    "STATUS_ICON_CLASSES",
]
