"""
Error types for varistyle descriptor definition and catalog loading.
"""

from __future__ import annotations

from pydantic import ValidationError


class VaristyleError(Exception):
    """Base exception for all varistyle errors."""

    def __init__(self, message: str, context: str | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class ConfigurationError(VaristyleError):
    """
    Raised when a variant descriptor cannot be defined.

    Examples:
    - Axis with no values
    - Default missing for a declared axis
    - Default referencing a value the axis does not have
    - Two axes sharing a name
    """

    pass


class CatalogError(ConfigurationError):
    """
    Raised when a catalog file cannot be read.

    Examples:
    - File not found
    - Malformed YAML
    - Document that is not a mapping of primitives
    """

    pass


def format_validation_error(error: ValidationError) -> str:
    """
    Collapse a pydantic ValidationError into a single readable line.

    Args:
        error: Error raised while building a model

    Returns:
        Messages joined with "; ", each prefixed by its field location
    """
    parts = []
    for item in error.errors():
        msg = str(item.get("msg", "")).removeprefix("Value error, ")
        loc = ".".join(str(p) for p in item.get("loc", ()))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def make_configuration_error(
    error: ValidationError,
    context: str | None = None,
) -> ConfigurationError:
    """
    Helper to wrap a pydantic ValidationError as a ConfigurationError.

    Args:
        error: Original validation error
        context: Optional primitive name or file the error belongs to

    Returns:
        ConfigurationError carrying the flattened message
    """
    return ConfigurationError(format_validation_error(error), context)
