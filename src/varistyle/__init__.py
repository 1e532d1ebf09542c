"""
varistyle - deterministic style-variant resolution for presentation primitives.

Resolves a primitive's declared axes of variation, the caller's selection
and free-form overrides into one ordered class-token sequence.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core.descriptor import define_descriptor
from .core.errors import CatalogError, ConfigurationError, VaristyleError
from .core.identity import ensure_identity
from .core.ir import Axis, VariantDescriptor
from .core.resolver import resolve, resolve_class_name


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("varistyle")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "Axis",
    "VariantDescriptor",
    "define_descriptor",
    "resolve",
    "resolve_class_name",
    "ensure_identity",
    "VaristyleError",
    "ConfigurationError",
    "CatalogError",
]
