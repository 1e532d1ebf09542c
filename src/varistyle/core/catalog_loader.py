"""
Catalog persistence layer for variant descriptors.

Handles reading and writing descriptor catalogs as YAML. A catalog lets
primitives be declared outside code; every entry goes through
``define_descriptor`` so it is validated exactly like a built-in one.

Default location: {project_root}/variants.yaml
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .descriptor import define_descriptor
from .errors import CatalogError, format_validation_error
from .ir import CatalogYAML, VariantDescriptor

logger = logging.getLogger(__name__)

CATALOG_FILE = "variants.yaml"

# Extra catalog picked up by the CLI when --catalog is not given
CATALOG_ENV_VAR = "VARISTYLE_CATALOG"


# =============================================================================
# Path helpers
# =============================================================================


def get_catalog_path(project_root: Path) -> Path:
    """Get the variants.yaml file path."""
    return project_root / CATALOG_FILE


def catalog_exists(project_root: Path) -> bool:
    """Check if a variants.yaml exists in the project."""
    return get_catalog_path(project_root).exists()


def catalog_path_from_env() -> Path | None:
    """Get the catalog path named by VARISTYLE_CATALOG, if set."""
    value = os.environ.get(CATALOG_ENV_VAR, "").strip()
    return Path(value) if value else None


# =============================================================================
# Loading
# =============================================================================


def parse_catalog(data: Any, source: str = "<catalog>") -> dict[str, VariantDescriptor]:
    """Build descriptors from raw catalog data.

    Args:
        data: Parsed YAML document (mapping of primitive name to entry).
        source: Name used in error messages.

    Returns:
        Primitive name to descriptor, in document order.

    Raises:
        CatalogError: If the document shape is invalid.
        ConfigurationError: If an entry does not define a valid descriptor.
    """
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise CatalogError(
            f"expected a mapping of primitives, got {type(data).__name__}", source
        )

    try:
        catalog = CatalogYAML(primitives=data)
    except ValidationError as e:
        raise CatalogError(format_validation_error(e), source) from e

    descriptors: dict[str, VariantDescriptor] = {}
    for name, entry in catalog.primitives.items():
        descriptors[name] = define_descriptor(
            entry.base,
            entry.variants,
            entry.default_variants,
            name=name,
        )
    return descriptors


def load_catalog(path: Path) -> dict[str, VariantDescriptor]:
    """Load descriptors from a catalog YAML file.

    Args:
        path: Catalog file.

    Returns:
        Primitive name to descriptor.

    Raises:
        CatalogError: If the file is missing, unreadable or not valid YAML.
        ConfigurationError: If an entry does not define a valid descriptor.
    """
    if not path.exists():
        raise CatalogError(f"catalog not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except OSError as e:
        raise CatalogError(f"cannot read catalog: {e}", str(path)) from e
    except yaml.YAMLError as e:
        raise CatalogError(f"invalid YAML: {e}", str(path)) from e

    descriptors = parse_catalog(data, source=str(path))
    logger.info("Loaded %d descriptor(s) from %s", len(descriptors), path)
    return descriptors


# =============================================================================
# Saving
# =============================================================================


def catalog_data(descriptors: Mapping[str, VariantDescriptor]) -> dict[str, Any]:
    """Convert descriptors to the catalog document shape."""
    data: dict[str, Any] = {}
    for name, descriptor in descriptors.items():
        data[name] = {
            "base": " ".join(descriptor.base_tokens),
            "variants": {
                axis.name: {value: " ".join(tokens) for value, tokens in axis.values.items()}
                for axis in descriptor.axes
            },
            "default_variants": dict(descriptor.defaults),
        }
    return data


def dump_catalog(descriptors: Mapping[str, VariantDescriptor]) -> str:
    """Serialize descriptors as catalog YAML, preserving declaration order."""
    return yaml.dump(
        catalog_data(descriptors),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=120,
    )


def save_catalog(path: Path, descriptors: Mapping[str, VariantDescriptor]) -> Path:
    """Write descriptors to a catalog file.

    Args:
        path: Destination file.
        descriptors: Primitive name to descriptor.

    Returns:
        Path to the written file.
    """
    path.write_text(dump_catalog(descriptors), encoding="utf-8")
    logger.info("Saved %d descriptor(s) to %s", len(descriptors), path)
    return path
