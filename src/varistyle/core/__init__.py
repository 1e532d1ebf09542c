"""
varistyle core: descriptor IR, definition, resolution and catalogs.
"""

from .catalog_loader import dump_catalog, load_catalog, parse_catalog, save_catalog
from .descriptor import define_descriptor
from .errors import CatalogError, ConfigurationError, VaristyleError
from .identity import ensure_identity
from .ir import Axis, VariantDescriptor
from .resolver import (
    effective_selection,
    effective_value,
    join_tokens,
    resolve,
    resolve_class_name,
)

__all__ = [
    # IR
    "Axis",
    "VariantDescriptor",
    # Definition
    "define_descriptor",
    # Resolution
    "resolve",
    "resolve_class_name",
    "effective_value",
    "effective_selection",
    "join_tokens",
    # Identity
    "ensure_identity",
    # Catalogs
    "load_catalog",
    "parse_catalog",
    "dump_catalog",
    "save_catalog",
    # Errors
    "VaristyleError",
    "ConfigurationError",
    "CatalogError",
]
