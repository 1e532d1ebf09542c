"""
Intermediate representation for variant descriptors and catalog files.
"""

from .catalog import CatalogEntry, CatalogYAML, TokenDeclaration
from .variants import Axis, TokenSpec, VariantDescriptor, split_tokens

__all__ = [
    # Descriptors
    "Axis",
    "VariantDescriptor",
    "TokenSpec",
    "split_tokens",
    # Catalog files
    "CatalogEntry",
    "CatalogYAML",
    "TokenDeclaration",
]
