"""
Catalog YAML IR types.

A catalog file maps primitive names to variant declarations in the same
shape the descriptors are written in code:

    button:
      base: "inline-flex items-center"
      variants:
        size:
          sm: "h-8 px-3"
          lg: ["h-12 px-6", "text-base"]
      default_variants:
        size: sm
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

TokenDeclaration = str | list[str]


class CatalogEntry(BaseModel):
    """One primitive declared in a catalog file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base: TokenDeclaration = Field(default="", description="Unconditional base tokens")
    variants: dict[str, dict[str, TokenDeclaration]] = Field(
        description="Axis name to value name to tokens"
    )
    default_variants: dict[str, str] = Field(
        default_factory=dict, description="Axis name to default value name"
    )


class CatalogYAML(BaseModel):
    """Whole catalog document."""

    model_config = ConfigDict(frozen=True)

    primitives: dict[str, CatalogEntry] = Field(default_factory=dict)
