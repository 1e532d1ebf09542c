"""Shared pytest fixtures for varistyle tests."""

from pathlib import Path

import pytest

from varistyle.core.descriptor import define_descriptor
from varistyle.core.ir import VariantDescriptor


@pytest.fixture(autouse=True)
def _no_catalog_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep a developer's VARISTYLE_CATALOG or ./variants.yaml from leaking into tests."""
    monkeypatch.delenv("VARISTYLE_CATALOG", raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def button_descriptor() -> VariantDescriptor:
    """Return the two-axis button used in the end-to-end example."""
    return define_descriptor(
        ["btn"],
        {
            "kind": {"default": ["base-kind"], "destructive": ["dest-kind"]},
            "size": {"sm": ["pad-sm"], "lg": ["pad-lg"]},
        },
        {"kind": "default", "size": "sm"},
        name="button",
    )


@pytest.fixture
def field_descriptor() -> VariantDescriptor:
    """Return a descriptor with a state axis that can be forced to error."""
    return define_descriptor(
        "field",
        {
            "size": {"default": "h-10", "lg": "h-12"},
            "variant": {
                "default": "border-gray",
                "error": "border-red",
                "success": "border-green",
            },
        },
        {"size": "default", "variant": "default"},
        name="field",
    )


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a small valid catalog and return its path."""
    path = tmp_path / "variants.yaml"
    path.write_text(
        """
chip:
  base: "inline-flex rounded"
  variants:
    tone:
      neutral: "bg-gray-100"
      brand: ["bg-blue-600", "text-white"]
    size:
      sm: "px-1"
      lg: "px-3"
  default_variants:
    tone: neutral
    size: sm
""",
        encoding="utf-8",
    )
    return path
