"""Tests for catalog loading and export."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from varistyle.core.catalog_loader import (
    CATALOG_ENV_VAR,
    catalog_exists,
    catalog_path_from_env,
    dump_catalog,
    get_catalog_path,
    load_catalog,
    parse_catalog,
    save_catalog,
)
from varistyle.core.errors import CatalogError, ConfigurationError
from varistyle.core.resolver import resolve
from varistyle.ui.primitives import PRIMITIVES


class TestLoadCatalog:
    """Tests for reading catalog files."""

    def test_load_valid_catalog(self, catalog_file: Path):
        descriptors = load_catalog(catalog_file)

        chip = descriptors["chip"]
        assert chip.name == "chip"
        assert chip.axis_names == ("tone", "size")
        assert resolve(chip, {"tone": "brand"}, ["ml-1"]) == [
            "inline-flex",
            "rounded",
            "bg-blue-600",
            "text-white",
            "px-1",
            "ml-1",
        ]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(CatalogError, match="catalog not found"):
            load_catalog(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "variants.yaml"
        path.write_text("chip: [unclosed", encoding="utf-8")

        with pytest.raises(CatalogError, match="invalid YAML"):
            load_catalog(path)

    def test_empty_file_defines_nothing(self, tmp_path: Path):
        path = tmp_path / "variants.yaml"
        path.write_text("", encoding="utf-8")

        assert load_catalog(path) == {}

    def test_catalog_error_is_configuration_error(self, tmp_path: Path):
        with pytest.raises(ConfigurationError):
            load_catalog(tmp_path / "missing.yaml")


class TestParseCatalog:
    """Tests for validating catalog documents."""

    def test_document_must_be_mapping(self):
        with pytest.raises(CatalogError, match="expected a mapping of primitives, got list"):
            parse_catalog(["chip"])

    def test_unknown_entry_key(self):
        data = {
            "chip": {
                "base": "x",
                "variants": {"tone": {"plain": "a"}},
                "default_variants": {"tone": "plain"},
                "colour": "red",
            }
        }
        with pytest.raises(CatalogError, match="colour"):
            parse_catalog(data, source="variants.yaml")

    def test_missing_default_names_primitive(self):
        data = {"chip": {"variants": {"tone": {"plain": "a"}}}}

        with pytest.raises(ConfigurationError) as exc_info:
            parse_catalog(data)

        assert str(exc_info.value) == "chip: no default for axis: tone"
        assert not isinstance(exc_info.value, CatalogError)

    def test_empty_axis_rejected(self):
        data = {"chip": {"variants": {"tone": {}}, "default_variants": {"tone": "plain"}}}

        with pytest.raises(ConfigurationError, match="axis 'tone' declares no values"):
            parse_catalog(data)

    def test_document_order_kept(self):
        data = {
            "zeta": {"variants": {"a": {"x": "1"}}, "default_variants": {"a": "x"}},
            "alpha": {"variants": {"a": {"x": "1"}}, "default_variants": {"a": "x"}},
        }
        assert list(parse_catalog(data)) == ["zeta", "alpha"]


class TestDumpCatalog:
    """Tests for exporting descriptors."""

    def test_builtins_survive_export(self):
        reloaded = parse_catalog(yaml.safe_load(dump_catalog(PRIMITIVES)))

        assert list(reloaded) == list(PRIMITIVES)
        for name, descriptor in PRIMITIVES.items():
            assert reloaded[name].axis_names == descriptor.axis_names
            assert reloaded[name].default_tokens() == descriptor.default_tokens()

    def test_save_catalog(self, tmp_path: Path):
        path = save_catalog(tmp_path / "out.yaml", {"button": PRIMITIVES["button"]})

        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["button"]["default_variants"] == {"variant": "default", "size": "default"}
        assert data["button"]["variants"]["size"]["sm"] == "h-8 px-3 text-xs rounded-md"


class TestCatalogPaths:
    """Tests for catalog path helpers."""

    def test_project_catalog_path(self, tmp_path: Path):
        assert get_catalog_path(tmp_path) == tmp_path / "variants.yaml"
        assert catalog_exists(tmp_path) is False

        (tmp_path / "variants.yaml").write_text("", encoding="utf-8")
        assert catalog_exists(tmp_path) is True

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch, catalog_file: Path):
        assert catalog_path_from_env() is None

        monkeypatch.setenv(CATALOG_ENV_VAR, str(catalog_file))
        assert catalog_path_from_env() == catalog_file

    def test_blank_env_var_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(CATALOG_ENV_VAR, "   ")
        assert catalog_path_from_env() is None
