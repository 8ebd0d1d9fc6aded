"""Tests for registry contribution sources."""

from pathlib import Path
from textwrap import dedent

import pytest

from javamodule_deps.errors import ConfigurationError
from javamodule_deps.registry.coordinates import Coordinate
from javamodule_deps.registry.coordinates import CoordinateRegistryBuilder
from javamodule_deps.registry.sources import build_registry
from javamodule_deps.registry.sources import contribute_extra_module_info
from javamodule_deps.registry.sources import load_bundled_mappings
from javamodule_deps.registry.sources import load_version_catalog
from javamodule_deps.settings import ResolutionSettings


def test_bundled_mappings_are_well_formed():
    mappings = load_bundled_mappings()
    assert mappings["org.slf4j"] == "org.slf4j:slf4j-api"
    for notation in mappings.values():
        Coordinate.parse(notation)


def test_extra_module_info_is_inverted():
    builder = CoordinateRegistryBuilder()
    contribute_extra_module_info(builder, {"commons-cli:commons-cli": "org.apache.commons.cli"})
    registry = builder.build()
    assert registry.lookup("org.apache.commons.cli") == Coordinate("commons-cli", "commons-cli")
    assert registry.sources_for("org.apache.commons.cli") == ("extra-module-info",)


def test_load_version_catalog(tmp_path: Path):
    catalog = tmp_path / "libs.versions.toml"
    catalog.write_text(
        dedent("""
            [versions]
            org_slf4j = "2.0.9"
            com_google_common = { strictly = "33.0.0-jre" }
            org_junit_jupiter_api = { prefer = "5.10.1" }
            broken = { reject = ["1.0"] }

            [libraries]
            guava = { module = "com.google.guava:guava", version.ref = "com_google_common" }
        """)
    )
    assert load_version_catalog(catalog) == {
        "org_slf4j": "2.0.9",
        "com_google_common": "33.0.0-jre",
        "org_junit_jupiter_api": "5.10.1",
    }


def test_missing_version_catalog_is_empty(tmp_path: Path):
    assert load_version_catalog(tmp_path / "missing.toml") == {}


def test_malformed_version_catalog(tmp_path: Path):
    catalog = tmp_path / "libs.versions.toml"
    catalog.write_text("[versions\n")
    with pytest.raises(ConfigurationError):
        load_version_catalog(catalog)


def test_settings_take_precedence_over_bundled(tmp_path: Path):
    catalog = tmp_path / "libs.versions.toml"
    catalog.write_text('[versions]\ncom_google_common = "33.0.0-jre"\n')
    settings = ResolutionSettings(
        module_name_to_ga={"org.slf4j": "org.example:patched-slf4j:1.0"},
        module_name_prefix_to_group={"org.acme.": "org.acme"},
        version_catalog=catalog,
    )
    registry = build_registry(settings)

    assert registry.lookup("org.slf4j") == Coordinate("org.example", "patched-slf4j", "1.0")
    assert registry.lookup("com.google.common") == Coordinate("com.google.guava", "guava", "33.0.0-jre")
    assert registry.lookup("org.acme.widgets") == Coordinate("org.acme", "widgets")
    assert registry.lookup("org.junit.jupiter.api") == Coordinate("org.junit.jupiter", "junit-jupiter-api")


def test_build_registry_without_bundled():
    registry = build_registry(ResolutionSettings(), include_bundled=False)
    assert registry.lookup("org.slf4j") is None
    assert len(registry) == 0
