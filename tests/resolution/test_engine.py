"""Tests for module name resolution precedence."""

from pathlib import Path

import pytest

from javamodule_deps.registry.coordinates import Coordinate
from javamodule_deps.registry.coordinates import CoordinateRegistryBuilder
from javamodule_deps.registry.platform import JDK_MODULES
from javamodule_deps.resolution.catalog import ProjectCatalog
from javamodule_deps.resolution.diagnostics import DiagnosticsPolicy
from javamodule_deps.resolution.diagnostics import Severity
from javamodule_deps.resolution.engine import ResolutionEngine
from javamodule_deps.resolution.engine import module_name_suffix
from javamodule_deps.resolution.results import ExternalCoordinate
from javamodule_deps.resolution.results import PlatformSupplied
from javamodule_deps.resolution.results import ProjectReference
from javamodule_deps.resolution.results import ProjectReferenceWithCapability
from javamodule_deps.resolution.results import Unresolved


class TestModuleNameSuffix:
    def test_unknown_prefix(self) -> None:
        assert module_name_suffix("com.example.core", None) is None

    def test_module_within_prefix(self) -> None:
        assert module_name_suffix("com.example.core.io", "com.example") == "core.io"

    def test_root_prefix(self) -> None:
        assert module_name_suffix("com.example.core", "") == "com.example.core"

    def test_module_outside_prefix(self) -> None:
        assert module_name_suffix("org.slf4j", "com.example") is None

    def test_prefix_must_end_at_separator(self) -> None:
        assert module_name_suffix("com.examples.core", "com.example") is None


@pytest.mark.parametrize("module_name", sorted(JDK_MODULES))
def test_platform_modules_never_need_a_dependency(module_name, registry, catalog, diagnostics):
    engine = ResolutionEngine(registry, diagnostics)
    for own_prefix in (None, "", "com.example", "java"):
        assert engine.resolve(module_name, own_prefix, catalog) == PlatformSupplied(module_name)
    assert diagnostics.records == ()


def test_platform_check_wins_over_projects_and_registry(diagnostics):
    builder = CoordinateRegistryBuilder()
    builder.add("java.sql", "g:a:1", source="test")
    engine = ResolutionEngine(builder.build(), diagnostics)
    catalog = ProjectCatalog({"java-sql": "com.example"})

    assert engine.resolve("java.sql", "", catalog) == PlatformSupplied("java.sql")


class TestProjectMatching:
    def test_exact_match(self, engine, catalog) -> None:
        result = engine.resolve("com.example.core", "com.example", catalog)
        assert result == ProjectReference("com.example.core", "core", ":core")

    def test_exact_match_with_hyphenated_project(self, engine, catalog) -> None:
        result = engine.resolve("com.example.core.io", "com.example", catalog)
        assert result == ProjectReference("com.example.core.io", "core-io", ":core-io")

    def test_exact_match_wins_over_longest_prefix(self, engine) -> None:
        catalog = ProjectCatalog({"core": "g", "core-io": "g", "core-io-util": "g"})
        result = engine.resolve("x.core.io", "x", catalog)
        assert result == ProjectReference("x.core.io", "core-io", ":core-io")

    def test_longest_prefix_match_with_capability(self, engine, catalog) -> None:
        result = engine.resolve("com.example.core.io.util", "com.example", catalog)
        assert result == ProjectReferenceWithCapability(
            "com.example.core.io.util", "core-io", ":core-io", "com.example.io:util"
        )

    def test_capability_joins_remaining_tokens_with_hyphens(self, engine, catalog) -> None:
        result = engine.resolve("com.example.core.test.fixtures", "com.example", catalog)
        assert isinstance(result, ProjectReferenceWithCapability)
        assert result.project == "core"
        assert result.capability == "com.example:test-fixtures"

    def test_root_prefix_uses_whole_module_name(self, engine) -> None:
        catalog = ProjectCatalog({"util": "com.example"})
        assert engine.resolve("util", "", catalog) == ProjectReference("util", "util", ":util")

    def test_unknown_prefix_skips_project_matching(self, engine, catalog, diagnostics) -> None:
        result = engine.resolve("com.example.core", None, catalog)
        assert result == Unresolved("com.example.core")

    def test_module_outside_prefix_skips_project_matching(self, engine, diagnostics) -> None:
        catalog = ProjectCatalog({"slf4j": "com.example"})
        result = engine.resolve("org.slf4j", "com.example", catalog)
        assert isinstance(result, ExternalCoordinate)

    def test_parent_path_in_project_reference(self, engine) -> None:
        catalog = ProjectCatalog({"core": "g"}, parent_path=":libs")
        assert engine.resolve("p.core", "p", catalog).project_path == ":libs:core"


class TestExternalCoordinates:
    def test_registry_entry_with_version(self, engine, catalog, diagnostics) -> None:
        result = engine.resolve("org.slf4j", "com.example", catalog)
        assert result == ExternalCoordinate("org.slf4j", Coordinate("org.slf4j", "slf4j-api", "2.0.9"))
        assert result.has_version
        assert diagnostics.records == ()

    def test_missing_version_is_reported_once(self, engine, catalog, diagnostics) -> None:
        module_info = Path("core/src/main/java/module-info.java")
        first = engine.resolve("com.google.common", "com.example", catalog, module_info)
        second = engine.resolve("com.google.common", "com.example", catalog, module_info)

        assert first == second
        assert not first.has_version
        assert len(diagnostics.records) == 1
        record = diagnostics.records[0]
        assert record.severity is Severity.WARNING
        assert "com.google.guava:guava" in record.message
        assert "com_google_common" in record.message

    def test_missing_version_warning_can_be_disabled(self, registry, catalog) -> None:
        diagnostics = DiagnosticsPolicy(warn_for_missing_versions=False)
        result = ResolutionEngine(registry, diagnostics).resolve("com.google.common", "com.example", catalog)
        assert isinstance(result, ExternalCoordinate)
        assert diagnostics.records == ()


class TestUnresolved:
    def test_unmapped_module(self, engine, diagnostics) -> None:
        catalog = ProjectCatalog({})
        result = engine.resolve("org.lib.widgets", "com.example", catalog)

        assert result == Unresolved("org.lib.widgets")
        assert len(diagnostics.records) == 1
        assert diagnostics.records[0].severity is Severity.INFO
        assert 'moduleNameToGA.put("org.lib.widgets", "group:artifact")' in diagnostics.records[0].message

    def test_resolving_twice_does_not_duplicate_warning(self, engine, diagnostics) -> None:
        catalog = ProjectCatalog({})
        assert engine.resolve("org.lib.widgets", "", catalog) == engine.resolve("org.lib.widgets", "", catalog)
        assert len(diagnostics.records) == 1


def test_scenario_project_in_namespace(engine):
    catalog = ProjectCatalog({"util": "com.example"})
    assert engine.resolve("com.example.util", "com.example", catalog) == ProjectReference(
        "com.example.util", "util", ":util"
    )


def test_scenario_platform_module_without_warning(engine, catalog, diagnostics):
    assert engine.resolve("java.sql", "com.example", catalog) == PlatformSupplied("java.sql")
    assert diagnostics.records == ()
