"""Pytest configuration and fixtures for javamodule-deps tests."""

from pathlib import Path
from textwrap import dedent

import pytest

from javamodule_deps.registry.coordinates import CoordinateRegistryBuilder
from javamodule_deps.resolution.catalog import ProjectCatalog
from javamodule_deps.resolution.diagnostics import DiagnosticsPolicy
from javamodule_deps.resolution.engine import ResolutionEngine


@pytest.fixture(autouse=True)
def _isolate_settings(tmp_path: Path, monkeypatch):
    """Keep the user's global settings and environment out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("JAVAMODULE_DEPS_WARN_FOR_MISSING_VERSIONS", raising=False)
    monkeypatch.delenv("JAVAMODULE_DEPS_ANALYSE_ONLY", raising=False)
    monkeypatch.delenv("JAVAMODULE_DEPS_LOG_PATH", raising=False)


@pytest.fixture
def registry():
    builder = CoordinateRegistryBuilder()
    builder.add("org.slf4j", "org.slf4j:slf4j-api:2.0.9", source="test")
    builder.add("com.google.common", "com.google.guava:guava", source="test")
    return builder.build()


@pytest.fixture
def catalog() -> ProjectCatalog:
    return ProjectCatalog(
        {
            "core": "com.example",
            "core-io": "com.example.io",
            "util": "com.example",
            "app": "com.example",
        }
    )


@pytest.fixture
def diagnostics() -> DiagnosticsPolicy:
    return DiagnosticsPolicy()


@pytest.fixture
def engine(registry, diagnostics) -> ResolutionEngine:
    return ResolutionEngine(registry, diagnostics)


def write_module_info(java_dir: Path, content: str) -> Path:
    java_dir.mkdir(parents=True, exist_ok=True)
    path = java_dir / "module-info.java"
    path.write_text(dedent(content))
    return path


@pytest.fixture
def sample_build(tmp_path: Path) -> Path:
    """A two-project build with descriptors on disk.

    Creates:
    - core/src/main/java/module-info.java  (com.example.core)
    - core/src/test/java/module-info.java  (com.example.core.test)
    - app/src/main/java/module-info.java   (com.example.app)
    """
    root = tmp_path / "build"
    root.mkdir()
    (root / "javamodule-build.yaml").write_text(
        dedent("""
            projects:
              - name: core
                group: com.example
                source_sets: [main, test]
              - name: app
                group: com.example
        """)
    )
    write_module_info(
        root / "core" / "src" / "main" / "java",
        """
        module com.example.core {
            requires java.sql;
            requires transitive org.slf4j;
            requires static com.google.common;
        }
        """,
    )
    write_module_info(
        root / "core" / "src" / "test" / "java",
        """
        module com.example.core.test {
            requires com.example.core;
            requires org.junit.jupiter.api;
        }
        """,
    )
    write_module_info(
        root / "app" / "src" / "main" / "java",
        """
        module com.example.app {
            requires com.example.core;
            requires org.unknown.lib;
            requires /*runtime*/ org.slf4j.simple;
        }
        """,
    )
    settings_dir = root / ".javamodule-deps"
    settings_dir.mkdir()
    (settings_dir / "settings.yaml").write_text(
        dedent("""
            module_name_to_ga:
              org.slf4j: org.slf4j:slf4j-api:2.0.9
        """)
    )
    return root


@pytest.fixture
def module_info_writer():
    """Write a module-info.java into a source directory."""
    return write_module_info
