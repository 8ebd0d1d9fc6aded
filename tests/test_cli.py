"""Tests for the javamodule-deps command line interface."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from javamodule_deps.main import cli


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def wide_console(monkeypatch) -> Console:
    """Record CLI output on a wide console so table cells are not wrapped."""
    recording = Console(record=True, width=250, force_terminal=False)
    monkeypatch.setattr("javamodule_deps.commands.resolve.console", recording)
    monkeypatch.setattr("javamodule_deps.commands.explain.console", recording)
    monkeypatch.setattr("javamodule_deps.main.console", recording)
    return recording


def _invoke(*args: str):
    return CliRunner().invoke(cli, ["--log-level", "ERROR", *args])


def test_help_without_command():
    result = _invoke()
    assert result.exit_code == 0
    assert "resolve" in result.output
    assert "explain" in result.output


def test_resolve_prints_declared_dependencies(sample_build: Path, wide_console: Console):
    result = _invoke("resolve", "--build", str(sample_build / "javamodule-build.yaml"))

    assert result.exit_code == 0, result.output
    text = wide_console.export_text()
    assert "Declared Dependencies" in text
    assert "testImplementation" in text
    assert "org.slf4j:slf4j-api:2.0.9" in text
    assert 'moduleNameToGA.put("org.unknown.lib", "group:artifact")' in text


def test_resolve_analyse_only(sample_build: Path, wide_console: Console):
    result = _invoke("resolve", "--build", str(sample_build / "javamodule-build.yaml"), "--analyse-only")

    assert result.exit_code == 0, result.output
    text = wide_console.export_text()
    assert "Analyse-only mode" in text
    assert "No dependencies declared" in text


def test_resolve_without_missing_version_warnings(sample_build: Path, wide_console: Console):
    result = _invoke(
        "resolve", "--build", str(sample_build / "javamodule-build.yaml"), "--no-warn-missing-versions"
    )
    assert result.exit_code == 0, result.output
    assert "No version defined" not in wide_console.export_text()


def test_explain_capability(sample_build: Path, wide_console: Console):
    result = _invoke(
        "explain",
        "com.example.core.test.fixtures",
        "--build",
        str(sample_build / "javamodule-build.yaml"),
        "--project",
        "app",
    )

    assert result.exit_code == 0, result.output
    text = wide_console.export_text()
    assert "project capability" in text
    assert ":core (com.example:test-fixtures)" in text


def test_explain_external_shows_sources(sample_build: Path, wide_console: Console):
    result = _invoke(
        "explain", "org.slf4j", "--build", str(sample_build / "javamodule-build.yaml"), "--project", "core"
    )
    assert result.exit_code == 0, result.output
    text = wide_console.export_text()
    assert "org.slf4j:slf4j-api:2.0.9" in text
    assert "settings" in text


def test_unknown_project_is_reported(sample_build: Path, wide_console: Console):
    result = _invoke(
        "explain", "org.slf4j", "--build", str(sample_build / "javamodule-build.yaml"), "--project", "nope"
    )
    assert result.exit_code == 1
    assert "No project named 'nope'" in wide_console.export_text()


def test_missing_build_file(tmp_path: Path, wide_console: Console):
    result = _invoke("resolve", "--build", str(tmp_path / "missing.yaml"))
    assert result.exit_code == 1
    assert "Build file not found" in wide_console.export_text()


def test_resolve_shows_each_diagnostic_once_at_default_log_level(
    sample_build: Path, wide_console: Console, monkeypatch
):
    monkeypatch.setattr("javamodule_deps.logging_setup.console", wide_console)
    result = CliRunner().invoke(cli, ["resolve", "--build", str(sample_build / "javamodule-build.yaml")])

    assert result.exit_code == 0, result.output
    text = wide_console.export_text()
    assert text.count('moduleNameToGA.put("org.unknown.lib"') == 1
