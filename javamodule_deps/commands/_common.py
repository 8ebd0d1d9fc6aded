"""Shared loading logic for CLI commands."""

from __future__ import annotations

from pathlib import Path

from ..build import BuildDescription
from ..build import load_build
from ..settings import AppSettings
from ..settings import ResolutionSettings
from ..settings import SettingsPaths


def load_inputs(build_file: Path, **overrides) -> tuple[BuildDescription, ResolutionSettings]:
    """Build description plus settings from the build root's settings scopes."""
    build = load_build(build_file)
    settings = AppSettings(SettingsPaths.default(project_dir=build.root)).load(**overrides)
    return build, settings
