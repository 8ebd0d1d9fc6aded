"""Settings management for javamodule-deps.

Scope-aware YAML settings, most specific scope wins:
1. local (.javamodule-deps/settings.local.yaml) - gitignored, machine-specific
2. project (.javamodule-deps/settings.yaml) - committed, team-shared
3. global (~/.javamodule-deps/settings.yaml) - user defaults

The merged document is validated into ResolutionSettings.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_WARN_FOR_MISSING_VERSIONS = "JAVAMODULE_DEPS_WARN_FOR_MISSING_VERSIONS"
ENV_ANALYSE_ONLY = "JAVAMODULE_DEPS_ANALYSE_ONLY"


class ResolutionSettings(BaseModel):
    """Options recognised by the resolution and declaration path."""

    warn_for_missing_versions: bool = Field(True, description="Warn when a mapped module has no version")
    analyse_only: bool = Field(False, description="Skip dependency declaration entirely")
    module_name_to_ga: dict[str, str] = Field(
        default_factory=dict, description="Module name to 'group:artifact[:version]'"
    )
    module_name_prefix_to_group: dict[str, str] = Field(
        default_factory=dict, description="Module name prefix to group; artifact follows the module name"
    )
    extra_module_info: dict[str, str] = Field(
        default_factory=dict, description="'group:artifact' of patched legacy jars to their module name"
    )
    version_catalog: Path | None = Field(None, description="Version catalog TOML with a [versions] table")


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path
    local_settings: Path

    @classmethod
    def default(cls, project_dir: Path | None = None) -> SettingsPaths:
        project_dir = project_dir or Path.cwd()
        return cls(
            global_settings=Path.home() / ".javamodule-deps" / "settings.yaml",
            project_settings=project_dir / ".javamodule-deps" / "settings.yaml",
            local_settings=project_dir / ".javamodule-deps" / "settings.local.yaml",
        )


def _env_flag(name: str) -> bool | None:
    value = os.environ.get(name)
    if value is None:
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


class AppSettings:
    """Settings manager with scope-aware merging.

    Usage:
        settings = AppSettings().load()
        if settings.analyse_only: ...
    """

    def __init__(self, paths: SettingsPaths | None = None) -> None:
        self.paths = paths or SettingsPaths.default()

    def get_merged_settings(self) -> dict[str, Any]:
        """Load and merge settings from all scopes."""
        result: dict[str, Any] = {}
        for path in [self.paths.global_settings, self.paths.project_settings, self.paths.local_settings]:
            result = self._deep_merge(result, self._read_file(path))
        return result

    def load(self, **overrides: Any) -> ResolutionSettings:
        """Validated settings: files, then environment, then explicit overrides.

        Raises:
            ConfigurationError: The merged settings do not validate
        """
        merged = self.get_merged_settings()

        for key, env_name in (
            ("warn_for_missing_versions", ENV_WARN_FOR_MISSING_VERSIONS),
            ("analyse_only", ENV_ANALYSE_ONLY),
        ):
            flag = _env_flag(env_name)
            if flag is not None:
                merged[key] = flag

        merged.update({k: v for k, v in overrides.items() if v is not None})

        try:
            settings = ResolutionSettings.model_validate(merged)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid javamodule-deps settings:\n{e}") from e

        if settings.version_catalog is not None and not settings.version_catalog.is_absolute():
            base = self.paths.project_settings.parent.parent
            settings = settings.model_copy(update={"version_catalog": base / settings.version_catalog})
        return settings

    def _read_file(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed settings file {path}: {e}") from e
        if not isinstance(content, dict):
            raise ConfigurationError(f"Settings file {path} must contain a mapping")
        return content

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dicts, overlay wins."""
        result = base.copy()
        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
