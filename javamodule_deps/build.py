"""Build description: the projects of a build and where their sources live.

Loaded from a YAML file (default ``javamodule-build.yaml``)::

    parent_path: ""
    projects:
      - name: core
        group: com.example
        source_sets: [main, test]
      - name: app
        group: com.example
        dir: applications/app
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

from .errors import CatalogError
from .errors import ConfigurationError
from .model.cache import ModuleInfoCache
from .model.module_info import MAIN_SOURCE_SET
from .model.module_info import MODULE_INFO_FILE
from .model.module_info import ModuleInfo
from .resolution.catalog import ProjectCatalog

logger = logging.getLogger(__name__)

DEFAULT_BUILD_FILE = "javamodule-build.yaml"


class SourceSetSpec(BaseModel):
    """A source set (variant) of a project."""

    name: str = Field(..., description="Source set name, e.g. 'main' or 'testFixtures'")
    java_dir: Path | None = Field(None, description="Java source directory, relative to the project dir")


class ProjectSpec(BaseModel):
    """One project of the build."""

    name: str = Field(..., min_length=1, description="Project name (hyphen separated tokens)")
    group: str = Field(..., description="Coordinate group of the project")
    dir: Path | None = Field(None, description="Project directory, relative to the build root")
    source_sets: list[SourceSetSpec] = Field(
        default_factory=lambda: [SourceSetSpec(name=MAIN_SOURCE_SET)], description="Source sets of the project"
    )

    @field_validator("source_sets", mode="before")
    @classmethod
    def _names_to_specs(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"name": v} if isinstance(v, str) else v for v in value]
        return value

    def source_set(self, name: str) -> SourceSetSpec:
        for spec in self.source_sets:
            if spec.name == name:
                return spec
        raise ConfigurationError(f"Project '{self.name}' has no source set '{name}'")


class BuildDescription(BaseModel):
    """All projects of a build."""

    root: Path = Field(default_factory=Path.cwd, description="Build root directory")
    parent_path: str = Field("", description="Build path of the projects' parent")
    projects: list[ProjectSpec] = Field(default_factory=list)

    def project(self, name: str) -> ProjectSpec:
        for spec in self.projects:
            if spec.name == name:
                return spec
        raise ConfigurationError(f"No project named '{name}' in build")

    def project_catalog(self) -> ProjectCatalog:
        """Catalog of project names and groups.

        Raises:
            CatalogError: Duplicate project names or conflicting dotted names
        """
        groups: dict[str, str] = {}
        for spec in self.projects:
            if spec.name in groups:
                raise CatalogError(f"Project '{spec.name}' is declared more than once")
            groups[spec.name] = spec.group
        return ProjectCatalog(groups, parent_path=self.parent_path)

    def project_dir(self, project: ProjectSpec) -> Path:
        return self.root / (project.dir if project.dir is not None else Path(project.name))

    def java_dir(self, project: ProjectSpec, source_set: str) -> Path:
        spec = project.source_set(source_set)
        if spec.java_dir is not None:
            return self.project_dir(project) / spec.java_dir
        return self.project_dir(project) / "src" / source_set / "java"

    def module_info_path(self, project: ProjectSpec, source_set: str = MAIN_SOURCE_SET) -> Path:
        return self.java_dir(project, source_set) / MODULE_INFO_FILE

    def module_info(self, cache: ModuleInfoCache, project: ProjectSpec, source_set: str) -> ModuleInfo:
        """Cached descriptor of a variant, keyed by (project, source set)."""
        return cache.for_source_dir((project.name, source_set), self.java_dir(project, source_set))


def load_build(path: Path) -> BuildDescription:
    """Load a build description; a relative ``root`` is taken relative to the file.

    Raises:
        ConfigurationError: Missing, malformed or invalid build file
    """
    if not path.exists():
        raise ConfigurationError(f"Build file not found: {path}")
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed build file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Build file {path} must contain a mapping")

    data.setdefault("root", ".")
    try:
        build = BuildDescription.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid build file {path}:\n{e}") from e

    if not build.root.is_absolute():
        build = build.model_copy(update={"root": (path.parent / build.root).resolve()})
    logger.debug(f"Loaded build with {len(build.projects)} projects from {path}")
    return build
