"""Resolve all module descriptors of a build.

Ties the pieces together: settings -> registry -> engine -> declarer, run for
every (project, source set) variant of a BuildDescription.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field

from .build import BuildDescription
from .build import ProjectSpec
from .declaration import DependencyDeclarer
from .declaration import DependencyEdge
from .declaration import InMemoryDependencySink
from .model.cache import ModuleInfoCache
from .registry.coordinates import CoordinateRegistry
from .registry.sources import build_registry
from .resolution.diagnostics import Diagnostic
from .resolution.diagnostics import DiagnosticsPolicy
from .resolution.engine import ResolutionEngine
from .resolution.results import Resolution
from .settings import ResolutionSettings

logger = logging.getLogger(__name__)


@dataclass
class VariantResult:
    """Outcome for one (project, source set) variant."""

    project: str
    source_set: str
    module_name: str | None
    own_prefix: str | None
    resolutions: list[Resolution] = field(default_factory=list)
    edges: list[DependencyEdge] = field(default_factory=list)


@dataclass
class BuildResult:
    variants: list[VariantResult]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def edges(self) -> list[DependencyEdge]:
        return [edge for variant in self.variants for edge in variant.edges]


class BuildResolver:
    """Resolves the descriptors of a build with one registry and one diagnostics policy.

    Args:
        build: Projects of the build
        settings: Resolution options and mappings
        registry: Pre-built registry (built from settings when omitted)
    """

    def __init__(
        self,
        build: BuildDescription,
        settings: ResolutionSettings | None = None,
        registry: CoordinateRegistry | None = None,
    ):
        self.build = build
        self.settings = settings or ResolutionSettings()
        self.registry = registry or build_registry(self.settings)
        self.catalog = build.project_catalog()
        self.cache = ModuleInfoCache()
        self.diagnostics = DiagnosticsPolicy(
            warn_for_missing_versions=self.settings.warn_for_missing_versions,
            root_dir=build.root,
        )
        self.engine = ResolutionEngine(self.registry, self.diagnostics)

    def resolve_variant(self, project: ProjectSpec, source_set: str) -> VariantResult:
        module_info = self.build.module_info(self.cache, project, source_set)
        sink = InMemoryDependencySink()
        declarer = DependencyDeclarer(self.engine, sink, analyse_only=self.settings.analyse_only)
        resolutions = declarer.declare(module_info, project.name, self.catalog, source_set)
        return VariantResult(
            project=project.name,
            source_set=source_set,
            module_name=module_info.module_name,
            own_prefix=module_info.module_name_prefix(project.name, source_set),
            resolutions=resolutions,
            edges=sink.edges,
        )

    def resolve(self, project_name: str | None = None) -> BuildResult:
        """Resolve every variant, or only those of one project."""
        projects = [self.build.project(project_name)] if project_name else self.build.projects
        variants = []
        for project in projects:
            for source_set in project.source_sets:
                variants.append(self.resolve_variant(project, source_set.name))
        logger.debug(f"Resolved {len(variants)} variants, {len(self.diagnostics.records)} diagnostics")
        return BuildResult(variants=variants, diagnostics=self.diagnostics.records)
