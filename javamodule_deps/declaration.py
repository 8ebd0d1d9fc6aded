"""Turn resolutions into dependency declarations.

The DependencyDeclarer walks the ``requires`` directives of one variant,
resolves each module name and hands the resulting edges to a DependencySink.
Platform modules and unresolved names produce no edge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .model.module_info import MAIN_SOURCE_SET
from .model.module_info import Directive
from .model.module_info import ModuleInfo
from .resolution.catalog import ProjectCatalog
from .resolution.engine import ResolutionEngine
from .resolution.results import ExternalCoordinate
from .resolution.results import PlatformSupplied
from .resolution.results import ProjectReference
from .resolution.results import ProjectReferenceWithCapability
from .resolution.results import Resolution
from .resolution.results import Unresolved

logger = logging.getLogger(__name__)


class EdgeKind(str, Enum):
    PROJECT = "project"
    CAPABILITY = "capability"
    EXTERNAL = "external"


@dataclass(frozen=True)
class DependencyEdge:
    """A dependency declared in a configuration.

    Attributes:
        configuration: Dependency configuration (e.g. "implementation", "testApi")
        target: Project path or 'group:artifact[:version]' notation
        because: Module name that caused the declaration
        kind: What the target refers to
        capability: Requested capability for CAPABILITY edges
    """

    configuration: str
    target: str
    because: str
    kind: EdgeKind
    capability: str | None = None

    def __str__(self) -> str:
        target = f"{self.target} ({self.capability})" if self.capability else self.target
        return f"{self.configuration}({target}) because {self.because}"


class DependencySink(Protocol):
    """Receives dependency edges."""

    def add(self, edge: DependencyEdge) -> None: ...


class InMemoryDependencySink:
    """Collects edges in declaration order."""

    def __init__(self) -> None:
        self.edges: list[DependencyEdge] = []

    def add(self, edge: DependencyEdge) -> None:
        self.edges.append(edge)

    def for_configuration(self, configuration: str) -> list[DependencyEdge]:
        return [e for e in self.edges if e.configuration == configuration]


def to_edge(resolution: Resolution, configuration: str) -> DependencyEdge | None:
    """Edge for a resolution, or None when nothing should be declared."""
    if isinstance(resolution, ProjectReference):
        return DependencyEdge(configuration, resolution.project_path, resolution.module_name, EdgeKind.PROJECT)
    if isinstance(resolution, ProjectReferenceWithCapability):
        return DependencyEdge(
            configuration,
            resolution.project_path,
            resolution.module_name,
            EdgeKind.CAPABILITY,
            resolution.capability,
        )
    if isinstance(resolution, ExternalCoordinate):
        return DependencyEdge(
            configuration, resolution.coordinate.notation, resolution.module_name, EdgeKind.EXTERNAL
        )
    if isinstance(resolution, (PlatformSupplied, Unresolved)):
        return None
    raise TypeError(f"Unknown resolution type: {type(resolution).__name__}")


class DependencyDeclarer:
    """Declares the dependencies implied by a variant's ``requires`` directives.

    Args:
        engine: Resolution engine
        sink: Receiver of the declared edges
        analyse_only: When True, nothing is resolved or declared
    """

    def __init__(self, engine: ResolutionEngine, sink: DependencySink, analyse_only: bool = False):
        self.engine = engine
        self.sink = sink
        self.analyse_only = analyse_only

    def declare(
        self,
        module_info: ModuleInfo,
        project_name: str,
        catalog: ProjectCatalog,
        source_set: str = MAIN_SOURCE_SET,
    ) -> list[Resolution]:
        """Resolve and declare every directive of one variant.

        Returns:
            Resolutions in directive order, then declaration order
        """
        if self.analyse_only:
            logger.debug(f"Analyse-only mode, skipping {project_name}/{source_set}")
            return []

        own_prefix = module_info.module_name_prefix(project_name, source_set)
        resolutions: list[Resolution] = []
        for directive in Directive:
            configuration = directive.configuration_name(source_set)
            for module_name in module_info.get(directive):
                resolution = self.engine.resolve(module_name, own_prefix, catalog, module_info.file_path)
                resolutions.append(resolution)
                edge = to_edge(resolution, configuration)
                if edge is not None:
                    self.sink.add(edge)
        return resolutions
