"""Module name resolution.

Resolution order (first match wins):
1. Platform module (java.*, jdk.*) - nothing to declare
2. Exact project match - the module name, minus the build's own prefix, is a project
3. Longest-prefix project match - a project exposing the module as a capability
4. Coordinate registry - an external group:artifact[:version]
5. Unresolved - reported, nothing declared
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..registry.coordinates import CoordinateRegistry
from .catalog import ProjectCatalog
from .catalog import dotted
from .diagnostics import DiagnosticsPolicy
from .results import ExternalCoordinate
from .results import PlatformSupplied
from .results import ProjectReference
from .results import ProjectReferenceWithCapability
from .results import Resolution
from .results import Unresolved

logger = logging.getLogger(__name__)


def module_name_suffix(module_name: str, own_prefix: str | None) -> str | None:
    """Part of module_name that names a project of this build, if any.

    Returns None when the prefix is unknown or module_name lies outside it.
    """
    if own_prefix is None:
        return None
    if module_name.startswith(own_prefix + "."):
        return module_name[len(own_prefix) + 1 :]
    if own_prefix == "":
        return module_name
    return None


class ResolutionEngine:
    """Decides which producer supplies a required module.

    The engine holds no per-call state; diagnostics go to the policy, which
    reports each gap only once.
    """

    def __init__(self, registry: CoordinateRegistry, diagnostics: DiagnosticsPolicy | None = None):
        self.registry = registry
        self.diagnostics = diagnostics or DiagnosticsPolicy()

    def resolve(
        self,
        module_name: str,
        own_prefix: str | None,
        catalog: ProjectCatalog,
        module_info_file: Path | None = None,
    ) -> Resolution:
        """Resolve one required module name.

        Args:
            module_name: Name from a ``requires`` directive
            own_prefix: Module name prefix of the requiring variant (None if unknown)
            catalog: All projects of the build
            module_info_file: Requiring descriptor, used in diagnostics

        Returns:
            One Resolution variant; Unresolved is a normal result
        """
        if self.registry.is_platform_module(module_name):
            logger.debug(f"[module:resolve] {module_name} -> platform")
            return PlatformSupplied(module_name)

        suffix = module_name_suffix(module_name, own_prefix)
        if suffix is not None:
            if project := catalog.exact_match(suffix):
                logger.debug(f"[module:resolve] {module_name} -> project {project}")
                return ProjectReference(module_name, project, catalog.project_path(project))

            if project := catalog.longest_prefix_match(suffix):
                remainder = suffix[len(dotted(project)) + 1 :]
                capability = f"{catalog.group(project)}:{remainder.replace('.', '-')}"
                logger.debug(f"[module:resolve] {module_name} -> project {project} capability {capability}")
                return ProjectReferenceWithCapability(
                    module_name, project, catalog.project_path(project), capability
                )

        if coordinate := self.registry.lookup(module_name):
            logger.debug(f"[module:resolve] {module_name} -> {coordinate}")
            if coordinate.version is None:
                self.diagnostics.missing_version(module_name, coordinate, module_info_file)
            return ExternalCoordinate(module_name, coordinate)

        logger.debug(f"[module:resolve] {module_name} -> unresolved")
        self.diagnostics.unmapped_module(module_name)
        return Unresolved(module_name)

    def __repr__(self) -> str:
        return f"ResolutionEngine({self.registry!r})"
