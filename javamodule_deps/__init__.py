"""Derive dependency declarations from Java module descriptors.

Each ``requires`` directive of a ``module-info.java`` file is resolved to a
project of the same build, a capability of such a project, an external
group:artifact[:version], or a module of the Java platform itself.
"""

from .declaration import DependencyDeclarer
from .declaration import DependencyEdge
from .declaration import InMemoryDependencySink
from .model import Directive
from .model import ModuleInfo
from .model import ModuleInfoCache
from .model import parse_module_info
from .registry import Coordinate
from .registry import CoordinateRegistry
from .registry import CoordinateRegistryBuilder
from .resolution import DiagnosticsPolicy
from .resolution import ProjectCatalog
from .resolution import ResolutionEngine

__all__ = [
    "Coordinate",
    "CoordinateRegistry",
    "CoordinateRegistryBuilder",
    "DependencyDeclarer",
    "DependencyEdge",
    "DiagnosticsPolicy",
    "Directive",
    "InMemoryDependencySink",
    "ModuleInfo",
    "ModuleInfoCache",
    "ProjectCatalog",
    "ResolutionEngine",
    "parse_module_info",
]
