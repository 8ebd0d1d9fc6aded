"""Module name resolution engine and its result types."""

from .catalog import ProjectCatalog
from .diagnostics import Diagnostic
from .diagnostics import DiagnosticsPolicy
from .diagnostics import Severity
from .engine import ResolutionEngine
from .engine import module_name_suffix
from .results import ExternalCoordinate
from .results import PlatformSupplied
from .results import ProjectReference
from .results import ProjectReferenceWithCapability
from .results import Resolution
from .results import Unresolved

__all__ = [
    "Diagnostic",
    "DiagnosticsPolicy",
    "ExternalCoordinate",
    "PlatformSupplied",
    "ProjectCatalog",
    "ProjectReference",
    "ProjectReferenceWithCapability",
    "Resolution",
    "ResolutionEngine",
    "Severity",
    "Unresolved",
    "module_name_suffix",
]
