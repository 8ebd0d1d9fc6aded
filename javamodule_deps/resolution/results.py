"""Resolution outcomes.

Exactly one of these is produced per required module name. Every variant
carries the module name it was resolved from so that the declared dependency
can be traced back to its ``requires`` directive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..registry.coordinates import Coordinate


@dataclass(frozen=True)
class PlatformSupplied:
    """Provided by the Java platform; no dependency is declared."""

    module_name: str


@dataclass(frozen=True)
class ProjectReference:
    """Another project in the same build produces the module."""

    module_name: str
    project: str
    project_path: str


@dataclass(frozen=True)
class ProjectReferenceWithCapability:
    """Another project produces the module as one of several capabilities."""

    module_name: str
    project: str
    project_path: str
    capability: str


@dataclass(frozen=True)
class ExternalCoordinate:
    """An external component, identified by group/artifact/version."""

    module_name: str
    coordinate: Coordinate

    @property
    def has_version(self) -> bool:
        return self.coordinate.version is not None


@dataclass(frozen=True)
class Unresolved:
    """No producer is known; no dependency is declared."""

    module_name: str


Resolution = Union[PlatformSupplied, ProjectReference, ProjectReferenceWithCapability, ExternalCoordinate, Unresolved]
