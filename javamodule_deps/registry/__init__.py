"""Module name to external coordinate registry."""

from .coordinates import Coordinate
from .coordinates import CoordinateRegistry
from .coordinates import CoordinateRegistryBuilder
from .platform import JDK_MODULES
from .sources import build_registry

__all__ = [
    "Coordinate",
    "CoordinateRegistry",
    "CoordinateRegistryBuilder",
    "JDK_MODULES",
    "build_registry",
]
