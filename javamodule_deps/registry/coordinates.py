"""Module name to group/artifact/version registry.

Two-phase lifecycle: contributions are collected by a mutable
CoordinateRegistryBuilder from any number of named sources, then ``build()``
produces an immutable CoordinateRegistry used during resolution. Contributions
are additive: an entry that is already present is never overwritten.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..errors import InvalidCoordinateError
from ..errors import RegistryFrozenError
from .platform import JDK_MODULES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """Group/artifact coordinates of an external component, version optional."""

    group: str
    artifact: str
    version: str | None = None

    @classmethod
    def parse(cls, notation: str) -> Coordinate:
        """Parse ``group:artifact`` or ``group:artifact:version``.

        Raises:
            InvalidCoordinateError: Wrong number of parts or an empty part
        """
        parts = notation.strip().split(":")
        if len(parts) not in (2, 3) or not all(parts):
            raise InvalidCoordinateError(f"Expected 'group:artifact[:version]', got '{notation}'")
        return cls(*parts)

    @property
    def ga(self) -> str:
        return f"{self.group}:{self.artifact}"

    @property
    def notation(self) -> str:
        return self.ga if self.version is None else f"{self.ga}:{self.version}"

    def with_version(self, version: str) -> Coordinate:
        return Coordinate(self.group, self.artifact, version)

    def __str__(self) -> str:
        return self.notation


def normalize_catalog_key(key: str) -> str:
    """Version catalog aliases may use '_' or '-' where module names use '.'."""
    return key.replace("_", ".").replace("-", ".")


class CoordinateRegistry:
    """Immutable lookup structure consulted by the resolution engine."""

    def __init__(
        self,
        entries: Mapping[str, Coordinate],
        prefix_groups: Mapping[str, str] | None = None,
        versions: Mapping[str, str] | None = None,
        platform_modules: Iterable[str] = JDK_MODULES,
        sources: Mapping[str, tuple[str, ...]] | None = None,
    ):
        self._entries = MappingProxyType(dict(entries))
        self._prefix_groups = MappingProxyType(dict(prefix_groups or {}))
        self._versions = MappingProxyType(dict(versions or {}))
        self._platform_modules = frozenset(platform_modules)
        self._sources = MappingProxyType(dict(sources or {}))

    def lookup(self, module_name: str) -> Coordinate | None:
        """Coordinates for a module name, or None when nothing is known.

        Explicit entries take precedence over the prefix-to-group mapping. A
        version from the version catalog completes an entry without one.
        """
        coordinate = self._entries.get(module_name) or self._lookup_by_prefix(module_name)
        if coordinate is None:
            return None
        if coordinate.version is None and module_name in self._versions:
            return coordinate.with_version(self._versions[module_name])
        return coordinate

    def _lookup_by_prefix(self, module_name: str) -> Coordinate | None:
        # Prefixes only match at a name segment boundary
        matches = [p for p in self._prefix_groups if module_name.startswith(p.rstrip(".") + ".")]
        if not matches:
            return None
        prefix = max(matches, key=len)
        artifact = module_name[len(prefix) :].lstrip(".").replace(".", "-")
        if not artifact:
            return None
        return Coordinate(self._prefix_groups[prefix], artifact)

    def is_platform_module(self, module_name: str) -> bool:
        return module_name in self._platform_modules

    @property
    def module_names(self) -> frozenset[str]:
        return frozenset(self._entries)

    def sources_for(self, module_name: str) -> tuple[str, ...]:
        """Names of the sources that contributed an entry for module_name."""
        return self._sources.get(module_name, ())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CoordinateRegistry({len(self._entries)} modules, {len(self._prefix_groups)} prefixes)"


class CoordinateRegistryBuilder:
    """Collects registry contributions before resolution starts.

    Usage:
        builder = CoordinateRegistryBuilder()
        builder.add_all({"org.slf4j": "org.slf4j:slf4j-api"}, source="settings")
        registry = builder.build()
    """

    def __init__(self, platform_modules: Iterable[str] = JDK_MODULES) -> None:
        self._entries: dict[str, Coordinate] = {}
        self._sources: dict[str, list[str]] = {}
        self._prefix_groups: dict[str, str] = {}
        self._versions: dict[str, str] = {}
        self._platform_modules = frozenset(platform_modules)
        self._built = False

    def _check_open(self, source: str) -> None:
        if self._built:
            raise RegistryFrozenError(f"Registry already built; contribution from '{source}' rejected")

    def add(self, module_name: str, coordinate: Coordinate | str, source: str = "direct") -> None:
        """Contribute one mapping.

        An existing entry is kept. The only change accepted for it is adding a
        version to an entry that has none, for the same group and artifact.
        """
        self._check_open(source)
        if isinstance(coordinate, str):
            coordinate = Coordinate.parse(coordinate)

        existing = self._entries.get(module_name)
        if existing is None:
            self._entries[module_name] = coordinate
        elif existing.version is None and coordinate.version and existing.ga == coordinate.ga:
            self._entries[module_name] = coordinate
        elif existing != coordinate:
            logger.debug(
                f"[registry] {module_name}: keeping {existing} over {coordinate} from '{source}'"
            )
            return

        contributors = self._sources.setdefault(module_name, [])
        if source not in contributors:
            contributors.append(source)

    def add_all(self, mappings: Mapping[str, str | Coordinate], source: str) -> None:
        for module_name, coordinate in mappings.items():
            self.add(module_name, coordinate, source)

    def add_prefix_group(self, prefix: str, group: str, source: str = "direct") -> None:
        """Map every module name starting with prefix to an artifact in group."""
        self._check_open(source)
        self._prefix_groups.setdefault(prefix, group)

    def add_versions(self, versions: Mapping[str, str], source: str) -> None:
        """Contribute versions keyed by module name (catalog style keys accepted)."""
        self._check_open(source)
        for key, version in versions.items():
            self._versions.setdefault(normalize_catalog_key(key), str(version))

    def build(self) -> CoordinateRegistry:
        """Finalize into an immutable registry; no contributions are accepted afterwards."""
        self._built = True
        registry = CoordinateRegistry(
            entries=self._entries,
            prefix_groups=self._prefix_groups,
            versions=self._versions,
            platform_modules=self._platform_modules,
            sources={name: tuple(s) for name, s in self._sources.items()},
        )
        logger.debug(f"Built {registry!r}")
        return registry
