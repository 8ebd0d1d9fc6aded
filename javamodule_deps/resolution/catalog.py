"""Catalog of the sibling projects in a build."""

from __future__ import annotations

from collections.abc import Iterator
from collections.abc import Mapping
from types import MappingProxyType

from ..errors import CatalogError


def dotted(project_name: str) -> str:
    """Project names separate tokens with hyphens, module names with dots."""
    return project_name.replace("-", ".")


class ProjectCatalog:
    """Read-only view of project name -> group for all projects of a build.

    Args:
        projects: Project name to coordinate group
        parent_path: Build path of the projects' parent ("" for the root project)

    Raises:
        CatalogError: Empty project name, or two projects with the same dotted form
    """

    def __init__(self, projects: Mapping[str, str], parent_path: str = ""):
        by_dotted: dict[str, str] = {}
        for name in projects:
            if not name:
                raise CatalogError("Project catalog contains an empty project name")
            key = dotted(name)
            if key in by_dotted:
                raise CatalogError(
                    f"Projects '{by_dotted[key]}' and '{name}' both map to module name '{key}'"
                )
            by_dotted[key] = name

        self._groups = MappingProxyType(dict(projects))
        self._by_dotted = MappingProxyType(by_dotted)
        self.parent_path = parent_path.rstrip(":")

    def group(self, project_name: str) -> str:
        return self._groups[project_name]

    def project_path(self, project_name: str) -> str:
        return f"{self.parent_path}:{project_name}"

    def exact_match(self, module_name_suffix: str) -> str | None:
        """Project whose dotted name equals the suffix."""
        return self._by_dotted.get(module_name_suffix)

    def longest_prefix_match(self, module_name_suffix: str) -> str | None:
        """Project with the longest dotted name that is a proper prefix of the suffix.

        Equal lengths are broken by the lexicographically smallest project name.
        """
        candidates = [name for key, name in self._by_dotted.items() if module_name_suffix.startswith(key + ".")]
        if not candidates:
            return None
        return min(candidates, key=lambda name: (-len(name), name))

    def __contains__(self, project_name: object) -> bool:
        return project_name in self._groups

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"ProjectCatalog({len(self._groups)} projects, parent='{self.parent_path}')"
