"""Contribution sources for the coordinate registry.

Each function feeds one kind of declarative input into a
CoordinateRegistryBuilder:
- bundled: well-known module names shipped with this package
- settings: explicit mappings from the user's settings files
- extra module info: patched legacy jars, declared as 'group:artifact' -> module name
- version catalog: versions from a TOML catalog's [versions] table
"""

from __future__ import annotations

import importlib.resources
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ..errors import ConfigurationError
from ..settings import ResolutionSettings
from .coordinates import Coordinate
from .coordinates import CoordinateRegistry
from .coordinates import CoordinateRegistryBuilder

logger = logging.getLogger(__name__)

BUNDLED_SOURCE = "bundled"
SETTINGS_SOURCE = "settings"
EXTRA_MODULE_INFO_SOURCE = "extra-module-info"
VERSION_CATALOG_SOURCE = "version-catalog"


def load_bundled_mappings() -> dict[str, str]:
    """Read the bundled module name to 'group:artifact' table."""
    data_file = importlib.resources.files("javamodule_deps") / "data" / "modules.yaml"
    content = yaml.safe_load(data_file.read_text(encoding="utf-8")) or {}
    return dict(content.get("modules") or {})


def contribute_bundled(builder: CoordinateRegistryBuilder) -> None:
    mappings = load_bundled_mappings()
    builder.add_all(mappings, source=BUNDLED_SOURCE)
    logger.debug(f"[registry] {len(mappings)} bundled mappings")


def contribute_settings(builder: CoordinateRegistryBuilder, settings: ResolutionSettings) -> None:
    """Explicit user mappings and prefix-to-group rules."""
    builder.add_all(settings.module_name_to_ga, source=SETTINGS_SOURCE)
    for prefix, group in settings.module_name_prefix_to_group.items():
        builder.add_prefix_group(prefix, group, source=SETTINGS_SOURCE)


def contribute_extra_module_info(
    builder: CoordinateRegistryBuilder, module_specs: Mapping[str, str], source: str = EXTRA_MODULE_INFO_SOURCE
) -> None:
    """Register patched legacy jars under the module names given to them.

    Args:
        builder: Registry builder to contribute to
        module_specs: Mapping of 'group:artifact' to the module name patched into the jar
        source: Name of the contributing source
    """
    for ga, module_name in module_specs.items():
        builder.add(module_name, Coordinate.parse(ga), source=source)


def _catalog_version(value: Any) -> str | None:
    """A catalog version is a plain string or a rich version table."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        for key in ("strictly", "require", "prefer"):
            if key in value:
                return str(value[key])
    return None


def load_version_catalog(path: Path) -> dict[str, str]:
    """Read the [versions] table of a version catalog.

    Raises:
        ConfigurationError: The file exists but is not valid TOML
    """
    if not path.exists():
        logger.warning(f"Version catalog not found: {path}")
        return {}
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Malformed version catalog {path}: {e}") from e

    versions = {}
    for key, value in (data.get("versions") or {}).items():
        version = _catalog_version(value)
        if version is None:
            logger.debug(f"Skipping catalog version '{key}' without a usable constraint")
            continue
        versions[key] = version
    return versions


def contribute_version_catalog(builder: CoordinateRegistryBuilder, path: Path) -> None:
    builder.add_versions(load_version_catalog(path), source=VERSION_CATALOG_SOURCE)


def build_registry(settings: ResolutionSettings, include_bundled: bool = True) -> CoordinateRegistry:
    """Populate a registry from settings and bundled data, then freeze it.

    Settings contribute first so that user mappings take precedence over
    bundled ones.
    """
    builder = CoordinateRegistryBuilder()
    contribute_settings(builder, settings)
    contribute_extra_module_info(builder, settings.extra_module_info)
    if settings.version_catalog is not None:
        contribute_version_catalog(builder, settings.version_catalog)
    if include_bundled:
        contribute_bundled(builder)
    return builder.build()
