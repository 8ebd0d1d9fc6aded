"""Parsed ``module-info.java`` descriptors.

A ModuleInfo holds the declared module name and, per directive kind, the
required module names in the order they appear in the file. Instances are
immutable; a missing descriptor is represented by an empty ModuleInfo.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

logger = logging.getLogger(__name__)

MAIN_SOURCE_SET = "main"
MODULE_INFO_FILE = "module-info.java"

# Marker comment used to declare a runtime-only requirement
RUNTIME_MARKER = "/*runtime*/"

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"//[^\n]*")
# Annotation with optional argument list, e.g. @Deprecated(since = "9")
_ANNOTATION = re.compile(r"@[\w.]+(?:\s*\([^)]*\))?")
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class Directive(str, Enum):
    """Kinds of ``requires`` directives.

    The value is the dependency configuration the directive feeds for the
    main source set.
    """

    REQUIRES = "implementation"
    REQUIRES_STATIC = "compileOnly"
    REQUIRES_TRANSITIVE = "api"
    REQUIRES_STATIC_TRANSITIVE = "compileOnlyApi"
    REQUIRES_RUNTIME = "runtimeOnly"

    def configuration_name(self, source_set: str = MAIN_SOURCE_SET) -> str:
        """Name of the dependency configuration for this directive in a source set.

        >>> Directive.REQUIRES.configuration_name("test")
        'testImplementation'
        """
        if source_set == MAIN_SOURCE_SET:
            return self.value
        return source_set + self.value[0].upper() + self.value[1:]


def to_dotted_case(name: str) -> str:
    """Convert a project or source set name to dot separated lower case.

    Hyphens, underscores and camelCase boundaries all become dots:
    ``"testFixtures"`` -> ``"test.fixtures"``, ``"my-lib"`` -> ``"my.lib"``.
    """
    dotted = name.replace("_", ".").replace("-", ".")
    parts = _CAMEL_BOUNDARY.split(dotted)
    joined = ".".join(p.lower() for p in parts)
    return re.sub(r"\.{2,}", ".", joined)


def source_set_to_module_name(project_name: str, source_set: str) -> str:
    """Conventional (unprefixed) module name for a project's source set."""
    if source_set == MAIN_SOURCE_SET:
        return to_dotted_case(project_name)
    return to_dotted_case(project_name) + "." + to_dotted_case(source_set)


@dataclass(frozen=True)
class ModuleInfo:
    """One parsed module descriptor."""

    module_name: str | None = None
    directives: Mapping[Directive, tuple[str, ...]] = field(default_factory=dict)
    file_path: Path | None = None

    def __post_init__(self) -> None:
        frozen = {d: tuple(self.directives.get(d, ())) for d in Directive}
        object.__setattr__(self, "directives", MappingProxyType(frozen))

    @classmethod
    def empty(cls, file_path: Path | None = None) -> ModuleInfo:
        """ModuleInfo for a variant without a descriptor."""
        return cls(module_name=None, directives={}, file_path=file_path)

    @property
    def is_empty(self) -> bool:
        return self.module_name is None and not any(self.directives.values())

    def get(self, directive: Directive) -> tuple[str, ...]:
        """Module names declared for a directive kind, in declaration order."""
        return self.directives.get(directive, ())

    def module_name_prefix(self, project_name: str, source_set: str = MAIN_SOURCE_SET) -> str | None:
        """Derive the namespace shared by the modules of this build.

        The descriptor's module name is expected to be
        ``<prefix>.<project name dotted>[.<source set dotted>]``. The prefix is
        a naming heuristic only; it is not checked against anything else.

        Returns:
            The prefix, ``""`` when the module is named after the project
            itself, or None when the module name does not follow the convention.
        """
        if self.module_name is None:
            return None
        if self.module_name == project_name:
            return ""

        conventional = source_set_to_module_name(project_name, source_set)
        if self.module_name == conventional:
            return ""
        if self.module_name.endswith("." + conventional):
            return self.module_name[: -len(conventional) - 1]
        return None


def _statements(text: str) -> list[list[str]]:
    """Split descriptor source into token lists, one per statement."""
    text = text.replace(RUNTIME_MARKER, " runtime ")
    text = _BLOCK_COMMENT.sub(" ", text)
    text = _LINE_COMMENT.sub(" ", text)
    text = _ANNOTATION.sub(" ", text)

    statements = []
    for raw in re.split(r"[;{}]", text):
        tokens = raw.split()
        if tokens:
            statements.append(tokens)
    return statements


def _directive_for(modifiers: set[str]) -> Directive | None:
    if modifiers == set():
        return Directive.REQUIRES
    if modifiers == {"static"}:
        return Directive.REQUIRES_STATIC
    if modifiers == {"transitive"}:
        return Directive.REQUIRES_TRANSITIVE
    if modifiers == {"static", "transitive"}:
        return Directive.REQUIRES_STATIC_TRANSITIVE
    if modifiers == {"runtime"}:
        return Directive.REQUIRES_RUNTIME
    return None


def parse_module_info(text: str, file_path: Path | None = None) -> ModuleInfo:
    """Parse the source text of a ``module-info.java`` file.

    Only the module name and ``requires`` directives are read; ``exports``,
    ``opens``, ``uses`` and ``provides`` are ignored.
    """
    module_name: str | None = None
    collected: dict[Directive, list[str]] = {d: [] for d in Directive}

    for tokens in _statements(text):
        keyword = tokens[0]
        if keyword == "module" and len(tokens) > 1:
            module_name = tokens[1]
        elif keyword == "open" and len(tokens) > 2 and tokens[1] == "module":
            module_name = tokens[2]
        elif keyword == "requires" and len(tokens) > 1:
            *modifiers, required = tokens[1:]
            directive = _directive_for(set(modifiers))
            if directive is None:
                logger.debug(f"Ignoring unsupported directive in {file_path}: {' '.join(tokens)}")
                continue
            if required not in collected[directive]:
                collected[directive].append(required)

    return ModuleInfo(
        module_name=module_name,
        directives={d: tuple(names) for d, names in collected.items()},
        file_path=file_path,
    )


def load_module_info(path: Path) -> ModuleInfo:
    """Read and parse a descriptor file; a missing file yields an empty ModuleInfo."""
    if not path.is_file():
        logger.debug(f"No module descriptor at {path}")
        return ModuleInfo.empty(path)
    return parse_module_info(path.read_text(encoding="utf-8"), file_path=path)
