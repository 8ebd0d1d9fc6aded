"""Warning policy for resolution gaps.

Diagnostics are advisory: they never stop resolution. Each one is emitted at
most once per key, recorded for the caller and forwarded to logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..registry.coordinates import Coordinate

logger = logging.getLogger(__name__)

PREFIX = "[WARN] [Java Module Dependencies]"


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"

    @property
    def log_level(self) -> int:
        return logging.WARNING if self is Severity.WARNING else logging.INFO


@dataclass(frozen=True)
class Diagnostic:
    """One warning record."""

    severity: Severity
    message: str
    module_name: str
    key: tuple[str, ...]


class DiagnosticsPolicy:
    """Decides when resolution gaps are surfaced.

    Args:
        warn_for_missing_versions: Report external coordinates without a version
        root_dir: Build root; descriptor paths in messages are shown relative to it
    """

    def __init__(self, warn_for_missing_versions: bool = True, root_dir: Path | None = None):
        self.warn_for_missing_versions = warn_for_missing_versions
        self.root_dir = root_dir
        self._records: list[Diagnostic] = []
        self._seen: set[tuple[str, ...]] = set()

    @property
    def records(self) -> tuple[Diagnostic, ...]:
        return tuple(self._records)

    def _emit(self, diagnostic: Diagnostic) -> bool:
        if diagnostic.key in self._seen:
            return False
        self._seen.add(diagnostic.key)
        self._records.append(diagnostic)
        logger.log(diagnostic.severity.log_level, diagnostic.message)
        return True

    def _display_path(self, module_info_file: Path | None) -> str:
        if module_info_file is None:
            return "<unknown>"
        if self.root_dir is not None:
            try:
                return module_info_file.resolve().relative_to(self.root_dir.resolve()).as_posix()
            except ValueError:
                pass
        return module_info_file.as_posix()

    def missing_version(self, module_name: str, coordinate: Coordinate, module_info_file: Path | None = None) -> bool:
        """Report a mapped module without a version. Returns True if a new record was emitted."""
        if not self.warn_for_missing_versions:
            return False
        readable_name = module_name.replace(".", "_")
        message = (
            f"{PREFIX} No version defined in catalog - {coordinate.ga} - "
            f"{readable_name} (required in {self._display_path(module_info_file)})"
        )
        return self._emit(
            Diagnostic(
                severity=Severity.WARNING,
                message=message,
                module_name=module_name,
                key=("missing-version", module_name, coordinate.group, coordinate.artifact),
            )
        )

    def unmapped_module(self, module_name: str) -> bool:
        """Report a module name none of the strategies could resolve."""
        message = (
            f'{PREFIX} javaModuleDependencies.moduleNameToGA.put("{module_name}", "group:artifact") '
            f"mapping is missing."
        )
        return self._emit(
            Diagnostic(
                severity=Severity.INFO,
                message=message,
                module_name=module_name,
                key=("unmapped", module_name),
            )
        )
