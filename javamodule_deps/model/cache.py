"""Per-variant ModuleInfo cache.

Descriptors are parsed once per (project, source set) variant and then
shared. Population is lazy and each key is computed at most once, even when
several threads ask for different (or the same) variants concurrently.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from collections.abc import Hashable
from pathlib import Path

from .module_info import MODULE_INFO_FILE
from .module_info import ModuleInfo
from .module_info import load_module_info

logger = logging.getLogger(__name__)


class ModuleInfoCache:
    """Keyed memoization of parsed descriptors."""

    def __init__(self) -> None:
        self._entries: dict[Hashable, ModuleInfo] = {}
        self._key_locks: dict[Hashable, threading.Lock] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable, loader: Callable[[], ModuleInfo]) -> ModuleInfo:
        """Return the cached ModuleInfo for key, computing it with loader on first use."""
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        with self._lock:
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            # Another thread may have finished while we waited
            entry = self._entries.get(key)
            if entry is None:
                entry = loader()
                self._entries[key] = entry
                logger.debug(f"Cached module info for {key}: {entry.module_name or '<none>'}")
        return entry

    def for_source_dir(self, key: Hashable, java_dir: Path) -> ModuleInfo:
        """Cached descriptor read from ``<java_dir>/module-info.java``."""
        return self.get(key, lambda: load_module_info(java_dir / MODULE_INFO_FILE))

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
