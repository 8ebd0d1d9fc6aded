"""Log filter to keep resolution diagnostics off the console handler.

The commands print collected diagnostics themselves once resolution has
finished. Attached to the console handler only, this filter drops the
matching log records so each warning is shown once.

Log file handlers are unaffected.
"""

import logging

DIAGNOSTICS_LOGGER = "javamodule_deps.resolution.diagnostics"


class DiagnosticsLogFilter(logging.Filter):
    """Suppress records emitted by the diagnostics policy."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress the record, True to let it through."""
        return record.name != DIAGNOSTICS_LOGGER
