"""
Plugin log file.

Diagnostic trace written next to the host's plugin storage. It is
best-effort: a missing directory or a locked file must never reach the
tracker, so write errors are dropped.
"""

import logging
from typing import Optional

import surface_helper

PLUGIN_LOGGER_NAME = "surface_helper"

DEFAULT_FORMAT = "%(asctime)s %(message)s"
DEFAULT_DATEFMT = "%d-%b-%Y %H:%M:%S"


class PluginLogHandler(logging.FileHandler):
    """
    Append-only file handler that never raises.

    The file is opened on first record. A version header line precedes the
    first record written by this handler.
    """

    def __init__(self, filename: str, fmt: str = DEFAULT_FORMAT,
                 datefmt: str = DEFAULT_DATEFMT):
        super().__init__(filename, mode='a', encoding='utf-8', delay=True)
        self.setFormatter(logging.Formatter(fmt, datefmt))
        self._header_sent = False

    def emit(self, record: logging.LogRecord):
        # FileHandler opens the file outside its own error handling
        try:
            if not self._header_sent:
                header = logging.LogRecord(
                    record.name, logging.INFO, __file__, 0,
                    f"SurfaceHelper {surface_helper.__version__}", None, None,
                )
                super().emit(header)
                self._header_sent = self.stream is not None
            super().emit(record)
        except Exception:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord):
        # Unwritable log destination: drop the record
        pass


def attach_plugin_log(
    log_file: Optional[str],
    level: int = logging.DEBUG,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> Optional[PluginLogHandler]:
    """
    Attach a plugin log file to the package logger.

    Args:
        log_file: Target path; empty or None disables the file log
        level: Minimum level written to the file
        fmt: Record format
        datefmt: Timestamp format

    Returns:
        The attached handler, or None when disabled
    """
    if not log_file:
        return None

    handler = PluginLogHandler(log_file, fmt, datefmt)
    handler.setLevel(level)

    package_logger = logging.getLogger(PLUGIN_LOGGER_NAME)
    package_logger.addHandler(handler)
    if package_logger.level == logging.NOTSET or package_logger.level > level:
        package_logger.setLevel(level)
    return handler


def detach_plugin_log(handler: Optional[PluginLogHandler]):
    """Remove and close a handler returned by attach_plugin_log."""
    if handler is None:
        return
    logging.getLogger(PLUGIN_LOGGER_NAME).removeHandler(handler)
    handler.close()
