"""Telemetry on top of the standard logging module. Diagnostics never go through here."""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "check_typo"


class _StderrHandler(logging.StreamHandler):
    """Marker type so configure_logging can replace its own handler."""


class ProjectTelemetry:
    """TelemetryPort implementation writing to the `check_typo` logger."""

    def __init__(self, name: str = "CHECK-TYPO", logger: Optional[logging.Logger] = None) -> None:
        self._name = name
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def handshake(self) -> None:
        self._logger.debug("%s online", self._name)

    def step(self, message: str) -> None:
        self._logger.info(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    @staticmethod
    def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> None:
        """Send log records to stderr so stdout only carries diagnostics."""
        root = logging.getLogger(LOGGER_NAME)
        root.setLevel(logging.DEBUG if verbose else logging.WARNING)
        for handler in list(root.handlers):
            if isinstance(handler, _StderrHandler):
                root.removeHandler(handler)
        handler = _StderrHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter("check-typo: %(levelname)s: %(message)s"))
        root.addHandler(handler)
