"""
Logging Notifier Adapter - Alerts written to a logger.

Suitable for headless use (scripts, tests, background jobs). UI layers
provide their own Notifier that renders dialogs instead.
"""

import logging
from typing import Optional
from legasi_dms.ports.notifier_port import Notifier


class LoggingNotifier(Notifier):
    """Send alerts to the ``legasi_dms.alerts`` logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("legasi_dms.alerts")

    def success(self, title: str, text: str) -> None:
        self._logger.info("%s: %s", title, text)

    def error(self, title: str, text: str) -> None:
        self._logger.error("%s: %s", title, text)
