"""
Notifier Port - Interface for user-facing alerts.

Implementations:
- LoggingNotifier: writes alerts to the ``legasi_dms.alerts`` logger
"""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Port: Show success and error alerts to the user."""

    @abstractmethod
    def success(self, title: str, text: str) -> None:
        pass

    @abstractmethod
    def error(self, title: str, text: str) -> None:
        pass
