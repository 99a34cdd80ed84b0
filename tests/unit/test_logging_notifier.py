"""
Unit tests for logging setup and the logging notifier.
"""

import logging

from legasi_dms.adapters import LoggingNotifier
from legasi_dms.logging_config import configure_logging


def test_notifier_levels(caplog):
    notifier = LoggingNotifier()

    with caplog.at_level(logging.INFO, logger="legasi_dms.alerts"):
        notifier.success("Success!", "Data submitted successfully!")
        notifier.error("Error!", "Upload failed")

    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert levels[0][0] == logging.INFO
    assert "Data submitted successfully!" in levels[0][1]
    assert levels[1][0] == logging.ERROR


def test_configure_logging_installs_one_handler():
    root = configure_logging("debug")
    handlers = len(root.handlers)

    configure_logging("warning")

    assert len(root.handlers) == handlers
    assert root.level == logging.WARNING


def test_notifier_uses_given_logger(caplog):
    notifier = LoggingNotifier(logging.getLogger("legasi_dms.custom_alerts"))

    with caplog.at_level(logging.INFO, logger="legasi_dms.custom_alerts"):
        notifier.success("Updated!", "The data entry has been updated.")

    assert caplog.records[0].name == "legasi_dms.custom_alerts"
