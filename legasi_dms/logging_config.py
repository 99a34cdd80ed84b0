"""
Logging setup for applications embedding the client.

Library modules only create loggers (``logging.getLogger(__name__)``);
handlers are installed here, once, by the host application.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a single stream handler to the ``legasi_dms`` logger.

    Args:
        level: Log level name; defaults to settings.log_level

    Returns:
        The package root logger
    """
    global _configured

    if level is None:
        from legasi_dms.config import get_settings
        level = get_settings().log_level

    root = logging.getLogger("legasi_dms")
    root.setLevel(level.upper())

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True

    return root
