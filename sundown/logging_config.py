"""
Logging configuration helpers.
"""

from __future__ import annotations

import logging

from sundown.config import load_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings.

    Streamlit re-executes the script on every interaction, so this is a no-op
    after the first call.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = load_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True
