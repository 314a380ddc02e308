"""
log_util.py: Shared logger factory for the weather lookup app.

Every module gets its logger with ``app_logger(__name__)``. Handlers are
attached once per logger name so Streamlit reruns don't duplicate output.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = os.environ.get("WEATHER_LOOKUP_LOG_LEVEL", "INFO").upper()


def app_logger(name: str, log_file: Optional[str] = None) -> logging.Logger:
    """
    Create or fetch a configured logger.

    :param name: Logger name, usually the calling module's ``__name__``.
    :param log_file: Optional path for an additional file handler.
    :return: Configured logger.
    """
    logger = logging.getLogger(name)
    if getattr(logger, "_weather_lookup_configured", False):
        return logger

    logger.setLevel(DEFAULT_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Propagate so caplog still sees records under pytest.
    logger.propagate = True
    logger._weather_lookup_configured = True
    return logger
