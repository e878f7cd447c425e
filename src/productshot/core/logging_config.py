"""Logging setup for applications embedding the engine.

The library itself only creates module loggers; handlers are configured by
the calling application, typically once at startup:

    from productshot.core.logging_config import configure_logging

    configure_logging("DEBUG")
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging with the standard format.

    Args:
        level: Logging level name or number
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("productshot").setLevel(level)
