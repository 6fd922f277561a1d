"""
Process-wide logging configuration.

Modules create their own logger with logging.getLogger(__name__); this
only installs the root handler and level once at application start-up.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Args:
        level: Level name such as "DEBUG" or "INFO"
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQL echo is controlled by DB_ECHO, not by the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
