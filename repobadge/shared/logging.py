"""
Logging setup for the badge service.

Error pages never carry diagnostic text, so the log stream on stdout is
where the ``<Kind>(<detail>)`` form of each failed request ends up.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that log every git command or HTTP request at INFO
QUIET_LOGGERS = ("git", "httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Route all service logs to stdout.

    Unknown level names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
