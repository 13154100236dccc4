"""
Logging configuration for the service.

One stdout handler on the root logger; modules log through
logging.getLogger(__name__).
"""

import logging
import sys

_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "botocore", "urllib3")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with an ISO timestamp format."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
