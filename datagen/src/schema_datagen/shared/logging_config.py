"""Root logging setup for the API process."""
import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Libraries that log every call at INFO or below
NOISY_LOGGERS = ("faker", "uvicorn.access", "asyncio", "multipart")


def configure_structured_logging(level: str = "INFO", stream: TextIO | None = None):
    """
    Configure the root logger.

    Plain module loggers and structured (JSON message) loggers share one
    line format. Calling this again replaces the previous handlers, so a
    configuration change can lower or raise the level at runtime.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=stream or sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
