import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "pdf_pages"
DEFAULT_TAG = "pdf-pages"
LOG_FORMAT = "%(levelname)s [%(tag)s] %(message)s"


class _TagFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "tag"):
            record.tag = DEFAULT_TAG
        return True


def build_logger(quiet: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Return the tool's logger writing to ``stream`` (stderr by default).

    Quiet mode drops info lines; errors are always emitted.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(_TagFilter())
    logger.addHandler(handler)
    logger.setLevel(logging.ERROR if quiet else logging.INFO)
    logger.propagate = False
    return logger
