import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "openapi_schema_checks"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def configure_split_stream_logging(
    *,
    level: int = logging.WARNING,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: str = PACKAGE_LOGGER_NAME,
) -> logging.Logger:
    """Attach split stdout/stderr handlers to the package logger:

    - records below ``stderr_level`` go to stdout
    - ``stderr_level`` and above go to stderr

    Only the named logger is touched; the root logger and handlers owned by
    the embedding application are left alone. Calling this again replaces
    the handlers installed by the previous call.
    """

    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if getattr(handler, "_openapi_schema_checks", False):
            logger.removeHandler(handler)
    logger.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    for handler in (stdout_handler, stderr_handler):
        handler._openapi_schema_checks = True
        logger.addHandler(handler)

    return logger
