"""Logging setup shared by every component of the service."""
import logging
from pathlib import Path
from typing import Union

LOGGER_NAME = "calculator_service"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ERROR_LOG = "error.log"
COMBINED_LOG = "combined.log"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(log_dir: Union[str, Path] = "logs", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach console and file handlers to the service logger.

    Three sinks are opened:
        - the console, at ``level``
        - ``<log_dir>/error.log``, errors only
        - ``<log_dir>/combined.log``, at ``level``

    Calling it again closes the previous handlers first.

    :param log_dir: Directory for the log files, created if missing
    :param level: Minimum level for the console and combined sinks

    :return: The configured service logger
    :rtype: logging.Logger
    """
    close_logging()

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)

    errors = logging.FileHandler(log_path / ERROR_LOG, mode="a", encoding="utf-8")
    errors.setLevel(logging.ERROR)

    combined = logging.FileHandler(log_path / COMBINED_LOG, mode="a", encoding="utf-8")
    combined.setLevel(level)

    for handler in (console, errors, combined):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # error.log must keep receiving errors even when level is CRITICAL
    numeric_level = logging.getLevelName(level) if isinstance(level, str) else level
    logger.setLevel(min(numeric_level, logging.ERROR))
    logger.info(f"📝 Logging to {log_path / COMBINED_LOG} and {log_path / ERROR_LOG}")
    return logger


def close_logging() -> None:
    """Flush, close and detach every handler of the service logger."""
    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
        logger.removeHandler(handler)
