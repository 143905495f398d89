"""Named loggers writing to stdout and to a dated log file.

A logger is configured once per name: later calls return the same
instance untouched. File output goes to ``<LOG_DIR>/<name>_<YYYYMMDD>.log``
and is skipped when ``LOG_TO_FILE`` is off.
"""

import logging
import sys
from datetime import date
from pathlib import Path

from src.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_TIME_FORMAT = "%H:%M:%S"

_configured: dict[str, logging.Logger] = {}


def setup_logger(
    name: str,
    level: int | None = None,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Return the logger for ``name``, configuring it on first use.

    Args:
        name: Dotted logger name (e.g. 'services.credits').
        level: Logging level. Defaults to LOG_LEVEL, or DEBUG when DEBUG is set.
        log_dir: Log file directory. Defaults to LOG_DIR.

    Returns:
        Logger with its own handlers and propagation disabled.
    """
    if name in _configured:
        return _configured[name]

    if level is None:
        level = logging.getLevelName(settings.log_level)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    for handler in build_handlers(name, level, log_dir):
        logger.addHandler(handler)

    _configured[name] = logger
    return logger


def build_handlers(
    name: str,
    level: int,
    log_dir: Path | None = None,
) -> list[logging.Handler]:
    """Build the stdout handler, plus the file handler if enabled.

    A log file that cannot be opened is reported on stderr and left out.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.logging.to_file:
        try:
            handlers.append(logging.FileHandler(log_file_path(name, log_dir), encoding="utf-8"))
        except OSError as e:
            print(f"Warning: log file disabled for {name}: {e}", file=sys.stderr)

    formatter = logging.Formatter(LOG_FORMAT, LOG_TIME_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    return handlers


def log_file_path(name: str, log_dir: Path | None = None) -> Path:
    """Dated log file for ``name``; creates the directory if missing."""
    directory = Path(log_dir if log_dir is not None else settings.logging.log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    stem = name.replace(".", "_").replace("/", "_")
    return directory / f"{stem}_{date.today():%Y%m%d}.log"
