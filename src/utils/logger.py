"""Logging configuration for the solar intel engine."""

import logging
from pathlib import Path

try:
    import colorlog

    HAS_COLORLOG = True
except ImportError:
    HAS_COLORLOG = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Parent of every module logger in the project
PACKAGE_LOGGER = "src"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def _console_formatter() -> logging.Formatter:
    if HAS_COLORLOG:
        return colorlog.ColoredFormatter(
            f"%(log_color)s{LOG_FORMAT}",
            datefmt=DATE_FORMAT,
            log_colors=LOG_COLORS,
        )
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def setup_logger(
    name: str,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up a logger with console and optional file output.

    Args:
        name: Logger name; modules use :func:`get_logger` instead.
        log_file: Optional path to log file. If None, only logs to console.
        console_level: Logging level for console output (default: INFO).
        file_level: Logging level for file output (default: DEBUG).

    Returns:
        Configured logger instance.

    Example:
        >>> logger = setup_logger("src", log_file=Path("logs/solar_intel.log"))
        >>> logger.info("File logging for the whole package")
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)  # Capture all levels, handlers filter

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(_console_formatter())
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

        logger.debug(f"File logging enabled: {log_file}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that defers output to the package logger.

    Module loggers carry no handlers of their own. Records propagate to
    ``PACKAGE_LOGGER``, whose handlers are installed once by
    :func:`configure_logging`, so one threshold governs every module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Fetching PVWatts estimate")
    """
    return logging.getLogger(name)


def configure_logging(
    console_level: int = logging.INFO,
    log_file: Path | None = None,
) -> logging.Logger:
    """(Re)install the package logger's handlers.

    Existing handlers are closed and replaced, so a later call with a new
    level or a new stderr takes effect instead of being ignored.

    Args:
        console_level: Threshold for console output.
        log_file: Optional path for a DEBUG-level log file.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    return setup_logger(PACKAGE_LOGGER, log_file=log_file, console_level=console_level)
