"""Logging for Gastos.

Everything goes through the "gastos" logger: a daily file under the configured
log directory gets full detail, the console gets the short form. The Google
client libraries are held at WARNING so a dashboard watch loop stays readable.
"""

import logging
from datetime import date
from config import Config

LOGGER_NAME = "gastos"
QUIET_LOGGERS = ("googleapiclient", "google.auth", "urllib3")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def setup_logging(config: Config) -> logging.Logger:
    """Attach the file and console handlers to the gastos logger.

    Safe to call again (e.g. after a config reload): previous handlers are
    closed and replaced.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_file_handler(config))
    logger.addHandler(_console_handler(config))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger


def _file_handler(config: Config) -> logging.Handler:
    config.log_dir.mkdir(parents=True, exist_ok=True)
    # One file per day: gastos-YYYY-MM-DD.log
    path = config.log_dir / f"{LOGGER_NAME}-{date.today().isoformat()}.log"
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(config.log_level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _console_handler(config: Config) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(config.log_level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def get_logger() -> logging.Logger:
    """Return the gastos logger (unconfigured until setup_logging runs)."""
    return logging.getLogger(LOGGER_NAME)
