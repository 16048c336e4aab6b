"""Logging configuration for the sales tracker.

Logs go to a dated file under the configured log directory and to the console.
"""

import logging
from datetime import date
from config import Config

LOGGER_NAME = "sales_tracker"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # setup_logging may run more than once per process (tests, CLI reuse)
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    log_file_path = config.log_dir / f"sales-tracker-{date.today().isoformat()}.log"
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(detailed_formatter)

    # Diagnostics stay in the file; the console only shows what users need
    console_handler = logging.StreamHandler()
    console_handler.setLevel(max(logging.getLevelName(config.log_level), logging.INFO))
    console_handler.setFormatter(console_formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The sales_tracker logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
