"""Logging configuration for the Elsa Data admin CLI."""

import logging
import os
import sys
from typing import Union


def parse_level(level: str) -> Union[int, str]:
    """Normalise a log level string for ``Logger.setLevel``.

    Numeric strings become ints, anything else is upper-cased so that names
    such as ``debug`` are accepted.
    """
    level = level.strip().upper()
    return int(level) if level.isdigit() else level


def get_logger(name: str = "elsa_data_cli") -> logging.Logger:
    """Get a configured logger for the package.

    The logger uses ELSA_DATA_CLI_LOG_LEVEL (or LOG_LEVEL) to determine the log level.
    If not set, defaults to ERROR level so that only failures are reported.

    Output goes to stderr: stdout is reserved for the admin command's output.

    Returns:
        Configured logger instance for the package.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        level = os.getenv("ELSA_DATA_CLI_LOG_LEVEL", os.getenv("LOG_LEVEL", "ERROR"))

        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "[%(levelname)s] %(name)s - %(filename)s:%(lineno)d: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        # Will raise ValueError if the level is not registered with logging
        logger.setLevel(parse_level(level))

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger


# Package logger instance
logger = get_logger()
