"""
Logging setup for the editor.

Curses owns the terminal while the editor runs, so log records only ever go
to a file. With no log file configured every record is dropped.
"""

import logging
import logging.handlers
import sys
from typing import Any, Dict

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3

logger = logging.getLogger("hexpy")


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """
    Configure the package logger from the ``[logging]`` config section.

    Args:
        config: Full merged configuration

    Returns:
        logging.Logger: The configured ``hexpy`` logger
    """

    logging_config = config.get("logging", {})
    level_name = str(logging_config.get("level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level_name, level = "INFO", logging.INFO
    log_file = logging_config.get("file") or ""

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False

    if not log_file:
        logger.addHandler(logging.NullHandler())
        return logger

    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError as e:
        print(f"Error setting up log file '{log_file}': {e}. Logging disabled.", file=sys.stderr)
        logger.addHandler(logging.NullHandler())
        return logger

    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    logger.info("Logging to %s at %s", log_file, level_name)
    return logger
