"""
Logging Configuration
Sets up the console (and optional file) logging for the app.
"""
import logging
import sys

import config

# every flat module logs under its own name; attach to the root once
_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=None, log_file=None):
    """
    Configure the root logger. Safe to call on every Streamlit rerun:
    existing handlers are cleared first so lines are never duplicated.

    Args:
        level: Logging level name or number, defaults to config.LOG_LEVEL
        log_file: Optional path to also write logs to, defaults to config.LOG_FILE
    """
    level = level if level is not None else config.LOG_LEVEL
    log_file = log_file if log_file is not None else config.LOG_FILE

    logger = logging.getLogger()
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.getLogger(__name__).debug("Logging initialized.")
