"""
Logging Configuration
Sets up the logger for the 'alcoholometry' namespace.
"""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configures the 'alcoholometry' namespace logger.

    Records go to stderr so stdout carries only calculation results.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
    """
    logger = logging.getLogger("alcoholometry")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
    )
    logger.addHandler(handler)
