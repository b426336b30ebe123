"""Console logging configuration."""

import logging
import sys

# Reduce noise from libraries
LOGGING_CONFIG = {
    'uvicorn.access': logging.WARNING,
    'httpx': logging.WARNING,
    'asyncio': logging.ERROR,
}


def setup_logging(level: str = 'INFO') -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter(
            '%(asctime)s %(levelname)-8s %(name)s - %(message)s',
            datefmt='%H:%M:%S',
        )
    )
    root_logger.addHandler(console_handler)

    for logger_name, logger_level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(logger_level)

    logging.getLogger(__name__).debug('Logging configured (level=%s)', level)
