import logging
import sys
from logging.handlers import RotatingFileHandler

from config import settings


def setup_logging(level=None, log_file=None):
    """Configure the root logger for the service."""

    logger = logging.getLogger()
    logger.setLevel(level or settings.LOG_LEVEL)

    # setup may run more than once (tests build the app repeatedly)
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or settings.LOG_FILE
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)

    return logger
