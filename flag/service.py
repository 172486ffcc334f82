import logging

from config import settings

logger = logging.getLogger(__name__)

RULE = "-" * 31


def receive_flag(flag: str) -> str:
    logger.info(RULE)
    logger.info("Flag: %s", flag)
    logger.info(RULE)

    return settings.FAKE_FLAG
