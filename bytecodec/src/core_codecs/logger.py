import logging

LOGGER_NAME = "bytecodec"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
