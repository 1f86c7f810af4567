import logging

logger: logging.Logger = logging.getLogger("lexmunch")
logger.addHandler(logging.StreamHandler())
# Silent unless the caller lowers the level
logger.setLevel(logging.CRITICAL)
