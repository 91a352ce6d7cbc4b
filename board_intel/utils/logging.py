# loguru setup shared by every stage
from loguru import logger
import sys

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {message}"

def setup_logging(level="INFO"):
    logger.remove()
    logger.add(sys.stdout, level=str(level).upper(), format=_FORMAT,
               backtrace=False, diagnose=False)
    return logger
