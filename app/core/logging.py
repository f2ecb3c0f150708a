from loguru import logger
import sys

def setup_logging(sink=sys.stdout):
    logger.remove()
    logger.add(sink, level="INFO", backtrace=False, diagnose=False,
               format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>")
    return logger
