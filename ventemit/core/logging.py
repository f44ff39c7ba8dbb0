import sys
from typing import List
from loguru import logger
import os

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = True, log_dir: str = "logs", log_to_file: bool = False) -> List[int]:
    """
    Configures Loguru logger.

    Returns the ids of the sinks that were added.
    """
    # Remove default handler
    logger.remove()

    # Console Handler
    level = "DEBUG" if debug_mode else "INFO"
    sinks = [logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)]

    # File Handler
    if log_to_file:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        sinks.append(
            logger.add(os.path.join(log_dir, "ventemit_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")
        )

    logger.info("Logging initialized.")
    return sinks
