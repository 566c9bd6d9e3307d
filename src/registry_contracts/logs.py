import os
import sys

from datetime import timedelta
from loguru import logger

from registry_contracts.constants import Constants


def setup_logging(level: str = Constants.LOG_LEVEL, log_dir=None):
    """
    Replace loguru's default sink with a stderr sink at `level`.
    When `log_dir` is given, also write hourly rotated, zipped log files there.
    """
    logger.remove()
    logger.add(sys.stderr, level=level)

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(
            os.path.join(log_dir, '{time}.log'),
            retention=timedelta(days=Constants.LOG_RETENTION_DAYS),
            rotation=timedelta(hours=1),
            format="{time} {level} {name} {message}",
            level=level,
            enqueue=True,
            compression="zip"
        )

    logger.debug(f"Logging configured at level {level}")
