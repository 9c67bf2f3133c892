"""
Logging setup for the console simulator.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


def setup_logging(log_level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """Configure root logging and return the package logger"""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, handlers=handlers, force=True)

    logger = logging.getLogger("stocksim")
    logger.debug(f"Logging configured at {log_level.upper()} level")
    return logger
