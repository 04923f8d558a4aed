"""
Logging setup.

The terminal belongs to the game display, so log records go to a file
unless no log file is configured.
"""

import logging
from pathlib import Path

from .config_loader import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger from a LoggingConfig.

    Args:
        config: Level name and log file path ("" logs to stderr)
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=str(log_path), force=True)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
