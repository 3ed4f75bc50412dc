"""Logging configuration for the command-line tool."""

import logging
import logging.handlers

from .config import LoggingConfig


def setup_logging(config: LoggingConfig, verbose: bool = False):
    """Configure the root logger from ``config``."""
    level = logging.DEBUG if verbose else getattr(logging, config.level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=config.format, force=True)

    if config.file_path:
        handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        handler.setFormatter(logging.Formatter(config.format))
        logging.getLogger().addHandler(handler)
