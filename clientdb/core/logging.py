"""
Logging setup for clientdb.

Library modules only create loggers (logging.getLogger(__name__)).
Applications that want clientdb output call setup_logging() once.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from clientdb.core.config import LoggingConfig


def setup_logging(
    level: int | str = logging.INFO,
    log_dir: Path | None = None,
    file_level: int | str = logging.DEBUG,
) -> logging.Logger:
    """
    Setup clientdb logging.

    Args:
        level: Minimum level for console output
        log_dir: Directory for log files (no file handler when None)
        file_level: Minimum level for file output

    Returns:
        The configured "clientdb" logger
    """
    logger = logging.getLogger("clientdb")
    logger.setLevel(logging.DEBUG)

    # Clear existing handlers
    logger.handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"clientdb_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        logger.info(f"Logging initialized. File: {log_file}")

    return logger


def setup_logging_from_config(config: LoggingConfig) -> logging.Logger:
    """Setup logging from a LoggingConfig section."""
    return setup_logging(
        level=config.level.upper(),
        log_dir=Path(config.log_dir) if config.log_dir else None,
        file_level=config.file_level.upper(),
    )
