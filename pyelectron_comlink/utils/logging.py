"""
PyElectron Comlink Logging Utilities

Structured logging shared by the adapter, the loopback transport
and the configuration loader.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


def get_logger(
    name: str,
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Logging level
        log_file: Optional file for logging output

    Returns:
        logging.Logger: Configured logger
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def set_level(level: Union[str, int], root: str = "pyelectron_comlink"):
    """Apply a logging level to every logger under the package namespace."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    manager = logging.getLogger(root).manager
    for name, candidate in list(manager.loggerDict.items()):
        if (name == root or name.startswith(root + ".")) and isinstance(candidate, logging.Logger):
            candidate.setLevel(level)
