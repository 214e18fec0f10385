"""Central logging configuration for the backend application."""

import logging
from typing import Union


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Map a level name or number onto a `logging` level constant."""
    if isinstance(level, int):
        return level
    if not level:
        return default
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else default


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once for consistent application logs."""
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """Create or retrieve a module logger."""
    return logging.getLogger(name)
