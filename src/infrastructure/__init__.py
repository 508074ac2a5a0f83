"""Infrastructure services."""

from .logger_manager import LoggerManager

__all__ = [
    "LoggerManager",
]
