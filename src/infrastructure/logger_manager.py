"""Logging aggregate injected into the domain services."""

import logging


class LoggerManager:
    """Thin wrapper over a stdlib logger exposing the four levels the services use."""

    def __init__(self, name: str = "company_employees") -> None:
        self._logger = logging.getLogger(name)

    def log_debug(self, message: str) -> None:
        self._logger.debug(message)

    def log_info(self, message: str) -> None:
        self._logger.info(message)

    def log_warn(self, message: str) -> None:
        self._logger.warning(message)

    def log_error(self, message: str, exc_info: bool = False) -> None:
        self._logger.error(message, exc_info=exc_info)
