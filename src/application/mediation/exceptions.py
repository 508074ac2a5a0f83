"""Dispatcher errors."""

from dataclasses import dataclass


class DispatchError(Exception):
    """Base class for dispatcher errors."""


class NoHandlerRegistered(DispatchError):
    """Raised when a request type has no handler bound to it."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for request type '{request_type.__name__}'")
        self.request_type = request_type


class DuplicateHandlerRegistration(DispatchError):
    """Raised at startup when a second handler is bound to a request type."""

    def __init__(self, request_type: type, existing: object, duplicate: object) -> None:
        super().__init__(
            f"Request type '{request_type.__name__}' is already handled by '{type(existing).__name__}'; "
            f"cannot also register '{type(duplicate).__name__}'"
        )
        self.request_type = request_type


class RegistryFrozenError(DispatchError):
    """Raised when registering into a registry that already backs a dispatcher."""


@dataclass(frozen=True)
class ListenerError:
    """One listener that raised while handling a notification."""

    listener: str
    notification_type: str
    error: Exception

    def __str__(self) -> str:
        return f"{self.listener}: {type(self.error).__name__}: {self.error}"


class ListenerFailure(DispatchError):
    """Raised by ``publish_async`` after every listener ran, if any of them failed."""

    def __init__(self, notification: object, failures: list[ListenerError]) -> None:
        details = "; ".join(str(failure) for failure in failures)
        super().__init__(f"{len(failures)} listener(s) failed handling '{type(notification).__name__}': {details}")
        self.notification = notification
        self.failures = failures
