"""Intent and handler abstractions for the dispatcher.

Intents are the objects controllers hand to the dispatcher:
- ``Command`` and ``Query`` are requests: exactly one handler, one result.
- ``Notification`` is an announcement: zero or more listeners, no result.

Concrete intents are declared as ``@dataclass(frozen=True)`` subclasses so
they are immutable and compare structurally.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TResult = TypeVar("TResult")


class Request(Generic[TResult]):
    """Base class of every intent that expects a result."""


class Command(Request[TResult]):
    """Represents an intent to change state."""


class Query(Request[TResult]):
    """Represents an intent to read state."""


class Notification:
    """Represents something that happened, broadcast to every listener."""


TRequest = TypeVar("TRequest", bound=Request)
TCommand = TypeVar("TCommand", bound=Command)
TQuery = TypeVar("TQuery", bound=Query)
TNotification = TypeVar("TNotification", bound=Notification)


class RequestHandler(Generic[TRequest, TResult], ABC):
    """Handles one request type and produces its result."""

    @abstractmethod
    async def handle_async(self, request: TRequest) -> TResult:
        raise NotImplementedError()


class CommandHandler(RequestHandler[TCommand, TResult], ABC):
    """Represents the base class of all command handlers."""


class QueryHandler(RequestHandler[TQuery, TResult], ABC):
    """Represents the base class of all query handlers."""


class NotificationHandler(Generic[TNotification], ABC):
    """Listens to one notification type."""

    @abstractmethod
    async def handle_async(self, notification: TNotification) -> None:
        raise NotImplementedError()
