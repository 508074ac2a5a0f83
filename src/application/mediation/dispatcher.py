"""Request dispatcher and its handler registry.

The registry is populated once while the application starts, then frozen when
the ``Dispatcher`` is built from it. From then on it is read-only and safe to
share between concurrent requests.
"""

import logging
import time
from collections import defaultdict
from typing import Any, Iterable, TypeVar, get_args, get_origin

from opentelemetry import trace

from observability import add_span_attributes, listener_failures, request_processing_time

from .abstractions import Notification, NotificationHandler, Request, RequestHandler
from .exceptions import DuplicateHandlerRegistration, ListenerError, ListenerFailure, NoHandlerRegistered, RegistryFrozenError

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

TResult = TypeVar("TResult")


def resolve_handled_type(handler: RequestHandler | NotificationHandler) -> type:
    """Return the intent type a handler declares through its generic base.

    ``class CreateCompanyCommandHandler(CommandHandler[CreateCompanyCommand, CompanyDto])``
    handles ``CreateCompanyCommand``.
    """
    for cls in type(handler).__mro__:
        for base in getattr(cls, "__orig_bases__", ()):
            origin = get_origin(base)
            if not isinstance(origin, type) or not issubclass(origin, (RequestHandler, NotificationHandler)):
                continue
            args = get_args(base)
            if args and isinstance(args[0], type):
                return args[0]
    raise TypeError(f"Cannot determine the intent type handled by '{type(handler).__name__}'; register it explicitly")


class DispatcherRegistry:
    """Maps request types to their single handler and notification types to their listeners."""

    def __init__(self) -> None:
        self._request_handlers: dict[type, RequestHandler] = {}
        self._notification_handlers: dict[type, list[NotificationHandler]] = defaultdict(list)
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_request_handler(self, request_type: type, handler: RequestHandler) -> "DispatcherRegistry":
        """Bind the single handler of a command or query type."""
        self._ensure_not_frozen()
        if not (isinstance(request_type, type) and issubclass(request_type, Request)):
            raise TypeError(f"'{request_type}' is not a Command or Query type")
        existing = self._request_handlers.get(request_type)
        if existing is not None:
            raise DuplicateHandlerRegistration(request_type, existing, handler)
        self._request_handlers[request_type] = handler
        log.debug(f"Registered {type(handler).__name__} for {request_type.__name__}")
        return self

    def add_notification_handler(self, notification_type: type, handler: NotificationHandler) -> "DispatcherRegistry":
        """Append a listener for a notification type; listeners run in registration order."""
        self._ensure_not_frozen()
        if not (isinstance(notification_type, type) and issubclass(notification_type, Notification)):
            raise TypeError(f"'{notification_type}' is not a Notification type")
        self._notification_handlers[notification_type].append(handler)
        log.debug(f"Registered listener {type(handler).__name__} for {notification_type.__name__}")
        return self

    def register(self, handler: RequestHandler | NotificationHandler) -> "DispatcherRegistry":
        """Register a handler under the intent type declared by its generic base."""
        handled_type = resolve_handled_type(handler)
        if isinstance(handler, NotificationHandler):
            return self.add_notification_handler(handled_type, handler)
        return self.add_request_handler(handled_type, handler)

    def register_all(self, handlers: Iterable[RequestHandler | NotificationHandler]) -> "DispatcherRegistry":
        for handler in handlers:
            self.register(handler)
        return self

    def require(self, *request_types: type) -> None:
        """Fail fast if any of the given request types has no handler."""
        for request_type in request_types:
            if request_type not in self._request_handlers:
                raise NoHandlerRegistered(request_type)

    def get_request_handler(self, request_type: type) -> RequestHandler:
        handler = self._request_handlers.get(request_type)
        if handler is None:
            raise NoHandlerRegistered(request_type)
        return handler

    def get_notification_handlers(self, notification_type: type) -> list[NotificationHandler]:
        return list(self._notification_handlers.get(notification_type, ()))

    def describe(self) -> dict[str, Any]:
        """Summarize the bindings, for startup logging."""
        return {
            "requests": {t.__name__: type(h).__name__ for t, h in self._request_handlers.items()},
            "notifications": {t.__name__: [type(h).__name__ for h in hs] for t, hs in self._notification_handlers.items()},
        }

    def freeze(self) -> None:
        self._frozen = True

    def _ensure_not_frozen(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("The dispatcher registry is frozen; register handlers before building the dispatcher")


class Dispatcher:
    """Routes commands and queries to their handler and notifications to their listeners."""

    def __init__(self, registry: DispatcherRegistry) -> None:
        registry.freeze()
        self.registry = registry

    async def send_async(self, request: Request[TResult]) -> TResult:
        """Invoke the single handler bound to the request's type and return its result.

        Raises:
            TypeError: If ``request`` is not a Command or Query
            NoHandlerRegistered: If no handler is bound to the request's type
        """
        if not isinstance(request, Request):
            raise TypeError(f"send_async expects a Command or Query, got '{type(request).__name__}'")
        request_type = type(request)
        handler = self.registry.get_request_handler(request_type)

        with tracer.start_as_current_span(f"dispatcher.send {request_type.__name__}"):
            add_span_attributes(
                {
                    "dispatcher.request_type": request_type.__name__,
                    "dispatcher.handler": type(handler).__name__,
                }
            )
            log.debug(f"Dispatching {request_type.__name__} to {type(handler).__name__}")
            start_time = time.time()
            try:
                return await handler.handle_async(request)
            finally:
                request_processing_time.record((time.time() - start_time) * 1000, {"request_type": request_type.__name__})

    async def publish_async(self, notification: Notification) -> None:
        """Invoke every listener bound to the notification's type, one after the other.

        A failing listener does not prevent the remaining ones from running.
        Once all listeners ran, failures are raised together as ``ListenerFailure``.
        """
        if not isinstance(notification, Notification):
            raise TypeError(f"publish_async expects a Notification, got '{type(notification).__name__}'")
        notification_type = type(notification)
        listeners = self.registry.get_notification_handlers(notification_type)
        if not listeners:
            log.debug(f"No listeners registered for {notification_type.__name__}")
            return

        failures: list[ListenerError] = []
        with tracer.start_as_current_span(f"dispatcher.publish {notification_type.__name__}"):
            add_span_attributes(
                {
                    "dispatcher.notification_type": notification_type.__name__,
                    "dispatcher.listener_count": len(listeners),
                }
            )
            for listener in listeners:
                listener_name = type(listener).__name__
                try:
                    await listener.handle_async(notification)
                except Exception as e:
                    log.exception(f"Listener {listener_name} failed handling {notification_type.__name__}: {e}")
                    listener_failures.add(1, {"listener": listener_name, "notification_type": notification_type.__name__})
                    failures.append(ListenerError(listener=listener_name, notification_type=notification_type.__name__, error=e))

        if failures:
            raise ListenerFailure(notification, failures)
