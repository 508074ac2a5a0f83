"""Mediated dispatch of commands, queries and notifications."""

from .abstractions import Command, CommandHandler, Notification, NotificationHandler, Query, QueryHandler, Request, RequestHandler
from .dispatcher import Dispatcher, DispatcherRegistry, resolve_handled_type
from .exceptions import DispatchError, DuplicateHandlerRegistration, ListenerError, ListenerFailure, NoHandlerRegistered, RegistryFrozenError

__all__ = [
    # Intents
    "Request",
    "Command",
    "Query",
    "Notification",
    # Handlers
    "RequestHandler",
    "CommandHandler",
    "QueryHandler",
    "NotificationHandler",
    # Dispatcher
    "Dispatcher",
    "DispatcherRegistry",
    "resolve_handled_type",
    # Errors
    "DispatchError",
    "NoHandlerRegistered",
    "DuplicateHandlerRegistration",
    "RegistryFrozenError",
    "ListenerError",
    "ListenerFailure",
]
