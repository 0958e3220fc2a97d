"""
Command and query buses.

Each message type is routed to exactly one handler. Handlers are plain
objects exposing handle(message); the bus neither validates nor retries.
"""
import logging
from typing import Any, Dict, Protocol

logger = logging.getLogger(__name__)


class MessageHandler(Protocol):

    def handle(self, message: Any) -> Any:
        ...


class BusError(Exception):
    """Base error for bus operations."""


class NoHandlerRegistered(BusError):
    """No handler registered for the dispatched message type."""

    def __init__(self, bus_name: str, message_type: str):
        self.bus_name = bus_name
        self.message_type = message_type
        super().__init__(
            f"No handler registered on the {bus_name} bus for '{message_type}'."
        )


class HandlerAlreadyRegistered(BusError):

    def __init__(self, bus_name: str, message_type: str):
        self.bus_name = bus_name
        self.message_type = message_type
        super().__init__(
            f"A handler is already registered on the {bus_name} bus for '{message_type}'."
        )


class MessageBus:
    name = 'message'

    def __init__(self):
        self._handlers: Dict[type, MessageHandler] = {}

    def register(self, message_type: type, handler: MessageHandler) -> None:
        if message_type in self._handlers:
            raise HandlerAlreadyRegistered(self.name, message_type.__name__)
        self._handlers[message_type] = handler

    def has_handler(self, message_type: type) -> bool:
        return message_type in self._handlers

    def handle(self, message: Any) -> Any:
        handler = self._handlers.get(type(message))
        if handler is None:
            raise NoHandlerRegistered(self.name, type(message).__name__)

        logger.debug(
            "%s bus dispatching %s to %s",
            self.name, type(message).__name__, type(handler).__name__,
        )
        return handler.handle(message)


class CommandBus(MessageBus):
    """Routes a mutation to its handler; returns the handler's result (e.g. a new id)."""
    name = 'command'


class QueryBus(MessageBus):
    """Routes a read request to its handler; returns a read-only projection."""
    name = 'query'
