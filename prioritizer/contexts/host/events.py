"""
Host event source.

The host fires events between simulation steps and calls every handler that is
subscribed to the event type. Handlers are stored under a key chosen by the
subscriber, so subscribing twice under the same key replaces the handler
instead of registering it twice.

EventSource is the interface the prioritizing context depends on; EventManager
is the in-memory implementation used by World.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict

from loguru import logger


class EventType(Enum):
    """Host events that scripts can subscribe to."""

    JOB_INITIATED = "job_initiated"  # payload: the new Job
    UNLOAD = "unload"  # no payload


class EventSource(ABC):
    """Subscription interface offered by the host."""

    @abstractmethod
    def enable_event(self, event_type: EventType, frequency: int) -> None:
        """Ask the host to check for events of this type every ``frequency`` ticks."""

    @abstractmethod
    def subscribe(self, event_type: EventType, key: str, handler: Callable) -> None:
        """Register ``handler`` for ``event_type`` under ``key``, replacing any previous one."""

    @abstractmethod
    def unsubscribe(self, event_type: EventType, key: str) -> None:
        """Remove the handler under ``key``. No-op if none is registered."""

    @abstractmethod
    def is_subscribed(self, event_type: EventType, key: str) -> bool:
        """Whether a handler is registered for ``event_type`` under ``key``."""


class EventManager(EventSource):
    """In-process event source with keyed handler tables per event type."""

    def __init__(self):
        self._handlers: Dict[EventType, Dict[str, Callable]] = {
            event_type: {} for event_type in EventType
        }
        self.frequencies: Dict[EventType, int] = {}

    def enable_event(self, event_type: EventType, frequency: int) -> None:
        if frequency < 1:
            raise ValueError(f"Event frequency must be at least 1, got: {frequency}")
        # Keep the most frequent polling any subscriber asked for
        current = self.frequencies.get(event_type)
        if current is None or frequency < current:
            self.frequencies[event_type] = frequency

    def is_enabled(self, event_type: EventType) -> bool:
        return event_type in self.frequencies

    def subscribe(self, event_type: EventType, key: str, handler: Callable) -> None:
        self._handlers[event_type][key] = handler

    def unsubscribe(self, event_type: EventType, key: str) -> None:
        self._handlers[event_type].pop(key, None)

    def is_subscribed(self, event_type: EventType, key: str) -> bool:
        return key in self._handlers[event_type]

    def dispatch(self, event_type: EventType, *payload) -> int:
        """
        Call every handler registered for ``event_type``.

        Dispatch iterates over a snapshot of the handler table, so handlers may
        unsubscribe themselves (or others) while the event is being delivered.
        Events that were never enabled are not delivered.

        Returns:
            Number of handlers called
        """
        if not self.is_enabled(event_type):
            logger.debug(f"Dropping {event_type.value} event: not enabled")
            return 0

        handlers = list(self._handlers[event_type].values())
        for handler in handlers:
            handler(*payload)
        return len(handlers)
