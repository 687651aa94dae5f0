# src/testcommander/runtime/notifications.py

"""
Fire-and-forget broadcast streams for discovery and run notifications.

Subscribers only see values published after they subscribe; nothing is
buffered or replayed.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

import structlog

from testcommander.telemetry import StructLogger

log: StructLogger = structlog.get_logger("runtime.notifications")

T = TypeVar("T")


class EventStream(Generic[T]):
    """A single-producer stream that calls every subscribed handler on publish."""

    def __init__(self, name: str):
        self.name = name
        self._handlers: dict[int, Callable[[T], None]] = {}
        self._next_id = 0

    def subscribe(self, handler: Callable[[T], None]) -> int:
        """Registers ``handler`` and returns a token for :meth:`unsubscribe`."""
        token = self._next_id
        self._next_id += 1
        self._handlers[token] = handler
        log.debug("Subscriber added", stream=self.name, token=token)
        return token

    def unsubscribe(self, token: int) -> bool:
        removed = self._handlers.pop(token, None) is not None
        if not removed:
            log.debug("Unknown subscription token", stream=self.name, token=token)
        return removed

    def publish(self, value: T) -> None:
        for token, handler in list(self._handlers.items()):
            try:
                handler(value)
            except Exception as e:
                # One broken subscriber must not starve the others.
                log.warning(
                    "Subscriber raised while handling notification",
                    stream=self.name,
                    token=token,
                    error=str(e),
                    exc_info=True,
                )

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)


class NotificationHub:
    """The two streams consumers can listen on."""

    def __init__(self) -> None:
        self.discovery_results: EventStream[list[str]] = EventStream("discovery_results")
        self.test_run_started: EventStream[str] = EventStream("test_run_started")
