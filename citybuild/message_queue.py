"""A thread-safe queue that hands over all pending messages at once."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

__all__ = ["MessageQueue"]

Event = TypeVar("Event")


class MessageQueue(Generic[Event]):
    """Thread-safe message queue.

    Producers push events; a consumer takes every queued event in one go.
    """

    def __init__(self) -> None:
        self._on_event = threading.Condition(threading.Lock())
        self._queue: deque[Event] = deque()

    def push(self, event: Event) -> None:
        """Append *event* and wake every waiting thread."""
        with self._on_event:
            self._queue.append(event)
            self._on_event.notify_all()

    def peek(self) -> bool:
        """Return True if a message is waiting; never blocks."""
        with self._on_event:
            return bool(self._queue)

    def get_enumerable(self) -> deque[Event]:
        """Block until at least one event is queued, then take them all.

        The queue is empty afterwards; the returned deque keeps push order.
        """
        with self._on_event:
            self._on_event.wait_for(lambda: bool(self._queue))
            events, self._queue = self._queue, deque()
            return events