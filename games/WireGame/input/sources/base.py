"""
Base Input Source - Abstract interface for direction input backends.
"""
from abc import ABC, abstractmethod
from typing import List

from models.wire import Direction


class InputSource(ABC):
    """Abstract base class for direction input sources.

    Sources translate device events into Direction values. The game
    decides whether to accept them.
    """

    def __init__(self):
        self._queue: List[Direction] = []

    @abstractmethod
    def handle_event(self, event) -> bool:
        """Offer one device event to the source.

        Returns:
            True if the event was consumed as a direction
        """

    def poll_events(self) -> List[Direction]:
        """Directions collected since the last poll, oldest first."""
        events = self._queue.copy()
        self._queue.clear()
        return events

    def clear(self) -> None:
        """Drop any collected directions."""
        self._queue.clear()
