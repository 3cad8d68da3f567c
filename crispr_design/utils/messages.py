"""
Bounded in-memory log of recent messages.

A MessageBuffer is an ordinary object: create one, hand it to whatever
should record into it, and read it back. BufferHandler plugs a buffer
into the logging module.
"""

import logging
from collections import deque
from typing import Deque, List

DEFAULT_CAPACITY = 100


class MessageBuffer:
    """Keeps the most recent ``capacity`` messages, oldest dropped first."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._messages: Deque[str] = deque(maxlen=capacity)

    def add(self, message: str) -> None:
        self._messages.append(message)

    def messages(self) -> List[str]:
        """Snapshot of buffered messages, oldest first."""
        return list(self._messages)

    def clear(self) -> None:
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)


class BufferHandler(logging.Handler):
    """Logging handler that appends formatted records to a MessageBuffer."""

    def __init__(self, buffer: MessageBuffer, level=logging.NOTSET):
        super().__init__(level)
        self.buffer = buffer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.buffer.add(self.format(record))
        except Exception:
            self.handleError(record)
