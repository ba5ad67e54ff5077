"""
Bounded FIFO shared by many producers and the single engine worker

Thin layer over queue.Queue exposing the push/pop contracts the engine
relies on.
"""

from typing import Generic, Optional, Tuple, TypeVar
import queue

T = TypeVar("T")


class BoundedBuffer(Generic[T]):
    """
    Fixed-capacity thread-safe FIFO.

    Producers never block for longer than ``push_timeout``; when the
    buffer stays full for that long the item is refused.
    """

    def __init__(self, capacity: int, push_timeout: float = 0.05):
        """
        Initialize bounded buffer.

        Args:
            capacity: Maximum number of queued items
            push_timeout: Longest time push_with_haste waits on a full buffer
        """
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if push_timeout < 0:
            raise ValueError("push_timeout cannot be negative")
        self._capacity = capacity
        self._push_timeout = push_timeout
        self._queue: "queue.Queue[T]" = queue.Queue(maxsize=capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of items."""
        return self._capacity

    def push_with_haste(self, item: T) -> bool:
        """
        Push an item, waiting at most ``push_timeout`` if the buffer is full.

        Returns:
            True if the item was queued, False if it was dropped
        """
        try:
            self._queue.put_nowait(item)
            return True
        except queue.Full:
            pass

        if self._push_timeout == 0:
            return False
        try:
            self._queue.put(item, timeout=self._push_timeout)
            return True
        except queue.Full:
            return False

    def pop_with_timed_wait(self, timeout: float) -> Tuple[bool, Optional[T]]:
        """
        Pop the oldest item, blocking up to ``timeout`` seconds.

        Returns:
            (True, item) on success, (False, None) on timeout
        """
        try:
            return True, self._queue.get(timeout=timeout)
        except queue.Empty:
            return False, None

    def pop_with_haste(self) -> Tuple[bool, Optional[T]]:
        """
        Pop the oldest item without blocking.

        Returns:
            (True, item) if an item was available, (False, None) otherwise
        """
        try:
            return True, self._queue.get_nowait()
        except queue.Empty:
            return False, None

    def task_done(self) -> None:
        """Mark a popped item as fully processed."""
        self._queue.task_done()

    def join(self) -> None:
        """Block until every pushed item has been marked done."""
        self._queue.join()

    def qsize(self) -> int:
        """Approximate number of queued items."""
        return self._queue.qsize()

    def empty(self) -> bool:
        """Whether the buffer is (approximately) empty."""
        return self._queue.empty()

    def __repr__(self) -> str:
        """String representation."""
        return f"BoundedBuffer(capacity={self._capacity}, size={self.qsize()})"
