from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, List, TypeVar

T = TypeVar("T")


class AttendanceBuffer(Generic[T]):
    """Thread-safe FIFO hand-off between acceptance and the durable store.

    Every enqueued item comes out of exactly one ``drain`` call, in enqueue order.
    Items still buffered when the process dies are lost; durability belongs to
    the store.
    """

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()

    def enqueue(self, item: T) -> None:
        with self._lock:
            self._items.append(item)

    def drain(self) -> List[T]:
        """Remove and return everything buffered, oldest first."""
        with self._lock:
            drained = list(self._items)
            self._items.clear()
        return drained

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
