"""Capacity-bounded event log with oldest-first eviction."""

from __future__ import annotations

from route_telemetry.config import CAPACITY
from route_telemetry.types import ExecutionEvent


class EventLog:
    """Fixed-capacity ring buffer of execution events.

    Slots are preallocated once. When the buffer is full, `append` overwrites
    the oldest slot and advances the head, so the retained events are always
    the most recent `capacity` in insertion order.
    """

    def __init__(self, capacity: int = CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._slots: list[ExecutionEvent | None] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def append(self, event: ExecutionEvent) -> None:
        tail = (self._head + self._size) % self._capacity
        self._slots[tail] = event
        if self._size < self._capacity:
            self._size += 1
        else:
            self._head = (self._head + 1) % self._capacity

    def snapshot(self) -> tuple[ExecutionEvent, ...]:
        """Return current contents, oldest first, as an immutable tuple."""
        end = self._head + self._size
        if end <= self._capacity:
            window = self._slots[self._head : end]
        else:
            window = self._slots[self._head :] + self._slots[: end - self._capacity]
        return tuple(event for event in window if event is not None)

    def tail(self, limit: int) -> tuple[ExecutionEvent, ...]:
        if limit <= 0:
            return ()
        return self.snapshot()[-limit:]
