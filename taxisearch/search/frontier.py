"""Frontier containers used by the search strategies."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Deque, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class FifoFrontier(Generic[T]):
    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.popleft()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class LifoFrontier(Generic[T]):
    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class PriorityFrontier(Generic[T]):
    """Min-heap on priority; equal priorities pop in insertion order."""

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (float(priority), next(self._counter), item))

    def pop(self) -> T:
        _, _, item = heapq.heappop(self._heap)
        return item

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["FifoFrontier", "LifoFrontier", "PriorityFrontier"]
