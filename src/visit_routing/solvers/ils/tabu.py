"""
Bounded tabu memory of recently visited tours.

Stores tour signatures in insertion order and forgets the oldest once the
capacity is reached. Membership is structural: two tours match when every
position holds the same city.
"""

from collections import Counter, deque
from typing import Deque, Sequence, Tuple

from ...core.errors import ConfigurationError


class TabuHistory:
    """
    Fixed-capacity FIFO memory of tours.

    A capacity of 0 disables the memory: nothing is stored and no tour is
    ever reported as tabu.

    Attributes:
        capacity: Maximum number of remembered tours
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ConfigurationError(f"tabu capacity must be non-negative, got {capacity}")
        self._capacity = int(capacity)
        self._queue: Deque[Tuple[int, ...]] = deque()
        # Multiset, the same tour may be pushed more than once
        self._counts: Counter = Counter()

    @property
    def capacity(self) -> int:
        return self._capacity

    def contains(self, tour: Sequence[int]) -> bool:
        """Check whether a tour is currently remembered."""
        return self._counts[tuple(tour)] > 0

    def push(self, tour: Sequence[int]) -> None:
        """
        Remember a tour, evicting the oldest entry when full.

        Args:
            tour: Tour to remember (copied)
        """
        if self._capacity == 0:
            return

        if len(self._queue) >= self._capacity:
            oldest = self._queue.popleft()
            self._counts[oldest] -= 1
            if self._counts[oldest] <= 0:
                del self._counts[oldest]

        key = tuple(tour)
        self._queue.append(key)
        self._counts[key] += 1

    def clear(self) -> None:
        """Forget every remembered tour."""
        self._queue.clear()
        self._counts.clear()

    def __contains__(self, tour: Sequence[int]) -> bool:
        return self.contains(tour)

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"TabuHistory({len(self._queue)}/{self._capacity})"
