from __future__ import annotations
from collections import deque
from typing import Callable, Deque, List, Tuple
import heapq
import itertools

# Frontiers hold arena indices. Admission is decided by the driver before push().


class FIFOFrontier:
    def __init__(self) -> None:
        self.q: Deque[int] = deque()

    def push(self, ref: int) -> None:
        self.q.append(ref)

    def pop(self) -> int:
        return self.q.popleft()

    def is_empty(self) -> bool:
        return not self.q

    def clear(self) -> None:
        self.q.clear()

    def __len__(self) -> int:
        return len(self.q)


class LIFOFrontier:
    def __init__(self) -> None:
        self.q: List[int] = []

    def push(self, ref: int) -> None:
        self.q.append(ref)

    def pop(self) -> int:
        return self.q.pop()

    def is_empty(self) -> bool:
        return not self.q

    def clear(self) -> None:
        self.q.clear()

    def __len__(self) -> int:
        return len(self.q)


class PriorityFrontier:
    """
    Min-heap by key(ref). The key is computed once, at push time.
    Equal keys pop in insertion order.
    """

    def __init__(self, key: Callable[[int], float]) -> None:
        self.key = key
        self.h: List[Tuple[float, int, int]] = []
        self.counter = itertools.count()

    def push(self, ref: int) -> None:
        heapq.heappush(self.h, (self.key(ref), next(self.counter), ref))

    def pop(self) -> int:
        return heapq.heappop(self.h)[2]

    def is_empty(self) -> bool:
        return not self.h

    def clear(self) -> None:
        self.h.clear()
        self.counter = itertools.count()

    def __len__(self) -> int:
        return len(self.h)
