"""
Binary heap priority queue.

The queue is a max-heap stored in a flat list: the children of index i live
at 2i+1 and 2i+2 and its parent at (i-1)//2. Insertion and removal are both
O(log n), as opposed to an unordered list where popping the maximum is O(n).

Used by: uniform-cost search (through MinPriorityQueue)
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

T = TypeVar('T')


@dataclass
class QueueItem(Generic[T]):
    """
    A payload paired with its priority.

    Attributes:
        item: The stored payload
        weight: Priority of the payload (larger pops first)
    """
    item: T
    weight: float


class PriorityQueue(Generic[T]):
    """
    Max-priority queue backed by a binary heap.

    Ties are not reordered: an entry only moves past another when its weight
    is strictly greater, so equal priorities have no defined secondary order.

    Example:
        >>> queue = PriorityQueue()
        >>> queue.add('low', 1)
        >>> queue.add('high', 10)
        >>> queue.pop()
        'high'
    """

    def __init__(self):
        self._heap: List[QueueItem[T]] = []

    def add(self, item: T, priority: float) -> None:
        """
        Insert an item, then sift it up until its parent is not smaller.

        Args:
            item: Payload to store
            priority: Numeric priority (larger means popped sooner)
        """
        self._heap.append(QueueItem(item, priority))
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Optional[T]:
        """
        Remove and return the highest-priority item.

        The tail entry is moved into the root slot and sifted down.

        Returns:
            The highest-priority payload, or None if the queue is empty
        """
        if not self._heap:
            return None

        result = self._heap[0]
        last = self._heap.pop()
        if not self._heap:
            return result.item

        self._heap[0] = last
        self._sift_down(0)
        return result.item

    def peek(self) -> Optional[T]:
        """Return the highest-priority item without removing it (None if empty)."""
        if not self._heap:
            return None
        return self._heap[0].item

    def peek_priority(self) -> Optional[float]:
        """Return the priority of the root entry (None if empty)."""
        if not self._heap:
            return None
        return self._heap[0].weight

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return len(self._heap) == 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._is_greater(index, parent):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * index + 1
            right = 2 * index + 2

            left_wins = left < size and self._is_greater(left, index)
            right_wins = right < size and self._is_greater(right, index)
            if not (left_wins or right_wins):
                break

            # Greater child wins; equal children favour the left one
            if right < size and self._is_greater(right, left):
                target = right
            else:
                target = left

            self._swap(index, target)
            index = target

    def _is_greater(self, index_a: int, index_b: int) -> bool:
        return self._heap[index_a].weight > self._heap[index_b].weight

    def _swap(self, index_a: int, index_b: int) -> None:
        self._heap[index_a], self._heap[index_b] = self._heap[index_b], self._heap[index_a]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._heap)})"


class MinPriorityQueue(PriorityQueue[T]):
    """
    Min-priority queue built on the max-heap by negating priorities.

    The lowest priority is popped first. peek_priority() reports the
    priority as it was passed to add().
    """

    def add(self, item: T, priority: float) -> None:
        super().add(item, -priority)

    def peek_priority(self) -> Optional[float]:
        weight = super().peek_priority()
        return None if weight is None else -weight
