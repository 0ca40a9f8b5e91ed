from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

from utilities.arrays import elem_urank

T = TypeVar('T', bound=Hashable)


class EmptyQueueError(IndexError):
    pass


class ItemNotFoundError(KeyError):
    pass


class Entry(Generic[T]):
    __slots__ = ('item', 'priority')

    item: T
    priority: float

    def __init__(self, item: T, priority: float):
        self.item = item
        self.priority = priority

    def __lt__(self, other: Entry[T]) -> bool:
        return self.priority < other.priority

    def __repr__(self):
        return f"<{self.item}:{self.priority}>"


class PriorityQueue(ABC, Generic[T]):
    """
    A min-priority queue whose entries are addressed by their item.
    Items are used as dictionary keys, so they have to be hashable and no item is queued twice.

    Both implementations keep the entry with the minimal priority at position 0 of `_entries`
    and maintain `_handles`, which maps every queued item to the position of its entry.
    Every method moving an entry has to update `_handles` for the moved item.
    """

    _entries: List[Entry[T]]
    _handles: Dict[T, int]

    def __init__(self, initial: Optional[Iterable[Tuple[T, float]]] = None):
        self._entries = []
        self._handles = {}
        if initial:
            for item, key in initial:
                self.push(item, key)

    def push(self, item: T, key: float):
        """
        Inserts item with the given key.
        If item is already queued, this has the same effect as `decrease_key`.
        """
        if self.has(item):
            self.decrease_key(item, key)
        else:
            self._insert(item, key)

    @abstractmethod
    def _insert(self, item: T, key: float):
        pass

    @abstractmethod
    def pop(self) -> T:
        pass

    @abstractmethod
    def decrease_key(self, item: T, key: float):
        """
        Lowers the key of a queued item. Keys that are not strictly lower than the current one
        are ignored. Raises ItemNotFoundError if item is not queued.
        """
        pass

    @abstractmethod
    def sorted(self) -> List[T]:
        pass

    def next(self) -> T:
        if len(self._entries) == 0:
            raise EmptyQueueError("next of an empty priority queue")
        return self._entries[0].item

    def min_key(self) -> float:
        if len(self._entries) == 0:
            raise EmptyQueueError("min_key of an empty priority queue")
        return self._entries[0].priority

    def key_of(self, item: T) -> float:
        return self._entries[self._position(item)].priority

    def has(self, item: T) -> bool:
        return item in self._handles

    def _position(self, item: T) -> int:
        try:
            return self._handles[item]
        except KeyError:
            raise ItemNotFoundError(item) from None

    def __contains__(self, item: T) -> bool:
        return self.has(item)

    def __len__(self) -> int:
        return self._entries.__len__()

    def __repr__(self):
        return f"{self.__class__.__name__}({self._entries})"


class BinaryHeapQueue(PriorityQueue[T]):
    """
    This is a min-heap queue with decrease-key operation.
    `_entries` is read as a complete binary tree: the children of position i are at 2i+1 and 2i+2.
    Thanks to `_handles`, `has`, `key_of` and `decrease_key` find an entry without scanning the heap.
    """

    @staticmethod
    def left(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def right(i: int) -> int:
        return 2 * i + 2

    @staticmethod
    def parent(i: int) -> int:
        return (i - 1) // 2

    def _insert(self, item: T, key: float):
        self._entries.append(Entry(item, key))
        self._handles[item] = len(self._entries) - 1
        self._sift_up(len(self._entries) - 1)

    def pop(self) -> T:
        if len(self._entries) == 0:
            raise EmptyQueueError("pop from an empty priority queue")
        root = self._entries[0]
        last = self._entries.pop()
        del self._handles[root.item]

        if self._entries:
            self._entries[0] = last
            self._handles[last.item] = 0
            self._sift_down(0)
        return root.item

    def decrease_key(self, item: T, key: float):
        pos = self._position(item)
        entry = self._entries[pos]
        if key < entry.priority:
            entry.priority = key
            self._sift_up(pos)

    def sorted(self) -> List[T]:
        return [entry.item for entry in sorted(self._entries)]

    def _swap(self, i: int, j: int):
        self._entries[i], self._entries[j] = self._entries[j], self._entries[i]
        self._handles[self._entries[i].item] = i
        self._handles[self._entries[j].item] = j

    def _sift_up(self, pos: int):
        # Follow the path to the root, as long as the entry is smaller than its parent.
        while pos > 0:
            parent = self.parent(pos)
            if not self._entries[pos] < self._entries[parent]:
                return
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int):
        size = len(self._entries)
        while True:
            smallest = pos
            left = self.left(pos)
            right = self.right(pos)
            if left < size and self._entries[left] < self._entries[smallest]:
                smallest = left
            if right < size and self._entries[right] < self._entries[smallest]:
                smallest = right
            if smallest == pos:
                return
            self._swap(pos, smallest)
            pos = smallest


class SortedArrayQueue(PriorityQueue[T]):
    """
    A priority queue keeping its entries sorted by ascending priority.
    `min_key` and `next` read the first entry; insertions and pops shift the entries behind
    the affected position and rewrite their handles, which costs O(n) in the worst case.
    Entries with equal priorities leave the queue in the order they were inserted.
    """

    def _insert(self, item: T, key: float):
        pos = elem_urank(self._entries, key, key=lambda entry: entry.priority)
        self._entries.insert(pos, Entry(item, key))
        self._update_handles(pos, len(self._entries))

    def pop(self) -> T:
        if len(self._entries) == 0:
            raise EmptyQueueError("pop from an empty priority queue")
        entry = self._entries.pop(0)
        del self._handles[entry.item]
        self._update_handles(0, len(self._entries))
        return entry.item

    def decrease_key(self, item: T, key: float):
        pos = self._position(item)
        if not key < self._entries[pos].priority:
            return
        old_pos = pos
        self._entries[pos].priority = key
        # Move the entry backwards until its predecessor is not larger anymore.
        while pos > 0 and key < self._entries[pos - 1].priority:
            self._entries[pos - 1], self._entries[pos] = self._entries[pos], self._entries[pos - 1]
            pos -= 1
        self._update_handles(pos, old_pos + 1)

    def sorted(self) -> List[T]:
        return [entry.item for entry in self._entries]

    def _update_handles(self, start: int, end: int):
        """
        Rewrites the handles of the entries at positions start, ..., end - 1.
        """
        for i in range(start, end):
            self._handles[self._entries[i].item] = i


class QueueType(Enum):
    BINARY_HEAP = 0
    SORTED_ARRAY = 1


def build_queue(queue_type: QueueType) -> PriorityQueue:
    if queue_type == QueueType.BINARY_HEAP:
        return BinaryHeapQueue()
    elif queue_type == QueueType.SORTED_ARRAY:
        return SortedArrayQueue()
    raise ValueError(f"Unknown queue type {queue_type}.")
