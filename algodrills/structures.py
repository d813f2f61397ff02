"""Containers and node types shared by the exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class BTNode:
    """Binary tree node. Nodes compare and hash by identity."""

    val: Any = None
    left: BTNode | None = field(default=None, repr=False)
    right: BTNode | None = field(default=None, repr=False)


@dataclass(eq=False)
class LinkNode:
    """Singly linked list node."""

    val: Any = None
    next: LinkNode | None = field(default=None, repr=False)


@dataclass(eq=False)
class BiLinkNode:
    """Doubly linked list node."""

    val: Any = None
    next: BiLinkNode | None = field(default=None, repr=False)
    pre: BiLinkNode | None = field(default=None, repr=False)


@dataclass(eq=False)
class LinkNodeWithRand:
    """Linked list node with an extra pointer to any node of the list."""

    val: Any = None
    next: LinkNodeWithRand | None = field(default=None, repr=False)
    rand: LinkNodeWithRand | None = field(default=None, repr=False)


@dataclass(eq=False)
class HeapNode:
    """Node of a pointer-based heap."""

    val: Any = None
    par: HeapNode | None = field(default=None, repr=False)
    left: HeapNode | None = field(default=None, repr=False)
    right: HeapNode | None = field(default=None, repr=False)


class Deque(Generic[T]):
    """Double-ended queue; ``buf_size`` is the block size hint and must be positive."""

    def __init__(self, buf_size: int) -> None:
        if buf_size < 1:
            raise ValueError("buf_size must be positive")
        self.buf_size = buf_size
        self._items: deque[T] = deque()

    def push_front(self, x: T) -> None:
        self._items.appendleft(x)

    def push_back(self, x: T) -> None:
        self._items.append(x)

    def pop_front(self) -> None:
        """Drop the front element; does nothing when empty."""
        if self._items:
            self._items.popleft()

    def pop_back(self) -> None:
        """Drop the back element; does nothing when empty."""
        if self._items:
            self._items.pop()

    def front(self) -> T:
        if not self._items:
            raise IndexError("deque is empty")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise IndexError("deque is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self) -> None:
        self._parent: dict[Any, Any] = {}
        self._rank: dict[Any, int] = {}

    def make_set(self, x: Any) -> None:
        self._parent[x] = x
        self._rank[x] = 0

    def find(self, x: Any) -> Any:
        """Return the representative of ``x``; unknown elements become singletons."""
        if x not in self._parent:
            self.make_set(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            nxt = self._parent[x]
            self._parent[x] = root
            x = nxt
        return root

    def union(self, x: Any, y: Any) -> None:
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return
        if self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_x] = root_y
            if self._rank[root_x] == self._rank[root_y]:
                self._rank[root_y] += 1

    def is_same_set(self, x: Any, y: Any) -> bool:
        return self.find(x) == self.find(y)


class PriorityQueue(Generic[T]):
    """Binary heap whose top is the element ``compare`` ranks highest.

    ``compare(a, b)`` is negative when ``a`` ranks below ``b``.
    """

    def __init__(self, compare: Callable[[T, T], int]) -> None:
        self._compare = compare
        self._data: list[T] = []

    def push(self, x: T) -> None:
        self._data.append(x)
        self._sift_up(len(self._data) - 1)

    def top(self) -> T:
        if not self._data:
            raise IndexError("empty priority queue")
        return self._data[0]

    def pop(self) -> None:
        """Drop the top element; does nothing when empty."""
        if not self._data:
            return
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()

    def __iter__(self) -> Iterator[T]:
        """Iterate in heap order, not in rank order."""
        return iter(list(self._data))

    def _sift_up(self, index: int) -> None:
        data, compare = self._data, self._compare
        while index > 0:
            parent = (index - 1) // 2
            if compare(data[parent], data[index]) >= 0:
                return
            data[parent], data[index] = data[index], data[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        data, compare = self._data, self._compare
        size = len(data)
        while True:
            left = index * 2 + 1
            right = left + 1
            if left >= size:
                return
            if right >= size or compare(data[left], data[right]) > 0:
                child = left
            else:
                child = right
            if compare(data[index], data[child]) >= 0:
                return
            data[index], data[child] = data[child], data[index]
            index = child


class Queue(Generic[T]):
    """FIFO queue; ``size`` is the initial capacity hint and must be positive."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._items: deque[T] = deque()

    def enqueue(self, x: T) -> None:
        self._items.append(x)

    def dequeue(self) -> None:
        """Drop the front element; does nothing when empty."""
        if self._items:
            self._items.popleft()

    def front(self) -> T:
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def rear(self) -> T:
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()


class Stack(Generic[T]):
    """LIFO stack; ``size`` is the initial capacity hint and must not be negative."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[T] = []

    def push(self, x: T) -> None:
        self._items.append(x)

    def pop(self) -> None:
        """Drop the top element; does nothing when empty."""
        if self._items:
            self._items.pop()

    def top(self) -> T:
        if not self._items:
            raise IndexError("empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()