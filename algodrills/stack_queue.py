"""Stack and queue exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from algodrills.structures import BTNode, Stack


class StackWithMin:
    """Stack with O(1) access to its minimum."""

    def __init__(self) -> None:
        self._data: Stack[int] = Stack(0)
        self._mins: Stack[int] = Stack(0)

    def push(self, x: int) -> None:
        self._data.push(x)
        self._mins.push(x if not self._mins else min(x, self._mins.top()))

    def pop(self) -> int:
        if not self._data:
            raise IndexError("stack is empty")
        value = self._data.top()
        self._data.pop()
        self._mins.pop()
        return value

    def top(self) -> int:
        if not self._data:
            raise IndexError("stack is empty")
        return self._data.top()

    def get_min(self) -> int:
        if not self._mins:
            raise IndexError("stack is empty")
        return self._mins.top()


def _transfer(source: Stack, target: Stack) -> None:
    while source:
        target.push(source.top())
        source.pop()


class QueueByStack:
    """FIFO queue built from two stacks."""

    def __init__(self) -> None:
        self._main: Stack[int] = Stack(0)
        self._help: Stack[int] = Stack(0)

    def push(self, x: int) -> None:
        self._main.push(x)

    def pop(self) -> int:
        if not self._main:
            raise IndexError("queue is empty")
        _transfer(self._main, self._help)
        value = self._help.top()
        self._help.pop()
        _transfer(self._help, self._main)
        return value

    def peek(self) -> int:
        if not self._main:
            raise IndexError("queue is empty")
        _transfer(self._main, self._help)
        value = self._help.top()
        _transfer(self._help, self._main)
        return value


def _insert_sorted(stack: Stack[int], value: int) -> None:
    if not stack or value >= stack.top():
        stack.push(value)
        return
    top = stack.top()
    stack.pop()
    _insert_sorted(stack, value)
    stack.push(top)


def sort_stack(stack: Stack[int]) -> Stack[int]:
    """Empty ``stack`` into a new stack whose largest value is on top (recursive insert)."""
    result: Stack[int] = Stack(len(stack))
    while stack:
        value = stack.top()
        stack.pop()
        _insert_sorted(result, value)
    return result


def sort_stack2(stack: Stack[int]) -> Stack[int]:
    """Empty ``stack`` into a new stack whose largest value is on top (insertion sort)."""
    result: Stack[int] = Stack(len(stack))
    while stack:
        value = stack.top()
        stack.pop()
        while result and result.top() > value:
            stack.push(result.top())
            result.pop()
        result.push(value)
    return result


def max_value_in_window(arr: Sequence[int], w: int) -> list[int]:
    """Maximum of every window of width ``w`` sliding over ``arr``."""
    if not 1 <= w <= len(arr):
        raise ValueError("window width must be between 1 and len(arr)")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(arr):
        while window and value > arr[window[-1]]:
            window.pop()
        window.append(i)
        if window[0] == i - w:
            window.popleft()
        if i >= w - 1:
            result.append(arr[window[0]])
    return result


def _first_greater(nodes: Sequence[BTNode]) -> list[BTNode | None]:
    stack: list[BTNode] = []
    result: list[BTNode | None] = []
    for node in nodes:
        while stack and stack[-1].val < node.val:
            stack.pop()
        result.append(stack[-1] if stack else None)
        stack.append(node)
    return result


def make_max_tree(arr: Sequence[int]) -> BTNode | None:
    """Build the MaxTree of an array of distinct values; return its root."""
    if not arr:
        return None
    nodes = [BTNode(v) for v in arr]
    left_greater = _first_greater(nodes)
    right_greater = _first_greater(nodes[::-1])[::-1]
    root = None
    for node, lg, rg in zip(nodes, left_greater, right_greater):
        if lg is None and rg is None:
            root = node
            continue
        if lg is None:
            parent = rg
        elif rg is None:
            parent = lg
        else:
            parent = rg if rg.val < lg.val else lg
        if parent.right is None:
            parent.right = node
        else:
            parent.left = node
    return root


def get_area(height: Sequence[int]) -> int:
    """Largest rectangle area under a histogram."""
    best = 0
    stack: list[int] = []
    for i, h in enumerate([*height, 0]):
        while stack and height[stack[-1]] >= h:
            top = stack.pop()
            left = stack[-1] if stack else -1
            best = max(best, height[top] * (i - left - 1))
        stack.append(i)
    return best


def max_matrix(matrix: Sequence[Sequence[int]]) -> int:
    """Area of the largest all-ones rectangle in a 0/1 matrix."""
    if not matrix or not matrix[0]:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [0 if cell == 0 else h + 1 for h, cell in zip(heights, row)]
        best = max(best, get_area(heights))
    return best