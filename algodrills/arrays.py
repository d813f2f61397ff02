"""Array and matrix exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    matrix.reverse()
    for i in range(n):
        for j in range(i):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]


def min_sort_length(arr: Sequence[int]) -> int:
    """Length of the shortest subarray whose sorting sorts the whole array."""
    n = len(arr)
    if n <= 1:
        return 0
    leftmost = -1
    cur_min = arr[-1]
    for i in range(n - 2, -1, -1):
        if arr[i] > cur_min:
            leftmost = i
        else:
            cur_min = arr[i]
    if leftmost == -1:
        return 0
    rightmost = -1
    cur_max = arr[0]
    for i in range(1, n):
        if arr[i] < cur_max:
            rightmost = i
        else:
            cur_max = arr[i]
    return rightmost - leftmost + 1


def has_k(matrix: Sequence[Sequence[int]], k: int) -> bool:
    """Whether ``k`` occurs in a matrix whose rows and columns are ascending."""
    if not matrix or not matrix[0]:
        return False
    n = len(matrix)
    i, j = 0, len(matrix[0]) - 1
    while i < n and j >= 0:
        value = matrix[i][j]
        if value > k:
            j -= 1
        elif value < k:
            i += 1
        else:
            return True
    return False


def max_length_equal_k_all_positive(arr: Sequence[int], k: int) -> int:
    """Longest subarray of positive numbers summing to ``k``; -1 if there is none."""
    total = 0
    start = 0
    best = -1
    for i, value in enumerate(arr):
        total += value
        while total > k and start <= i:
            total -= arr[start]
            start += 1
        if total == k and i - start + 1 > best:
            best = i - start + 1
    return best


def max_length_equal_k(arr: Sequence[int], k: int) -> int:
    """Longest subarray summing to ``k``; 0 if there is none."""
    first_pos = {0: -1}
    total = 0
    best = 0
    for i, value in enumerate(arr):
        total += value
        pos = first_pos.get(total - k)
        if pos is not None:
            best = max(best, i - pos)
        first_pos.setdefault(total, i)
    return best


def max_length_equal_positive_negative(arr: Sequence[int]) -> int:
    """Longest subarray with as many positive as negative numbers."""
    signs = [(value > 0) - (value < 0) for value in arr]
    return max_length_equal_k(signs, 0)


def max_length_equal01(arr: Sequence[int]) -> int:
    """Longest subarray of a 0/1 array holding as many zeros as ones."""
    return max_length_equal_k([1 if value == 1 else -1 for value in arr], 0)


def sort_e_arr(arr: list[int]) -> None:
    """Sort a permutation of 1..N in place by swapping each value home."""
    n = len(arr)
    if sorted(arr) != list(range(1, n + 1)):
        raise ValueError("array must be a permutation of 1..N")
    for i in range(n):
        while arr[i] != i + 1:
            target = arr[i] - 1
            arr[i], arr[target] = arr[target], arr[i]


def max_sub_arr_sum(arr: Sequence[int]) -> int:
    """Largest subarray sum, at least 0 (the empty subarray)."""
    best = 0
    cur = 0
    for value in arr:
        cur += value
        best = max(best, cur)
        if cur < 0:
            cur = 0
    return best


def max_sub_matrix_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Largest sum of a sub-matrix, at least 0."""
    if not matrix or not matrix[0]:
        return 0
    m = len(matrix[0])
    best = 0
    for top in range(len(matrix)):
        columns = [0] * m
        for row in matrix[top:]:
            columns = [acc + value for acc, value in zip(columns, row)]
            best = max(best, max_sub_arr_sum(columns))
    return best


def find_min_index(arr: Sequence[int]) -> int:
    """Index of some local minimum in logarithmic time; -1 for an empty array."""
    n = len(arr)
    if n == 0:
        return -1
    if n == 1 or arr[0] < arr[1]:
        return 0
    if arr[-1] < arr[-2]:
        return n - 1
    left, right = 1, n - 2
    while left < right:
        mid = (left + right) // 2
        if arr[mid] > arr[mid - 1]:
            right = mid - 1
        elif arr[mid] > arr[mid + 1]:
            left = mid + 1
        else:
            return mid
    return left


def max_square_length(matrix: Sequence[Sequence[int]]) -> int:
    """Side of the largest square whose border consists only of 1s."""
    n = len(matrix)
    if n == 0 or not matrix[0]:
        return 0
    m = len(matrix[0])
    right = [[0] * (m + 1) for _ in range(n + 1)]
    down = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if matrix[i][j] != 0:
                right[i][j] = right[i][j + 1] + 1
                down[i][j] = down[i + 1][j] + 1
    best = 0
    for i in range(n):
        for j in range(m):
            for size in range(min(right[i][j], down[i][j]), best, -1):
                if right[i + size - 1][j] >= size and down[i][j + size - 1] >= size:
                    best = size
                    break
    return best


def multiply_arr(arr: Sequence[int]) -> list[int]:
    """Product of all other elements at each position, without division."""
    result = []
    prefix = 1
    for value in arr:
        result.append(prefix)
        prefix *= value
    suffix = 1
    for i in range(len(arr) - 1, -1, -1):
        result[i] *= suffix
        suffix *= arr[i]
    return result


_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def min_path_value(matrix: Sequence[Sequence[int]]) -> int:
    """Cells on the shortest 1-path from the top-left to the bottom-right; -1 if none."""
    if not matrix or not matrix[0] or matrix[0][0] == 0:
        return -1
    n, m = len(matrix), len(matrix[0])
    visited = {(0, 0)}
    queue = deque([(0, 0, 1)])
    while queue:
        i, j, length = queue.popleft()
        if (i, j) == (n - 1, m - 1):
            return length
        for di, dj in _STEPS:
            ni, nj = i + di, j + dj
            if 0 <= ni < n and 0 <= nj < m and matrix[ni][nj] == 1 and (ni, nj) not in visited:
                visited.add((ni, nj))
                queue.append((ni, nj, length + 1))
    return -1


def min_number(arr: Sequence[int]) -> int:
    """Smallest positive integer missing from ``arr``."""
    values = list(arr)
    n = len(values)
    for i in range(n):
        while 1 <= values[i] <= n and values[values[i] - 1] != values[i]:
            target = values[i] - 1
            values[i], values[target] = values[target], values[i]
    for i, value in enumerate(values):
        if value != i + 1:
            return i + 1
    return n + 1


def max_gap(arr: Sequence[int]) -> int:
    """Largest difference between neighbours once sorted, in linear time."""
    n = len(arr)
    if n <= 1:
        return 0
    low, high = min(arr), max(arr)
    if low == high:
        return 0
    mins: list[int | None] = [None] * (n + 1)
    maxs: list[int | None] = [None] * (n + 1)
    for value in arr:
        bucket = (value - low) * n // (high - low)
        mins[bucket] = value if mins[bucket] is None else min(mins[bucket], value)
        maxs[bucket] = value if maxs[bucket] is None else max(maxs[bucket], value)
    best = 0
    last_max = maxs[0]
    for bucket_min, bucket_max in zip(mins[1:], maxs[1:]):
        if bucket_min is not None:
            best = max(best, bucket_min - last_max)
            last_max = bucket_max
    return best