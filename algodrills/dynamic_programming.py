"""Recursion and dynamic programming exercises."""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence

Matrix = list[list[int]]


def fibonacci_recursion(n: int) -> int:
    """n-th Fibonacci number by plain recursion (exponential time)."""
    if n <= 1:
        return n
    return fibonacci_recursion(n - 1) + fibonacci_recursion(n - 2)


def fibonacci_dp(n: int) -> int:
    """n-th Fibonacci number in linear time and constant space."""
    if n <= 1:
        return n
    prev, cur = 0, 1
    for _ in range(2, n + 1):
        prev, cur = cur, prev + cur
    return cur


def multi_matrix(matrix1: Sequence[Sequence[int]], matrix2: Sequence[Sequence[int]]) -> Matrix:
    """Product of two matrices."""
    if matrix1 and len(matrix1[0]) != len(matrix2):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*matrix2))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in matrix1]


def matrix_power(base: Sequence[Sequence[int]], n: int) -> Matrix:
    """``base`` raised to the non-negative power ``n`` by repeated squaring."""
    if n < 0:
        raise ValueError("power must not be negative")
    size = len(base)
    result: Matrix = [[1 if i == j else 0 for j in range(size)] for i in range(size)]
    square: Matrix = [list(row) for row in base]
    while n:
        if n & 1:
            result = multi_matrix(result, square)
        square = multi_matrix(square, square)
        n >>= 1
    return result


def fibonacci_matrix(n: int) -> int:
    """n-th Fibonacci number in logarithmic time via matrix powers."""
    if n <= 1:
        return n
    return matrix_power([[1, 1], [1, 0]], n - 1)[0][0]


def min_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right cell."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix is empty")
    dp: list[int] = []
    for value in matrix[0]:
        dp.append(value + (dp[-1] if dp else 0))
    for row in matrix[1:]:
        dp[0] += row[0]
        for j in range(1, len(row)):
            dp[j] = min(dp[j - 1], dp[j]) + row[j]
    return dp[-1]


def coin_changes1(coins: Sequence[int], aim: int) -> int:
    """Fewest coins summing to ``aim`` with unlimited coins of each value; -1 if impossible."""
    dp: list[float] = [0] + [math.inf] * aim
    for amount in range(1, aim + 1):
        for coin in coins:
            if coin <= amount and dp[amount - coin] + 1 < dp[amount]:
                dp[amount] = dp[amount - coin] + 1
    return -1 if dp[aim] == math.inf else int(dp[aim])


def coin_changes2(coins: Sequence[int], aim: int) -> int:
    """Number of coin combinations summing to ``aim``."""
    dp = [1] + [0] * aim
    for coin in coins:
        for amount in range(coin, aim + 1):
            dp[amount] += dp[amount - coin]
    return dp[aim]


def longest_increasing_subsequence(arr: Sequence[int]) -> list[int]:
    """One longest strictly increasing subsequence of ``arr``."""
    if not arr:
        return []
    lengths = [1] * len(arr)
    for i in range(1, len(arr)):
        for j in range(i):
            if arr[i] > arr[j]:
                lengths[i] = max(lengths[i], lengths[j] + 1)
    wanted = max(lengths)
    result: list[int] = []
    for value, length in zip(reversed(arr), reversed(lengths)):
        if length == wanted and (not result or value < result[-1]):
            result.append(value)
            wanted -= 1
    return result[::-1]


def hanoi_moves(
    n: int, source: Hashable, mid: Hashable, target: Hashable
) -> list[tuple[Hashable, Hashable]]:
    """Optimal moves, as ``(from, to)`` pairs, taking ``n`` disks from ``source`` to ``target``."""
    if n <= 0:
        return []
    if n == 1:
        return [(source, target)]
    return [
        *hanoi_moves(n - 1, source, target, mid),
        (source, target),
        *hanoi_moves(n - 1, mid, source, target),
    ]


def hanoi_step(arr: Sequence[int]) -> int:
    """Index of a disk layout in the optimal sequence, or -1 if it never occurs.

    ``arr[i]`` is the peg (1 left, 2 middle, 3 right) of disk ``i + 1``, smallest first.
    """
    if not arr:
        return -1
    if any(peg not in (1, 2, 3) for peg in arr):
        raise ValueError("pegs are numbered 1 to 3")
    source, mid, target = 1, 2, 3
    step = 0
    for i in range(len(arr) - 1, -1, -1):
        peg = arr[i]
        if peg == mid:
            return -1
        if peg == source:
            mid, target = target, mid
        else:
            step += 1 << i
            source, mid = mid, source
    return step


def common_sub_seq(str1: str, str2: str) -> str:
    """One longest common subsequence of two strings."""
    n, m = len(str1), len(str2)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
            if str1[i - 1] == str2[j - 1]:
                dp[i][j] = max(dp[i][j], dp[i - 1][j - 1] + 1)
    chars: list[str] = []
    remaining = dp[n][m]
    while remaining > 0:
        if n > 0 and dp[n][m] == dp[n - 1][m]:
            n -= 1
        elif m > 0 and dp[n][m] == dp[n][m - 1]:
            m -= 1
        else:
            chars.append(str1[n - 1])
            remaining -= 1
            n -= 1
            m -= 1
    return "".join(reversed(chars))


def edit_distance(str1: str, str2: str, ic: int, de: int, re: int) -> int:
    """Least cost to edit ``str1`` into ``str2`` with insert, delete and replace costs."""
    m = len(str2)
    prev = [j * ic for j in range(m + 1)]
    for i, ch1 in enumerate(str1, start=1):
        cur = [i * de] + [0] * m
        for j, ch2 in enumerate(str2, start=1):
            if ch1 == ch2:
                cur[j] = prev[j - 1]
            else:
                cur[j] = min(cur[j - 1] + ic, prev[j] + de, prev[j - 1] + re)
        prev = cur
    return prev[m]


def get_init_health(graph: Sequence[Sequence[int]]) -> int:
    """Least starting health to walk right/down through ``graph`` keeping health above zero."""
    if not graph or not graph[0]:
        raise ValueError("map is empty")
    n, m = len(graph), len(graph[0])
    dp = [[0] * m for _ in range(n)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if i == n - 1 and j == m - 1:
                need = 1
            elif i == n - 1:
                need = dp[i][j + 1]
            elif j == m - 1:
                need = dp[i + 1][j]
            else:
                need = min(dp[i + 1][j], dp[i][j + 1])
            dp[i][j] = max(need - graph[i][j], 1)
    return dp[0][0]


def convert_count(s: str) -> int:
    """Number of ways to read a digit string as letters with 1 -> A ... 26 -> Z."""
    if not s.isdigit() and s:
        raise ValueError("string must contain only digits")
    if not s or s[0] == "0":
        return 0
    before, last = 1, 1
    for i in range(1, len(s)):
        ways = last if s[i] != "0" else 0
        if s[i - 1] != "0" and int(s[i - 1:i + 1]) <= 26:
            ways += before
        before, last = last, ways
        if ways == 0:
            return 0
    return last


def winner_score(arr: Sequence[int]) -> int:
    """Score of the winner when two players alternately take the leftmost or rightmost card."""
    n = len(arr)
    if n == 0:
        return 0
    first = [[0] * n for _ in range(n)]
    second = [[0] * n for _ in range(n)]
    for j in range(n):
        first[j][j] = arr[j]
        for i in range(j - 1, -1, -1):
            first[i][j] = max(arr[i] + second[i + 1][j], arr[j] + second[i][j - 1])
            second[i][j] = min(first[i + 1][j], first[i][j - 1])
    return max(first[0][n - 1], second[0][n - 1])


def jump_count(arr: Sequence[int]) -> int:
    """Fewest jumps from position 0 to the last position; ``arr[i]`` is the reach from ``i``."""
    jumps = reach = next_reach = 0
    for i, step in enumerate(arr):
        if reach < i:
            jumps += 1
            reach = next_reach
        next_reach = max(next_reach, i + step)
    return jumps


def _merge_runs(runs: dict[int, int], less: int, more: int) -> int:
    left = less - runs[less] + 1
    right = more + runs[more] - 1
    length = right - left + 1
    runs[left] = length
    runs[right] = length
    return length


def longest_consecutive(arr: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers present in ``arr``."""
    if not arr:
        return 0
    best = 1
    runs: dict[int, int] = {}
    for value in arr:
        if value in runs:
            continue
        runs[value] = 1
        if value - 1 in runs:
            best = max(best, _merge_runs(runs, value - 1, value))
        if value + 1 in runs:
            best = max(best, _merge_runs(runs, value, value + 1))
    return best


def n_queen(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError("n must not be negative")
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row + col in diagonals or col - row in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(col - row)
            total += place(row + 1)
            columns.remove(col)
            diagonals.remove(row + col)
            anti_diagonals.remove(col - row)
        return total

    return place(0)