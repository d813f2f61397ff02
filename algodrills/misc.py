"""Assorted exercises: number theory, caches and counting."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Sequence
from typing import Any


def gcd(m: int, n: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while n != 0:
        m, n = n, m % n
    return m


def zero_count(n: int) -> int:
    """Number of trailing zeros of ``n!`` in decimal."""
    count = 0
    while n > 0:
        n //= 5
        count += n
    return count


def low_bit(n: int) -> int:
    """Position of the lowest set bit of ``n!`` in binary."""
    count = 0
    while n > 0:
        n //= 2
        count += n
    return count


class SetAllHashMap:
    """Map whose ``set_all`` gives every stored key the same value in O(1)."""

    def __init__(self) -> None:
        self._values: dict[Hashable, Any] = {}
        self._keys: set[Hashable] = set()
        self._all_value: Any = None

    def put(self, key: Hashable, value: Any) -> None:
        self._values[key] = value
        self._keys.add(key)

    def get(self, key: Hashable) -> Any:
        """Value of ``key``; raises KeyError when absent."""
        if key in self._values:
            return self._values[key]
        if key in self._keys:
            return self._all_value
        raise KeyError(key)

    def remove(self, key: Hashable) -> None:
        self._values.pop(key, None)
        self._keys.discard(key)

    def contains_key(self, key: Hashable) -> bool:
        return key in self._keys

    def set_all(self, value: Any) -> None:
        self._all_value = value
        self._values = {}


class LRUCache:
    """Fixed-size cache evicting the least recently read or written key."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._data: OrderedDict[Hashable, Any] = OrderedDict()

    def get(self, key: Hashable) -> Any:
        """Value of ``key``, marking it most recent; raises KeyError when absent."""
        value = self._data[key]
        self._data.move_to_end(key)
        return value

    def set(self, key: Hashable, value: Any) -> None:
        if key in self._data:
            self._data[key] = value
            self._data.move_to_end(key)
            return
        if len(self._data) >= self.size:
            self._data.popitem(last=False)
        self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data


def _check_alphabet(chars: Sequence[str]) -> None:
    if not chars:
        raise ValueError("alphabet must not be empty")


def str_to_num(chars: Sequence[str], s: str) -> int:
    """Number spelled by ``s`` in bijective numeration over ``chars`` (first char is 1)."""
    _check_alphabet(chars)
    digit_of = {ch: i + 1 for i, ch in enumerate(chars)}
    base = len(chars)
    result = 0
    for ch in s:
        if ch not in digit_of:
            raise ValueError(f"character {ch!r} not in alphabet")
        result = result * base + digit_of[ch]
    return result


def num_to_str(chars: Sequence[str], num: int) -> str:
    """Spelling of ``num`` in bijective numeration over ``chars``; 0 is the empty string."""
    _check_alphabet(chars)
    if num < 0:
        raise ValueError("num must not be negative")
    base = len(chars)
    digits: list[str] = []
    while num > 0:
        num, digit = divmod(num - 1, base)
        digits.append(chars[digit])
    return "".join(reversed(digits))


def one_count(num: int) -> int:
    """How many times the digit 1 is written among 1..num."""
    if num < 1:
        return 0
    length = len(str(num))
    power = 10 ** (length - 1)
    first = num // power
    first_ones = num % power + 1 if first == 1 else power
    other_ones = first * (length - 1) * (power // 10)
    return first_ones + other_ones + one_count(num % power)


def find_min(arr: Sequence[int]) -> int:
    """Minimum of a possibly rotated ascending array that may hold duplicates."""
    if not arr:
        raise ValueError("array is empty")
    left, right = 0, len(arr) - 1
    while left < right:
        while left < right and arr[left] == arr[right]:
            left += 1
        if arr[left] < arr[right]:
            return arr[left]
        mid = (left + right) // 2
        if arr[left] > arr[mid]:
            right = mid
        else:
            left = mid + 1
    return arr[left]


def dispense_candy(score: Sequence[int]) -> int:
    """Fewest candies when higher-scoring neighbours get more and equal ones the same."""
    n = len(score)
    if n <= 1:
        return n
    extra = [0] * n
    for i in range(1, n):
        if score[i - 1] < score[i] and extra[i - 1] >= extra[i]:
            extra[i] = extra[i - 1] + 1
        elif score[i - 1] == score[i]:
            extra[i] = extra[i - 1]
    for i in range(n - 2, -1, -1):
        if score[i] > score[i + 1] and extra[i] <= extra[i + 1]:
            extra[i] = extra[i + 1] + 1
        elif score[i] == score[i + 1] and extra[i] != extra[i + 1]:
            extra[i] = extra[i + 1] = max(extra[i], extra[i + 1])
    return n + sum(extra)