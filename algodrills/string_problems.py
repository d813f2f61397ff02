"""String exercises: counting, matching, palindromes and a trie."""

from __future__ import annotations

import math
import re
import string
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from functools import cache, cmp_to_key
from itertools import groupby, pairwise

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_INTEGER_FORM = re.compile(r"0|-?[1-9][0-9]*")
_SIGNED_NUMBER = re.compile(r"(-*)([0-9]+)")
_ZERO_RUN = re.compile(r"0+")
_UPPER_ASCII = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def is_trans_words(str1: str, str2: str) -> bool:
    """Whether the two strings hold the same characters with the same counts."""
    return len(str1) == len(str2) and Counter(str1) == Counter(str2)


def str_num_sum(s: str) -> int:
    """Sum of every digit run in ``s``.

    A run is negative when an odd number of ``-`` stand directly to its left;
    any other character, a decimal point included, just separates runs.
    """
    total = 0
    for minus, digits in _SIGNED_NUMBER.findall(s):
        value = int(digits)
        total += -value if len(minus) % 2 else value
    return total


def remove_k_zero(s: str, k: int) -> str:
    """Remove every run of exactly ``k`` consecutive ``0`` characters."""
    if k <= 0:
        return s
    return _ZERO_RUN.sub(lambda m: "" if len(m.group()) == k else m.group(), s)


def str_to_int32(s: str) -> int:
    """Integer written in ``s`` if it is in plain form and fits 32 bits, else 0."""
    if not _INTEGER_FORM.fullmatch(s):
        return 0
    value = int(s)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return 0
    return value


def replace_str(s: str, source: str, target: str) -> str:
    """Replace each run of consecutive ``source`` occurrences with one ``target``."""
    if not source:
        raise ValueError("source must not be empty")
    parts: list[str] = []
    i = 0
    replaced_last = False
    while i < len(s):
        if s.startswith(source, i):
            if not replaced_last:
                parts.append(target)
            replaced_last = True
            i += len(source)
        else:
            parts.append(s[i])
            replaced_last = False
            i += 1
    return "".join(parts)


def get_char_count(s: str) -> str:
    """Run-length summary, e.g. each run written as its character and its length."""
    return "".join(f"{ch}{sum(1 for _ in run)}" for ch, run in groupby(s))


def is_unique1(arr: Iterable[Hashable]) -> bool:
    """Whether no item repeats, in linear time."""
    seen: set[Hashable] = set()
    for item in arr:
        if item in seen:
            return False
        seen.add(item)
    return True


def is_unique2(arr: Iterable) -> bool:
    """Whether no item repeats, by sorting and comparing neighbours."""
    return all(a != b for a, b in pairwise(sorted(arr)))


def _is_hole(item: str | None) -> bool:
    return item is None or item == ""


def find_str_index(arr: Sequence[str | None], target: str) -> int:
    """Leftmost index of ``target`` in a sorted list with ``None`` or empty holes; -1 if absent."""
    left, right = 0, len(arr) - 1
    found = -1
    while left <= right:
        mid = (left + right) // 2
        probe = mid
        if _is_hole(arr[mid]):
            probe = mid - 1
            while probe >= left and _is_hole(arr[probe]):
                probe -= 1
            if probe < left:
                left = mid + 1
                continue
        value = arr[probe]
        if value == target:
            found = probe
            right = probe - 1
        elif value > target:
            right = probe - 1
        else:
            left = mid + 1
    return found


def min_distance(strs: Sequence[str], str1: str | None, str2: str | None) -> int:
    """Smallest index distance between ``str1`` and ``str2`` in ``strs``; -1 if either is missing."""
    if not strs or not str1 or not str2:
        return -1
    if str1 == str2:
        return 0
    last1 = last2 = -1
    best = math.inf
    for i, item in enumerate(strs):
        if item == str1:
            if last2 != -1:
                best = min(best, i - last2)
            last1 = i
        elif item == str2:
            if last1 != -1:
                best = min(best, i - last1)
            last2 = i
    return -1 if best == math.inf else int(best)


def get_palindrome(s: str) -> str:
    """A palindrome made from ``s`` by inserting the fewest characters."""
    n = len(s)
    if n == 0:
        return ""
    dp = [[0] * n for _ in range(n)]
    for i in range(n - 2, -1, -1):
        for j in range(i + 1, n):
            if s[i] == s[j]:
                dp[i][j] = dp[i + 1][j - 1]
            else:
                dp[i][j] = min(dp[i + 1][j], dp[i][j - 1]) + 1
    left: list[str] = []
    right: list[str] = []
    i, j = 0, n - 1
    while i <= j:
        if i == j:
            left.append(s[i])
            break
        if s[i] == s[j]:
            left.append(s[i])
            right.append(s[j])
            i += 1
            j -= 1
        elif dp[i][j - 1] < dp[i + 1][j]:
            left.append(s[j])
            right.append(s[j])
            j -= 1
        else:
            left.append(s[i])
            right.append(s[i])
            i += 1
    return "".join(left) + "".join(reversed(right))


def is_valid(s: str) -> bool:
    """Whether ``s`` is a balanced string of parentheses only."""
    depth = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
        else:
            return False
    return depth == 0


def max_valid_str(s: str) -> str:
    """Longest balanced parenthesis substring (the first one if several tie)."""
    dp = [0] * len(s)
    best = 0
    end = -1
    for i in range(1, len(s)):
        if s[i] == ")":
            match_pos = i - dp[i - 1] - 1
            if match_pos >= 0 and s[match_pos] == "(":
                dp[i] = dp[i - 1] + 2
                if match_pos > 0:
                    dp[i] += dp[match_pos - 1]
        if dp[i] > best:
            best = dp[i]
            end = i
    return s[end + 1 - best:end + 1]


def get_num(n: int) -> int:
    """Number of 0/1 strings of length ``n`` in which every ``0`` has a ``1`` to its left."""
    if n < 1:
        return 0
    if n == 1:
        return 1
    prev, cur = 1, 2
    for _ in range(3, n + 1):
        prev, cur = cur, prev + cur
    return cur


def _concat_order(a: str, b: str) -> int:
    ab, ba = a + b, b + a
    return (ab > ba) - (ab < ba)


def lowest_string(strs: Iterable[str]) -> str:
    """Smallest concatenation of all strings, with ASCII letters upper-cased."""
    ordered = sorted(strs, key=cmp_to_key(_concat_order))
    return "".join(ordered).translate(_UPPER_ASCII)


def max_unique_str(s: str) -> str:
    """First longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = ""
    for i, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        if i - start + 1 > len(best):
            best = s[start:i + 1]
    return best


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def new_char_at(s: str, k: int) -> str:
    """The compound character covering position ``k``; empty if ``k`` is out of range.

    A compound character is a lower-case letter, or an upper-case letter
    followed by any letter.
    """
    if not 0 <= k < len(s):
        return ""
    uppers = 0
    i = k - 1
    while i >= 0 and _is_upper(s[i]):
        uppers += 1
        i -= 1
    if uppers % 2 == 1:
        return s[k - 1:k + 1]
    if _is_upper(s[k]):
        return s[k:k + 2]
    return s[k:k + 1]


def min_contain_str_length(str1: str, str2: str) -> int:
    """Length of the shortest substring of ``str1`` holding every character of ``str2``; 0 if none."""
    if not str1 or not str2 or len(str1) < len(str2):
        return 0
    need = Counter(str2)
    missing = len(str2)
    best = math.inf
    left = 0
    for right, ch in enumerate(str1):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        while missing == 0:
            best = min(best, right - left + 1)
            need[str1[left]] += 1
            if need[str1[left]] > 0:
                missing += 1
            left += 1
    return 0 if best == math.inf else int(best)


def min_cut(s: str) -> int:
    """Fewest cuts splitting ``s`` into palindromes."""
    n = len(s)
    if n == 0:
        return 0
    pal = [[False] * n for _ in range(n)]
    cuts = [0] * (n + 1)
    cuts[n] = -1
    for i in range(n - 1, -1, -1):
        cuts[i] = n - i - 1
        for j in range(i, n):
            if s[i] == s[j] and (j - i < 2 or pal[i + 1][j - 1]):
                pal[i][j] = True
                cuts[i] = min(cuts[i], cuts[j + 1] + 1)
    return cuts[0]


def _valid_pattern(s: str, exp: str) -> bool:
    if "." in s or "*" in s:
        return False
    return all(
        not (ch == "*" and (i == 0 or exp[i - 1] == "*")) for i, ch in enumerate(exp)
    )


def match(s: str, exp: str) -> bool:
    """Whether ``exp`` (with ``.`` for any character and ``*`` for repetition) matches all of ``s``.

    Returns False when ``s`` holds ``.`` or ``*``, or ``exp`` starts with ``*``
    or has two ``*`` in a row.
    """
    if not _valid_pattern(s, exp):
        return False

    @cache
    def matches(i: int, j: int) -> bool:
        if j == len(exp):
            return i == len(s)
        first = i < len(s) and exp[j] in (s[i], ".")
        if j + 1 < len(exp) and exp[j + 1] == "*":
            return matches(i, j + 2) or (first and matches(i + 1, j))
        return first and matches(i + 1, j + 1)

    return matches(0, 0)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    end: int = 0
    path: int = 0


class Trie:
    """Prefix tree counting repeated words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        node = self._root
        node.path += 1
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
            node.path += 1
        node.end += 1

    def _find(self, prefix: str) -> _TrieNode | None:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.end > 0

    def delete(self, word: str) -> None:
        """Remove one copy of ``word``; does nothing if it is absent."""
        if not self.search(word):
            return
        node = self._root
        node.path -= 1
        for ch in word:
            child = node.children[ch]
            child.path -= 1
            if child.path == 0:
                del node.children[ch]
                return
            node = child
        node.end -= 1

    def prefix_number(self, pre: str) -> int:
        """Number of stored words starting with ``pre``."""
        node = self._find(pre)
        return 0 if node is None else node.path