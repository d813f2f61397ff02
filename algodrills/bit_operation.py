"""Bit manipulation exercises on 32-bit signed integers."""

from __future__ import annotations

from collections.abc import Iterable

_MASK = 0xFFFFFFFF
_SIGN = 0x80000000


def _to_int32(x: int) -> int:
    x &= _MASK
    return x - (1 << 32) if x & _SIGN else x


def swap_bit(a: int, b: int) -> tuple[int, int]:
    """Swap two integers using exclusive or."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def swap_add(a: int, b: int) -> tuple[int, int]:
    """Swap two integers using addition and subtraction."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def get_max1(a: int, b: int) -> int:
    """Larger of ``a`` and ``b`` without a comparison."""
    diff = a - b
    negative = (diff >> diff.bit_length()) & 1
    return a - negative * diff


def bit_add(a: int, b: int) -> int:
    """32-bit sum using only bitwise operations; overflow wraps."""
    a &= _MASK
    b &= _MASK
    while b:
        carry = ((a & b) << 1) & _MASK
        a ^= b
        b = carry
    return _to_int32(a)


def _negate(x: int) -> int:
    return bit_add(~x, 1)


def bit_subtract(a: int, b: int) -> int:
    """32-bit difference as ``a + (~b + 1)``."""
    return bit_add(a, _negate(b))


def bit_multiply(a: int, b: int) -> int:
    """32-bit product by shifting and adding; overflow wraps."""
    result = 0
    multiplicand = a & _MASK
    multiplier = b & _MASK
    while multiplier:
        if multiplier & 1:
            result = bit_add(result, multiplicand)
        multiplicand = (multiplicand << 1) & _MASK
        multiplier >>= 1
    return result


def bit_divide(a: int, b: int) -> int:
    """32-bit quotient truncated toward zero, by shift-and-subtract long division."""
    if b == 0:
        raise ZeroDivisionError("divided by zero")
    negative = (a < 0) != (b < 0)
    dividend, divisor = abs(a), abs(b)
    quotient = 0
    for i in range(31, -1, -1):
        if (dividend >> i) >= divisor:
            quotient |= 1 << i
            dividend -= divisor << i
    return _negate(quotient) if negative else _to_int32(quotient)


def odd_times_num1(arr: Iterable[int]) -> int:
    """The only value occurring an odd number of times."""
    result = 0
    for num in arr:
        result ^= num
    return result


def odd_times_num2(arr: Iterable[int]) -> tuple[int, int]:
    """The two values occurring an odd number of times."""
    values = list(arr)
    combined = odd_times_num1(values)
    right_one = combined & (~combined + 1)
    first = second = 0
    for num in values:
        if num & right_one == 0:
            first ^= num
        else:
            second ^= num
    return first, second


def odd_times_num_k(arr: Iterable[int], k: int) -> int:
    """The only 32-bit value occurring once when every other value occurs ``k`` times."""
    if k < 2:
        raise ValueError("k must be greater than 1")
    bit_counts = [0] * 32
    for num in arr:
        for i in range(32):
            bit_counts[i] = (bit_counts[i] + ((num >> i) & 1)) % k
    result = 0
    for i, count in enumerate(bit_counts):
        result |= count << i
    return _to_int32(result)