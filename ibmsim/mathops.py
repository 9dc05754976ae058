"""Arithmetic, bitwise, trigonometric, number-theory and combinatorial operations.

Integer results follow 32-bit signed machine arithmetic: sums and products wrap
around, division truncates toward zero and remainders take the dividend's sign.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

_INT_BITS = 32
_MODULUS = 1 << _INT_BITS
_HALF = 1 << (_INT_BITS - 1)


class UnknownOperation(ValueError):
    """Raised when an operation name or menu choice is not recognised."""

    def __init__(self, op):
        super().__init__(f"unknown operation: {op!r}")
        self.op = op


def to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value + _HALF) % _MODULUS - _HALF


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_rem(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def arithmetic(op: str, a: int, b: int) -> int:
    """Apply ``add`` or ``sub`` to two integers."""
    if op == "add":
        return to_int32(a + b)
    if op == "sub":
        return to_int32(a - b)
    raise UnknownOperation(op)


def logic(op: str, a: int, b: int) -> int:
    """Apply the bitwise ``and``, ``or`` or ``xor`` operation."""
    a, b = to_int32(a), to_int32(b)
    if op == "and":
        return a & b
    if op == "or":
        return a | b
    if op == "xor":
        return a ^ b
    raise UnknownOperation(op)


def bit_not(a: int) -> int:
    """Bitwise complement of a 32-bit integer."""
    return ~to_int32(a)


def mult_div(op: str, a: int, b: int) -> int:
    """Apply ``mult`` or truncating ``div``; division by zero raises ZeroDivisionError."""
    if op == "mult":
        return to_int32(a * b)
    if op == "div":
        if b == 0:
            raise ZeroDivisionError("Division by zero")
        return to_int32(_trunc_div(a, b))
    raise UnknownOperation(op)


_TRIG = {1: math.sin, 2: math.cos, 3: math.tan}


def trig(choice: int, value: float) -> float:
    """Evaluate sine (1), cosine (2) or tangent (3) of ``value`` in radians."""
    try:
        function = _TRIG[choice]
    except KeyError:
        raise UnknownOperation(choice) from None
    return function(value)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm with truncated remainders."""
    while b != 0:
        a, b = b, _trunc_rem(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple computed as ``a / gcd(a, b) * b``."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("lcm of zero and zero")
    return to_int32(_trunc_div(a, divisor) * b)


def probability(occurrences: int, total: int) -> float:
    """Ratio of occurrences to total outcomes, or 0.0 when there are no outcomes."""
    if total == 0:
        return 0.0
    return occurrences / total


def permutations(items: Iterable) -> Iterator[tuple]:
    """Yield every ordering of ``items`` in swap-and-backtrack order."""
    values = list(items)
    last = len(values) - 1

    def walk(left: int) -> Iterator[tuple]:
        if left == last:
            yield tuple(values)
            return
        for i in range(left, last + 1):
            values[left], values[i] = values[i], values[left]
            yield from walk(left + 1)
            values[left], values[i] = values[i], values[left]

    if values:
        yield from walk(0)