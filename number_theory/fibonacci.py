"""
Fibonacci sequence generation.

Responsibility: the sequence 0, 1, 1, 2, 3, 5, ... by count, by maximum
value and by index. Iterative only, two trailing values of state.
"""

from typing import Iterator

from .numeric import U64OverflowError, check_non_negative, check_u64

# F(93) is the largest Fibonacci number below 2**64
MAX_INDEX = 93


def by_quantity(count: int) -> Iterator[int]:
    """
    Yield the first count Fibonacci numbers, starting 0, 1, 1, 2.

    Raises
    ------
    U64OverflowError
        If count > 94, since F(94) does not fit in 64 bits.
    """
    count = check_non_negative(count, "count")
    if count > MAX_INDEX + 1:
        raise U64OverflowError(
            f"count={count}: only the first {MAX_INDEX + 1} Fibonacci numbers fit in 64 bits")
    return _first(count)


def _first(count: int) -> Iterator[int]:
    a, b = 0, 1
    for _ in range(count):
        yield a
        a, b = b, a + b


def by_max_value(max_value: int) -> Iterator[int]:
    """
    Yield 0 and then every Fibonacci number <= max_value.

    The leading 1 appears twice whenever max_value >= 1, as in the
    classical sequence.
    """
    max_value = check_u64(max_value, "max_value")
    return _upto(max_value)


def _upto(max_value: int) -> Iterator[int]:
    a, b = 0, 1
    yield a
    if max_value > 0:
        yield b
    while a + b <= max_value:
        a, b = b, a + b
        yield b


def by_index(index: int) -> int:
    """Zero-based Fibonacci number: by_index(0) == 0, by_index(1) == 1."""
    index = check_non_negative(index, "index")
    if index > MAX_INDEX:
        raise U64OverflowError(f"F({index}) does not fit in 64 bits")
    a, b = 0, 1
    for _ in range(index):
        a, b = b, a + b
    return a
