"""
Numeric domain: bounds, validation, error types.

Responsibility: every operation works on unsigned 64-bit values (the bulk
sieve on signed 32-bit limits). Python ints never wrap, so the bounds are
enforced here instead and reported as explicit errors.
"""

import numpy as np

U64_MAX = 2**64 - 1
I32_MAX = 2**31 - 1


class NumberTheoryError(Exception):
    """Base class for all engine errors."""


class InvalidDomainError(NumberTheoryError, ValueError):
    """Argument outside the domain of the operation (e.g. factorize(0))."""


class U64OverflowError(NumberTheoryError, OverflowError):
    """Result does not fit in an unsigned 64-bit integer."""


def as_int(value, name: str) -> int:
    """Return value as a Python int, rejecting floats and other types."""
    if isinstance(value, (int, np.integer)):
        return int(value)
    raise InvalidDomainError(f"{name} must be an integer, got {type(value).__name__}")


def check_non_negative(value, name: str) -> int:
    n = as_int(value, name)
    if n < 0:
        raise InvalidDomainError(f"{name} must be >= 0, got {n}")
    return n


def check_u64(value, name: str) -> int:
    """Validate an argument in [0, 2**64 - 1]."""
    n = check_non_negative(value, name)
    if n > U64_MAX:
        raise InvalidDomainError(f"{name} must fit in 64 bits, got {n}")
    return n


def check_i32(value, name: str) -> int:
    """Validate an argument in the signed 32-bit range."""
    n = as_int(value, name)
    if not -I32_MAX - 1 <= n <= I32_MAX:
        raise InvalidDomainError(f"{name} must fit in 32 bits, got {n}")
    return n


def checked_u64(result: int, what: str) -> int:
    """Return result unchanged, or raise U64OverflowError if it exceeds 64 bits."""
    if result > U64_MAX:
        raise U64OverflowError(f"{what} needs {result.bit_length()} bits, exceeds 2**64 - 1")
    return result
