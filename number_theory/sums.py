"""Closed-form sums."""

from .numeric import InvalidDomainError, check_u64, checked_u64


def sum_divisible_by(divisor: int, max_value: int) -> int:
    """
    Sum of the multiples of divisor in 1..max_value.

    Uses d * k * (k + 1) / 2 with k = max_value // d,
    e.g. sum_divisible_by(3, 10) == 3 + 6 + 9 == 18.
    """
    divisor = check_u64(divisor, "divisor")
    max_value = check_u64(max_value, "max_value")
    if divisor == 0:
        raise InvalidDomainError("divisor must be > 0")
    k = max_value // divisor
    return checked_u64(divisor * k * (k + 1) // 2, f"sum of multiples of {divisor} up to {max_value}")
