"""
Factorials, permutations and combinations.

All results are checked against the u64 range: 20! is the largest
factorial that fits, but permutations and combinations are only checked on
their own value, so e.g. combinations(30, 15) is fine. Running products
never decrease, so each loop stops as soon as it passes 2**64 - 1.
"""

from .numeric import U64_MAX, InvalidDomainError, U64OverflowError, as_int


def _checked_product(low: int, high: int, what: str) -> int:
    """low * (low + 1) * ... * high (1 if empty), failing once it exceeds 64 bits."""
    result = 1
    for k in range(low, high + 1):
        result *= k
        if result > U64_MAX:
            raise U64OverflowError(f"{what} exceeds 2**64 - 1 (overflowed at factor {k})")
    return result


def factorial(n: int) -> int:
    """n! for n >= 1; any n <= 0 gives 1."""
    n = as_int(n, "n")
    if n <= 0:
        return 1
    return _checked_product(2, n, f"{n}!")


def _check_selection(set_size, chosen_size):
    n = as_int(set_size, "set_size")
    r = as_int(chosen_size, "chosen_size")
    if r < 0 or n < r:
        raise InvalidDomainError(
            f"need 0 <= chosen_size <= set_size, got set_size={n}, chosen_size={r}")
    return n, r


def permutations(set_size: int, chosen_size: int) -> int:
    """
    Ordered selections: n! / (n - r)!.

    Raises
    ------
    InvalidDomainError
        Unless 0 <= chosen_size <= set_size.
    U64OverflowError
        If the result does not fit in 64 bits.
    """
    n, r = _check_selection(set_size, chosen_size)
    return _checked_product(n - r + 1, n, f"P({n}, {r})")


def combinations(set_size: int, chosen_size: int) -> int:
    """
    Unordered selections: n! / (r! (n - r)!).

    Raises
    ------
    InvalidDomainError
        Unless 0 <= chosen_size <= set_size.
    U64OverflowError
        If the result does not fit in 64 bits.
    """
    n, r = _check_selection(set_size, chosen_size)
    steps = min(r, n - r)
    result = 1
    for k in range(1, steps + 1):
        # exact at every step: result is C(n - steps + k, k), non-decreasing in k
        result = result * (n - steps + k) // k
        if result > U64_MAX:
            raise U64OverflowError(f"C({n}, {r}) exceeds 2**64 - 1")
    return result
