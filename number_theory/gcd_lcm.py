"""
Greatest common divisor and least common multiple.

Responsibility: GCD/LCM of u64 values. The n-ary LCM merges prime
factorizations by maximum exponent instead of folding pairwise.
"""

from typing import Dict, Iterable, Optional

from .factorization import factorize, multiply_out
from .numeric import InvalidDomainError, check_u64, checked_u64
from .prime_cache import PrimeCache


def gcd(a: int, b: int) -> int:
    """Euclidean GCD; gcd(a, 0) == a."""
    a = check_u64(a, "a")
    b = check_u64(b, "b")
    while b:
        a, b = b, a % b
    return a


def gcd_many(values: Iterable[int]) -> int:
    """
    GCD of two or more values.

    Folds left to right and stops as soon as the running result is 1.

    Parameters
    ----------
    values : iterable of int
        At least two non-negative integers.

    Returns
    -------
    int
    """
    values = list(values)
    if len(values) < 2:
        raise InvalidDomainError(f"gcd_many needs at least 2 values, got {len(values)}")
    result = check_u64(values[0], "values[0]")
    for value in values[1:]:
        result = gcd(value, result)
        if result == 1:
            break
    return result


def lcm(a: int, b: int) -> int:
    """
    LCM of two values: a * b / gcd(a, b), and 0 when either is 0.

    Raises
    ------
    U64OverflowError
        If the result does not fit in 64 bits.
    """
    a = check_u64(a, "a")
    b = check_u64(b, "b")
    if a == 0 or b == 0:
        return 0
    return checked_u64(a * b // gcd(a, b), f"lcm({a}, {b})")


def lcm_many(values: Iterable[int], cache: Optional[PrimeCache] = None) -> int:
    """
    LCM of any number of values via factorization.

    Each value is factorized, the highest exponent seen for every prime is
    kept, and the result is the product of prime**max_exponent.

    Parameters
    ----------
    values : iterable of int
        Non-negative integers.
    cache : PrimeCache, optional
        Cache used by factorize.

    Returns
    -------
    int
        0 for an empty input or when every value is 0. Zeros among
        non-zero values contribute no prime factors and are skipped.
    """
    values = [check_u64(v, f"values[{i}]") for i, v in enumerate(values)]
    if not any(values):
        return 0

    merged: Dict[int, int] = {}
    for value in values:
        if value == 0:
            continue
        for p, e in factorize(value, cache).items():
            if e > merged.get(p, 0):
                merged[p] = e
    merged = {p: merged[p] for p in sorted(merged)}
    return checked_u64(multiply_out(merged), f"lcm of {len(values)} values")
