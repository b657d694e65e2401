"""
Factorization utilities.

Responsibility: prime factorization and the two views of its result.
This file must not know about enumeration strategies or combinatorics.

Result views:
- mapping: {prime: exponent}, keys ascending (factorize)
- sequence: ascending primes with repetition (prime_factors)

Both are derivable from each other with factors_to_list / list_to_factors.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional

from .numeric import InvalidDomainError, check_u64
from .prime_cache import PrimeCache, default_cache


def factorize(n: int, cache: Optional[PrimeCache] = None) -> Dict[int, int]:
    """
    Decompose n into primes with exponents.

    Candidate divisors are taken from the cache in ascending order (the
    cache grows when the walk passes its ceiling). A successful division
    retries the same candidate. Once candidate**2 exceeds the remainder,
    the remainder is prime and closes the factorization.

    Parameters
    ----------
    n : int
        Integer to factor, 1 <= n < 2**64.
    cache : PrimeCache, optional
        Source of candidate divisors. Defaults to the process-wide cache.

    Returns
    -------
    dict
        {prime: exponent}, ascending by prime. Empty for n == 1.

    Raises
    ------
    InvalidDomainError
        If n == 0.
    """
    n = check_u64(n, "n")
    if n == 0:
        raise InvalidDomainError("cannot factorize 0")
    if cache is None:
        cache = default_cache()

    factors: Dict[int, int] = {}
    remaining = n
    index = 0
    while remaining > 1:
        p = cache.prime_at(index)
        if p * p > remaining:
            # no divisor up to sqrt: what is left is prime and larger than any key
            factors[remaining] = factors.get(remaining, 0) + 1
            break
        if remaining % p == 0:
            factors[p] = factors.get(p, 0) + 1
            remaining //= p
        else:
            index += 1
    return factors


def prime_factors(n: int, cache: Optional[PrimeCache] = None) -> List[int]:
    """Ascending prime factors of n with repetition, e.g. 12 -> [2, 2, 3]."""
    return factors_to_list(factorize(n, cache))


def factors_to_list(factors: Dict[int, int]) -> List[int]:
    """
    Flatten a {prime: exponent} mapping into an ascending list.

    Parameters
    ----------
    factors : dict
        Mapping as returned by factorize.

    Returns
    -------
    list
        Each prime repeated exponent times.
    """
    result = []
    for p in sorted(factors):
        result.extend([p] * factors[p])
    return result


def list_to_factors(primes: Iterable[int]) -> Dict[int, int]:
    """Group a sequence of primes into an ascending {prime: exponent} mapping."""
    counts = Counter(primes)
    return {p: counts[p] for p in sorted(counts)}


def multiply_out(factors: Dict[int, int]) -> int:
    """Product of prime**exponent over the mapping (1 for an empty mapping)."""
    product = 1
    for p, e in factors.items():
        product *= p ** e
    return product
