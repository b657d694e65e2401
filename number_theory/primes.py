"""
Prime generation utilities.

Responsibility: primality and prime enumeration only. No factorization.

Two enumeration strategies are kept side by side on purpose:

- primes_incremental walks (and grows) the shared PrimeCache, so later
  queries below the same limit are answered from memory;
- primes_sieve is a one-shot Sieve of Eratosthenes over odd numbers that
  never touches the cache.

They must return the same primes for the same limit.
"""

import math
import numpy as np
from typing import Iterator, Optional

from .numeric import check_i32, check_non_negative, check_u64
from .prime_cache import PrimeCache, default_cache, is_odd_prime_by_trial_division


def is_prime(n: int, cache: Optional[PrimeCache] = None) -> bool:
    """
    Return True iff n is prime.

    Values up to the cache ceiling are answered by membership; larger
    values are trial-divided by odd numbers up to isqrt(n). Never grows
    the cache.

    Parameters
    ----------
    n : int
        Value to test, 0 <= n < 2**64.
    cache : PrimeCache, optional
        Cache to consult. Defaults to the process-wide cache.

    Returns
    -------
    bool
    """
    n = check_u64(n, "n")
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    if cache is None:
        cache = default_cache()
    if n <= cache.ceiling:
        return n in cache
    return is_odd_prime_by_trial_division(n)


def nth_prime(index: int, cache: Optional[PrimeCache] = None) -> int:
    """
    Return the prime at a zero-based position (nth_prime(0) == 2).

    Grows the cache up to that prime if needed.
    """
    index = check_non_negative(index, "index")
    if cache is None:
        cache = default_cache()
    return cache.prime_at(index)


def primes_incremental(limit: int, cache: Optional[PrimeCache] = None) -> "IncrementalPrimes":
    """
    All primes <= limit in ascending order, extending the cache.

    Cached primes are emitted first; past the ceiling each newly confirmed
    prime is appended to the cache before it is yielded. The output does
    not depend on how far the cache had already grown.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive), 0 <= limit < 2**64.
    cache : PrimeCache, optional
        Cache to read and grow. Defaults to the process-wide cache.

    Returns
    -------
    IncrementalPrimes
        Lazy, restartable iterable: every iteration walks the cache again
        from 2.
    """
    limit = check_u64(limit, "limit")
    if cache is None:
        cache = default_cache()
    return IncrementalPrimes(limit, cache)


class IncrementalPrimes:
    """Restartable view of the primes <= limit backed by a PrimeCache."""

    def __init__(self, limit: int, cache: PrimeCache):
        self.limit = limit
        self.cache = cache

    def __iter__(self) -> Iterator[int]:
        return _walk_cache(self.limit, self.cache)

    def __repr__(self) -> str:
        return f"IncrementalPrimes(limit={self.limit})"


def _walk_cache(limit: int, cache: PrimeCache) -> Iterator[int]:
    index = 0
    while True:
        p = cache.prime_at(index, limit)
        if p is None:
            return
        yield p
        index += 1


def prime_flags_upto(limit: int) -> np.ndarray:
    """
    Odd-only Sieve of Eratosthenes.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive), at least 3.

    Returns
    -------
    np.ndarray
        Boolean array of length (limit - 1) // 2 + 1 where flags[i] is True
        iff 2i + 1 is prime (flags[0], standing for 1, is False).
    """
    sieve_bound = (limit - 1) // 2
    flags = np.ones(sieve_bound + 1, dtype=bool)
    flags[0] = False
    boundary = (math.isqrt(limit) - 1) // 2
    for i in range(1, boundary + 1):
        if flags[i]:
            # odd multiples of p = 2i+1 starting at p*p, whose index is 2i(i+1)
            flags[2 * i * (i + 1)::2 * i + 1] = False
    return flags


def primes_sieve(limit: int) -> np.ndarray:
    """
    Return array of all primes <= limit using a bounded sieve.

    Self-contained: does not read or grow the cache.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive), must fit in signed 32 bits.

    Returns
    -------
    np.ndarray
        Ascending int64 array of primes.
    """
    limit = check_i32(limit, "limit")
    if limit <= 1:
        return np.empty(0, dtype=np.int64)
    if limit == 2:
        return np.array([2], dtype=np.int64)
    flags = prime_flags_upto(limit)
    odd_primes = 2 * np.nonzero(flags)[0].astype(np.int64) + 1
    return np.concatenate((np.array([2], dtype=np.int64), odd_primes))
