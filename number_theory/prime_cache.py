"""
Shared prime cache.

Responsibility: the append-only, ascending record of primes found so far.
No enumeration or factorization logic lives here.

Seeded with the 168 primes below 1000. Growth (extend, prime_at) derives
the next candidate from the ceiling while holding the lock, so two threads
can never append the same prime or append out of order. Readers do not
lock: they capture the current length and only touch slots below it,
which never change once written.
"""

import math
import threading
from bisect import bisect_left, bisect_right
from typing import Iterator, List, Optional

from .numeric import InvalidDomainError

SEED_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67,
    71, 73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139,
    149, 151, 157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223,
    227, 229, 233, 239, 241, 251, 257, 263, 269, 271, 277, 281, 283, 293,
    307, 311, 313, 317, 331, 337, 347, 349, 353, 359, 367, 373, 379, 383,
    389, 397, 401, 409, 419, 421, 431, 433, 439, 443, 449, 457, 461, 463,
    467, 479, 487, 491, 499, 503, 509, 521, 523, 541, 547, 557, 563, 569,
    571, 577, 587, 593, 599, 601, 607, 613, 617, 619, 631, 641, 643, 647,
    653, 659, 661, 673, 677, 683, 691, 701, 709, 719, 727, 733, 739, 743,
    751, 757, 761, 769, 773, 787, 797, 809, 811, 821, 823, 827, 829, 839,
    853, 857, 859, 863, 877, 881, 883, 887, 907, 911, 919, 929, 937, 941,
    947, 953, 967, 971, 977, 983, 991, 997,
)


def is_odd_prime_by_trial_division(n: int) -> bool:
    """
    Trial-divide an odd n > 2 by every odd integer 3..isqrt(n).

    Parameters
    ----------
    n : int
        Odd integer greater than 2.

    Returns
    -------
    bool
        True if no odd divisor was found.
    """
    bound = math.isqrt(n)
    for d in range(3, bound + 1, 2):
        if n % d == 0:
            return False
    return True


class PrimeCache:
    """
    Ascending, duplicate-free list of the smallest primes, grown on demand.

    Parameters
    ----------
    seed : sequence of int, optional
        Initial primes. Must be every prime up to its last element, in
        ascending order, starting at 2 (defaults to the primes below 1000).
    """

    def __init__(self, seed=SEED_PRIMES):
        primes = list(seed)
        if not primes or primes[0] != 2:
            raise InvalidDomainError("seed must start at 2")
        if any(a >= b for a, b in zip(primes, primes[1:])):
            raise InvalidDomainError("seed must be strictly ascending")
        self._primes: List[int] = primes
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._primes)

    def __getitem__(self, index: int) -> int:
        return self._primes[index]

    def __iter__(self) -> Iterator[int]:
        size = len(self._primes)
        for i in range(size):
            yield self._primes[i]

    def __contains__(self, n: int) -> bool:
        size = len(self._primes)
        i = bisect_left(self._primes, n, 0, size)
        return i < size and self._primes[i] == n

    def __repr__(self) -> str:
        return f"PrimeCache(size={len(self)}, ceiling={self.ceiling})"

    @property
    def ceiling(self) -> int:
        """Largest cached prime. Every prime below it is cached too."""
        return self._primes[-1]

    def primes_upto(self, limit: int) -> List[int]:
        """Return the cached primes <= limit (no growth)."""
        size = len(self._primes)
        end = bisect_right(self._primes, limit, 0, size)
        return self._primes[:end]

    def extend(self, limit: Optional[int] = None) -> Optional[int]:
        """
        Append the next prime after the ceiling.

        Parameters
        ----------
        limit : int, optional
            Do not look past this value. If None, search until a prime is found.

        Returns
        -------
        int or None
            The prime appended, or None if there is no prime in
            (ceiling, limit].
        """
        with self._lock:
            return self._append_next(limit)

    def _append_next(self, limit: Optional[int]) -> Optional[int]:
        # caller holds self._lock
        candidate = self._primes[-1] + 2
        if candidate == 4:  # seed of just [2]
            candidate = 3
        while limit is None or candidate <= limit:
            if is_odd_prime_by_trial_division(candidate):
                self._primes.append(candidate)
                return candidate
            candidate += 2
        return None

    def prime_at(self, index: int, limit: Optional[int] = None) -> Optional[int]:
        """
        Return the prime at a zero-based position, growing the cache to reach it.

        Returns None when limit is given and that prime would exceed it.
        """
        if index >= len(self._primes):
            with self._lock:
                while len(self._primes) <= index:
                    if self._append_next(limit) is None:
                        return None
        p = self._primes[index]
        return p if limit is None or p <= limit else None


_default_cache: Optional[PrimeCache] = None
_default_lock = threading.Lock()


def default_cache() -> PrimeCache:
    """Return the process-wide cache, creating it on first use."""
    global _default_cache
    if _default_cache is None:
        with _default_lock:
            if _default_cache is None:
                _default_cache = PrimeCache()
    return _default_cache
