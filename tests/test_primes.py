"""
Tests for primality and the two enumeration strategies.

The incremental (cache-growing) and sieve strategies are independent
implementations; the cross-validation class checks they agree.
"""

import numpy as np
import pytest

from number_theory.numeric import InvalidDomainError
from number_theory.prime_cache import PrimeCache
from number_theory.primes import (
    is_prime,
    nth_prime,
    prime_flags_upto,
    primes_incremental,
    primes_sieve,
)


# Known small primes for testing
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


def naive_is_prime(n):
    return n >= 2 and all(n % d for d in range(2, int(n**0.5) + 1))


class TestIsPrime:

    @pytest.mark.parametrize("n,expected", [
        (0, False), (1, False), (2, True), (3, True), (4, False),
        (5, True), (6, False), (7, True), (8, False), (9, False),
        (10, False), (11, True), (19, True), (647, True), (2477, True),
    ])
    def test_known_values(self, n, expected):
        assert is_prime(n, PrimeCache()) == expected

    def test_agrees_with_trial_division(self):
        """Both the cached range and the trial-division range are correct."""
        cache = PrimeCache()
        for n in range(0, 5000):
            assert is_prime(n, cache) == naive_is_prime(n), f"is_prime({n})"

    def test_even_values_above_ceiling(self):
        cache = PrimeCache()
        assert not is_prime(1000, cache)
        assert not is_prime(2**40, cache)

    def test_large_values(self):
        cache = PrimeCache()
        assert is_prime(104743, cache)
        assert is_prime(1000000007, cache)
        assert not is_prime(1000000007 * 3, cache)
        assert not is_prime(999983 * 999979, cache)

    def test_does_not_grow_cache(self):
        cache = PrimeCache()
        is_prime(1009, cache)
        is_prime(7919, cache)
        assert len(cache) == 168

    def test_uses_grown_cache(self):
        cache = PrimeCache()
        cache.prime_at(300)
        assert cache.ceiling > 1009
        assert is_prime(1009, cache)
        assert not is_prime(1011, cache)

    def test_invalid_input(self):
        with pytest.raises(InvalidDomainError):
            is_prime(-7)
        with pytest.raises(InvalidDomainError):
            is_prime(2**64)
        with pytest.raises(InvalidDomainError):
            is_prime(7.0)


class TestNthPrime:

    @pytest.mark.parametrize("index,expected", [
        (0, 2), (1, 3), (2, 5), (3, 7), (4, 11), (5, 13), (6, 17),
        (167, 997), (168, 1009),
    ])
    def test_known_values(self, index, expected):
        assert nth_prime(index, PrimeCache()) == expected

    def test_ten_thousandth(self):
        cache = PrimeCache()
        assert nth_prime(10000, cache) == 104743
        assert len(cache) == 10001

    def test_negative_index(self):
        with pytest.raises(InvalidDomainError):
            nth_prime(-1)


class TestPrimesIncremental:

    def test_small_limits(self):
        cache = PrimeCache()
        assert list(primes_incremental(0, cache)) == []
        assert list(primes_incremental(1, cache)) == []
        assert list(primes_incremental(2, cache)) == [2]
        assert list(primes_incremental(3, cache)) == [2, 3]
        assert list(primes_incremental(4, cache)) == [2, 3]
        assert list(primes_incremental(7, cache)) == [2, 3, 5, 7]

    def test_seed_range(self):
        cache = PrimeCache()
        assert list(primes_incremental(998, cache)) == [n for n in range(999) if naive_is_prime(n)]
        assert len(cache) == 168

    def test_grows_cache_past_seed(self):
        cache = PrimeCache()
        primes = list(primes_incremental(1010, cache))
        assert primes[-1] == 1009
        assert cache.ceiling == 1009

    def test_stops_at_limit(self):
        """No prime beyond the limit is appended."""
        cache = PrimeCache()
        list(primes_incremental(1020, cache))
        assert cache.ceiling == 1019
        list(primes_incremental(1020, cache))
        assert cache.ceiling == 1019

    def test_is_lazy(self):
        cache = PrimeCache()
        primes = iter(primes_incremental(10**6, cache))
        assert next(primes) == 2
        assert len(cache) == 168

    def test_restartable(self):
        """Iterating the same result twice walks the primes again from 2."""
        cache = PrimeCache()
        primes = primes_incremental(1100, cache)
        first = list(primes)
        assert list(primes) == first
        assert first[0] == 2
        assert first[-1] == 1097

    def test_idempotent_regardless_of_cache_history(self):
        fresh = list(primes_incremental(5000, PrimeCache()))
        grown = PrimeCache()
        grown.prime_at(2000)
        assert list(primes_incremental(5000, grown)) == fresh
        assert list(primes_incremental(5000, PrimeCache([2]))) == fresh

    def test_invalid_limit_fails_immediately(self):
        with pytest.raises(InvalidDomainError):
            primes_incremental(-1)


class TestPrimesSieve:

    def test_small_limits(self):
        assert primes_sieve(-5).tolist() == []
        assert primes_sieve(0).tolist() == []
        assert primes_sieve(1).tolist() == []
        assert primes_sieve(2).tolist() == [2]
        assert primes_sieve(3).tolist() == [2, 3]
        assert primes_sieve(4).tolist() == [2, 3]
        assert primes_sieve(5).tolist() == [2, 3, 5]
        assert primes_sieve(6).tolist() == [2, 3, 5]
        assert primes_sieve(7).tolist() == [2, 3, 5, 7]

    def test_squares_of_primes_are_removed(self):
        primes = set(primes_sieve(1000).tolist())
        for p in SMALL_PRIMES:
            assert p * p not in primes
        for n in SMALL_COMPOSITES:
            assert n not in primes

    def test_prime_count(self):
        assert len(primes_sieve(100)) == 25
        assert len(primes_sieve(10**6)) == 78498

    def test_odd_flags_layout(self):
        flags = prime_flags_upto(15)
        # indices 0..7 stand for 1, 3, 5, ..., 15
        assert flags.tolist() == [False, True, True, True, False, True, True, False]

    def test_dtype(self):
        assert primes_sieve(50).dtype == np.int64
        assert primes_sieve(1).dtype == np.int64

    def test_limit_must_fit_in_32_bits(self):
        with pytest.raises(InvalidDomainError):
            primes_sieve(2**31)


class TestCrossValidation:
    """Both strategies must return the same primes for the same limit."""

    def test_every_limit_up_to_1100(self):
        cache = PrimeCache()
        for limit in range(0, 1100):
            incremental = np.array(list(primes_incremental(limit, cache)), dtype=np.int64)
            assert np.array_equal(incremental, primes_sieve(limit)), f"mismatch at limit={limit}"

    @pytest.mark.parametrize("limit", [997, 1000, 1009, 7919, 7920, 30030, 100000])
    def test_larger_limits(self, limit):
        incremental = list(primes_incremental(limit, PrimeCache()))
        assert set(incremental) == set(primes_sieve(limit).tolist())
