"""
Cross-validation reports.

Responsibility: run the engine's operations against each other and
tabulate agreement and timings. No plotting here.
"""

import time
import numpy as np
import pandas as pd
from typing import List, Optional

from .factorization import factorize, prime_factors, factors_to_list, multiply_out
from .fibonacci import by_index, by_max_value, by_quantity
from .prime_cache import PrimeCache, default_cache
from .primes import nth_prime, primes_incremental, primes_sieve


def compare_enumerators(limits: List[int], cache: Optional[PrimeCache] = None,
                        verbose: bool = False) -> pd.DataFrame:
    """
    Enumerate primes <= limit with both strategies and compare.

    Parameters
    ----------
    limits : list of int
        Upper bounds to check, processed in the given order (the cache
        keeps whatever the incremental walk added).
    cache : PrimeCache, optional
        Cache for the incremental strategy.
    verbose : bool
        Print one line per limit.

    Returns
    -------
    pd.DataFrame
        Columns: limit, count_incremental, count_sieve, match,
        seconds_incremental, seconds_sieve, cache_size.
    """
    if cache is None:
        cache = default_cache()

    rows = []
    for limit in limits:
        t0 = time.time()
        incremental = np.fromiter(primes_incremental(limit, cache), dtype=np.int64)
        t_inc = time.time() - t0

        t0 = time.time()
        sieved = primes_sieve(limit)
        t_sieve = time.time() - t0

        match = np.array_equal(incremental, sieved)
        rows.append({
            'limit': limit,
            'count_incremental': len(incremental),
            'count_sieve': len(sieved),
            'match': match,
            'seconds_incremental': t_inc,
            'seconds_sieve': t_sieve,
            'cache_size': len(cache),
        })

        if verbose:
            mark = '✓' if match else '✗'
            print(f"  {mark} limit={limit:,}: {len(sieved):,} primes "
                  f"(incremental {t_inc:.3f}s, sieve {t_sieve:.3f}s)")

    return pd.DataFrame(rows)


def check_factorizations(max_n: int, cache: Optional[PrimeCache] = None) -> pd.DataFrame:
    """
    Factor every n in 2..max_n and check both result views.

    Returns
    -------
    pd.DataFrame
        Columns: n, distinct (omega), total (Omega), product_ok, views_ok.
    """
    rows = []
    for n in range(2, max_n + 1):
        factors = factorize(n, cache)
        flat = prime_factors(n, cache)
        rows.append({
            'n': n,
            'distinct': len(factors),
            'total': len(flat),
            'product_ok': multiply_out(factors) == n,
            'views_ok': factors_to_list(factors) == flat,
        })
    return pd.DataFrame(rows, columns=['n', 'distinct', 'total', 'product_ok', 'views_ok'])


def time_nth_primes(indices: List[int], cache: Optional[PrimeCache] = None,
                    verbose: bool = False) -> pd.DataFrame:
    """Resolve each index with nth_prime and record the time taken."""
    rows = []
    for index in indices:
        t0 = time.time()
        p = nth_prime(index, cache)
        elapsed = time.time() - t0
        rows.append({'index': index, 'prime': p, 'seconds': elapsed})
        if verbose:
            print(f"  nth_prime({index:,}) = {p:,} ({elapsed:.3f}s)")
    return pd.DataFrame(rows)


def check_fibonacci(count: int) -> pd.DataFrame:
    """
    Compare by_quantity against by_index, and by_max_value against both.

    Returns
    -------
    pd.DataFrame
        Columns: index, value, by_index_ok. The attribute
        df.attrs['max_value_ok'] records whether by_max_value(last value)
        reproduced the same sequence.
    """
    values = list(by_quantity(count))
    df = pd.DataFrame({
        'index': np.arange(count, dtype=np.int64),
        # object dtype: F(93) does not fit in int64
        'value': pd.Series(values, dtype=object),
        'by_index_ok': [by_index(i) == v for i, v in enumerate(values)],
    })
    if values:
        # by_max_value(1) repeats the 1, so only the first count terms are compared
        df.attrs['max_value_ok'] = list(by_max_value(values[-1]))[:count] == values
    else:
        df.attrs['max_value_ok'] = True
    return df
