#!/usr/bin/env python3
"""
Full verification script.

Cross-checks the two prime enumerators, every factorization up to a bound,
nth-prime lookups and the Fibonacci generators, then writes the tables as
CSV (and optionally figures).

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
import sys
import yaml
from pathlib import Path
import time

from number_theory.prime_cache import PrimeCache
from number_theory.verification import (
    compare_enumerators,
    check_factorizations,
    time_nth_primes,
    check_fibonacci,
)


def main():
    parser = argparse.ArgumentParser(description='Verify the number theory engine')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    args = parser.parse_args()

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f)

    print("=" * 60)
    print("Number Theory Engine - Verification Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  limits = {config['limits']}")
    print(f"  nth_prime_indices = {config['nth_prime_indices']}")
    print(f"  factorization_max = {config['factorization_max']:,}")
    print(f"  fibonacci_count = {config['fibonacci_count']}")
    print()

    output_dir = Path(config.get('output_dir', 'data/results'))
    output_dir.mkdir(parents=True, exist_ok=True)

    # One cache for the whole run, so later steps reuse earlier growth
    cache = PrimeCache()
    total_start = time.time()
    failures = []

    # 1. Enumeration strategies
    print("-" * 60)
    print("1. Incremental vs sieve enumeration")
    print("-" * 60)
    start = time.time()
    df_enum = compare_enumerators(config['limits'], cache, verbose=True)
    df_enum.to_csv(output_dir / 'enumeration.csv', index=False)
    if not df_enum['match'].all():
        failures.append('enumeration')
    print(f"   Completed in {time.time() - start:.1f}s (cache size {len(cache):,})")
    print()

    # 2. nth prime
    print("-" * 60)
    print("2. nth prime")
    print("-" * 60)
    start = time.time()
    df_nth = time_nth_primes(config['nth_prime_indices'], cache, verbose=True)
    df_nth.to_csv(output_dir / 'nth_prime.csv', index=False)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Factorization
    print("-" * 60)
    print(f"3. Factorization of 2..{config['factorization_max']:,}")
    print("-" * 60)
    start = time.time()
    df_fact = check_factorizations(config['factorization_max'], cache)
    df_fact.to_csv(output_dir / 'factorization.csv', index=False)
    bad = df_fact[~(df_fact['product_ok'] & df_fact['views_ok'])]
    if len(bad) == 0:
        print(f"  ✓ All {len(df_fact):,} factorizations multiply back")
    else:
        print(f"  ✗ {len(bad):,} factorizations failed, first: n={bad['n'].iloc[0]}")
        failures.append('factorization')
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 4. Fibonacci
    print("-" * 60)
    print("4. Fibonacci")
    print("-" * 60)
    df_fib = check_fibonacci(config['fibonacci_count'])
    df_fib.to_csv(output_dir / 'fibonacci.csv', index=False)
    if df_fib['by_index_ok'].all() and df_fib.attrs['max_value_ok']:
        print(f"  ✓ {len(df_fib)} terms agree across by_quantity/by_index/by_max_value")
    else:
        print(f"  ✗ Fibonacci generators disagree")
        failures.append('fibonacci')
    print()

    # 5. Figures
    if config.get('plots', False):
        from number_theory.plotting import plot_enumeration_timings, plot_prime_counts

        print("-" * 60)
        print("5. Generating Figures")
        print("-" * 60)
        figures_dir = output_dir / 'figures'
        figures_dir.mkdir(exist_ok=True)

        print("  - Enumeration timings...")
        plot_enumeration_timings(df_enum, figures_dir / 'enumeration_timings.png')

        print("  - Prime counts...")
        plot_prime_counts(df_enum, figures_dir / 'prime_counts.png')
        print()

    # Summary
    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"Final cache: {cache}")
    print(f"\nOutputs saved to: {output_dir.absolute()}")

    print("\nEnumeration summary:")
    print(df_enum[['limit', 'count_incremental', 'count_sieve', 'match']].to_string(index=False))

    if failures:
        print(f"\n✗ Failed checks: {', '.join(failures)}")
        sys.exit(1)
    print("\n✓ All verifications passed!")


if __name__ == '__main__':
    main()
