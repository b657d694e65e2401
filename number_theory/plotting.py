"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_enumeration_timings(df: pd.DataFrame,
                             output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot incremental vs sieve enumeration time per limit.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from compare_enumerators with columns:
        limit, seconds_incremental, seconds_sieve.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 5))

    ax.plot(df['limit'], df['seconds_incremental'], 'o-', label='Incremental (cache)')
    ax.plot(df['limit'], df['seconds_sieve'], 's--', label='Sieve (one-shot)')

    ax.set_xscale('log')
    ax.set_xlabel('limit')
    ax.set_ylabel('seconds')
    ax.set_title('Prime enumeration strategies')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_prime_counts(df: pd.DataFrame,
                      output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot pi(x) from compare_enumerators against x / ln x.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame with columns: limit, count_sieve.
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 5))

    df = df[df['limit'] >= 2]
    x = df['limit'].to_numpy(dtype=float)

    ax.plot(x, df['count_sieve'], 'o-', label='pi(x)')
    ax.plot(x, x / np.log(x), 's--', label='x / ln x')

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('x')
    ax.set_ylabel('count')
    ax.set_title('Prime counting function')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
