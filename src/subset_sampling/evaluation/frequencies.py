"""
Frequency diagnostics for repeated subset draws.

Every valid subset should appear with probability 1 / n_solutions. These
helpers tally draws into a DataFrame and compare observed frequencies with
that expectation using binomial standard errors and a chi-square goodness-of-fit test.
"""

from collections import Counter
from typing import Any, Dict, Iterable, Sequence, Union

import numpy as np
import pandas as pd
from scipy import stats

from ..builder.dataclasses import SubsetDraw

DrawLike = Union[SubsetDraw, Sequence[int]]


def _draw_key(draw: DrawLike) -> tuple:
    if isinstance(draw, SubsetDraw):
        return draw.key
    return tuple(int(i) for i in draw)


def check_draws_match(draws: Iterable[SubsetDraw], weights: Sequence[int], target: int) -> None:
    """
    Make sure saved draws belong to the instance (weights, target).

    Raises
    ------
    ValueError
        If a draw has another target, an index outside weights, or indices
        whose weights do not sum to target.
    """
    for d in draws:
        if d.target != target:
            raise ValueError(
                f"Draw {d.draw_id} has target {d.target}, expected {target}"
            )
        if any(i < 0 or i >= len(weights) for i in d.indices):
            raise ValueError(
                f"Draw {d.draw_id} has indices outside {len(weights)} weights: {d.indices}"
            )
        total = sum(weights[i] for i in d.indices)
        if total != target:
            raise ValueError(
                f"Draw {d.draw_id} indices sum to {total} with these weights, expected {target}"
            )


def tabulate_draws(draws: Iterable[DrawLike], n_solutions: int) -> pd.DataFrame:
    """
    Tally draws by subset.

    Parameters
    ----------
    draws : iterable of SubsetDraw or index sequences
        Drawn subsets
    n_solutions : int
        Total number of valid subsets (see count_subsets)

    Returns
    -------
    pd.DataFrame
        Columns: indices, size, count, frequency, expected_frequency,
        std_error, z_score. One row per distinct subset observed, sorted by
        indices.
    """
    if n_solutions < 1:
        raise ValueError(f"n_solutions must be positive, got {n_solutions}")

    tally = Counter(_draw_key(d) for d in draws)
    n_draws = sum(tally.values())
    if n_draws == 0:
        raise ValueError("No draws to tabulate")
    if len(tally) > n_solutions:
        raise ValueError(
            f"Observed {len(tally)} distinct subsets but only {n_solutions} exist"
        )

    p = 1.0 / n_solutions
    std_error = np.sqrt(p * (1.0 - p) / n_draws)

    keys = sorted(tally)
    df = pd.DataFrame({
        'indices': keys,
        'size': [len(k) for k in keys],
        'count': [tally[k] for k in keys],
    })
    df['frequency'] = df['count'] / n_draws
    df['expected_frequency'] = p
    df['std_error'] = std_error
    if std_error > 0:
        df['z_score'] = (df['frequency'] - p) / std_error
    else:
        # a single solution is always drawn
        df['z_score'] = 0.0
    return df


def uniformity_summary(
    freq_df: pd.DataFrame,
    n_solutions: int,
) -> Dict[str, Any]:
    """
    Summarize how far a frequency table is from uniform.

    Runs a chi-square goodness-of-fit test against equal probabilities over
    all n_solutions subsets. Unseen subsets enter the test with an observed
    count of zero.

    Returns
    -------
    dict
        n_draws, n_solutions, n_observed, n_unseen, chi2, dof, p_value,
        max_abs_z
    """
    counts = freq_df['count'].to_numpy(dtype=float)
    n_draws = int(counts.sum())
    n_observed = len(freq_df)
    n_unseen = n_solutions - n_observed
    dof = n_solutions - 1

    if dof > 0:
        f_obs = np.concatenate([counts, np.zeros(n_unseen)])
        chi2, p_value = stats.chisquare(f_obs=f_obs)
    else:
        # a single solution is always drawn
        chi2, p_value = 0.0, 1.0

    return {
        'n_draws': n_draws,
        'n_solutions': n_solutions,
        'n_observed': n_observed,
        'n_unseen': n_unseen,
        'chi2': float(chi2),
        'dof': dof,
        'p_value': float(p_value),
        'max_abs_z': float(freq_df['z_score'].abs().max()),
    }


def is_consistent_with_uniform(summary: Dict[str, Any], alpha: float = 0.001) -> bool:
    """True unless the chi-square test rejects uniformity at level alpha."""
    return summary['p_value'] >= alpha


def print_summary(summary: Dict[str, Any]) -> None:
    print(f"Draws:            {summary['n_draws']:,}")
    print(f"Valid subsets:    {summary['n_solutions']:,}")
    print(f"Observed subsets: {summary['n_observed']:,} ({summary['n_unseen']:,} unseen)")
    print(f"Chi-square:       {summary['chi2']:.2f} on {summary['dof']} dof (p = {summary['p_value']:.4g})")
    print(f"Max |z|:          {summary['max_abs_z']:.2f}")
