"""
Uniform sampling of subsets with an exact target sum.

The sampler walks a CountTable backward from (n, target) to (0, 0). At each
element it includes the element with probability

    ways_include / (ways_exclude + ways_include)

where each term is the number of ways to finish the walk from the
corresponding branch. Conditioning on completions this way makes every valid
subset equally likely.
"""

import logging
from fractions import Fraction
from typing import Any, Optional, Sequence, Union

from .errors import InternalInconsistency, InvalidArgument
from .table import CountTable, build_count_table
from .utils import resolve_rng, validate_target, validate_weights

logger = logging.getLogger(__name__)


def _include(ways_include: int, total: int, r: float, exact: bool) -> bool:
    if exact:
        return Fraction(r) < Fraction(ways_include, total)
    # int / int is correctly rounded, even for counts beyond float range
    return r < ways_include / total


def sample_from_table(
    table: CountTable,
    weights: Sequence[Any],
    target: Any,
    rng: Any,
    exact: bool = False,
) -> list[int]:
    """
    Draw one subset uniformly from the subsets counted in ``table``.

    Parameters
    ----------
    table : CountTable
        Table built from the same weights and target. It is only read.
    weights : sequence of int
        The weights the table was built from.
    target : int
        The target the table was built for.
    rng : RandomState, Generator, random.Random, int or None
        Source of uniform draws in [0, 1). Exactly one draw is taken per
        weight, none when there is no solution.
    exact : bool, default False
        Compare each draw against the exact rational inclusion probability
        instead of its float rounding.

    Returns
    -------
    list[int]
        Ascending indices into weights whose values sum to target, or an
        empty list when no subset sums to target.

    Raises
    ------
    InvalidArgument
        If the table's shape does not match weights and target.
    InternalInconsistency
        If the walk reaches a state with no completions.
    """
    weights = validate_weights(weights)
    target = validate_target(target)
    n = len(weights)
    if table.n_items != n or table.target != target:
        raise InvalidArgument(
            f"Table shape ({table.n_items}, {table.target}) does not match "
            f"{n} weights and target {target}"
        )

    if table.total == 0:
        return []

    rng = resolve_rng(rng)
    counts = table.counts
    selected = []
    s = target

    for i in range(n, 0, -1):
        w = weights[i - 1]
        ways_exclude = counts[i - 1, s]
        ways_include = counts[i - 1, s - w] if w <= s else 0
        total = ways_exclude + ways_include
        if total == 0:
            raise InternalInconsistency(
                f"No completions from element {i - 1} with remaining sum {s}"
            )

        r = float(rng.random())
        if _include(ways_include, total, r, exact):
            selected.append(i - 1)
            s -= w

    if s != 0:
        raise InternalInconsistency(f"Backward walk ended with remaining sum {s}")

    selected.reverse()
    return selected


def uniform_subset_sum_indices(
    weights: Sequence[Any],
    target: Any,
    rng: Union[None, int, Any] = None,
    exact: bool = False,
    max_cells: Optional[int] = None,
) -> list[int]:
    """
    Pick a uniformly random subset of weights summing exactly to target.

    Builds the count table, samples once and discards the table.

    Example
    -------
    >>> weights = [10, 20, 30, 40, 50]
    >>> indices = uniform_subset_sum_indices(weights, 80, rng=42)
    >>> sum(weights[i] for i in indices)
    80
    """
    table = build_count_table(weights, target, max_cells=max_cells)
    logger.debug("%d subsets sum to %d", table.total, table.target)
    return sample_from_table(table, weights, target, rng, exact=exact)


def count_subsets(
    weights: Sequence[Any],
    target: Any,
    max_cells: Optional[int] = None,
) -> int:
    """Number of distinct index subsets of weights summing exactly to target."""
    return build_count_table(weights, target, max_cells=max_cells).total
