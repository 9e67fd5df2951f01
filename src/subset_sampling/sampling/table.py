"""
Subset-count table construction.

Cell (i, s) of the table holds the number of subsets of the first i weights
whose sum is exactly s:

    table[0, 0] = 1
    table[0, s] = 0                                   for s > 0
    table[i, s] = table[i-1, s] + table[i-1, s - w]   (second term only if w <= s)

with w = weights[i-1]. Counts grow up to 2**n, so the table is stored as a
numpy array of dtype=object holding Python ints.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from .utils import check_table_size, validate_target, validate_weights

logger = logging.getLogger(__name__)


@dataclass
class CountTable:
    """Dense (n+1) x (target+1) table of subset counts."""
    counts: np.ndarray

    @property
    def n_items(self) -> int:
        return self.counts.shape[0] - 1

    @property
    def target(self) -> int:
        return self.counts.shape[1] - 1

    @property
    def total(self) -> int:
        """Number of subsets of all weights summing to the target."""
        return self.counts[self.n_items, self.target]

    def cell(self, i: int, s: int) -> int:
        """Number of subsets of the first i weights summing to s."""
        return self.counts[i, s]


def build_count_table(
    weights: Sequence[Any],
    target: Any,
    max_cells: Optional[int] = None,
) -> CountTable:
    """
    Build the subset-count table for weights and target.

    Rows are filled in order of prefix length. Each row depends only on the
    finished row above it, so it is computed as one vectorised step.

    Parameters
    ----------
    weights : sequence of int
        Non-negative integer weights. Zero is allowed and doubles every count
        from its row onward.
    target : int
        Non-negative target sum.
    max_cells : int, optional
        Upper bound on (n+1) * (target+1). None means no bound.

    Returns
    -------
    CountTable

    Raises
    ------
    InvalidArgument
        If a weight or the target is negative or not an integer.
    TableTooLarge
        If the table would exceed max_cells.
    """
    weights = validate_weights(weights)
    target = validate_target(target)
    n = len(weights)
    n_cells = check_table_size(n, target, max_cells)
    logger.debug("Building count table: %d weights, target %d, %d cells", n, target, n_cells)

    counts = np.zeros((n + 1, target + 1), dtype=object)
    counts[0, 0] = 1

    for i in range(1, n + 1):
        w = weights[i - 1]
        counts[i] = counts[i - 1]
        if w <= target:
            counts[i, w:] += counts[i - 1, :target + 1 - w]

    return CountTable(counts)
