"""
Exact Subset-Sum Sampling Module

This package builds subset-count tables and draws subsets whose weights sum
exactly to a target, uniformly over all such subsets.
"""

from .errors import (
    InvalidArgument,
    TableTooLarge,
    InternalInconsistency,
)
from .table import (
    CountTable,
    build_count_table,
)
from .sampler import (
    sample_from_table,
    uniform_subset_sum_indices,
    count_subsets,
)
from .utils import (
    resolve_rng,
    derive_draw_seed,
)

__all__ = [
    # Errors
    'InvalidArgument',
    'TableTooLarge',
    'InternalInconsistency',
    # Table
    'CountTable',
    'build_count_table',
    # Sampling
    'sample_from_table',
    'uniform_subset_sum_indices',
    'count_subsets',
    # Utilities
    'resolve_rng',
    'derive_draw_seed',
]
