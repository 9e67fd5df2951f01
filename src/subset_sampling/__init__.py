"""
Subset Sampling: uniform random subsets with an exact target sum.

This package provides tools for:
- Counting the subsets of a weight vector that sum exactly to a target
- Drawing one such subset uniformly at random, reproducibly from a seed
- Drawing many subsets from a single count table and saving them
- Checking drawn frequencies against the uniform expectation

Quick Start:
    from subset_sampling import uniform_subset_sum_indices

    weights = [10, 20, 30, 40, 50]
    indices = uniform_subset_sum_indices(weights, 80, rng=42)
    # e.g. [0, 2, 3] -> 10 + 30 + 40 == 80

Modules:
    sampling: Count table and backward sampler
    config: Configuration (sampler, draws, output paths)
    builder: Repeated draws (SubsetDrawBuilder)
    loaders: Weight and draw file readers
    evaluation: Uniformity diagnostics
"""

__version__ = '0.1.0'

from .sampling import (
    InvalidArgument,
    TableTooLarge,
    InternalInconsistency,
    CountTable,
    build_count_table,
    sample_from_table,
    uniform_subset_sum_indices,
    count_subsets,
)

from .config import (
    OutputPaths,
    SamplerConfig,
    DrawConfig,
    load_config,
)

from .builder import SubsetDrawBuilder, SubsetDraw

__all__ = [
    # Version
    '__version__',
    # Sampling
    'InvalidArgument',
    'TableTooLarge',
    'InternalInconsistency',
    'CountTable',
    'build_count_table',
    'sample_from_table',
    'uniform_subset_sum_indices',
    'count_subsets',
    # Config
    'OutputPaths',
    'SamplerConfig',
    'DrawConfig',
    'load_config',
    # Builder
    'SubsetDrawBuilder',
    'SubsetDraw',
]
