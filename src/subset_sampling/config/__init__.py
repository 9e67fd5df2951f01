"""
Configuration module for subset sampling.

Example usage:
    from subset_sampling.config import load_config, SamplerConfig, DrawConfig

    # Load everything from one YAML file
    config = load_config('configs/local.yaml')
    sampler_config = config['sampler']

    # Or create directly
    sampler_config = SamplerConfig(exact_ratio=True, max_table_cells=None)
    draw_config = DrawConfig(n_draws=10_000, seed=7)
"""

from .base import (
    OutputPaths,
    SamplerConfig,
    DrawConfig,
    load_config,
)

__all__ = [
    'OutputPaths',
    'SamplerConfig',
    'DrawConfig',
    'load_config',
]
