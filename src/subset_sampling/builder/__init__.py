"""
Repeated-draw module for subset sampling.

Example usage:
    from subset_sampling.config import SamplerConfig, DrawConfig, OutputPaths
    from subset_sampling.builder import SubsetDrawBuilder

    builder = SubsetDrawBuilder(
        SamplerConfig(),
        DrawConfig(n_draws=1000, seed=42),
        paths=OutputPaths(output_dir='./outputs'),
    )
    draws = builder.draw([10, 20, 30, 40, 50], 80)
    builder.save_jsonl(draws, 'draws.jsonl')
"""

from .builder import SubsetDrawBuilder
from .dataclasses import SubsetDraw

__all__ = ['SubsetDrawBuilder', 'SubsetDraw']
