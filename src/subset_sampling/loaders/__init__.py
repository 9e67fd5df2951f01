"""
Data loading module for subset sampling.

Example usage:
    from subset_sampling.loaders import load_weights, load_draws_jsonl

    weights, target = load_weights('deaths.json')
    draws = load_draws_jsonl('outputs/draws.jsonl')
"""

from .file_io import (
    load_weights,
    load_text_weights,
    load_draws_jsonl,
)

__all__ = [
    'load_weights',
    'load_text_weights',
    'load_draws_jsonl',
]
