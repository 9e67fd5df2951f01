"""
Uniformity diagnostics for subset draws.
"""

from .frequencies import (
    check_draws_match,
    tabulate_draws,
    uniformity_summary,
    is_consistent_with_uniform,
    print_summary,
)

__all__ = [
    'check_draws_match',
    'tabulate_draws',
    'uniformity_summary',
    'is_consistent_with_uniform',
    'print_summary',
]
