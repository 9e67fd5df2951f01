#!/usr/bin/env python
"""
Uniformity check for the subset sampler.

Draws many subsets for one (weights, target) pair and compares how often each
valid subset comes up with 1 / (number of valid subsets).

Usage:
    python scripts/check_uniformity.py --weights 10 20 30 40 50 --target 80 --n_draws 100000
    python scripts/check_uniformity.py --draws outputs/draws.jsonl --weights-file counts.json
"""

import argparse
import sys
from pathlib import Path

# Add src to path
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root / 'src'))

from subset_sampling.builder import SubsetDrawBuilder
from subset_sampling.config import DrawConfig, SamplerConfig
from subset_sampling.evaluation import (
    check_draws_match,
    is_consistent_with_uniform,
    print_summary,
    tabulate_draws,
    uniformity_summary,
)
from subset_sampling.loaders import load_draws_jsonl, load_weights
from subset_sampling.sampling import count_subsets


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Compare drawn subset frequencies against the uniform expectation'
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--weights', type=int, nargs='+', help='Weights, space separated')
    source.add_argument('--weights-file', type=str, help='Path to weights (.json, .yaml, .txt)')
    parser.add_argument('--target', type=int, default=None, help='Target sum')
    parser.add_argument(
        '--draws', type=str, default=None,
        help='Existing draws JSONL to check instead of drawing new ones'
    )
    parser.add_argument('--n_draws', type=int, default=100_000, help='Number of draws')
    parser.add_argument('--seed', type=int, default=42, help='Base random seed')
    parser.add_argument('--exact', action='store_true', help='Use exact rational inclusion tests')
    parser.add_argument('--alpha', type=float, default=0.001, help='Significance level of the chi-square test')
    parser.add_argument('--top', type=int, default=20, help='Rows of the frequency table to print')

    args = parser.parse_args(argv)

    if args.weights_file:
        weights, file_target = load_weights(args.weights_file)
    else:
        weights, file_target = args.weights, None
    target = args.target if args.target is not None else file_target
    if target is None:
        parser.error('--target is required when the weights file does not set one')

    n_solutions = count_subsets(weights, target, max_cells=None)
    if n_solutions == 0:
        print(f"No subset sums to {target}")
        sys.exit(1)

    if args.draws:
        draws = load_draws_jsonl(args.draws)
        try:
            check_draws_match(draws, weights, target)
        except ValueError as e:
            parser.error(f"{args.draws}: {e}")
    else:
        builder = SubsetDrawBuilder(
            SamplerConfig(exact_ratio=args.exact),
            DrawConfig(n_draws=args.n_draws, seed=args.seed),
        )
        draws = builder.draw(weights, target)

    freq_df = tabulate_draws(draws, n_solutions)
    summary = uniformity_summary(freq_df, n_solutions)

    print(freq_df.sort_values('z_score', key=abs, ascending=False).head(args.top).to_string(index=False))
    print()
    print_summary(summary)

    if is_consistent_with_uniform(summary, args.alpha):
        print("\n✓ Frequencies consistent with uniform sampling")
    else:
        print(f"\n✗ Uniformity rejected at alpha = {args.alpha}")
        sys.exit(1)


if __name__ == '__main__':
    main()
