#!/usr/bin/env python
"""
Draw random subsets whose weights sum exactly to a target.

Each subset is chosen uniformly among all subsets with that sum. Draws are
reproducible from --seed.

Usage:
    python scripts/sample_subsets.py --weights 10 20 30 40 50 --target 80 --n_draws 5
    python scripts/sample_subsets.py --weights-file counts.json --config config.yaml --output draws.jsonl
"""

import argparse
import sys
from pathlib import Path

# Add src to path
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root / 'src'))

from subset_sampling.builder import SubsetDrawBuilder
from subset_sampling.config import DrawConfig, SamplerConfig, load_config
from subset_sampling.loaders import load_weights


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Draw uniformly random subsets with an exact target sum'
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--weights', type=int, nargs='+',
        help='Weights, space separated'
    )
    source.add_argument(
        '--weights-file', type=str,
        help='Path to weights (.json, .yaml, .txt)'
    )
    parser.add_argument(
        '--target', type=int, default=None,
        help='Target sum (required unless the weights file sets one)'
    )
    parser.add_argument(
        '--n_draws', type=int, default=None,
        help='Number of subsets to draw (default: from config, else 1000)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Base random seed (default: from config, else 42)'
    )
    parser.add_argument(
        '--config', type=str, default=None,
        help='YAML config with sampler/draws/paths sections'
    )
    parser.add_argument(
        '--exact', action='store_true',
        help='Use exact rational inclusion tests'
    )
    parser.add_argument(
        '--output', type=str, default=None,
        help='Output JSONL path (default: draws.jsonl under paths.output from --config, else stdout)'
    )
    parser.add_argument(
        '--quiet', action='store_true',
        help='Suppress progress output'
    )

    args = parser.parse_args(argv)

    if args.config:
        config = load_config(args.config)
        sampler_config = config['sampler']
        draw_config = config['draws']
        paths = config['paths']
    else:
        sampler_config = SamplerConfig()
        draw_config = DrawConfig()
        paths = None
    if args.exact:
        sampler_config.exact_ratio = True

    if args.weights_file:
        weights, file_target = load_weights(args.weights_file)
    else:
        weights, file_target = args.weights, None

    target = args.target if args.target is not None else file_target
    if target is None:
        parser.error('--target is required when the weights file does not set one')

    builder = SubsetDrawBuilder(
        sampler_config, draw_config, paths=paths, verbose=not args.quiet
    )
    draws = builder.draw(weights, target, n_draws=args.n_draws, seed=args.seed)

    if args.output:
        output = Path(args.output)
        builder.save_jsonl(draws, output.name, output_dir=output.parent)
    elif paths is not None:
        builder.save_jsonl(draws, 'draws.jsonl')
    else:
        for d in draws:
            print(' '.join(str(i) for i in d.indices))


if __name__ == '__main__':
    main()
