"""
Draw Builder for repeated subset sampling.

This module provides the SubsetDrawBuilder class which orchestrates:
- Validating weights and target
- Building the count table once per request
- Drawing many subsets from it with per-draw seeds
- Saving draws to JSONL/JSON
"""

import json
import logging
import warnings
from pathlib import Path
from typing import Any, List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from ..config import DrawConfig, OutputPaths, SamplerConfig
from ..sampling import build_count_table, derive_draw_seed, sample_from_table
from ..sampling.utils import check_table_size, validate_target, validate_weights
from .dataclasses import SubsetDraw

logger = logging.getLogger(__name__)

# share of max_table_cells above which draw() warns before building
LARGE_TABLE_FRACTION = 0.5


class SubsetDrawBuilder:
    """
    Draws many uniformly random subsets for one (weights, target) pair.

    The count table is built once per call to ``draw`` and discarded when
    the call returns. Draw ``k`` uses a RandomState seeded from
    ``(seed, k)``, so it is reproducible on its own and does not depend on
    how many draws were requested.

    Example
    -------
    >>> from subset_sampling.config import SamplerConfig, DrawConfig, OutputPaths
    >>> from subset_sampling.builder import SubsetDrawBuilder
    >>>
    >>> builder = SubsetDrawBuilder(
    ...     SamplerConfig(),
    ...     DrawConfig(n_draws=500, seed=7),
    ...     paths=OutputPaths(output_dir='./outputs'),
    ... )
    >>> draws = builder.draw([10, 20, 30, 40, 50], 80)
    >>> builder.save_jsonl(draws, 'draws.jsonl')
    """

    def __init__(
        self,
        sampler_config: Optional[SamplerConfig] = None,
        draw_config: Optional[DrawConfig] = None,
        paths: Optional[OutputPaths] = None,
        verbose: bool = True
    ):
        """
        Initialize the SubsetDrawBuilder.

        Parameters
        ----------
        sampler_config : SamplerConfig, optional
            Ratio mode and table size limit. Defaults if None.
        draw_config : DrawConfig, optional
            Default number of draws, base seed, progress bar. Defaults if None.
        paths : OutputPaths, optional
            Output directory for save_jsonl/save_json.
        verbose : bool, default True
            Print progress messages
        """
        self.sampler_config = sampler_config or SamplerConfig()
        self.draw_config = draw_config or DrawConfig()
        self.paths = paths
        self.verbose = verbose

    def _log(self, message: str) -> None:
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(message)

    def draw(
        self,
        weights: Sequence[Any],
        target: Any,
        n_draws: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> List[SubsetDraw]:
        """
        Draw n_draws subsets of weights summing to target.

        Parameters
        ----------
        weights : sequence of int
            Non-negative integer weights
        target : int
            Exact sum each subset must reach
        n_draws : int, optional
            Number of subsets to draw. Defaults to draw_config.n_draws.
        seed : int, optional
            Base seed. Defaults to draw_config.seed.

        Returns
        -------
        list[SubsetDraw]
            One entry per draw, or an empty list if no subset sums to target.
        """
        weights = validate_weights(weights)
        target = validate_target(target)
        if n_draws is None:
            n_draws = self.draw_config.n_draws
        if seed is None:
            seed = self.draw_config.seed
        if n_draws < 0:
            raise ValueError(f"n_draws must be non-negative, got {n_draws}")

        max_cells = self.sampler_config.max_table_cells
        n_cells = check_table_size(len(weights), target, max_cells)
        if max_cells is not None and n_cells > LARGE_TABLE_FRACTION * max_cells:
            warnings.warn(
                f"Count table is large: {n_cells:,} cells of the {max_cells:,} allowed"
            )

        table = build_count_table(weights, target, max_cells=max_cells)
        self._log(f"{table.total:,} subsets of {len(weights)} weights sum to {target}")

        if table.total == 0:
            warnings.warn(f"No subset of the weights sums to {target}; no draws made")
            return []

        draw_ids = range(n_draws)
        if self.verbose and self.draw_config.show_progress:
            draw_ids = tqdm(draw_ids, desc="Drawing subsets")

        draws = []
        for draw_id in draw_ids:
            draw_seed = derive_draw_seed(draw_id, seed)
            rng = np.random.RandomState(draw_seed)
            indices = sample_from_table(
                table, weights, target, rng,
                exact=self.sampler_config.exact_ratio,
            )
            draws.append(SubsetDraw(
                draw_id=draw_id,
                seed=draw_seed,
                target=target,
                indices=indices,
                values=[weights[i] for i in indices],
            ))

        logger.debug("Drew %d subsets with base seed %d", len(draws), seed)
        return draws

    def _output_path(self, filename: str, output_dir: Optional[Path]) -> Path:
        if output_dir is None:
            if self.paths is None:
                raise ValueError("No output_dir given and no OutputPaths configured")
            output_dir = self.paths.output_dir

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir / filename

    def save_jsonl(
        self,
        draws: List[SubsetDraw],
        filename: str,
        output_dir: Optional[Path] = None
    ) -> Path:
        """
        Save draws to a JSONL file, one draw per line.

        Parameters
        ----------
        draws : list[SubsetDraw]
            Draws to save
        filename : str
            Output filename (e.g., 'draws.jsonl')
        output_dir : Path, optional
            Output directory. If None, uses paths.output_dir

        Returns
        -------
        Path
            Full path to saved file
        """
        output_path = self._output_path(filename, output_dir)

        with open(output_path, 'w', encoding='utf-8') as f:
            for d in draws:
                f.write(json.dumps(d.to_dict(), ensure_ascii=False) + '\n')

        self._log(f"\n✓ Saved {len(draws)} draws to {output_path}")

        return output_path

    def save_json(
        self,
        draws: List[SubsetDraw],
        filename: str,
        output_dir: Optional[Path] = None
    ) -> Path:
        """Save draws to a JSON file (as array)."""
        output_path = self._output_path(filename, output_dir)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump([d.to_dict() for d in draws], f, ensure_ascii=False, indent=2)

        self._log(f"\n✓ Saved {len(draws)} draws to {output_path}")

        return output_path
