"""
Configuration classes for subset sampling.

This module provides output path management and sampler/draw settings,
loadable from a single YAML file so that runs can be reproduced from config
alone.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any, List
import os

import yaml


def _read_yaml(config_path: Path | str) -> Dict[str, Any]:
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        cfg = yaml.safe_load(f)
    return cfg or {}


@dataclass
class OutputPaths:
    """
    Where draws and reports are written.

    Attributes:
        output_dir: Directory for JSONL/JSON draw files

    Example:
        >>> paths = OutputPaths.from_yaml("configs/local.yaml")
        >>> paths = OutputPaths(output_dir='~/runs/subsets')
    """
    output_dir: Path

    def __post_init__(self):
        """Expand ~ and environment variables."""
        self.output_dir = self._resolve_path(self.output_dir)

    @staticmethod
    def _resolve_path(path: Any) -> Path:
        path_str = str(path) if isinstance(path, Path) else path
        expanded = os.path.expandvars(os.path.expanduser(path_str))
        return Path(expanded)

    @classmethod
    def from_yaml(cls, config_path: Path | str) -> 'OutputPaths':
        """
        Load paths from a YAML configuration file.

        Expected YAML structure:
            paths:
              output: /path/to/output

        Raises:
            FileNotFoundError: If config file doesn't exist
            KeyError: If paths.output is missing
        """
        cfg = _read_yaml(config_path)
        paths_cfg = cfg.get('paths', {})
        if 'output' not in paths_cfg:
            raise KeyError("Missing required path keys in config: ['output']")
        return cls(output_dir=paths_cfg['output'])

    @classmethod
    def from_dict(cls, paths_dict: Dict[str, str]) -> 'OutputPaths':
        return cls(output_dir=paths_dict['output'])

    def validate(self, check_writable: bool = True) -> List[str]:
        """
        Make sure output_dir exists and is writable.

        Returns:
            List of problems (empty if all valid)
        """
        issues = []

        if not self.output_dir.exists():
            try:
                self.output_dir.mkdir(parents=True, exist_ok=True)
            except PermissionError:
                issues.append(f"Cannot create output_dir: {self.output_dir}")

        if check_writable and self.output_dir.exists():
            test_file = self.output_dir / '.write_test'
            try:
                test_file.touch()
                test_file.unlink()
            except PermissionError:
                issues.append(f"output_dir is not writable: {self.output_dir}")

        return issues


@dataclass
class SamplerConfig:
    """
    Settings for table construction and the backward walk.

    exact_ratio switches the per-element inclusion test from a float
    probability to an exact rational comparison. max_table_cells bounds
    (n+1) * (target+1); None disables the bound.
    """
    exact_ratio: bool = False
    max_table_cells: Optional[int] = 50_000_000

    @classmethod
    def from_dict(cls, sampler_dict: Dict[str, Any]) -> 'SamplerConfig':
        return cls(
            exact_ratio=sampler_dict.get('exact_ratio', False),
            max_table_cells=sampler_dict.get('max_table_cells', 50_000_000),
        )

    @classmethod
    def from_yaml(cls, config_path: Path | str) -> 'SamplerConfig':
        """Load sampler config from the ``sampler`` section of a YAML file."""
        return cls.from_dict(_read_yaml(config_path).get('sampler', {}))


@dataclass
class DrawConfig:
    """Settings for repeated draws."""
    n_draws: int = 1000
    seed: int = 42
    show_progress: bool = True

    @classmethod
    def from_dict(cls, draws_dict: Dict[str, Any]) -> 'DrawConfig':
        return cls(
            n_draws=draws_dict.get('n_draws', 1000),
            seed=draws_dict.get('seed', 42),
            show_progress=draws_dict.get('show_progress', True),
        )

    @classmethod
    def from_yaml(cls, config_path: Path | str) -> 'DrawConfig':
        """Load draw config from the ``draws`` section of a YAML file."""
        return cls.from_dict(_read_yaml(config_path).get('draws', {}))


def load_config(config_path: Path | str) -> Dict[str, Any]:
    """
    Load a complete configuration file and return all config objects.

    The ``paths`` section is optional here; when it is absent the 'paths'
    entry is None.

    Returns:
        Dictionary with keys 'paths', 'sampler', 'draws'
    """
    cfg = _read_yaml(config_path)

    paths_cfg = cfg.get('paths')
    return {
        'paths': OutputPaths.from_dict(paths_cfg) if paths_cfg else None,
        'sampler': SamplerConfig.from_dict(cfg.get('sampler', {})),
        'draws': DrawConfig.from_dict(cfg.get('draws', {})),
    }
