"""
File loaders for weights and saved draws.

Weights can come from JSON, YAML or plain text files. Draws are read back
from the JSONL files written by SubsetDrawBuilder.save_jsonl.
"""

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml

from ..builder.dataclasses import SubsetDraw


def _unpack_weights(data: Any, filepath: Path) -> Tuple[List[Any], Optional[int]]:
    """Accept either a bare list or a mapping with 'weights' and optional 'target'."""
    if isinstance(data, list):
        return data, None
    if isinstance(data, dict):
        if 'weights' not in data:
            raise KeyError(f"No 'weights' key in {filepath}")
        return data['weights'], data.get('target')
    raise ValueError(
        f"Expected a list or a mapping with 'weights' in {filepath}, "
        f"got {type(data).__name__}"
    )


def load_text_weights(filepath: Path) -> List[int]:
    """Load whitespace-separated integers from a text file."""
    with open(filepath, 'r', encoding='utf-8') as f:
        tokens = f.read().split()
    try:
        return [int(tok) for tok in tokens]
    except ValueError as e:
        raise ValueError(f"Non-integer token in {filepath}: {e}")


def load_weights(filepath: Path | str) -> Tuple[List[Any], Optional[int]]:
    """
    Load weights (and optionally a target) from a file.

    Supported formats: .json, .yaml/.yml, .txt

    JSON and YAML files may hold a bare list of weights or a mapping like
    ``{"weights": [...], "target": 80}``. Text files hold whitespace
    separated integers and never carry a target.

    Args:
        filepath: Path to the weights file

    Returns:
        Tuple of (weights, target or None)
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Weights file not found: {filepath}")

    suffix = filepath.suffix.lower()

    if suffix == '.json':
        with open(filepath, 'r', encoding='utf-8') as f:
            return _unpack_weights(json.load(f), filepath)
    elif suffix in ('.yaml', '.yml'):
        with open(filepath, 'r', encoding='utf-8') as f:
            return _unpack_weights(yaml.safe_load(f), filepath)
    elif suffix == '.txt':
        return load_text_weights(filepath), None
    else:
        raise ValueError(
            f"Unsupported file format: {suffix}. "
            f"Supported formats: .json, .yaml, .yml, .txt"
        )


def load_draws_jsonl(filepath: Path | str) -> List[SubsetDraw]:
    """Load draws saved by SubsetDrawBuilder.save_jsonl."""
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Draws file not found: {filepath}")

    draws = []
    with open(filepath, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line:
                draws.append(SubsetDraw.from_dict(json.loads(line)))
    return draws
