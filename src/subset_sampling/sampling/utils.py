"""
Utility Functions for Subset Sampling

Argument validation, random source resolution and per-draw seed derivation.
"""

import hashlib
import numbers
from typing import Any, Optional, Sequence, Union

import numpy as np

from .errors import InvalidArgument, TableTooLarge


def _is_integer(value: Any) -> bool:
    # bool is an Integral subclass but never a meaningful weight
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def validate_weights(weights: Sequence[Any]) -> list[int]:
    """
    Check that every weight is a non-negative integer.

    Returns the weights as a list of Python ints so that later arithmetic
    never touches fixed-width numpy integers.

    Raises
    ------
    InvalidArgument
        If any weight is not an integer or is negative.
    """
    if isinstance(weights, (str, bytes)):
        raise InvalidArgument("weights must be a sequence of integers, not a string")
    try:
        items = list(weights)
    except TypeError:
        raise InvalidArgument(
            f"weights must be a sequence of integers, got {type(weights).__name__}"
        )

    checked = []
    for i, w in enumerate(items):
        if not _is_integer(w):
            raise InvalidArgument(
                f"weight at index {i} is not an integer: {w!r}"
            )
        w = int(w)
        if w < 0:
            raise InvalidArgument(f"weight at index {i} is negative: {w}")
        checked.append(w)
    return checked


def validate_target(target: Any) -> int:
    """Check that the target is a non-negative integer and return it as an int."""
    if not _is_integer(target):
        raise InvalidArgument(f"target is not an integer: {target!r}")
    target = int(target)
    if target < 0:
        raise InvalidArgument(f"target is negative: {target}")
    return target


def check_table_size(n_items: int, target: int, max_cells: Optional[int]) -> int:
    """
    Return the number of cells an (n_items+1) x (target+1) table needs.

    Raises TableTooLarge if max_cells is set and the table would exceed it.
    """
    n_cells = (n_items + 1) * (target + 1)
    if max_cells is not None and n_cells > max_cells:
        raise TableTooLarge(n_cells, max_cells)
    return n_cells


def resolve_rng(rng: Union[None, int, Any] = None) -> Any:
    """
    Turn an rng argument into an object with a ``random()`` method.

    - None: a fresh, unseeded ``np.random.RandomState``
    - int: ``np.random.RandomState(rng)``
    - anything exposing ``random()`` (RandomState, Generator, random.Random):
      returned unchanged
    """
    if rng is None:
        return np.random.RandomState()
    if _is_integer(rng):
        return np.random.RandomState(int(rng))
    if callable(getattr(rng, 'random', None)):
        return rng
    raise InvalidArgument(
        f"rng must be None, an integer seed, or expose random(); got {type(rng).__name__}"
    )


def derive_draw_seed(draw_id: Union[int, str], base_seed: int) -> int:
    """
    Generate a unique but reproducible seed for one draw.

    Combines base_seed with draw_id via hashing so that:
    1. Same (draw_id, base_seed) always gives the same seed
    2. Different draws get unrelated seeds
    3. Changing base_seed changes every draw
    """
    combined = f"{base_seed}_{draw_id}"
    return int(hashlib.sha256(combined.encode()).hexdigest()[:8], 16)
