"""
Exceptions raised by the subset-sum sampler.

Finding no subset is not an error: the sampler returns an empty list.
"""


class InvalidArgument(ValueError):
    """A weight or target is negative, non-integer, or otherwise unusable."""


class TableTooLarge(InvalidArgument):
    """The (n+1) x (target+1) count table would exceed the configured cell limit."""

    def __init__(self, n_cells: int, max_cells: int):
        self.n_cells = n_cells
        self.max_cells = max_cells
        super().__init__(
            f"Count table would need {n_cells:,} cells, "
            f"more than the limit of {max_cells:,}. "
            f"Reduce the number of weights or the target."
        )


class InternalInconsistency(RuntimeError):
    """The backward walk reached a state the count table says is unreachable."""
