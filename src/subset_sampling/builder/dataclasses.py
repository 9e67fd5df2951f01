"""
Data classes for repeated subset draws.
"""

from dataclasses import dataclass, field


@dataclass
class SubsetDraw:
    """One subset drawn from a count table."""
    draw_id: int
    seed: int  # seed of the RandomState used for this draw
    target: int
    indices: list[int]  # ascending indices into the weights
    values: list[int] = field(default_factory=list)  # weights at those indices

    @property
    def size(self) -> int:
        return len(self.indices)

    @property
    def key(self) -> tuple[int, ...]:
        """Hashable identity of the subset, for tallying."""
        return tuple(self.indices)

    def to_dict(self) -> dict:
        """Serialize draw for storage."""
        return {
            'draw_id': self.draw_id,
            'seed': self.seed,
            'target': self.target,
            'indices': list(self.indices),
            'values': list(self.values),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SubsetDraw':
        return cls(
            draw_id=data['draw_id'],
            seed=data['seed'],
            target=data['target'],
            indices=list(data['indices']),
            values=list(data.get('values', [])),
        )
