"""
Chain data types and the registry of accepted chains.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .edge_map import EdgeMapInvariantError, Point


@dataclass(frozen=True)
class Chain:
    """An ordered run of 8-connected edge pixels. Immutable once built."""
    chain_id: int
    points: Tuple[Point, ...]  # (row, col), far forward end -> seed -> far backward end

    def __post_init__(self):
        object.__setattr__(self, "points", tuple((int(r), int(c)) for r, c in self.points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    @property
    def path_length(self) -> float:
        """Euclidean length of the polyline through the points."""
        if len(self.points) < 2:
            return 0.0
        steps = np.diff(self.as_array(), axis=0)
        return float(np.sqrt((steps ** 2).sum(axis=1)).sum())

    def as_array(self) -> np.ndarray:
        """Points as an N x 2 int array of (row, col)."""
        return np.array(self.points, dtype=np.int32).reshape(-1, 2)


@dataclass
class ChainRegistry:
    """
    Accepted chains in discovery order, plus the labeled grid.

    Chain ids run 1..N with no gaps; an id is only used once a chain
    has passed the minimum length filter.
    """
    shape: tuple
    _chains: List[Chain] = field(default_factory=list)
    labels: Optional[np.ndarray] = None

    def register(self, chain: Chain) -> None:
        expected = len(self._chains) + 1
        if chain.chain_id != expected:
            raise EdgeMapInvariantError(
                f"Chain id {chain.chain_id} registered out of order (expected {expected})"
            )
        self._chains.append(chain)

    @property
    def chains(self) -> List[Chain]:
        return list(self._chains)

    def get(self, chain_id: int) -> Chain:
        if not 1 <= chain_id <= len(self._chains):
            raise KeyError(chain_id)
        return self._chains[chain_id - 1]

    def __len__(self) -> int:
        return len(self._chains)

    def __iter__(self) -> Iterator[Chain]:
        return iter(self._chains)

    @property
    def total_points(self) -> int:
        return sum(len(chain) for chain in self._chains)

    def edgelist(self) -> List[np.ndarray]:
        """One N x 2 (row, col) array per chain, in id order."""
        return [chain.as_array() for chain in self._chains]

    def length_histogram(self) -> Dict[int, int]:
        """Number of chains for each point count."""
        counts: Dict[int, int] = {}
        for chain in self._chains:
            counts[len(chain)] = counts.get(len(chain), 0) + 1
        return dict(sorted(counts.items()))
