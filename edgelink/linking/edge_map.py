"""
Mutable per-pixel state for a single edge linking run.

Every cell is in one of three states: background, an edge pixel not yet
claimed by a chain, or an edge pixel owned by chain ``k``.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, Optional, Tuple
import logging

import numpy as np

from ..vision.thinning import thin_edges

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


class EdgeMapInvariantError(AssertionError):
    """Raised when a pixel state transition breaks the linking bookkeeping."""


class CellKind(IntEnum):
    BACKGROUND = 0
    UNASSIGNED = 1
    ASSIGNED = 2


@dataclass(frozen=True)
class CellState:
    """State of one grid cell. chain_id is 0 unless kind is ASSIGNED."""
    kind: CellKind
    chain_id: int = 0


class EdgeMap:
    """
    Bounds-checked grid of cell states shared by the scanner, tracker
    and neighbor search.

    Coordinates are 0-indexed (row, col).
    """

    def __init__(self, edges: np.ndarray):
        """
        Args:
            edges: 2D boolean mask of edge pixels (already binary and thinned)
        """
        mask = np.asarray(edges, dtype=bool)
        self.rows, self.cols = mask.shape
        self._kind = np.where(mask, CellKind.UNASSIGNED, CellKind.BACKGROUND).astype(np.int8)
        self._labels = np.zeros(mask.shape, dtype=np.int32)

    @classmethod
    def from_image(
        cls,
        image: np.ndarray,
        thinning: Optional[Callable[[np.ndarray], np.ndarray]] = thin_edges
    ) -> "EdgeMap":
        """
        Build an edge map from a raw edge image.

        Nonzero pixels are edges. The thinning callable is applied once to
        the binary mask; pass None for input that is known to be thinned.
        """
        binary = np.asarray(image) != 0
        if thinning is not None:
            thinned = np.asarray(thinning(binary), dtype=bool)
            removed = int(binary.sum() - thinned.sum())
            if removed:
                logger.debug(f"Thinning removed {removed} edge pixels")
            binary = thinned
        return cls(binary)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _check_bounds(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise IndexError(f"Pixel ({r}, {c}) outside {self.rows}x{self.cols} edge map")

    def get(self, r: int, c: int) -> CellState:
        self._check_bounds(r, c)
        kind = CellKind(int(self._kind[r, c]))
        return CellState(kind, int(self._labels[r, c]))

    def is_unassigned(self, r: int, c: int) -> bool:
        self._check_bounds(r, c)
        return self._kind[r, c] == CellKind.UNASSIGNED

    def assign(self, r: int, c: int, chain_id: int) -> None:
        """Claim an unassigned edge pixel for chain_id."""
        self._check_bounds(r, c)
        if self._kind[r, c] != CellKind.UNASSIGNED:
            raise EdgeMapInvariantError(
                f"Cannot assign ({r}, {c}) to chain {chain_id}: state is {self.get(r, c)}"
            )
        self._kind[r, c] = CellKind.ASSIGNED
        self._labels[r, c] = chain_id

    def unassign(self, r: int, c: int, chain_id: int) -> None:
        """Roll a pixel owned by chain_id back to background."""
        self._check_bounds(r, c)
        if self._kind[r, c] != CellKind.ASSIGNED or self._labels[r, c] != chain_id:
            raise EdgeMapInvariantError(
                f"Cannot unassign ({r}, {c}) from chain {chain_id}: state is {self.get(r, c)}"
            )
        self._kind[r, c] = CellKind.BACKGROUND
        self._labels[r, c] = 0

    def edge_pixels(self) -> List[Point]:
        """Row-major coordinates of every cell that is not background."""
        rows, cols = np.nonzero(self._kind != CellKind.BACKGROUND)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self._kind == kind))

    def export_labels(self) -> np.ndarray:
        """Labeled grid: chain id for assigned pixels, 0 everywhere else."""
        return np.where(self._kind == CellKind.ASSIGNED, self._labels, 0).astype(np.int32)
