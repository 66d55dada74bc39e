"""Helpers for building edge images and checking linking results."""

from typing import List

import numpy as np


def grid(rows: List[str]) -> np.ndarray:
    """Build a uint8 edge image from strings; '#' marks an edge pixel."""
    return np.array([[1 if ch == '#' else 0 for ch in row] for row in rows], dtype=np.uint8)


def assert_valid_linking(registry, min_length: int) -> None:
    """Check connectivity, length and label bookkeeping of a linking result."""
    seen = set()
    for chain in registry:
        assert len(chain) >= min_length
        for (r0, c0), (r1, c1) in zip(chain.points, chain.points[1:]):
            dr, dc = abs(r1 - r0), abs(c1 - c0)
            assert dr <= 1 and dc <= 1 and (dr, dc) != (0, 0)
        for point in chain.points:
            assert point not in seen
            seen.add(point)
            assert registry.labels[point] == chain.chain_id

    labeled = {(int(r), int(c)) for r, c in zip(*np.nonzero(registry.labels))}
    assert labeled == seen
    assert [chain.chain_id for chain in registry] == list(range(1, len(registry) + 1))

