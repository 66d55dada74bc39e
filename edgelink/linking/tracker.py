"""
Edge tracking from a single seed pixel.

From the seed the tracker walks in one direction, labelling pixels as it
goes. When no more connected points are found it returns to the seed and
walks the opposite way. Where an edge diverges at a junction only one
branch is followed; the other branch is picked up later by the scanner as
a separate chain.
"""

from typing import List, Optional
import logging

from .edge_map import EdgeMap, Point
from .neighbors import find_next_point
from .registry import Chain

logger = logging.getLogger(__name__)


def _walk(edge_map: EdgeMap, start: Point, chain_id: int, points: List[Point]) -> None:
    """Follow connected unassigned pixels from start, appending each to points."""
    next_point = find_next_point(edge_map, start)
    while next_point is not None:
        edge_map.assign(next_point[0], next_point[1], chain_id)
        points.append(next_point)
        next_point = find_next_point(edge_map, next_point)


def track_edge(
    edge_map: EdgeMap,
    seed: Point,
    chain_id: int,
    min_length: int
) -> Optional[Chain]:
    """
    Track all edge points connected to a seed pixel.

    Args:
        edge_map: Edge map to label (modified in place)
        seed: (row, col) of an unassigned edge pixel
        chain_id: Id given to the pixels of this chain
        min_length: Minimum number of points for the chain to be kept

    Returns:
        The chain, ordered from the far end of the forward walk through the
        seed to the far end of the backward walk, or None if it was shorter
        than min_length. Rejected pixels are cleared to background.
    """
    edge_map.assign(seed[0], seed[1], chain_id)
    points = [seed]

    _walk(edge_map, seed, chain_id, points)
    points.reverse()

    # Now track from the seed in the opposite direction
    _walk(edge_map, seed, chain_id, points)

    if len(points) < min_length:
        for r, c in points:
            edge_map.unassign(r, c, chain_id)
        logger.debug(f"Rejected edge at {seed}: {len(points)} < {min_length} points")
        return None

    return Chain(chain_id=chain_id, points=points)
