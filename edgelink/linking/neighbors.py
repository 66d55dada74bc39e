"""Next-point search over the 8-connected neighborhood of an edge pixel."""

from typing import Optional

from .edge_map import EdgeMap, Point

# Row and column offsets of the eight neighbours, 4-connected ones first.
# The order decides which branch is followed at a junction, so it must not change.
NEIGHBOR_OFFSETS = (
    (1, 0), (0, 1), (-1, 0), (0, -1),
    (1, 1), (1, -1), (-1, -1), (-1, 1),
)


def find_next_point(edge_map: EdgeMap, point: Point) -> Optional[Point]:
    """
    Find the first unassigned edge pixel connected to point.

    Args:
        edge_map: Current edge map (not modified)
        point: (row, col) of the current chain tip

    Returns:
        (row, col) of the neighbour, or None if there is no connecting point.
    """
    r, c = point
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = r + dr, c + dc
        if edge_map.in_bounds(nr, nc) and edge_map.is_unassigned(nr, nc):
            return (nr, nc)
    return None
