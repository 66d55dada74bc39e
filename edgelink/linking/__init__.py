"""Edge linking: scanner, tracker, neighbour search and chain registry."""

from .edge_map import EdgeMap, EdgeMapInvariantError, CellKind, CellState
from .neighbors import NEIGHBOR_OFFSETS, find_next_point
from .registry import Chain, ChainRegistry
from .tracker import track_edge
from .scanner import EdgeLinker, link_edges, scan_edges
from .validation import InputValidationError, validate_input

__all__ = [
    'EdgeMap', 'EdgeMapInvariantError', 'CellKind', 'CellState',
    'NEIGHBOR_OFFSETS', 'find_next_point',
    'Chain', 'ChainRegistry',
    'track_edge',
    'EdgeLinker', 'link_edges', 'scan_edges',
    'InputValidationError', 'validate_input',
]
