"""Image processing helpers for thinning and drawing edge chains."""

from .thinning import thin_edges
from .rendering import colorize_labels, draw_chains

__all__ = ['thin_edges', 'colorize_labels', 'draw_chains']
