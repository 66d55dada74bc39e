"""
Drawing helpers for inspecting linked edges.
"""

from typing import List, Sequence

import cv2
import numpy as np

# BGR colours cycled by chain id
CHAIN_COLORS = [
    (255, 0, 0), (0, 200, 0), (0, 0, 255),
    (255, 128, 0), (128, 0, 255), (0, 200, 200),
    (200, 0, 128), (0, 128, 200), (128, 128, 0)
]


def chain_color(chain_id: int) -> tuple:
    return CHAIN_COLORS[(chain_id - 1) % len(CHAIN_COLORS)]


def colorize_labels(labels: np.ndarray) -> np.ndarray:
    """
    Turn a labeled grid into a BGR image, one colour per chain on black.

    Args:
        labels: 2D int array, 0 for background and k > 0 for chain k

    Returns:
        uint8 image of shape (rows, cols, 3).
    """
    palette = np.array([(0, 0, 0)] + CHAIN_COLORS, dtype=np.uint8)
    labels = np.asarray(labels)
    index = np.where(labels > 0, (labels - 1) % len(CHAIN_COLORS) + 1, 0)
    return palette[index]


def draw_chains(
    image: np.ndarray,
    chains: Sequence,
    show_numbers: bool = True
) -> np.ndarray:
    """
    Draw chains on an image for visualization.

    Args:
        image: Image to draw on (will be modified); grayscale is converted to BGR
        chains: Chains with chain_id and (row, col) points
        show_numbers: Whether to show chain ids

    Returns:
        Modified image.
    """
    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)

    for chain in chains:
        color = chain_color(chain.chain_id)
        # OpenCV wants (x, y) = (col, row)
        points: List[tuple] = [(int(c), int(r)) for r, c in chain.points]

        for j in range(len(points) - 1):
            cv2.line(image, points[j], points[j + 1], color, 1)
        if len(points) == 1:
            image[points[0][1], points[0][0]] = color

        # Start point green, end point red
        cv2.circle(image, points[0], 2, (0, 255, 0), -1)
        cv2.circle(image, points[-1], 2, (0, 0, 255), -1)

        if show_numbers:
            cx = int(np.mean([p[0] for p in points]))
            cy = int(np.mean([p[1] for p in points]))
            cv2.putText(image, str(chain.chain_id), (cx, cy),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.4, color, 1)

    return image
