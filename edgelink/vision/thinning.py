"""
Thinning of binary edge masks to one-pixel-wide skeletons.
"""

import numpy as np
from skimage.morphology import thin


def thin_edges(mask: np.ndarray) -> np.ndarray:
    """
    Thin a binary mask until it stops changing.

    Uses the Lam/Lee/Suen topology preserving thinning from scikit-image.
    Applying it again to its own output leaves the mask unchanged.

    Args:
        mask: 2D array; nonzero pixels are foreground

    Returns:
        Boolean mask of the same shape.
    """
    binary = np.asarray(mask) != 0
    if not binary.any():
        return binary
    return thin(binary)
