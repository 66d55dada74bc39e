"""Input checks run before any edge map is built."""

import numbers

import numpy as np


class InputValidationError(ValueError):
    """Raised when the edge image or linking parameters are malformed."""


def validate_input(image, min_length) -> np.ndarray:
    """
    Check an edge image and minimum chain length.

    Args:
        image: 2D grid of edge values (numpy array or nested sequences)
        min_length: Minimum number of points in an accepted chain

    Returns:
        The image as a 2D numpy array.

    Raises:
        InputValidationError: if the image is not a non-empty rectangular
            2D grid or min_length is not a positive integer.
    """
    if isinstance(min_length, bool) or not isinstance(min_length, numbers.Integral):
        raise InputValidationError(f"min_length must be an integer, got {min_length!r}")
    if min_length < 1:
        raise InputValidationError(f"min_length must be positive, got {min_length}")

    if image is None:
        raise InputValidationError("Edge image is None")

    if not isinstance(image, np.ndarray):
        try:
            rows = list(image)
        except TypeError as e:
            raise InputValidationError(f"Edge image is not a 2D grid: {image!r}") from e
        if rows and all(hasattr(row, "__len__") for row in rows):
            widths = {len(row) for row in rows}
            if len(widths) > 1:
                raise InputValidationError(f"Edge image rows have unequal lengths: {sorted(widths)}")
        try:
            image = np.asarray(rows)
        except ValueError as e:
            raise InputValidationError(f"Edge image is not a rectangular grid: {e}") from e

    if image.dtype.kind not in "biuf":
        raise InputValidationError("Edge image is not a rectangular numeric grid")
    if image.ndim != 2:
        raise InputValidationError(f"Edge image must be 2D, got shape {image.shape}")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InputValidationError(f"Edge image is empty: shape {image.shape}")

    return image
