"""
Saving and loading linked chains.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import cv2
import numpy as np

from .registry import Chain, ChainRegistry

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def chains_to_dict(registry: ChainRegistry) -> Dict[str, Any]:
    """JSON-ready description of the chains in a registry."""
    return {
        "shape": [int(registry.shape[0]), int(registry.shape[1])],
        "chains": [
            {"id": chain.chain_id, "points": [[int(r), int(c)] for r, c in chain.points]}
            for chain in registry
        ],
    }


def save_chains_json(registry: ChainRegistry, path: PathLike) -> Path:
    path = Path(path)
    with open(path, 'w') as f:
        json.dump(chains_to_dict(registry), f)
    logger.info(f"Saved {len(registry)} chains to {path}")
    return path


def load_chains_json(path: PathLike) -> Tuple[List[Chain], Tuple[int, int]]:
    """
    Load chains written by save_chains_json.

    Returns:
        Tuple of (chains, (rows, cols)).
    """
    with open(path, 'r') as f:
        data = json.load(f)

    chains = [
        Chain(chain_id=int(item["id"]), points=[(int(r), int(c)) for r, c in item["points"]])
        for item in data.get("chains", [])
    ]
    rows, cols = data["shape"]
    return chains, (int(rows), int(cols))


def save_label_image(labels: np.ndarray, path: PathLike) -> Path:
    """
    Write a labeled grid as a 16-bit PNG.

    Raises:
        ValueError: if a label does not fit in 16 bits.
    """
    path = Path(path)
    if labels.size and labels.max() > np.iinfo(np.uint16).max:
        raise ValueError(f"Too many chains ({labels.max()}) for a 16-bit label image")
    if not cv2.imwrite(str(path), labels.astype(np.uint16)):
        raise IOError(f"Failed to write label image: {path}")
    logger.info(f"Saved label image to {path}")
    return path
