#!/usr/bin/env python3
"""
Minimum chain length sweep for edge linking.

Links one edge image with several min_length values to help choose a
threshold that drops noise without losing real edges.

Usage:
    python scripts/sweep_min_length.py edges.png
    python scripts/sweep_min_length.py edges.png --values 1 5 10 20 --no-thin
    python scripts/sweep_min_length.py edges.png --output-dir ./sweeps
"""

import sys
import argparse
from pathlib import Path
from typing import List, Dict, Any
import logging

import cv2
import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from edgelink.linking import EdgeLinker, ChainRegistry
from edgelink.main import load_edge_image
from edgelink.vision.rendering import draw_chains

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

DEFAULT_VALUES = [1, 3, 5, 10, 20, 50]


def visualize_registry(image: np.ndarray, registry: ChainRegistry, title: str) -> np.ndarray:
    """Draw chains on a black background with statistics."""
    viz = np.zeros(image.shape[:2], dtype=np.uint8)
    viz = draw_chains(viz, registry.chains, show_numbers=False)

    lines = [title, f"Chains: {len(registry)} | Points: {registry.total_points}"]
    y_offset = 14
    for line in lines:
        cv2.putText(viz, line, (4, y_offset), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (255, 255, 255), 1)
        y_offset += 14

    return viz


def create_grid(images: List[tuple], cols: int = 3) -> np.ndarray:
    """Create a grid of labeled images."""
    if not images:
        return np.zeros((100, 100, 3), dtype=np.uint8)

    n = len(images)
    rows = (n + cols - 1) // cols

    max_h = max(img.shape[0] for _, img in images)
    max_w = max(img.shape[1] for _, img in images)

    padding = 4
    grid_h = rows * (max_h + padding) + padding
    grid_w = cols * (max_w + padding) + padding
    grid = np.full((grid_h, grid_w, 3), 40, dtype=np.uint8)

    for i, (_, img) in enumerate(images):
        row = i // cols
        col = i % cols
        y1 = row * (max_h + padding) + padding
        x1 = col * (max_w + padding) + padding
        grid[y1:y1 + img.shape[0], x1:x1 + img.shape[1]] = img

    return grid


def run_sweep(image: np.ndarray, values: List[int], thin: bool, output_dir: Path, stem: str) -> List[Dict[str, Any]]:
    """Link the image once per min_length value and save the visualizations."""
    results = []
    comparisons = []

    for value in values:
        registry = EdgeLinker(min_length=value, thin=thin).link(image)
        viz = visualize_registry(image, registry, f"min_length={value}")
        comparisons.append((f"min_length={value}", viz))

        individual_path = output_dir / f"{stem}_min_length_{value}.png"
        cv2.imwrite(str(individual_path), viz)

        results.append({
            "value": value,
            "chains": len(registry),
            "points": registry.total_points,
        })
        logger.info(f"  min_length={value}: {len(registry)} chains, "
                    f"{registry.total_points} points -> {individual_path.name}")

    grid_path = output_dir / f"{stem}_sweep_min_length.png"
    cv2.imwrite(str(grid_path), create_grid(comparisons, cols=3))
    logger.info(f"Saved grid: {grid_path}")

    return results


def main():
    parser = argparse.ArgumentParser(description="Sweep the minimum chain length on an edge image")
    parser.add_argument("image_path", help="Path to binary edge image")
    parser.add_argument("--values", "-v", type=int, nargs="+", default=DEFAULT_VALUES,
                        help="min_length values to try")
    parser.add_argument("--no-thin", action="store_true", help="Skip thinning")
    parser.add_argument("--output-dir", "-o", help="Output directory (default: same as input)")
    args = parser.parse_args()

    image_path = Path(args.image_path)
    image = load_edge_image(str(image_path))
    if image is None:
        return 1

    output_dir = Path(args.output_dir) if args.output_dir else image_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info(f"Sweeping min_length: {args.values}")
    results = run_sweep(image, args.values, not args.no_thin, output_dir, image_path.stem)

    logger.info("\nSummary:")
    for result in results:
        logger.info(f"  min_length={result['value']:>4}: {result['chains']:>5} chains, {result['points']:>7} points")
    return 0


if __name__ == "__main__":
    sys.exit(main())
