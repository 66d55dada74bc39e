"""
Edge Linking - Command Line Entry Point

Links the pixels of a binary edge image into chains:
1. Edge image is loaded at native bit depth (nonzero pixels are edges)
2. Edges are thinned to one pixel width
3. Pixels are linked into chains in raster scan order
4. Chains, label image and a visualization are saved

Usage:
    python -m edgelink.main <edge_image> [--min-length N] [--no-thin]
"""

import sys
import logging
import argparse
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

import cv2
import numpy as np

from edgelink.config import load_config, validate_config, Config
from edgelink.linking import EdgeLinker, ChainRegistry, InputValidationError
from edgelink.linking.export import save_chains_json, save_label_image
from edgelink.vision.rendering import draw_chains

logger = logging.getLogger(__name__)


def setup_logging(level="INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_edge_image(image_path: str) -> Optional[np.ndarray]:
    """
    Load an edge image as a single channel mask; returns None if it cannot be read.

    The image is read at its native bit depth so that small nonzero values in
    16-bit images stay edges. Colour pixels are edges if any colour channel is nonzero.
    """
    image = cv2.imread(image_path, cv2.IMREAD_UNCHANGED)
    if image is None:
        logger.error(f"Failed to load image: {image_path}")
        return None

    if image.ndim == 3:
        # Ignore the alpha channel
        image = image[:, :, :3].any(axis=2)
    return (image != 0).astype(np.uint8) * 255


def save_outputs(
    registry: ChainRegistry,
    edge_image: np.ndarray,
    config: Config,
    output_dir: Path,
    stem: str
) -> None:
    """Write the requested outputs for one linking run."""
    output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    prefix = output_dir / f"{stem}_{timestamp}"

    if config.output.save_labels:
        save_label_image(registry.labels, f"{prefix}_labels.png")

    if config.output.save_chains:
        save_chains_json(registry, f"{prefix}_chains.json")

    if config.output.save_visualization:
        # Dim the input so the chains stand out
        background = (np.asarray(edge_image) != 0).astype(np.uint8) * 60
        viz = draw_chains(background, registry.chains, show_numbers=config.output.show_numbers)
        viz_path = f"{prefix}_chains.png"
        if not cv2.imwrite(viz_path, viz):
            raise IOError(f"Failed to write visualization: {viz_path}")
        logger.info(f"Saved visualization to {viz_path}")


def print_summary(registry: ChainRegistry) -> None:
    print(f"\nLinked {len(registry)} chains, {registry.total_points} points")
    if len(registry) == 0:
        return

    lengths = [len(chain) for chain in registry]
    print(f"  Shortest: {min(lengths)} points, longest: {max(lengths)} points")
    for chain in registry.chains[:10]:
        print(f"  {chain.chain_id}: {len(chain)} points, {chain.start} -> {chain.end}, "
              f"length={chain.path_length:.1f}")
    if len(registry) > 10:
        print(f"  ... {len(registry) - 10} more")


def main(argv=None) -> int:
    """Main entry point."""
    # Load environment variables (EDGELINK_CONFIG) from .env file
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Link edge pixels of a binary edge image into chains"
    )
    parser.add_argument('image_path', help='Binary edge image (nonzero pixels are edges)')
    parser.add_argument('--min-length', type=int, default=None,
                        help='Minimum number of points in a chain')
    parser.add_argument('--no-thin', action='store_true',
                        help='Skip thinning (input is already one pixel wide)')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to configuration file')
    parser.add_argument('--output-dir', '-o', type=str, default=None,
                        help='Output directory')
    parser.add_argument('--show-numbers', action='store_true',
                        help='Draw chain ids on the visualization')
    args = parser.parse_args(argv)

    # Load configuration, command line overrides win
    config = load_config(args.config)
    if args.min_length is not None:
        config.linking.min_length = args.min_length
    if args.no_thin:
        config.linking.thin = False
    if args.output_dir:
        config.system.output_dir = args.output_dir
    if args.show_numbers:
        config.output.show_numbers = True

    setup_logging(config.system.log_level)

    errors = validate_config(config)
    if errors:
        logger.error("Configuration errors:")
        for error in errors:
            logger.error(f"  - {error}")
        return 1

    image = load_edge_image(args.image_path)
    if image is None:
        return 1

    linker = EdgeLinker(min_length=config.linking.min_length, thin=config.linking.thin)
    try:
        registry = linker.link(image)
    except InputValidationError as e:
        logger.error(f"Invalid edge image: {e}")
        return 1

    save_outputs(registry, image, config, Path(config.system.output_dir), Path(args.image_path).stem)
    print_summary(registry)
    return 0


if __name__ == "__main__":
    sys.exit(main())
