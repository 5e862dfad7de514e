"""Command-line hole filling.

    holefill IMAGE MASK CONNECTIVITY Z E [--strategy NAME] [--clusters K] [--output PATH]

Writes IMAGE_FILLED.<ext> next to IMAGE unless --output is given.
Exit status: 0 on success, 1 on invalid input, 2 on usage errors.
"""

from __future__ import annotations

import argparse
import logging
import sys

from holefill.config import configure_logging, settings
from holefill.engine.manager import create_manager
from holefill.engine.preprocessing import preprocess
from holefill.utils.imaging import filled_output_path, load_samples, save_grid

logger = logging.getLogger("holefill.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holefill",
        description="Fill masked holes in a grayscale image from the surrounding boundary",
    )
    parser.add_argument("image", help="Image to fill")
    parser.add_argument("mask", help="Mask image; pixels darker than 50%% gray are holes")
    parser.add_argument("connectivity", type=int, help="Pixel connectivity: 4 or 8")
    parser.add_argument("z", type=float, help="Distance exponent of the weight function")
    parser.add_argument("e", type=float, help="Epsilon of the weight function (> 0)")
    parser.add_argument(
        "-s", "--strategy",
        default=settings.default_strategy,
        help="Exact (default) or Approximate",
    )
    parser.add_argument(
        "-k", "--clusters",
        type=int,
        default=settings.default_cluster_target,
        help="Boundary cluster target for Approximate (default: connectivity)",
    )
    parser.add_argument("-o", "--output", help="Output path (default: <image>_FILLED.<ext>)")
    return parser


def run(args: argparse.Namespace) -> int:
    try:
        manager = create_manager(
            connectivity=args.connectivity,
            z=args.z,
            e=args.e,
            strategy=args.strategy,
            cluster_target=args.clusters,
        )
        output = args.output or filled_output_path(args.image, settings.output_suffix)

        image = load_samples(args.image)
        mask = load_samples(args.mask)
        processed = preprocess(image, mask, manager.connectivity)

        filled = manager.run(processed)
        save_grid(filled, output)
    except OSError as e:
        logger.error("Failed to read or write image: %s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid arguments: %s", e)
        return 1

    unfilled = len(filled.unfilled())
    if unfilled:
        logger.warning("%d hole pixels could not be filled", unfilled)
    return 0


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
