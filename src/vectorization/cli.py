"""Command line entry point: vectorize a mask image to GeoJSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import VectorizerConfig
from .engine import ENGINES
from .raster import MaskDecodeError
from .schemas import GeoBounds

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vectorize a binary mask image into a GeoJSON polygon."
    )
    parser.add_argument("--mask", type=str, required=True, help="Path to mask image.")
    parser.add_argument(
        "--north", type=float, required=True, help="Latitude of row 0."
    )
    parser.add_argument(
        "--south", type=float, required=True, help="Latitude of the last row."
    )
    parser.add_argument(
        "--east", type=float, required=True, help="Longitude of the last column."
    )
    parser.add_argument(
        "--west", type=float, required=True, help="Longitude of column 0."
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=127,
        help="Red/gray values >= threshold are foreground (0-255).",
    )
    parser.add_argument(
        "--max-vertices",
        type=int,
        default=200,
        help="Maximum number of sampled ring vertices.",
    )
    parser.add_argument(
        "--engine",
        type=str,
        default="border_follow",
        choices=sorted(ENGINES),
        help="Vectorization engine.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the GeoJSON Feature here instead of stdout.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = VectorizerConfig(
            threshold=args.threshold, max_vertices=args.max_vertices
        )
    except ValueError as e:
        parser.error(str(e))

    bounds = GeoBounds(
        north=args.north, south=args.south, east=args.east, west=args.west
    )
    engine = ENGINES[args.engine](config)

    try:
        result = engine.vectorize(args.mask, bounds)
    except (FileNotFoundError, MaskDecodeError) as e:
        logger.error("Could not process scan image: %s", e)
        return 1

    if result.is_empty:
        logger.info("No foreground found in %s.", args.mask)
    else:
        logger.info("Polygon has %d points.", len(result.polygon))

    feature = result.to_geojson(properties={"mask": args.mask})
    text = json.dumps(feature, indent=2)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text)
        logger.info("Saved GeoJSON to %s", output_path)
    else:
        sys.stdout.write(text + "\n")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
