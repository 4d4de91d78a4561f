"""Outline a pavement scan's segmented region and write GeoJSON + preview."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from scan_overlay.pipeline import ScanOverlayPipeline  # noqa: E402
from segmentation.engine.mask_file_engine import MaskFileSegmentationEngine  # noqa: E402, E501
from vectorization.config import VectorizerConfig  # noqa: E402
from vectorization.engine import ENGINES  # noqa: E402


def main() -> int:
    """Run the demo."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    parser = argparse.ArgumentParser(
        description="Outline a segmented pavement scan as a map overlay."
    )
    parser.add_argument("--image", type=str, required=True, help="Path to scan image.")
    parser.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        required=True,
        metavar=("NORTH", "SOUTH", "EAST", "WEST"),
        help="Geographic rectangle covered by the scan.",
    )
    parser.add_argument(
        "--mask-dir",
        type=str,
        default=None,
        help="Directory holding <stem>_mask.png files (defaults to the scan dir).",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="output/scan_overlay",
        help="Directory to write outputs.",
    )
    parser.add_argument("--threshold", type=int, default=127, help="Mask cutoff.")
    parser.add_argument(
        "--engine",
        type=str,
        default="border_follow",
        choices=sorted(ENGINES),
        help="Vectorization engine.",
    )
    args = parser.parse_args()

    image_path = Path(args.image).expanduser().resolve()
    output_dir = Path(args.output_dir).expanduser().resolve()
    output_dir.mkdir(parents=True, exist_ok=True)

    north, south, east, west = args.bounds
    bounds = {"north": north, "south": south, "east": east, "west": west}

    segmentation_engine = MaskFileSegmentationEngine(mask_dir=args.mask_dir)
    pipeline = ScanOverlayPipeline(
        segmentation_engine=segmentation_engine,
        vectorization_engine=ENGINES[args.engine](
            VectorizerConfig(threshold=args.threshold)
        ),
    )

    overlay = pipeline.run(str(image_path), bounds)

    geojson_path = output_dir / f"{image_path.stem}_overlay.geojson"
    geojson_path.write_text(json.dumps(overlay.to_geojson(), indent=2))
    print(f"Saved overlay to {geojson_path}")

    mask = segmentation_engine.segment(str(image_path))
    viz_path = output_dir / f"{image_path.stem}_overlay.png"
    pipeline.visualize(overlay, mask, str(viz_path))

    if not overlay.detected:
        print("Nothing detected; no overlay to draw.")
    else:
        print(f"Summary: {len(overlay.result.polygon)} points.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
