"""Tests for MaskFileSegmentationEngine."""

from pathlib import Path

import cv2
import numpy as np
import pytest

from segmentation.engine.mask_file_engine import MaskFileSegmentationEngine


def test_mask_path_next_to_scan():
    engine = MaskFileSegmentationEngine()

    assert engine.mask_path_for("data/tile_0001.png") == Path(
        "data/tile_0001_mask.png"
    )


def test_mask_path_in_mask_dir():
    engine = MaskFileSegmentationEngine(suffix="_seg", mask_dir="masks")

    assert engine.mask_path_for("scans/tile.jpg") == Path("masks/tile_seg.png")


def test_segment_reads_mask(tmp_path):
    mask = np.zeros((12, 16), dtype=np.uint8)
    mask[2:6, 3:9] = 255
    cv2.imwrite(str(tmp_path / "tile_mask.png"), mask)

    engine = MaskFileSegmentationEngine()
    loaded = engine.segment(str(tmp_path / "tile.png"))

    np.testing.assert_array_equal(loaded, mask)


def test_segment_transparent_mask_pixels_are_background(tmp_path):
    image = np.zeros((6, 6, 4), dtype=np.uint8)
    image[:, :, 2] = 255  # Red everywhere
    image[1:3, 1:3, 3] = 255  # Opaque only in the corner square
    cv2.imwrite(str(tmp_path / "tile_mask.png"), image)

    loaded = MaskFileSegmentationEngine().segment(str(tmp_path / "tile.png"))

    assert loaded.shape == (6, 6)
    assert loaded.sum() == 4 * 255


def test_segment_missing_mask():
    engine = MaskFileSegmentationEngine()

    with pytest.raises(FileNotFoundError):
        engine.segment("missing.png")


def test_segment_unreadable_mask(tmp_path):
    (tmp_path / "tile_mask.png").write_bytes(b"not a png")

    with pytest.raises(FileNotFoundError):
        MaskFileSegmentationEngine().segment(str(tmp_path / "tile.png"))
