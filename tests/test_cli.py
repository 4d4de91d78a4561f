"""Tests for the vectorize-mask command line tool."""

import json

import cv2
import numpy as np
import pytest

from vectorization.cli import main

BOUNDS_ARGS = ["--north", "10", "--south", "0", "--east", "20", "--west", "10"]


@pytest.fixture
def mask_path(tmp_path):
    mask = np.zeros((30, 30), dtype=np.uint8)
    mask[5:25, 5:25] = 255
    path = tmp_path / "scan_mask.png"
    cv2.imwrite(str(path), mask)
    return path


def test_cli_writes_geojson(mask_path, tmp_path):
    output = tmp_path / "out" / "overlay.geojson"

    code = main(["--mask", str(mask_path), *BOUNDS_ARGS, "--output", str(output)])

    assert code == 0
    feature = json.loads(output.read_text())
    ring = feature["geometry"]["coordinates"][0]
    assert ring[0] == ring[-1]
    for lon, lat in ring:
        assert 0 <= lat <= 10
        assert 10 <= lon <= 20
    assert feature["properties"]["mask"] == str(mask_path)


def test_cli_prints_to_stdout(mask_path, capsys):
    code = main(["--mask", str(mask_path), *BOUNDS_ARGS, "--engine", "cv2"])

    assert code == 0
    feature = json.loads(capsys.readouterr().out)
    assert feature["properties"]["engine"] == "cv2"


def test_cli_empty_mask(tmp_path, capsys):
    path = tmp_path / "empty.png"
    cv2.imwrite(str(path), np.zeros((10, 10), dtype=np.uint8))

    code = main(["--mask", str(path), *BOUNDS_ARGS])

    assert code == 0
    assert json.loads(capsys.readouterr().out)["geometry"] is None


def test_cli_missing_mask(tmp_path):
    code = main(["--mask", str(tmp_path / "missing.png"), *BOUNDS_ARGS])

    assert code == 1


def test_cli_undecodable_mask(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not a png")

    assert main(["--mask", str(path), *BOUNDS_ARGS]) == 1


def test_cli_rejects_bad_threshold(mask_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["--mask", str(mask_path), *BOUNDS_ARGS, "--threshold", "999"])

    assert exc_info.value.code == 2


def test_cli_accepts_border_follow_engine(mask_path, capsys):
    code = main(["--mask", str(mask_path), *BOUNDS_ARGS, "--engine", "border_follow"])

    assert code == 0
    feature = json.loads(capsys.readouterr().out)
    assert feature["properties"]["engine"] == "border_follow"
