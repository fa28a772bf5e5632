"""
Smoke test for the sample-curve script.
"""
import json
import os

import cv2

from smart_curve_module import generate_sample_curves


def test_renders_every_default_type(tmp_path):
    out = generate_sample_curves.main(["--output_dir", str(tmp_path), "--size", "32", "--cols", "6"])
    assert os.path.exists(out)
    img = cv2.imread(out, cv2.IMREAD_GRAYSCALE)
    # 18 built-ins -> 3 rows of 6 tiles
    assert img.shape == (96, 192)
    assert img.max() > 0


def test_renders_from_config(tmp_path):
    config_path = tmp_path / "curves.json"
    config_path.write_text(json.dumps({"curves": [
        {"type": "rose", "petals": 3, "smoothness": 1},
        {"type": "star", "points": 6, "closed": True},
    ]}))
    out = generate_sample_curves.main([
        "--config", str(config_path), "--output_dir", str(tmp_path / "out"), "--size", "40", "--cols", "2",
    ])
    img = cv2.imread(out, cv2.IMREAD_GRAYSCALE)
    assert img.shape == (40, 80)
