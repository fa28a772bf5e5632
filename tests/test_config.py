"""
Tests for config parsing, validation helpers and JSON loading.
"""
import json
import os

import numpy as np
import pytest

from smart_curve_module import (
    CustomCurveConfig,
    EllipseConfig,
    InvalidConfigurationShape,
    InvalidSegmentCount,
    ParametricConfig,
    Point3,
    PolygonConfig,
    SpiralConfig,
    TorusConfig,
    as_rng,
    config_to_dict,
    create_smart_curve,
    load_curve_config,
    load_curve_configs,
    parse_curve_config,
    plane_axes,
    save_config_snapshot,
    to_points,
    validate_number,
    validate_segments,
)


def test_parse_camel_case_fields():
    cfg = parse_curve_config({"type": "torus", "majorRadius": 7, "minorSegments": 8})
    assert isinstance(cfg, TorusConfig)
    assert cfg.major_radius == 7
    assert cfg.minor_segments == 8
    assert cfg.major_segments == 32


def test_parse_snake_case_and_lists():
    cfg = parse_curve_config({"type": "ellipse", "x_radius": 2, "center": [1, 2, 3], "closed": True})
    assert isinstance(cfg, EllipseConfig)
    assert cfg.center == (1, 2, 3)
    assert cfg.closed is True


def test_parse_unknown_field_for_builtin():
    with pytest.raises(InvalidConfigurationShape):
        parse_curve_config({"type": "spiral", "wobble": 3})


def test_parse_missing_type():
    with pytest.raises(InvalidConfigurationShape):
        parse_curve_config({"segments": 3})
    with pytest.raises(InvalidConfigurationShape):
        parse_curve_config(["spiral"])


def test_parse_custom_type():
    cfg = parse_curve_config({"type": "wave", "segments": 12, "smoothness": 2, "waveHeight": 3})
    assert isinstance(cfg, CustomCurveConfig)
    assert cfg.segments == 12
    assert cfg.smoothness == 2
    assert cfg.params == {"wave_height": 3}
    assert cfg.get("wave_height") == 3
    assert cfg.get("missing", 5) == 5


def test_config_passthrough_and_tags():
    cfg = SpiralConfig(turns=4)
    assert parse_curve_config(cfg) is cfg
    assert cfg.type == "spiral"
    assert cfg.get("turns") == 4
    assert cfg.get("smoothness", 0) == 0


def test_validate_segments():
    assert validate_segments(5) == 5
    assert validate_segments(8.0) == 8
    assert validate_segments(np.int64(3)) == 3
    for bad in (0, -1, 2.5, True, "3", None, float("nan"), float("inf")):
        with pytest.raises(InvalidSegmentCount):
            validate_segments(bad)


def test_point3_operations():
    a = Point3(1, 2, 3)
    b = Point3(3, 2, 1)
    assert a + b == Point3(4, 4, 4)
    assert b - a == Point3(2, 0, -2)
    assert a.scale(2) == Point3(2, 4, 6)
    assert a.lerp(b, 0.5) == Point3(2, 2, 2)
    assert a.lerp(b, 1.0) == b
    clone = a.clone()
    clone.x = 10
    assert a.x == 1
    assert list(a) == [1, 2, 3]


def test_point3_as_config_input():
    cfg = PolygonConfig(sides=4, radius=1, center=Point3(0, 0, 5))
    pts = to_points(create_smart_curve(cfg))
    assert len(pts) == 4
    assert all(p.z == 5 for p in pts)


def test_load_curve_configs(tmp_path):
    path = tmp_path / "curves.json"
    path.write_text(json.dumps({"curves": [
        {"type": "spiral", "turns": 4, "smoothness": 1},
        {"type": "polygon", "sides": 6, "closed": True},
    ]}))
    configs = load_curve_configs(str(path))
    assert [c.type for c in configs] == ["spiral", "polygon"]
    assert configs[0].turns == 4
    assert configs[1].closed is True


def test_load_curve_config_searches_cwd(tmp_path, monkeypatch):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "curves.json").write_text(json.dumps({"curves": []}))
    monkeypatch.chdir(tmp_path)
    config, path = load_curve_config()
    assert config == {"curves": []}
    assert os.path.realpath(path) == os.path.realpath(str(tmp_path / "config" / "curves.json"))


def test_load_missing_or_broken(tmp_path):
    assert load_curve_config(str(tmp_path / "nope.json")) == ({}, None)
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert load_curve_config(str(broken)) == ({}, None)


def test_save_snapshot(tmp_path):
    configs = [SpiralConfig(turns=2, smoothness=1), CustomCurveConfig(type="wave", params={"height": 3})]
    out = save_config_snapshot(configs, str(tmp_path / "out" / "snapshot.json"))
    saved = json.loads(open(out).read())
    assert saved["curves"][0]["type"] == "spiral"
    assert saved["curves"][0]["turns"] == 2
    assert saved["curves"][1] == {"type": "wave", "closed": False, "height": 3}
    assert load_curve_configs(out) == configs


def test_parametric_cannot_be_saved():
    with pytest.raises(InvalidConfigurationShape):
        config_to_dict(ParametricConfig())


def test_parse_builtin_type_as_custom():
    cfg = parse_curve_config({"type": "polygon", "sides": 6, "jitter": 2.0, "closed": True}, custom=True)
    assert isinstance(cfg, CustomCurveConfig)
    assert cfg.type == "polygon"
    assert cfg.closed is True
    assert cfg.params == {"sides": 6, "jitter": 2.0}


def test_validate_number():
    assert validate_number(3, "radius") == 3.0
    assert validate_number(np.float32(0.5), "radius") == 0.5
    for bad in (True, "3", None, [1, 2], float("nan"), float("-inf")):
        with pytest.raises(InvalidConfigurationShape):
            validate_number(bad, "radius")


def test_plane_axes_and_rng():
    assert plane_axes("xz") == (0, 2)
    with pytest.raises(InvalidConfigurationShape):
        plane_axes("zx")
    rng = np.random.default_rng(5)
    assert as_rng(rng) is rng
    assert as_rng(9).random() == np.random.default_rng(9).random()
