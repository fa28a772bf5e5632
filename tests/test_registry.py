"""
Tests for the curve type registry and the create_smart_curve() entry point.
"""
import numpy as np
import pytest

from smart_curve_module import (
    CurveRegistry,
    CustomCurveConfig,
    InvalidConfigurationShape,
    LinearConfig,
    PolygonConfig,
    UnregisteredCurveType,
    create_default_registry,
    create_smart_curve,
    get_curve_registry,
    register_curve_type,
)


def _constant(config, rng):
    return np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_unregistered_type():
    with pytest.raises(UnregisteredCurveType) as excinfo:
        create_smart_curve({"type": "unregistered-xyz", "segments": 10})
    assert "unregistered-xyz" in str(excinfo.value)
    # also usable as a KeyError
    assert isinstance(excinfo.value, KeyError)


def test_empty_registry_knows_nothing():
    registry = CurveRegistry()
    assert len(registry) == 0
    with pytest.raises(UnregisteredCurveType):
        registry.resolve("linear")


def test_override_builtin():
    """Last registration wins."""
    registry = create_default_registry()
    calls = []

    def replacement(config, rng):
        calls.append(config.type)
        return _constant(config, rng)

    registry.register("polygon", replacement)
    pts = create_smart_curve(PolygonConfig(sides=6), registry=registry)
    assert calls == ["polygon"]
    assert np.allclose(pts, _constant(None, None))


def test_override_builtin_reads_extra_dict_fields():
    """A replaced built-in gets fields the built-in config does not declare."""
    registry = create_default_registry()
    seen = []

    def jittered_polygon(config, rng):
        seen.append(config.get("jitter", 0))
        return _constant(config, rng) + config.get("jitter", 0)

    registry.register("polygon", jittered_polygon)
    pts = create_smart_curve({"type": "polygon", "jitter": 2.0, "sides": 6}, registry=registry)
    assert seen == [2.0]
    assert np.allclose(pts, _constant(None, None) + 2.0)

    # the untouched built-in still rejects unknown fields
    with pytest.raises(InvalidConfigurationShape):
        create_smart_curve({"type": "polygon", "jitter": 2.0}, registry=create_default_registry())


def test_override_delegating_to_builtin():
    registry = create_default_registry()
    builtin = registry.resolve("polygon")

    def lifted_polygon(config, rng):
        return builtin(config, rng) + [0.0, 0.0, config.get("lift", 0.0)]

    registry.register("polygon", lifted_polygon)
    pts = create_smart_curve({"type": "polygon", "sides": 4, "radius": 1, "lift": 3}, registry=registry)
    assert len(pts) == 4
    assert np.allclose(pts[:, 2], 3.0)
    assert np.allclose(np.hypot(pts[:, 0], pts[:, 1]), 1.0)


def test_isolated_registries():
    first = create_default_registry()
    second = create_default_registry()
    first.register("linear", _constant)
    assert second.resolve("linear") is not _constant
    assert len(create_smart_curve(LinearConfig(), registry=second)) == 11


def test_custom_type_with_params():
    def zigzag(config, rng):
        count = config.get("teeth", 3) * 2
        height = config.get("height", 1.0)
        x = np.arange(count, dtype=float)
        y = np.where(np.arange(count) % 2 == 0, 0.0, height)
        return np.column_stack([x, y, np.zeros(count)])

    registry = CurveRegistry()
    registry.register("zigzag", zigzag)
    pts = create_smart_curve({"type": "zigzag", "teeth": 4, "height": 2.5}, registry=registry)
    assert len(pts) == 8
    assert np.allclose(pts[1::2, 1], 2.5)

    cfg = CustomCurveConfig(type="zigzag", params={"teeth": 2}, smoothness=1)
    assert len(create_smart_curve(cfg, registry=registry)) == 40


def test_bad_generator_output():
    registry = CurveRegistry()
    registry.register("nan", lambda config, rng: np.array([[np.nan, 0.0, 0.0]]))
    registry.register("flat", lambda config, rng: np.zeros((4, 2)))
    registry.register("empty", lambda config, rng: np.zeros((0, 3)))
    for curve_type in ("nan", "flat", "empty"):
        with pytest.raises(InvalidConfigurationShape):
            create_smart_curve({"type": curve_type}, registry=registry)


def test_register_on_default_registry():
    register_curve_type("test-constant", _constant)
    try:
        assert "test-constant" in get_curve_registry()
        pts = create_smart_curve({"type": "test-constant"})
        assert pts.shape == (2, 3)
    finally:
        get_curve_registry().unregister("test-constant")
    assert "test-constant" not in get_curve_registry()


def test_registry_copy_and_types():
    registry = create_default_registry()
    clone = registry.copy()
    clone.register("extra", _constant)
    assert "extra" in clone
    assert "extra" not in registry
    assert set(registry.types()) <= set(clone.types())
    assert list(registry) == list(registry.types())
