#!/usr/bin/env python3
"""
Built-in curve generators.

Every generator has the signature ``generator(config, rng) -> np.ndarray`` and
returns the raw (unsmoothed) points as a float64 array of shape (N, 3).
Generators apply their own defaults and validate their own counts; ``rng`` is
a numpy Generator and is only consumed by archetypes that add noise.
"""
import math
from dataclasses import MISSING, fields
from typing import Any, Callable, Dict, Optional, Type

import numpy as np
from scipy.special import comb

from .config import (
    ArcConfig,
    BezierConfig,
    CubeConfig,
    CurveConfigBase,
    CylinderConfig,
    EllipseConfig,
    HelixConfig,
    LinearConfig,
    LissajousConfig,
    ParametricConfig,
    PolygonConfig,
    PolylineConfig,
    RectangleConfig,
    RoseConfig,
    SineConfig,
    SpiralConfig,
    StarConfig,
    SuperformulaConfig,
    TorusConfig,
)
from .errors import InvalidConfigurationShape
from .vectors import AXES, plane_axes, to_array, to_point_array, validate_number, validate_segments

Generator = Callable[[CurveConfigBase, np.random.Generator], np.ndarray]

TWO_PI = 2.0 * math.pi


def _params(config: CurveConfigBase, config_cls: Type[CurveConfigBase]) -> Dict[str, Any]:
    """Field values of config, falling back to config_cls defaults.

    Fields declared as float are checked with validate_number().
    """
    out = {}
    for f in fields(config_cls):
        if not f.init or f.default is MISSING:
            continue
        value = config.get(f.name, f.default)
        if f.type is float:
            value = validate_number(value, f"{config.type} {f.name}")
        out[f.name] = value
    return out


def _segments(config: CurveConfigBase, default: Optional[int] = None) -> Optional[int]:
    """Validated config.segments, or default when it is unset."""
    value = config.get("segments")
    if value is None:
        return default
    return validate_segments(value)


def _axis_index(axis: str) -> int:
    if axis not in AXES:
        raise InvalidConfigurationShape(f"axis must be one of {AXES}, got {axis!r}")
    return AXES.index(axis)


def _planar(center, u: np.ndarray, v: np.ndarray, plane: str) -> np.ndarray:
    """Embed 2D offsets (u, v) around center in one of the coordinate planes.

    The coordinate outside the plane keeps the center's value.
    """
    iu, iv = plane_axes(plane)
    pts = np.tile(to_array(center, "center"), (len(u), 1))
    pts[:, iu] += u
    pts[:, iv] += v
    return pts


def _sweep(n: int, axis: str, radius: float, height: float, turns: float, clockwise: bool) -> np.ndarray:
    """Points winding `turns` times around axis while rising through height."""
    h_idx = _axis_index(axis)
    c1, c2 = [i for i in range(3) if i != h_idx]
    progress = np.arange(n) / n
    angle = (1.0 if clockwise else -1.0) * progress * TWO_PI * turns
    pts = np.zeros((n, 3))
    pts[:, h_idx] = progress * height - height / 2
    pts[:, c1] = np.cos(angle) * radius
    pts[:, c2] = np.sin(angle) * radius
    return pts


def _general_bezier(control_points: np.ndarray, n_samples: int) -> np.ndarray:
    """Evaluate a Bezier curve of any degree defined by control_points.

    Args:
        control_points: Array of shape (N, 3) where N is number of control points.
        n_samples: Number of points to sample along the curve.

    Returns:
        Array of shape (n_samples, 3) containing the curve points.
    """
    n = len(control_points) - 1
    t = np.linspace(0, 1, n_samples)[:, np.newaxis]

    # B(t) = sum_{i=0}^{n} comb(n, i) * (1-t)^(n-i) * t^i * P_i
    curve = np.zeros((n_samples, 3), dtype=np.float64)
    for i in range(n + 1):
        basis = comb(n, i) * ((1 - t) ** (n - i)) * (t ** i)
        curve += basis * control_points[i]
    return curve


def generate_linear(config, rng):
    p = _params(config, LinearConfig)
    n = _segments(config, 10)
    start = to_array(p["start"], "start")
    end = to_array(p["end"], "end")
    t = np.linspace(0.0, 1.0, n + 1)[:, np.newaxis]
    pts = (1.0 - t) * start + t * end

    noise = p["noise"]
    if noise:
        # envelope vanishes at both ends so endpoints stay put
        envelope = noise * t * (1.0 - t)
        pts = pts + rng.uniform(-1.0, 1.0, size=pts.shape) * envelope
    return pts


def generate_sine(config, rng):
    p = _params(config, SineConfig)
    n = _segments(config, 30)
    axis = p["axis"]
    axis_idx = _axis_index(axis)
    forward_idx = {"x": 1, "y": 2, "z": 1}[axis]
    i = np.arange(n)
    pts = np.zeros((n, 3))
    pts[:, axis_idx] = p["amplitude"] * np.sin(TWO_PI * (i / n) * p["frequency"] + p["phase"])
    pts[:, forward_idx] = -i * (p["length"] / n)
    return pts


def generate_spiral(config, rng):
    p = _params(config, SpiralConfig)
    n = _segments(config, 50)
    return _sweep(n, p["axis"], p["radius"], p["height"], p["turns"], p["clockwise"])


def generate_helix(config, rng):
    p = _params(config, HelixConfig)
    n = _segments(config, 50)
    return _sweep(n, "y", p["radius"], p["height"], p["turns"], p["clockwise"])


def generate_superformula(config, rng):
    p = _params(config, SuperformulaConfig)
    n = _segments(config, 100)
    m, n1, n2, n3, scale = p["m"], p["n1"], p["n2"], p["n3"], p["scale"]
    if n1 == 0:
        raise InvalidConfigurationShape("superformula n1 must be non-zero")
    if scale == 0:
        raise InvalidConfigurationShape("superformula scale must be non-zero")

    phi = TWO_PI * np.arange(n) / n
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        r = (
            np.abs(np.cos(m * phi / 4) / scale) ** n2
            + np.abs(np.sin(m * phi / 4) / scale) ** n3
        ) ** (-1.0 / n1)
    return np.stack([r * np.cos(phi), r * np.sin(phi), np.zeros(n)], axis=1)


def generate_arc(config, rng):
    p = _params(config, ArcConfig)
    n = _segments(config, 32)
    sweep = p["end_angle"] - p["start_angle"]
    # A partial arc ends exactly on end_angle; a full turn does not repeat its start.
    count = n if abs(sweep) >= TWO_PI - 1e-12 else n + 1
    angle = p["start_angle"] + sweep * np.arange(count) / n
    radius = p["radius"]
    return _planar(p["center"], np.cos(angle) * radius, np.sin(angle) * radius, p["plane"])


def generate_bezier(config, rng):
    p = _params(config, BezierConfig)
    n = _segments(config, 50)
    control = to_point_array(p["points"], "points")
    if len(control) < 4:
        raise InvalidConfigurationShape(f"bezier needs at least 4 control points, got {len(control)}")
    return _general_bezier(control, n + 1)


def generate_ellipse(config, rng):
    p = _params(config, EllipseConfig)
    n = _segments(config, 40)
    angle = TWO_PI * np.arange(n) / n
    u = np.cos(angle) * p["x_radius"]
    v = np.sin(angle) * p["y_radius"]
    c, s = math.cos(p["rotation"]), math.sin(p["rotation"])
    return _planar(p["center"], u * c - v * s, u * s + v * c, p["plane"])


def generate_polygon(config, rng):
    p = _params(config, PolygonConfig)
    _segments(config)
    sides = validate_segments(p["sides"], "sides")
    angle = TWO_PI * np.arange(sides) / sides + p["rotation"]
    radius = p["radius"]
    return _planar(p["center"], np.cos(angle) * radius, np.sin(angle) * radius, p["plane"])


def generate_star(config, rng):
    p = _params(config, StarConfig)
    _segments(config)
    tips = validate_segments(p["points"], "points")
    k = np.arange(tips * 2)
    radius = np.where(k % 2 == 0, p["outer_radius"], p["inner_radius"])
    angle = TWO_PI * k / (tips * 2) + p["rotation"]
    return _planar(p["center"], np.cos(angle) * radius, np.sin(angle) * radius, p["plane"])


def generate_parametric(config, rng):
    p = _params(config, ParametricConfig)
    n = _segments(config, 50)
    fn = p["fn"]
    if not callable(fn):
        raise InvalidConfigurationShape("parametric fn must be callable")
    try:
        t0, t1 = (float(v) for v in p["range"])
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationShape(f"parametric range must be a (start, end) pair, got {p['range']!r}") from e
    ts = t0 + (np.arange(n) / n) * (t1 - t0)
    # fn errors propagate to the caller untouched
    return np.stack([to_array(fn(float(t)), "fn(t)") for t in ts])


def generate_lissajous(config, rng):
    p = _params(config, LissajousConfig)
    n = _segments(config, 100)
    t = TWO_PI * np.arange(n) / n
    size = p["size"]
    return np.stack(
        [size * np.sin(p["a"] * t + p["delta"]), size * np.sin(p["b"] * t), np.zeros(n)],
        axis=1,
    )


def generate_polyline(config, rng):
    p = _params(config, PolylineConfig)
    _segments(config)
    pts = to_point_array(p["points"], "points")
    if len(pts) == 0:
        raise InvalidConfigurationShape("polyline needs at least one point")
    return pts


def generate_rectangle(config, rng):
    p = _params(config, RectangleConfig)
    _segments(config)
    hw, hh = p["width"] / 2, p["height"] / 2
    u = np.array([-hw, hw, hw, -hw, -hw])
    v = np.array([-hh, -hh, hh, hh, -hh])
    return _planar(p["center"], u, v, p["plane"])


_CUBE_OUTLINE = np.array([
    # front face
    [-1, -1, 1], [1, -1, 1], [1, 1, 1], [-1, 1, 1], [-1, -1, 1],
    # back face
    [-1, -1, -1], [1, -1, -1], [1, 1, -1], [-1, 1, -1], [-1, -1, -1],
    # connections
    [1, -1, -1], [1, 1, -1], [-1, 1, -1], [-1, -1, -1],
], dtype=np.float64)


def generate_cube(config, rng):
    p = _params(config, CubeConfig)
    _segments(config)
    return to_array(p["center"], "center") + _CUBE_OUTLINE * (p["size"] / 2)


def generate_cylinder(config, rng):
    p = _params(config, CylinderConfig)
    n = _segments(config, 32)
    angle = TWO_PI * np.arange(n) / n
    x = np.cos(angle) * p["radius"]
    z = np.sin(angle) * p["radius"]
    half = p["height"] / 2
    bottom = np.stack([x, np.full(n, -half), z], axis=1)
    top = np.stack([x, np.full(n, half), z], axis=1)
    return np.vstack([bottom, top, bottom[:1], top[:1]])


def generate_torus(config, rng):
    p = _params(config, TorusConfig)
    _segments(config)
    n_major = validate_segments(p["major_segments"], "major_segments")
    n_minor = validate_segments(p["minor_segments"], "minor_segments")
    major = TWO_PI * np.arange(n_major) / n_major
    minor = TWO_PI * np.arange(n_minor) / n_minor
    # rows: major angle outer, minor angle inner
    A, B = np.meshgrid(major, minor, indexing="ij")
    ring = p["major_radius"] + np.cos(B) * p["minor_radius"]
    pts = np.stack([np.cos(A) * ring, np.sin(B) * p["minor_radius"], np.sin(A) * ring], axis=-1)
    return pts.reshape(-1, 3)


def generate_rose(config, rng):
    p = _params(config, RoseConfig)
    n = _segments(config, 100)
    theta = TWO_PI * np.arange(n) / n
    r = p["length"] * np.cos(p["petals"] * theta)
    return np.stack([r * np.cos(theta), r * np.sin(theta), np.zeros(n)], axis=1)


BUILTIN_GENERATORS: Dict[str, Generator] = {
    "linear": generate_linear,
    "sine": generate_sine,
    "spiral": generate_spiral,
    "superformula": generate_superformula,
    "arc": generate_arc,
    "bezier": generate_bezier,
    "ellipse": generate_ellipse,
    "polygon": generate_polygon,
    "star": generate_star,
    "helix": generate_helix,
    "parametric": generate_parametric,
    "lissajous": generate_lissajous,
    "polyline": generate_polyline,
    "rectangle": generate_rectangle,
    "cube": generate_cube,
    "cylinder": generate_cylinder,
    "torus": generate_torus,
    "rose": generate_rose,
}
