#!/usr/bin/env python3
"""
Configuration model for curve generation.

One frozen dataclass per built-in archetype, all sharing the fields of
CurveConfigBase (type, segments, closed, smoothness). Curve types that are
not built in use CustomCurveConfig, which carries its fields in a plain dict.

Configs are usually built directly:

    from smart_curve_module import SpiralConfig
    cfg = SpiralConfig(turns=4, radius=2.0, smoothness=1)

or parsed from JSON-style dicts (snake_case or camelCase keys):

    cfg = parse_curve_config({"type": "ellipse", "xRadius": 4, "plane": "xz"})
"""
import math
import re
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type

from .errors import InvalidConfigurationShape
from .vectors import VectorLike

Vec3 = Tuple[float, float, float]
ORIGIN: Vec3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True, kw_only=True)
class CurveConfigBase:
    """Fields shared by every curve configuration."""

    type: str
    segments: Optional[int] = None
    closed: bool = False
    smoothness: Optional[float] = None

    def get(self, key: str, default: Any = None) -> Any:
        """Read a field by name, falling back to default when unset."""
        value = getattr(self, key, None)
        return default if value is None else value


@dataclass(frozen=True, kw_only=True)
class LinearConfig(CurveConfigBase):
    type: str = field(default="linear", init=False)
    start: VectorLike = ORIGIN
    end: VectorLike = (0.0, 0.0, -10.0)
    # Amount of random displacement added to interior points
    noise: float = 0.0


@dataclass(frozen=True, kw_only=True)
class SineConfig(CurveConfigBase):
    type: str = field(default="sine", init=False)
    axis: str = "x"
    amplitude: float = 2.0
    frequency: float = 2.0
    phase: float = 0.0
    length: float = 20.0


@dataclass(frozen=True, kw_only=True)
class SpiralConfig(CurveConfigBase):
    type: str = field(default="spiral", init=False)
    axis: str = "y"
    radius: float = 3.0
    height: float = 10.0
    turns: float = 3.0
    clockwise: bool = True


@dataclass(frozen=True, kw_only=True)
class SuperformulaConfig(CurveConfigBase):
    type: str = field(default="superformula", init=False)
    m: float = 3.0
    n1: float = 1.0
    n2: float = 1.0
    n3: float = 1.0
    scale: float = 1.0


@dataclass(frozen=True, kw_only=True)
class ArcConfig(CurveConfigBase):
    type: str = field(default="arc", init=False)
    center: VectorLike = ORIGIN
    radius: float = 5.0
    start_angle: float = 0.0
    end_angle: float = 2 * math.pi
    plane: str = "xy"


@dataclass(frozen=True, kw_only=True)
class BezierConfig(CurveConfigBase):
    type: str = field(default="bezier", init=False)
    # At least 4 control points; the curve degree is len(points) - 1
    points: Tuple[VectorLike, ...] = (
        (0.0, 0.0, 0.0),
        (5.0, 5.0, 0.0),
        (10.0, 0.0, 0.0),
        (15.0, 5.0, 0.0),
    )


@dataclass(frozen=True, kw_only=True)
class EllipseConfig(CurveConfigBase):
    type: str = field(default="ellipse", init=False)
    center: VectorLike = ORIGIN
    x_radius: float = 5.0
    y_radius: float = 3.0
    rotation: float = 0.0
    plane: str = "xy"


@dataclass(frozen=True, kw_only=True)
class PolygonConfig(CurveConfigBase):
    type: str = field(default="polygon", init=False)
    sides: int = 5
    radius: float = 5.0
    center: VectorLike = ORIGIN
    rotation: float = 0.0
    plane: str = "xy"


@dataclass(frozen=True, kw_only=True)
class StarConfig(CurveConfigBase):
    type: str = field(default="star", init=False)
    # Number of star tips
    points: int = 5
    inner_radius: float = 3.0
    outer_radius: float = 5.0
    center: VectorLike = ORIGIN
    rotation: float = 0.0
    plane: str = "xy"


@dataclass(frozen=True, kw_only=True)
class HelixConfig(CurveConfigBase):
    type: str = field(default="helix", init=False)
    radius: float = 2.0
    height: float = 10.0
    turns: float = 5.0
    clockwise: bool = True


def _diagonal(t: float) -> Vec3:
    return (t, t, t)


@dataclass(frozen=True, kw_only=True)
class ParametricConfig(CurveConfigBase):
    type: str = field(default="parametric", init=False)
    fn: Callable[[float], VectorLike] = _diagonal
    range: Tuple[float, float] = (0.0, 1.0)


@dataclass(frozen=True, kw_only=True)
class LissajousConfig(CurveConfigBase):
    type: str = field(default="lissajous", init=False)
    a: float = 3.0
    b: float = 2.0
    delta: float = math.pi / 2
    size: float = 10.0


@dataclass(frozen=True, kw_only=True)
class PolylineConfig(CurveConfigBase):
    type: str = field(default="polyline", init=False)
    points: Tuple[VectorLike, ...] = ()


@dataclass(frozen=True, kw_only=True)
class RectangleConfig(CurveConfigBase):
    type: str = field(default="rectangle", init=False)
    width: float = 10.0
    height: float = 5.0
    center: VectorLike = ORIGIN
    plane: str = "xy"


@dataclass(frozen=True, kw_only=True)
class CubeConfig(CurveConfigBase):
    type: str = field(default="cube", init=False)
    size: float = 5.0
    center: VectorLike = ORIGIN


@dataclass(frozen=True, kw_only=True)
class CylinderConfig(CurveConfigBase):
    type: str = field(default="cylinder", init=False)
    radius: float = 3.0
    height: float = 10.0


@dataclass(frozen=True, kw_only=True)
class TorusConfig(CurveConfigBase):
    type: str = field(default="torus", init=False)
    major_radius: float = 5.0
    minor_radius: float = 2.0
    major_segments: int = 32
    minor_segments: int = 16


@dataclass(frozen=True, kw_only=True)
class RoseConfig(CurveConfigBase):
    type: str = field(default="rose", init=False)
    # Odd values give that many petals, even values twice as many
    petals: float = 4.0
    length: float = 5.0


@dataclass(frozen=True, kw_only=True)
class CustomCurveConfig(CurveConfigBase):
    """Config for caller-defined curve types; fields live in params."""

    params: Mapping[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        if key in self.params:
            value = self.params[key]
            return default if value is None else value
        return super().get(key, default)


CONFIG_TYPES: Dict[str, Type[CurveConfigBase]] = {
    "linear": LinearConfig,
    "sine": SineConfig,
    "spiral": SpiralConfig,
    "superformula": SuperformulaConfig,
    "arc": ArcConfig,
    "bezier": BezierConfig,
    "ellipse": EllipseConfig,
    "polygon": PolygonConfig,
    "star": StarConfig,
    "helix": HelixConfig,
    "parametric": ParametricConfig,
    "lissajous": LissajousConfig,
    "polyline": PolylineConfig,
    "rectangle": RectangleConfig,
    "cube": CubeConfig,
    "cylinder": CylinderConfig,
    "torus": TorusConfig,
    "rose": RoseConfig,
}

_BASE_KEYS = ("segments", "closed", "smoothness")


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _freeze(value: Any) -> Any:
    """Turn JSON lists into tuples so configs stay hashable."""
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def parse_curve_config(data: Mapping[str, Any], custom: bool = False) -> CurveConfigBase:
    """Build the config variant matching data["type"].

    Args:
        data: Mapping with a "type" key and archetype fields. Keys may be
            snake_case or camelCase ("xRadius" -> x_radius).
        custom: Always build a CustomCurveConfig, even for a built-in type
            id. Used when a host generator has replaced the built-in one and
            may read fields the built-in dataclass does not have.

    Returns:
        A built-in config dataclass, or CustomCurveConfig for other types.

    Raises:
        InvalidConfigurationShape: missing type, or unknown fields for a
            built-in type.
    """
    if isinstance(data, CurveConfigBase):
        return data
    if not isinstance(data, Mapping):
        raise InvalidConfigurationShape(f"Curve config must be a mapping, got {type(data).__name__}")
    curve_type = data.get("type")
    if not isinstance(curve_type, str) or not curve_type:
        raise InvalidConfigurationShape("Curve config needs a non-empty string 'type'")

    values = {_snake_case(k): _freeze(v) for k, v in data.items() if k != "type"}

    config_cls = None if custom else CONFIG_TYPES.get(curve_type)
    if config_cls is None:
        base = {k: values.pop(k) for k in _BASE_KEYS if k in values}
        return CustomCurveConfig(type=curve_type, params=values, **base)

    allowed = {f.name for f in fields(config_cls) if f.init}
    unknown = sorted(set(values) - allowed)
    if unknown:
        raise InvalidConfigurationShape(f"Unknown fields for curve type '{curve_type}': {', '.join(unknown)}")
    return config_cls(**values)
