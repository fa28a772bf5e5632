#!/usr/bin/env python3
"""
Point/vector primitive shared by every curve generator.

Generators work on numpy arrays of shape (N, 3); Point3 is the value type
callers hand in (centers, control points) or get back from to_points().
"""
import math
import numbers
from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidConfigurationShape, InvalidSegmentCount

PLANES = ("xy", "xz", "yz")
AXES = ("x", "y", "z")


@dataclass
class Point3:
    """A 3D point / vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Point3") -> "Point3":
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def scale(self, factor: float) -> "Point3":
        return Point3(self.x * factor, self.y * factor, self.z * factor)

    def lerp(self, other: "Point3", t: float) -> "Point3":
        """Linear interpolation; t=0 gives self, t=1 gives other exactly."""
        omt = 1.0 - t
        return Point3(
            omt * self.x + t * other.x,
            omt * self.y + t * other.y,
            omt * self.z + t * other.z,
        )

    def clone(self) -> "Point3":
        return Point3(self.x, self.y, self.z)

    def to_tuple(self):
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


VectorLike = Union[Point3, Sequence[float], np.ndarray]


def to_array(value: Any, name: str = "point") -> np.ndarray:
    """Convert a Point3, 3-sequence or (3,) array into a float64 (3,) array."""
    if isinstance(value, Point3):
        return value.to_array()
    try:
        arr = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationShape(f"{name} must be a 3D vector, got {value!r}") from e
    if arr.shape != (3,):
        raise InvalidConfigurationShape(f"{name} must be a 3D vector, got {value!r}")
    return arr


def to_point_array(values: Iterable[Any], name: str = "points") -> np.ndarray:
    """Convert a sequence of vector-likes into an (N, 3) array."""
    rows = [to_array(v, name) for v in values]
    if not rows:
        return np.zeros((0, 3), dtype=np.float64)
    return np.stack(rows)


def to_points(array: np.ndarray) -> List[Point3]:
    """Turn an (N, 3) array into a list of Point3."""
    return [Point3(float(x), float(y), float(z)) for x, y, z in np.asarray(array, dtype=np.float64)]


def validate_segments(value: Any, name: str = "segments") -> int:
    """Return value as an int if it is a positive integer.

    Integral floats (e.g. 8.0 read from JSON) are accepted; booleans are not.

    Raises:
        InvalidSegmentCount: for anything else.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidSegmentCount(f"{name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        count = int(value)
    else:
        if not float(value).is_integer():
            raise InvalidSegmentCount(f"{name} must be an integer, got {value!r}")
        count = int(value)
    if count <= 0:
        raise InvalidSegmentCount(f"{name} must be > 0, got {value!r}")
    return count


def validate_number(value: Any, name: str) -> float:
    """Return value as a float if it is a finite real number.

    Raises:
        InvalidConfigurationShape: for booleans, non-numbers, NaN and infinities.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfigurationShape(f"{name} must be a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidConfigurationShape(f"{name} must be finite, got {value!r}")
    return number


def plane_axes(plane: str) -> Tuple[int, int]:
    """Coordinate indices spanning one of PLANES."""
    if plane == "xy":
        return 0, 1
    if plane == "xz":
        return 0, 2
    if plane == "yz":
        return 1, 2
    raise InvalidConfigurationShape(f"plane must be one of {PLANES}, got {plane!r}")


def as_rng(seed=None):
    """Create a numpy random number generator (a Generator is passed through)."""
    return np.random.default_rng(seed)
