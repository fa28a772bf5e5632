#!/usr/bin/env python3
"""
Smoothing / resampling stage.

Raw generator output is treated as the control points of a Catmull-Rom
spline, which is then sampled densely with the same share of samples on every
control segment. The spline is built as a piecewise cubic Hermite curve
(scipy) whose tangents come from the Catmull-Rom neighbour rule, so it passes
through every control point.
"""
import logging

import numpy as np
from scipy.interpolate import CubicHermiteSpline

from .errors import InvalidConfigurationShape

logger = logging.getLogger(__name__)

# knot exponent per curve type
CURVE_TYPES = {
    "catmullrom": 0.0,
    "centripetal": 0.5,
    "chordal": 1.0,
}

MIN_SAMPLES = 20
_MIN_SPACING = 1e-4


def smoothed_count(n_points, smoothness):
    """Number of samples smooth_points() returns for n_points raw points."""
    return max(int(n_points * smoothness * 10), MIN_SAMPLES)


class CatmullRomSpline(object):
    """Catmull-Rom spline through a sequence of 3D control points.

    Open splines start and end on the first and last control points (phantom
    end points are reflected). Closed splines wrap around and include the
    segment from the last control point back to the first.
    """

    def __init__(self, points, closed=False, curve_type="centripetal", tension=0.5):
        """
        Args:
            points: (N, 3) control points, N >= 2.
            closed: Whether the spline loops back to its first point.
            curve_type: "centripetal" (default), "chordal" or "catmullrom" (uniform).
            tension: Tangent scale, only used by "catmullrom".
        """
        if curve_type not in CURVE_TYPES:
            raise InvalidConfigurationShape(
                f"curve_type must be one of {tuple(CURVE_TYPES)}, got {curve_type!r}"
            )
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise InvalidConfigurationShape(f"Expected (N, 3) points, got shape {pts.shape}")
        if len(pts) < 2:
            raise InvalidConfigurationShape(f"Smoothing needs at least 2 points, got {len(pts)}")

        self.closed = closed
        self.curve_type = curve_type
        self.tension = tension

        if closed:
            nodes = np.vstack([pts, pts[:1]])
            ext = np.vstack([pts[-1:], nodes, pts[1:2]])
        else:
            nodes = pts
            ext = np.vstack([2 * pts[0] - pts[1], nodes, 2 * pts[-1] - pts[-2]])

        prev_pts, next_pts = ext[:-2], ext[2:]
        alpha = CURVE_TYPES[curve_type]
        if alpha == 0.0:
            knots = np.arange(len(nodes), dtype=np.float64)
            tangents = tension * (next_pts - prev_pts)
        else:
            spacing = np.linalg.norm(np.diff(ext, axis=0), axis=1) ** alpha
            spacing[spacing < _MIN_SPACING] = 1.0
            dt0 = spacing[:-1, np.newaxis]
            dt1 = spacing[1:, np.newaxis]
            tangents = (
                (nodes - prev_pts) / dt0
                - (next_pts - prev_pts) / (dt0 + dt1)
                + (next_pts - nodes) / dt1
            )
            knots = np.concatenate([[0.0], np.cumsum(spacing[1:len(nodes)])])

        self.nodes = nodes
        self.knots = knots
        self._spline = CubicHermiteSpline(knots, nodes, tangents, axis=0)

    @property
    def n_segments(self):
        return len(self.knots) - 1

    def evaluate(self, u):
        """Point(s) at normalised parameter u in [0, 1].

        u is spread evenly over the control segments: u = i / n_segments
        lands on control point i whatever the knot spacing, and within a
        segment u maps linearly onto that segment's knot interval.
        """
        u = np.clip(np.asarray(u, dtype=np.float64), 0.0, 1.0)
        t = np.interp(u * self.n_segments, np.arange(len(self.knots)), self.knots)
        return self._spline(t)

    def sample(self, count):
        """count samples, evenly spaced per control segment.

        Closed splines skip the duplicate seam sample.
        """
        u = np.linspace(0.0, 1.0, count, endpoint=not self.closed)
        return self.evaluate(u)


def smooth_points(points, closed=False, smoothness=1.0, curve_type="centripetal", tension=0.5):
    """Resample raw points through a Catmull-Rom spline.

    Args:
        points: (N, 3) raw points, N >= 2.
        closed: Wrap the spline around to the first point.
        smoothness: Density factor; the output has max(N * smoothness * 10, 20) points.
        curve_type: See CatmullRomSpline.
        tension: See CatmullRomSpline.

    Returns:
        (M, 3) float64 array.

    Raises:
        InvalidConfigurationShape: fewer than 2 points, or a bad curve_type.
    """
    spline = CatmullRomSpline(points, closed=closed, curve_type=curve_type, tension=tension)
    count = smoothed_count(len(points), smoothness)
    logger.debug("Smoothing %d points into %d (closed=%s, %s)", len(points), count, closed, curve_type)
    return spline.sample(count)
