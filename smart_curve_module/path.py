#!/usr/bin/env python3
"""
Sampling a point sequence by progress.

Consumers that move an object along a generated curve index it with a
progress value in [0, 1]; progress maps to a fraction of the polyline's
arc length.
"""
import numpy as np

from .errors import InvalidConfigurationShape


def _as_path(points, closed):
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 3 or len(pts) == 0:
        raise InvalidConfigurationShape(f"Expected a non-empty (N, 3) path, got shape {pts.shape}")
    if closed and len(pts) > 1:
        pts = np.vstack([pts, pts[:1]])
    return pts


def path_lengths(points, closed=False):
    """Cumulative arc length at every vertex (closed paths get the closing vertex too)."""
    pts = _as_path(points, closed)
    seg = np.linalg.norm(np.diff(pts, axis=0), axis=1)
    return np.concatenate([[0.0], np.cumsum(seg)])


def point_at(points, progress, closed=False):
    """Point at `progress` (clamped to [0, 1]) of the path length."""
    pts = _as_path(points, closed)
    if len(pts) == 1:
        return pts[0].copy()
    lengths = path_lengths(pts)
    total = lengths[-1]
    if total == 0.0:
        return pts[0].copy()

    target = min(1.0, max(0.0, float(progress))) * total
    i = int(np.searchsorted(lengths, target, side="right")) - 1
    i = min(max(i, 0), len(pts) - 2)
    seg = lengths[i + 1] - lengths[i]
    t = 0.0 if seg == 0.0 else (target - lengths[i]) / seg
    return (1.0 - t) * pts[i] + t * pts[i + 1]


def direction_at(points, progress, closed=False, look_ahead=0.01):
    """Unit direction of travel at `progress`, zero vector for degenerate paths."""
    progress = min(1.0, max(0.0, float(progress)))
    here = point_at(points, progress, closed)
    ahead = min(progress + look_ahead, 1.0)
    if ahead > progress:
        delta = point_at(points, ahead, closed) - here
    else:
        # at the very end look behind instead
        delta = here - point_at(points, max(progress - look_ahead, 0.0), closed)
    norm = np.linalg.norm(delta)
    if norm == 0.0:
        return np.zeros(3)
    return delta / norm
