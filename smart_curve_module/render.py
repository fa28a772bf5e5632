#!/usr/bin/env python3
"""
Preview rendering of generated curves.
Rasterises point sequences into grayscale float images with OpenCV.
"""
import numpy as np
import cv2

from .errors import InvalidConfigurationShape
from .vectors import plane_axes


def project_points(points, plane="xy"):
    """Drop the axis outside `plane`, returning (N, 2) points."""
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise InvalidConfigurationShape(f"Expected (N, 3) points, got shape {pts.shape}")
    iu, iv = plane_axes(plane)
    return pts[:, [iu, iv]]


def render_curve(points, size=128, margin=8, thickness=1, closed=False, plane="xy", intensity=1.0):
    """Draw a curve into a size x size float32 image in [0, 1].

    The projected points are scaled uniformly to fit inside the margin and
    drawn as an anti-aliased polyline. Image rows grow downwards, so the
    second plane axis is flipped.
    """
    img = np.zeros((size, size), dtype=np.float32)
    pts2d = project_points(points, plane)
    if len(pts2d) == 0:
        return img

    lo = pts2d.min(axis=0)
    extent = float(np.max(pts2d.max(axis=0) - lo))
    inner = size - 2 * margin - 1
    scale = inner / extent if extent > 0 else 0.0
    # center the drawing inside the tile
    offset = margin + (inner - (pts2d.max(axis=0) - lo) * scale) / 2.0
    px = (pts2d - lo) * scale + offset
    px[:, 1] = size - 1 - px[:, 1]

    # 4 bits of sub-pixel precision
    pts_int = (px * 16).astype(np.int32).reshape((-1, 1, 2))
    canvas = np.zeros((size, size), dtype=np.uint8)
    cv2.polylines(canvas, [pts_int], closed, 255, max(1, int(thickness)), cv2.LINE_AA, 4)
    if len(pts2d) == 1:
        cv2.circle(canvas, tuple(int(v) for v in pts_int[0, 0]), 16 * max(1, int(thickness)), 255, -1, cv2.LINE_AA, 4)
    img[:] = (canvas.astype(np.float32) / 255.0) * intensity
    return img


def create_grid(images, cols=5, rows=None):
    """Create a grid image from a list of equally sized images."""
    if not images:
        return None
    if rows is None:
        rows = -(-len(images) // cols)

    h, w = images[0].shape[:2]
    grid = np.zeros((h * rows, w * cols), dtype=np.float32)

    for idx, img in enumerate(images[:rows * cols]):
        row = idx // cols
        col = idx % cols
        grid[row*h:(row+1)*h, col*w:(col+1)*w] = img

    return grid
