#!/usr/bin/env python3
"""
Generate sample curves to visualize the different archetypes.
Creates a grid with one tile per curve: every registered type by default,
or the curves listed in a JSON config.
"""
import argparse
import os

import numpy as np
import cv2

from smart_curve_module import (
    create_grid,
    create_smart_curve,
    get_curve_registry,
    load_curve_configs,
    parse_curve_config,
    render_curve,
)


# Types whose defaults draw nothing useful
SAMPLE_OVERRIDES = {
    "polyline": {"points": [[0, 0, 0], [2, 3, 0], [5, 1, 0], [7, 4, 0], [9, 0, 0]]},
}


def build_configs(config_path=None, smoothness=None):
    """Curve configs to render: from config_path, or one default per registered type."""
    if config_path:
        return load_curve_configs(config_path)
    configs = []
    for curve_type in get_curve_registry().types():
        data = {"type": curve_type}
        data.update(SAMPLE_OVERRIDES.get(curve_type, {}))
        if smoothness:
            data["smoothness"] = smoothness
        configs.append(parse_curve_config(data))
    return configs


def _plane_for(points):
    """Project onto the plane with the largest spread."""
    spread = np.ptp(points, axis=0)
    flat_axis = int(np.argmin(spread))
    return {0: "yz", 1: "xz", 2: "xy"}[flat_axis]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render sample curves into a PNG grid")
    parser.add_argument("--config", type=str, default=None, help="JSON file with a 'curves' list")
    parser.add_argument("--output_dir", type=str, default="sample_curves_output", help="Output directory")
    parser.add_argument("--size", type=int, default=128, help="Tile size in pixels")
    parser.add_argument("--cols", type=int, default=6, help="Tiles per row")
    parser.add_argument("--smoothness", type=float, default=None, help="Smoothness for the default curves")
    parser.add_argument("--seed", type=int, default=42, help="Seed for noisy curves")
    args = parser.parse_args(argv)

    os.makedirs(args.output_dir, exist_ok=True)
    configs = build_configs(args.config, args.smoothness)
    rng = np.random.default_rng(args.seed)

    print("Generating sample curves...")
    print(f"Output directory: {args.output_dir}")

    tiles = []
    for cfg in configs:
        pts = create_smart_curve(cfg, rng=rng)
        tiles.append(render_curve(pts, size=args.size, closed=cfg.closed, plane=_plane_for(pts)))
        print(f"  ✓ {cfg.type}: {len(pts)} points")

    grid = create_grid(tiles, cols=args.cols)
    if grid is None:
        print("No curves to render.")
        return None

    out_path = os.path.join(args.output_dir, "sample_curves.png")
    cv2.imwrite(out_path, (grid * 255).astype(np.uint8))
    print(f"\n✅ Done! Saved {len(tiles)} curves to {out_path}")
    return out_path


if __name__ == "__main__":
    main()
