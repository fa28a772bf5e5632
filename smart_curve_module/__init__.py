#!/usr/bin/env python3
"""
Smart Curve Module

Parametric curve generation for 3D scenes.
Provides:
- A registry of named curve archetypes (18 built in, open for extension)
- Per-archetype configuration dataclasses with defaults and validation
- Catmull-Rom smoothing/resampling of the raw points
- JSON config loading, path sampling by progress and preview rendering
"""
import logging

from .config import (
    CONFIG_TYPES,
    ArcConfig,
    BezierConfig,
    CubeConfig,
    CurveConfigBase,
    CustomCurveConfig,
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
    parse_curve_config,
)
from .config_loader import config_to_dict, load_curve_config, load_curve_configs, save_config_snapshot
from .curves import create_smart_curve
from .errors import CurveError, InvalidConfigurationShape, InvalidSegmentCount, UnregisteredCurveType
from .generators import BUILTIN_GENERATORS
from .path import direction_at, path_lengths, point_at
from .registry import CurveRegistry, create_default_registry, get_curve_registry, register_curve_type
from .render import create_grid, project_points, render_curve
from .smoothing import CatmullRomSpline, smooth_points
from .vectors import Point3, as_rng, plane_axes, to_points, validate_number, validate_segments

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'create_smart_curve',
    'register_curve_type',
    'CurveRegistry',
    'create_default_registry',
    'get_curve_registry',
    'BUILTIN_GENERATORS',
    'CONFIG_TYPES',
    'CurveConfigBase',
    'CustomCurveConfig',
    'LinearConfig',
    'SineConfig',
    'SpiralConfig',
    'SuperformulaConfig',
    'ArcConfig',
    'BezierConfig',
    'EllipseConfig',
    'PolygonConfig',
    'StarConfig',
    'HelixConfig',
    'ParametricConfig',
    'LissajousConfig',
    'PolylineConfig',
    'RectangleConfig',
    'CubeConfig',
    'CylinderConfig',
    'TorusConfig',
    'RoseConfig',
    'parse_curve_config',
    'load_curve_config',
    'load_curve_configs',
    'save_config_snapshot',
    'config_to_dict',
    'CatmullRomSpline',
    'smooth_points',
    'point_at',
    'direction_at',
    'path_lengths',
    'render_curve',
    'project_points',
    'create_grid',
    'Point3',
    'to_points',
    'validate_segments',
    'validate_number',
    'plane_axes',
    'as_rng',
    'CurveError',
    'UnregisteredCurveType',
    'InvalidSegmentCount',
    'InvalidConfigurationShape',
]
