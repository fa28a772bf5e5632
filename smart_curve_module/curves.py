#!/usr/bin/env python3
"""
Entry point of the curve engine: create_smart_curve().
"""
import logging
from typing import Any, Mapping, Optional, Union

import numpy as np

from .config import CurveConfigBase, parse_curve_config
from .errors import InvalidConfigurationShape
from .generators import BUILTIN_GENERATORS
from .registry import CurveRegistry, get_curve_registry
from .smoothing import smooth_points
from .vectors import as_rng

logger = logging.getLogger(__name__)


def _check_points(points: Any, curve_type: str) -> np.ndarray:
    """Generator output must be a non-empty, finite (N, 3) array."""
    try:
        pts = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationShape(f"Generator for {curve_type!r} returned non-numeric points") from e
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise InvalidConfigurationShape(
            f"Generator for {curve_type!r} must return (N, 3) points, got shape {pts.shape}"
        )
    if len(pts) == 0:
        raise InvalidConfigurationShape(f"Generator for {curve_type!r} returned no points")
    if not np.all(np.isfinite(pts)):
        raise InvalidConfigurationShape(f"Generator for {curve_type!r} produced non-finite coordinates")
    return pts


def _resolve(config: Union[CurveConfigBase, Mapping[str, Any]], registry: CurveRegistry):
    """Parse config and look up its generator.

    A dict config for a built-in type id whose generator was replaced in the
    registry is parsed as a CustomCurveConfig, so fields the replacement reads
    reach it untouched.
    """
    curve_type = config.get("type") if isinstance(config, Mapping) else None
    if isinstance(curve_type, str) and curve_type:
        generator = registry.resolve(curve_type)
        replaced = generator is not BUILTIN_GENERATORS.get(curve_type)
        return parse_curve_config(config, custom=replaced), generator
    config = parse_curve_config(config)
    return config, registry.resolve(config.type)


def create_smart_curve(
    config: Union[CurveConfigBase, Mapping[str, Any]],
    registry: Optional[CurveRegistry] = None,
    rng: Union[None, int, np.random.Generator] = None,
) -> np.ndarray:
    """Generate the points of a curve.

    The result can be handed straight to a path/spline consumer.

    Args:
        config: A config dataclass, or a dict parsed with parse_curve_config().
        registry: Registry to resolve the type from; the default one if None.
        rng: Seed or numpy Generator used by archetypes that add noise.

    Returns:
        (N, 3) float64 array of points.

    Raises:
        UnregisteredCurveType: config.type has no generator.
        InvalidSegmentCount: a count field is not a positive integer.
        InvalidConfigurationShape: other malformed fields.
    """
    registry = registry if registry is not None else get_curve_registry()
    config, generator = _resolve(config, registry)

    raw = _check_points(generator(config, as_rng(rng)), config.type)
    if not config.smoothness:
        logger.debug("Generated %s curve with %d points", config.type, len(raw))
        return raw

    smoothed = smooth_points(raw, closed=bool(config.closed), smoothness=config.smoothness)
    logger.debug("Generated %s curve: %d raw points, %d smoothed", config.type, len(raw), len(smoothed))
    return smoothed
