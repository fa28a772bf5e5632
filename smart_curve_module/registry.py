#!/usr/bin/env python3
"""
Curve type registry.

Maps a curve type id to its generator. Registering an existing id replaces
the previous generator (last registration wins). A process-wide default
registry holding the built-in archetypes is created on first use; tests and
hosts that need isolation build their own CurveRegistry.
"""
import logging
import threading
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .errors import UnregisteredCurveType
from .generators import BUILTIN_GENERATORS, Generator

logger = logging.getLogger(__name__)


class CurveRegistry(object):
    """Registry responsible for resolving curve types to generators."""

    def __init__(self, generators: Optional[Mapping[str, Generator]] = None) -> None:
        self._lock = threading.RLock()
        self._generators: Dict[str, Generator] = dict(generators or {})

    def register(self, curve_type: str, generator: Generator) -> None:
        """Insert or replace the generator for curve_type."""
        with self._lock:
            if curve_type in self._generators:
                logger.debug("Overriding generator for curve type %r", curve_type)
            else:
                logger.debug("Registering curve type %r", curve_type)
            self._generators[curve_type] = generator

    def unregister(self, curve_type: str) -> Optional[Generator]:
        with self._lock:
            return self._generators.pop(curve_type, None)

    def resolve(self, curve_type: str) -> Generator:
        with self._lock:
            generator = self._generators.get(curve_type)
        if generator is None:
            raise UnregisteredCurveType(curve_type)
        return generator

    def types(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._generators)

    def copy(self) -> "CurveRegistry":
        with self._lock:
            return CurveRegistry(self._generators)

    def __contains__(self, curve_type: object) -> bool:
        with self._lock:
            return curve_type in self._generators

    def __len__(self) -> int:
        with self._lock:
            return len(self._generators)

    def __iter__(self) -> Iterator[str]:
        return iter(self.types())


def create_default_registry() -> CurveRegistry:
    """A new registry holding the built-in archetypes."""
    return CurveRegistry(BUILTIN_GENERATORS)


_REGISTRY: Optional[CurveRegistry] = None
_REGISTRY_LOCK = threading.Lock()


def get_curve_registry() -> CurveRegistry:
    global _REGISTRY
    if _REGISTRY is None:
        with _REGISTRY_LOCK:
            if _REGISTRY is None:
                _REGISTRY = create_default_registry()
    return _REGISTRY


def register_curve_type(curve_type: str, generator: Generator) -> None:
    """Register a generator on the default registry."""
    get_curve_registry().register(curve_type, generator)
