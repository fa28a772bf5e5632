#!/usr/bin/env python3
"""
Error kinds raised by the curve engine.
All of them are caller-input problems; nothing here is retried.
"""


class CurveError(Exception):
    """Base class for every curve engine error."""


class UnregisteredCurveType(CurveError, KeyError):
    """No generator is registered for the requested curve type."""

    def __init__(self, curve_type):
        self.curve_type = curve_type
        super().__init__(f"Unregistered curve type: {curve_type}")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidSegmentCount(CurveError, ValueError):
    """A segment, side or point count that is not a positive integer."""


class InvalidConfigurationShape(CurveError, ValueError):
    """Archetype-specific fields are malformed."""
