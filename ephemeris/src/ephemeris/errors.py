"""Exceptions raised by the celestial status engine."""

from __future__ import annotations


class EphemerisError(Exception):
    """Base class for engine errors."""


class InvalidDateError(EphemerisError, ValueError):
    """A date input could not be parsed as a calendar date."""


class UnknownPlanetError(EphemerisError, ValueError):
    """A planet identifier is not part of the supported body set."""


class UnknownDescriptionError(EphemerisError, KeyError):
    """No description text exists for the requested key."""
