"""Lunar phase, illumination, and approximate Moon sign calculations."""

from __future__ import annotations

import logging
import math
from datetime import date

from astrologly.schemas.celestial import MoonPhaseResult

from ephemeris.bodies import sign_at
from ephemeris.dates import day_of_year, parse_date

logger = logging.getLogger(__name__)

# Offset of the civil-to-Julian conversion below
JD_OFFSET = 1721013.5

# Julian Date of the reference new moon, 2000-01-06
REFERENCE_NEW_MOON_JD = 2451549.5

SYNODIC_MONTH = 29.53058867
SIDEREAL_MONTH = 27.32166

# Upper bounds (exclusive) of each named phase over the synodic fraction.
# The waning crescent bound is inclusive; above it the cycle wraps to new_moon.
PHASE_BOUNDS = [
    (0.033, "new_moon"),
    (0.216, "waxing_crescent"),
    (0.283, "first_quarter"),
    (0.467, "waxing_gibbous"),
    (0.533, "full_moon"),
    (0.717, "waning_gibbous"),
    (0.783, "last_quarter"),
    (0.967, "waning_crescent"),
]

NEW_MOON_WRAP = 0.967


def julian_date(target: date) -> float:
    """Julian Date at 0h for a Gregorian calendar date (valid 1901-2099)."""
    y, m, d = target.year, target.month, target.day
    jd = 367 * y - (7 * (y + (m + 9) // 12)) // 4
    jd += (275 * m) // 9 + d
    return jd + JD_OFFSET


def moon_phase_fraction(target: date) -> float:
    """Synodic progress in [0, 1): 0.0 = new moon, 0.5 = full moon."""
    days_since_new = julian_date(target) - REFERENCE_NEW_MOON_JD
    # Python's modulo is already non-negative for dates before the reference
    fraction = (days_since_new % SYNODIC_MONTH) / SYNODIC_MONTH
    return fraction if fraction < 1.0 else 0.0


def illumination(phase_fraction: float) -> float:
    """Illuminated fraction from the cosine model, rounded to 2 decimals."""
    lit = (1 - math.cos(phase_fraction * 2 * math.pi)) / 2
    return round(lit, 2)


def phase_name(phase_fraction: float) -> str:
    """Classify a synodic fraction into one of eight named phases."""
    if phase_fraction > NEW_MOON_WRAP:
        return "new_moon"
    for upper, name in PHASE_BOUNDS:
        if phase_fraction < upper:
            return name
    return "waning_crescent"


def compute_moon_phase(target: object) -> MoonPhaseResult:
    """Named phase and illumination for a date."""
    day = parse_date(target)
    fraction = moon_phase_fraction(day)
    result = MoonPhaseResult(phase=phase_name(fraction), illumination=illumination(fraction))
    logger.debug("Moon phase %s: fraction=%.4f -> %s", day, fraction, result.phase)
    return result


def compute_moon_sign(target: object) -> str:
    """Approximate Moon sign from elapsed sidereal months since the start of the year.

    This is a coarse model, independent of the phase calculation and not
    tied to the Moon's true ecliptic longitude.
    """
    day = parse_date(target)
    cycles = day_of_year(day) / SIDEREAL_MONTH
    return sign_at(math.floor((cycles * 12) % 12))
