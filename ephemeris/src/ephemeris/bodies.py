"""Planet definitions, orbital tables, and sign data."""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

# Zodiac signs in order, index 0 = Aries
SIGNS: tuple[str, ...] = (
    "aries",
    "taurus",
    "gemini",
    "cancer",
    "leo",
    "virgo",
    "libra",
    "scorpio",
    "sagittarius",
    "capricorn",
    "aquarius",
    "pisces",
)

# Bodies with a transit position, in report order
PLANETS: tuple[str, ...] = (
    "sun",
    "moon",
    "mercury",
    "venus",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
    "pluto",
)


class ReferencePosition(NamedTuple):
    """Sign index (0-11) and degree within sign at the reference epoch."""

    sign_index: int
    degree: float


# Approximate periods in days for a full trip around the zodiac.
# Mercury and Venus use their synodic periods.
ORBITAL_PERIODS = MappingProxyType(
    {
        "sun": 365.25,
        "moon": 27.32,  # sidereal
        "mercury": 87.97,
        "venus": 224.70,
        "mars": 686.98,
        "jupiter": 4332.59,  # ~11.86 years
        "saturn": 10759.22,  # ~29.46 years
        "uranus": 30688.5,  # ~84.01 years
        "neptune": 60182.0,  # ~164.79 years
        "pluto": 90560.0,  # ~248 years
    }
)

# Approximate positions on 2025-01-01T00:00Z
REFERENCE_POSITIONS = MappingProxyType(
    {
        "sun": ReferencePosition(9, 10.0),  # Capricorn
        "moon": ReferencePosition(5, 15.0),  # Virgo
        "mercury": ReferencePosition(10, 20.0),  # Aquarius
        "venus": ReferencePosition(10, 5.0),  # Aquarius
        "mars": ReferencePosition(8, 25.0),  # Sagittarius
        "jupiter": ReferencePosition(4, 10.0),  # Leo
        "saturn": ReferencePosition(10, 15.0),  # Aquarius
        "uranus": ReferencePosition(1, 20.0),  # Taurus
        "neptune": ReferencePosition(11, 28.0),  # Pisces
        "pluto": ReferencePosition(9, 5.0),  # Capricorn
    }
)


def sign_at(index: int) -> str:
    """Sign name for an index, wrapping around the zodiac."""
    return SIGNS[index % 12]


def longitude_to_sign(longitude: float) -> tuple[str, float]:
    """Convert ecliptic longitude to sign and degree within sign."""
    longitude = longitude % 360.0
    sign_index = int(longitude / 30.0)
    degree = longitude - (sign_index * 30.0)
    return SIGNS[sign_index], degree
