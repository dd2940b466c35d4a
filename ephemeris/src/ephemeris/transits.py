"""Approximate planetary transit positions and retrograde windows."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, date, datetime

from astrologly.schemas.celestial import PlanetPosition

from ephemeris.bodies import (
    ORBITAL_PERIODS,
    REFERENCE_POSITIONS,
    ReferencePosition,
    longitude_to_sign,
)
from ephemeris.dates import day_of_year, noon_utc, parse_date
from ephemeris.errors import UnknownPlanetError

logger = logging.getLogger(__name__)

REFERENCE_EPOCH = datetime(2025, 1, 1, 0, 0, 0, tzinfo=UTC)

SECONDS_PER_DAY = 86400.0


# Simplified retrograde windows keyed on day of year. These are periodic
# approximations, not derived from the linear position model.
def _mercury_retrograde(doy: int) -> bool:
    # ~3 times a year, ~3 weeks each
    return doy % 120 < 21


def _venus_retrograde(doy: int) -> bool:
    # every ~18 months, ~40 days
    return doy % 540 < 40


def _mars_retrograde(doy: int) -> bool:
    # every ~2 years, ~80 days
    return doy % 730 < 80


def _jupiter_retrograde(doy: int) -> bool:
    return 60 < doy % 365 < 180


def _saturn_retrograde(doy: int) -> bool:
    return 80 < doy % 365 < 210


def _outer_retrograde(doy: int) -> bool:
    # Uranus, Neptune and Pluto spend ~5 months a year retrograde
    return 100 < doy % 365 < 250


def _never_retrograde(doy: int) -> bool:
    return False


RETROGRADE_RULES: Mapping[str, Callable[[int], bool]] = {
    "sun": _never_retrograde,
    "moon": _never_retrograde,
    "mercury": _mercury_retrograde,
    "venus": _venus_retrograde,
    "mars": _mars_retrograde,
    "jupiter": _jupiter_retrograde,
    "saturn": _saturn_retrograde,
    "uranus": _outer_retrograde,
    "neptune": _outer_retrograde,
    "pluto": _outer_retrograde,
}


class TransitCalculator:
    """Linear-motion position model anchored at a reference epoch.

    Each body advances ``360 / period`` degrees per day from its reference
    position. Tables are injected so alternative epochs or periods can be
    plugged in without touching module state.
    """

    def __init__(
        self,
        periods: Mapping[str, float] = ORBITAL_PERIODS,
        reference_positions: Mapping[str, ReferencePosition] = REFERENCE_POSITIONS,
        retrograde_rules: Mapping[str, Callable[[int], bool]] = RETROGRADE_RULES,
        epoch: datetime = REFERENCE_EPOCH,
    ) -> None:
        self._periods = dict(periods)
        self._references = dict(reference_positions)
        self._rules = dict(retrograde_rules)
        self._epoch = epoch

    @property
    def planets(self) -> tuple[str, ...]:
        return tuple(self._periods)

    def longitude(self, target: date, planet: str) -> float:
        """Ecliptic longitude in [0, 360) at noon UTC on the target date."""
        period = self._lookup(self._periods, planet)
        ref = self._lookup(self._references, planet)

        days_since_ref = (noon_utc(target) - self._epoch).total_seconds() / SECONDS_PER_DAY
        degrees_per_day = 360.0 / period
        degrees_moved = (days_since_ref * degrees_per_day) % 360.0
        return (ref.sign_index * 30 + ref.degree + degrees_moved) % 360.0

    def is_retrograde(self, target: date, planet: str) -> bool:
        rule = self._rules.get(planet, _never_retrograde)
        return rule(day_of_year(target))

    def position(self, target: object, planet: str) -> PlanetPosition:
        day = parse_date(target)
        total = self.longitude(day, planet)

        # Round on the full circle so 29.96 deg rolls into 0.0 of the next sign
        sign, degree = longitude_to_sign(round(total, 1))
        return PlanetPosition(
            sign=sign,
            degree=round(degree, 1),
            retrograde=self.is_retrograde(day, planet),
        )

    def all_positions(self, target: object) -> dict[str, PlanetPosition]:
        day = parse_date(target)
        return {planet: self.position(day, planet) for planet in self.planets}

    @staticmethod
    def _lookup(table: Mapping, planet: str):
        try:
            return table[planet]
        except (KeyError, TypeError):
            raise UnknownPlanetError(f"Unknown planet '{planet}'") from None


_DEFAULT_CALCULATOR = TransitCalculator()


def compute_transit_position(target: object, planet: str) -> PlanetPosition:
    """Sign, degree and retrograde flag for one planet on a date."""
    return _DEFAULT_CALCULATOR.position(target, planet)


def compute_all_transits(target: object) -> dict[str, PlanetPosition]:
    """Positions for all ten bodies, in report order."""
    return _DEFAULT_CALCULATOR.all_positions(target)


def is_retrograde(target: object, planet: str) -> bool:
    """Retrograde flag for one planet on a date."""
    if planet not in RETROGRADE_RULES:
        raise UnknownPlanetError(f"Unknown planet '{planet}'")
    return _DEFAULT_CALCULATOR.is_retrograde(parse_date(target), planet)
