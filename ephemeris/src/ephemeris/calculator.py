"""Main celestial status calculator - calculate_day() entry point."""

from __future__ import annotations

import logging

from astrologly.schemas.celestial import CelestialSnapshot

from ephemeris.dates import parse_date
from ephemeris.lunar import compute_moon_phase, compute_moon_sign
from ephemeris.retrograde import RetrogradeClassifier
from ephemeris.transits import TransitCalculator

logger = logging.getLogger(__name__)


def calculate_day(
    target_date: object,
    classifier: RetrogradeClassifier | None = None,
    transits: TransitCalculator | None = None,
) -> CelestialSnapshot:
    """Calculate Mercury status, Moon data and planetary positions for a date.

    Args:
        target_date: A date, datetime, or YYYY-MM-DD string
        classifier: Optional classifier with a custom interval table
        transits: Optional transit calculator with custom tables

    Returns:
        CelestialSnapshot with all engine results for the date
    """
    day = parse_date(target_date)
    classifier = classifier or RetrogradeClassifier()
    transits = transits or TransitCalculator()

    mercury = classifier.classify(day)
    moon = compute_moon_phase(day)
    moon_sign = compute_moon_sign(day)
    planets = transits.all_positions(day)

    logger.debug(
        "Calculated %s: mercury=%s moon=%s (%s) in %s",
        day,
        mercury.status,
        moon.phase,
        moon.illumination,
        moon_sign,
    )

    return CelestialSnapshot(
        date=day,
        mercury=mercury,
        moon=moon,
        moon_sign=moon_sign,
        planets=planets,
    )
