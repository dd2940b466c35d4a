"""Planetary transits stage."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from astrologly.schemas.celestial import TransitReport

if TYPE_CHECKING:
    from ephemeris.transits import TransitCalculator

logger = logging.getLogger(__name__)


def run_transits_stage(date_context: date, calculator: TransitCalculator | None = None) -> TransitReport:
    from ephemeris.descriptions import transit_description
    from ephemeris.transits import TransitCalculator

    calculator = calculator or TransitCalculator()
    planets = calculator.all_positions(date_context)

    for name, position in planets.items():
        logger.info(
            "%s: %s %.1f%s",
            name,
            position.sign,
            position.degree,
            " (R)" if position.retrograde else "",
        )

    return TransitReport(
        date=date_context,
        planets=planets,
        descriptions=transit_description(),
    )
