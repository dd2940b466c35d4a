"""Moon phase stage."""

from __future__ import annotations

import logging
from datetime import date

from astrologly.schemas.celestial import MoonReport

logger = logging.getLogger(__name__)


def run_moon_stage(date_context: date) -> MoonReport:
    from ephemeris.descriptions import moon_phase_description
    from ephemeris.lunar import compute_moon_phase, compute_moon_sign

    result = compute_moon_phase(date_context)
    sign = compute_moon_sign(date_context)

    logger.info(
        "Moon for %s: %s, %.1f%% illuminated, in %s",
        date_context,
        result.phase,
        result.illumination * 100,
        sign,
    )

    return MoonReport(
        date=date_context,
        phase=result.phase,
        illumination=result.illumination,
        zodiac_sign=sign,
        descriptions=moon_phase_description(result.phase),
    )
