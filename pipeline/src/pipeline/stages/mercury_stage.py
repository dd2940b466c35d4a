"""Mercury retrograde status stage."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from astrologly.schemas.celestial import MercuryReport

if TYPE_CHECKING:
    from ephemeris.retrograde import RetrogradeClassifier

logger = logging.getLogger(__name__)


def run_mercury_stage(date_context: date, classifier: RetrogradeClassifier | None = None) -> MercuryReport:
    from ephemeris.descriptions import mercury_description
    from ephemeris.retrograde import RetrogradeClassifier

    classifier = classifier or RetrogradeClassifier()
    status = classifier.classify(date_context)

    logger.info("Mercury status for %s: %s", date_context, status.status)
    if status.current_period:
        logger.info(
            "Current period: %s to %s",
            status.current_period.started,
            status.current_period.ends,
        )
    if status.next_period:
        logger.info("Next retrograde: %s to %s", status.next_period.starts, status.next_period.ends)

    return MercuryReport(
        date=date_context,
        status=status.status,
        current_period=status.current_period,
        next_period=status.next_period,
        descriptions=mercury_description(status.status),
    )
