"""Mercury retrograde windows: retrograde, shadow, and direct classification."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from pathlib import Path

from astrologly.schemas.celestial import (
    CurrentPeriod,
    NextPeriod,
    RetrogradeInterval,
    RetrogradeStatus,
)

from ephemeris.dates import parse_date

logger = logging.getLogger(__name__)

# Shadow periods: two weeks either side of the retrograde itself
SHADOW_DAYS = 14


def _interval(starts: str, ends: str, sign: str) -> RetrogradeInterval:
    return RetrogradeInterval(start=date.fromisoformat(starts), end=date.fromisoformat(ends), sign=sign)


# Pre-calculated Mercury retrograde periods (NASA/JPL data), chronological
MERCURY_RETROGRADES: tuple[RetrogradeInterval, ...] = (
    # 2025
    _interval("2025-03-15", "2025-04-07", "aries"),
    _interval("2025-07-18", "2025-08-11", "leo"),
    _interval("2025-11-09", "2025-11-29", "sagittarius"),
    # 2026
    _interval("2026-02-26", "2026-03-20", "pisces"),
    _interval("2026-06-29", "2026-07-23", "cancer"),
    _interval("2026-10-24", "2026-11-13", "scorpio"),
    # 2027
    _interval("2027-02-09", "2027-03-03", "aquarius"),
    _interval("2027-06-10", "2027-07-04", "gemini"),
    _interval("2027-10-07", "2027-10-28", "libra"),
    # 2028
    _interval("2028-01-24", "2028-02-14", "capricorn"),
    _interval("2028-05-21", "2028-06-14", "taurus"),
    _interval("2028-09-19", "2028-10-11", "virgo"),
    # 2029
    _interval("2029-01-07", "2029-01-27", "sagittarius"),
    _interval("2029-05-02", "2029-05-26", "aries"),
    _interval("2029-09-02", "2029-09-25", "leo"),
    _interval("2029-12-22", "2030-01-11", "sagittarius"),
    # 2030
    _interval("2030-04-13", "2030-05-07", "taurus"),
    _interval("2030-08-15", "2030-09-07", "virgo"),
    _interval("2030-12-06", "2030-12-26", "sagittarius"),
)


def load_retrograde_table(path: str | Path) -> tuple[RetrogradeInterval, ...]:
    """Load an interval table from a JSON list of ``{starts, ends, sign}`` objects."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Retrograde table {path} must be a JSON list")
    table = tuple(RetrogradeInterval.model_validate(item) for item in raw)
    logger.debug("Loaded %d retrograde intervals from %s", len(table), path)
    return table


class RetrogradeClassifier:
    """Classifies dates against an ordered, non-overlapping interval table.

    The first interval in table order whose retrograde or shadow window
    contains the date wins, even when shadows of neighbouring intervals
    overlap.
    """

    def __init__(
        self,
        intervals: Iterable[RetrogradeInterval] = MERCURY_RETROGRADES,
        shadow_days: int = SHADOW_DAYS,
    ) -> None:
        self._intervals: tuple[RetrogradeInterval, ...] = tuple(intervals)
        self._shadow = timedelta(days=shadow_days)
        _check_table(self._intervals)

    @property
    def intervals(self) -> Sequence[RetrogradeInterval]:
        return self._intervals

    def classify(self, target: object) -> RetrogradeStatus:
        """Return the retrograde status for a date."""
        day = parse_date(target)

        for index, period in enumerate(self._intervals):
            pre_start = period.start - self._shadow
            post_end = period.end + self._shadow

            if period.start <= day <= period.end:
                return RetrogradeStatus(
                    status="retrograde",
                    current_period=CurrentPeriod(started=period.start, ends=period.end, sign=period.sign),
                    next_period=self._following(index),
                )

            if pre_start <= day < period.start:
                return RetrogradeStatus(
                    status="pre_shadow",
                    current_period=CurrentPeriod(started=pre_start, ends=period.start, sign=period.sign),
                    next_period=NextPeriod.from_interval(period),
                )

            if period.end < day <= post_end:
                return RetrogradeStatus(
                    status="post_shadow",
                    current_period=CurrentPeriod(started=period.end, ends=post_end, sign=period.sign),
                    next_period=self._following(index),
                )

        upcoming = next((p for p in self._intervals if p.start > day), None)
        if upcoming is None:
            logger.debug("%s is past the last tabulated retrograde", day)
        return RetrogradeStatus(
            status="direct",
            current_period=None,
            next_period=NextPeriod.from_interval(upcoming) if upcoming else None,
        )

    def _following(self, index: int) -> NextPeriod | None:
        if index + 1 >= len(self._intervals):
            return None
        return NextPeriod.from_interval(self._intervals[index + 1])


def _check_table(intervals: Sequence[RetrogradeInterval]) -> None:
    for prev, cur in zip(intervals, intervals[1:]):
        if cur.start <= prev.end:
            raise ValueError(
                f"Retrograde table must be chronological and non-overlapping: "
                f"{prev.start}..{prev.end} followed by {cur.start}..{cur.end}"
            )


_DEFAULT_CLASSIFIER = RetrogradeClassifier()


def classify_retrograde(target: object) -> RetrogradeStatus:
    """Classify a date against the built-in Mercury retrograde table."""
    return _DEFAULT_CLASSIFIER.classify(target)
