"""Pydantic schemas for celestial status data."""

from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

ZodiacSign = Literal[
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
]

Planet = Literal[
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
]

RetrogradePhase = Literal["retrograde", "pre_shadow", "post_shadow", "direct"]

MoonPhaseName = Literal[
    "new_moon",
    "waxing_crescent",
    "first_quarter",
    "waxing_gibbous",
    "full_moon",
    "waning_gibbous",
    "last_quarter",
    "waning_crescent",
]


class RetrogradeInterval(BaseModel):
    """A tabulated retrograde period. Shadow windows are derived from it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start: dt.date = Field(alias="starts")
    end: dt.date = Field(alias="ends")
    sign: ZodiacSign

    @model_validator(mode="after")
    def _check_order(self) -> RetrogradeInterval:
        if self.start > self.end:
            raise ValueError(f"retrograde interval starts after it ends: {self.start} > {self.end}")
        return self


class CurrentPeriod(BaseModel):
    """The window (retrograde or shadow) the target date falls in."""

    model_config = ConfigDict(frozen=True)

    started: dt.date
    ends: dt.date
    sign: ZodiacSign


class NextPeriod(BaseModel):
    """The upcoming retrograde interval."""

    model_config = ConfigDict(frozen=True)

    starts: dt.date
    ends: dt.date
    sign: ZodiacSign

    @classmethod
    def from_interval(cls, interval: RetrogradeInterval) -> NextPeriod:
        return cls(starts=interval.start, ends=interval.end, sign=interval.sign)


class RetrogradeStatus(BaseModel):
    """Mercury retrograde status for a single date."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: RetrogradePhase
    current_period: CurrentPeriod | None = Field(default=None, alias="currentPeriod")
    next_period: NextPeriod | None = Field(default=None, alias="nextPeriod")


class MoonPhaseResult(BaseModel):
    """Named lunar phase and cosine-model illumination."""

    model_config = ConfigDict(frozen=True)

    phase: MoonPhaseName
    illumination: float = Field(ge=0.0, le=1.0)


class PlanetPosition(BaseModel):
    """Approximate position of a body in the zodiac."""

    model_config = ConfigDict(frozen=True)

    sign: ZodiacSign
    degree: float = Field(ge=0.0, lt=30.0)
    retrograde: bool


class MercuryReport(BaseModel):
    """Dated Mercury status document (``mercury/YYYY-MM-DD.json``)."""

    model_config = ConfigDict(populate_by_name=True)

    date: dt.date
    status: RetrogradePhase
    current_period: CurrentPeriod | None = Field(default=None, alias="currentPeriod")
    next_period: NextPeriod | None = Field(default=None, alias="nextPeriod")
    descriptions: dict[str, str] = Field(default_factory=dict)


class MoonReport(BaseModel):
    """Dated Moon document (``moon/YYYY-MM-DD.json``)."""

    date: dt.date
    phase: MoonPhaseName
    illumination: float = Field(ge=0.0, le=1.0)
    zodiac_sign: ZodiacSign
    descriptions: dict[str, str] = Field(default_factory=dict)


class TransitReport(BaseModel):
    """Dated planetary transit document (``transits/YYYY-MM-DD.json``)."""

    date: dt.date
    planets: dict[str, PlanetPosition]
    descriptions: dict[str, str] = Field(default_factory=dict)


class CelestialSnapshot(BaseModel):
    """All engine results for one date."""

    date: dt.date
    mercury: RetrogradeStatus
    moon: MoonPhaseResult
    moon_sign: ZodiacSign
    planets: dict[str, PlanetPosition]
