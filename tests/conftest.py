"""Integration test configuration."""

import pytest


@pytest.fixture
def sample_mercury_report():
    """Mercury document as written for 2025-03-20."""
    return {
        "date": "2025-03-20",
        "status": "retrograde",
        "currentPeriod": {"started": "2025-03-15", "ends": "2025-04-07", "sign": "aries"},
        "nextPeriod": {"starts": "2025-07-18", "ends": "2025-08-11", "sign": "leo"},
        "descriptions": {"en": "Mercury is currently retrograde."},
    }


@pytest.fixture
def sample_moon_report():
    """Moon document for the 2000-01-06 reference new moon."""
    return {
        "date": "2000-01-06",
        "phase": "new_moon",
        "illumination": 0.0,
        "zodiac_sign": "gemini",
        "descriptions": {"en": "The New Moon brings fresh beginnings and new intentions."},
    }


@pytest.fixture
def sample_transit_report():
    """Transit document fragment."""
    return {
        "date": "2025-01-01",
        "planets": {
            "sun": {"sign": "capricorn", "degree": 10.5, "retrograde": False},
            "mercury": {"sign": "aquarius", "degree": 22.0, "retrograde": True},
        },
        "descriptions": {},
    }
