"""Tests for multilingual descriptions."""

import pytest
from ephemeris.descriptions import (
    LANGUAGES,
    mercury_description,
    moon_phase_description,
    transit_description,
)
from ephemeris.errors import UnknownDescriptionError
from ephemeris.lunar import PHASE_BOUNDS


def test_every_mercury_status_has_all_languages():
    for status in ("retrograde", "pre_shadow", "post_shadow", "direct"):
        text = mercury_description(status)
        assert tuple(text) == LANGUAGES
        assert all(text.values())


def test_every_moon_phase_has_all_languages():
    for _, phase in PHASE_BOUNDS:
        text = moon_phase_description(phase)
        assert tuple(text) == LANGUAGES
        assert all(text.values())


def test_transit_description():
    text = transit_description()
    assert tuple(text) == LANGUAGES
    assert text["en"].startswith("The planetary transits")


def test_returned_mapping_is_a_copy():
    text = mercury_description("direct")
    text["en"] = "changed"
    assert mercury_description("direct")["en"] != "changed"


def test_unknown_keys():
    with pytest.raises(UnknownDescriptionError):
        mercury_description("stationary")
    with pytest.raises(KeyError):
        moon_phase_description("blue_moon")
