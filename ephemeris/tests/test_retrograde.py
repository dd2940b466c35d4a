"""Tests for Mercury retrograde window classification."""

from datetime import date, timedelta

import pytest
from astrologly.schemas.celestial import RetrogradeInterval, RetrogradeStatus
from ephemeris.errors import InvalidDateError
from ephemeris.retrograde import (
    MERCURY_RETROGRADES,
    RetrogradeClassifier,
    classify_retrograde,
    load_retrograde_table,
)


def test_date_inside_retrograde():
    """Test the March 2025 retrograde in Aries."""
    result = classify_retrograde("2025-03-20")

    assert result.status == "retrograde"
    assert result.current_period.started == date(2025, 3, 15)
    assert result.current_period.ends == date(2025, 4, 7)
    assert result.current_period.sign == "aries"
    assert result.next_period.starts == date(2025, 7, 18)


def test_new_year_2025_is_direct():
    """Test a date before the first pre-shadow window."""
    result = classify_retrograde(date(2025, 1, 1))

    assert result.status == "direct"
    assert result.current_period is None
    assert result.next_period.starts == date(2025, 3, 15)
    assert result.next_period.sign == "aries"


def test_pre_shadow_boundaries():
    """Test the 14 days before a retrograde start."""
    assert classify_retrograde("2025-02-28").status == "direct"

    first = classify_retrograde("2025-03-01")
    assert first.status == "pre_shadow"
    assert first.current_period.started == date(2025, 3, 1)
    assert first.current_period.ends == date(2025, 3, 15)
    assert first.next_period.starts == date(2025, 3, 15)
    assert first.next_period.ends == date(2025, 4, 7)

    assert classify_retrograde("2025-03-14").status == "pre_shadow"
    assert classify_retrograde("2025-03-15").status == "retrograde"


def test_post_shadow_boundaries():
    """Test the 14 days after a retrograde ends."""
    assert classify_retrograde("2025-04-07").status == "retrograde"

    first = classify_retrograde("2025-04-08")
    assert first.status == "post_shadow"
    assert first.current_period.started == date(2025, 4, 7)
    assert first.current_period.ends == date(2025, 4, 21)
    assert first.next_period.starts == date(2025, 7, 18)

    assert classify_retrograde("2025-04-21").status == "post_shadow"

    after = classify_retrograde("2025-04-22")
    assert after.status == "direct"
    assert after.next_period.starts == date(2025, 7, 18)


def test_every_tabulated_window():
    """Test all days of every interval and its shadows."""
    for period in MERCURY_RETROGRADES:
        day = period.start
        while day <= period.end:
            assert classify_retrograde(day).status == "retrograde", day
            day += timedelta(days=1)

        for offset in range(1, 15):
            pre = classify_retrograde(period.start - timedelta(days=offset))
            post = classify_retrograde(period.end + timedelta(days=offset))
            assert pre.status == "pre_shadow"
            assert post.status == "post_shadow"
            assert pre.next_period.starts == period.start


def test_table_is_chronological():
    """Test that the built-in table covers 2025-2030 without overlap."""
    assert len(MERCURY_RETROGRADES) == 19
    assert MERCURY_RETROGRADES[0].start == date(2025, 3, 15)
    assert MERCURY_RETROGRADES[-1].end == date(2030, 12, 26)
    for prev, cur in zip(MERCURY_RETROGRADES, MERCURY_RETROGRADES[1:]):
        assert prev.end < cur.start


def test_end_of_table():
    """Test dates at and beyond the last tabulated retrograde."""
    last = classify_retrograde("2030-12-20")
    assert last.status == "retrograde"
    assert last.next_period is None

    post = classify_retrograde("2031-01-09")
    assert post.status == "post_shadow"
    assert post.next_period is None

    beyond = classify_retrograde("2031-01-10")
    assert beyond.status == "direct"
    assert beyond.current_period is None
    assert beyond.next_period is None


def test_before_table_coverage():
    """Test that dates before 2025 fall through to direct."""
    result = classify_retrograde("2024-06-01")
    assert result.status == "direct"
    assert result.next_period.starts == date(2025, 3, 15)


def test_first_interval_wins_on_overlapping_shadows():
    """Test that overlapping shadow windows resolve to the earlier interval."""
    classifier = RetrogradeClassifier(
        [
            RetrogradeInterval(start=date(2025, 1, 1), end=date(2025, 1, 10), sign="capricorn"),
            RetrogradeInterval(start=date(2025, 1, 25), end=date(2025, 2, 5), sign="aquarius"),
        ]
    )

    result = classifier.classify("2025-01-15")
    assert result.status == "post_shadow"
    assert result.current_period.sign == "capricorn"
    assert result.next_period.starts == date(2025, 1, 25)

    # Last day of the first interval's post-shadow
    later = classifier.classify("2025-01-24")
    assert later.status == "post_shadow"
    assert classifier.classify("2025-01-25").status == "retrograde"


def test_classifier_rejects_unordered_table():
    """Test that an overlapping or unordered table is refused."""
    with pytest.raises(ValueError):
        RetrogradeClassifier(
            [
                RetrogradeInterval(start=date(2025, 7, 18), end=date(2025, 8, 11), sign="leo"),
                RetrogradeInterval(start=date(2025, 3, 15), end=date(2025, 4, 7), sign="aries"),
            ]
        )


def test_interval_rejects_reversed_dates():
    """Test that start must not be after end."""
    with pytest.raises(ValueError):
        RetrogradeInterval(start=date(2025, 4, 7), end=date(2025, 3, 15), sign="aries")


def test_invalid_dates_fail_fast():
    """Test that malformed dates raise instead of being coerced."""
    for bad in ["2025-13-01", "03/20/2025", "2025-3-20", "", 20250320, None]:
        with pytest.raises(InvalidDateError):
            classify_retrograde(bad)


def test_status_json_round_trip():
    """Test the serialized field names and a round trip through JSON."""
    for target in ["2025-01-01", "2025-03-01", "2025-03-20", "2025-04-10", "2031-06-01"]:
        status = classify_retrograde(target)
        payload = status.model_dump(mode="json", by_alias=True)
        assert set(payload) == {"status", "currentPeriod", "nextPeriod"}
        assert RetrogradeStatus.model_validate_json(status.model_dump_json(by_alias=True)) == status

    payload = classify_retrograde("2025-03-20").model_dump(mode="json", by_alias=True)
    assert payload["currentPeriod"] == {"started": "2025-03-15", "ends": "2025-04-07", "sign": "aries"}
    assert payload["nextPeriod"] == {"starts": "2025-07-18", "ends": "2025-08-11", "sign": "leo"}


def test_load_retrograde_table(tmp_path):
    """Test loading a custom interval table from JSON."""
    table_file = tmp_path / "retrogrades.json"
    table_file.write_text(
        '[{"starts": "2031-01-01", "ends": "2031-01-20", "sign": "capricorn"}]',
        encoding="utf-8",
    )

    table = load_retrograde_table(table_file)
    assert table == (RetrogradeInterval(start=date(2031, 1, 1), end=date(2031, 1, 20), sign="capricorn"),)

    result = RetrogradeClassifier(table).classify("2031-01-10")
    assert result.status == "retrograde"
    assert result.next_period is None


def test_load_retrograde_table_rejects_non_list(tmp_path):
    """Test that a JSON object is not accepted as a table."""
    table_file = tmp_path / "retrogrades.json"
    table_file.write_text('{"starts": "2031-01-01"}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_retrograde_table(table_file)
