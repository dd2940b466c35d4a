"""Pipeline test configuration."""

import pytest
from astrologly.config import reset_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point settings at a temporary output directory for each test."""
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("TIMEZONE", "Asia/Jerusalem")
    monkeypatch.delenv("RETROGRADE_TABLE_PATH", raising=False)
    reset_settings_cache()
    yield tmp_path
    reset_settings_cache()
