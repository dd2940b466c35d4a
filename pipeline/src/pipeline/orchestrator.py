"""Pipeline orchestrator - writes the dated celestial JSON documents."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from astrologly.config import get_settings
from ephemeris.dates import format_date, parse_date
from ephemeris.errors import InvalidDateError
from ephemeris.retrograde import RetrogradeClassifier, load_retrograde_table
from pydantic import BaseModel

from pipeline.stages.mercury_stage import run_mercury_stage
from pipeline.stages.moon_stage import run_moon_stage
from pipeline.stages.transits_stage import run_transits_stage

logger = logging.getLogger(__name__)

REPORT_KINDS = ("mercury", "moon", "transits")


def _zone(tz_name: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidDateError(f"Unknown timezone '{tz_name}'. Check the TIMEZONE setting.") from exc


def resolve_target_date(target: str, tz_name: str, now: datetime | None = None) -> date:
    """Resolve ``today``/``tomorrow`` in the given timezone, or an explicit YYYY-MM-DD."""
    keyword = target.strip().lower()
    if keyword in ("today", "tomorrow"):
        tz = _zone(tz_name)
        current = now.astimezone(tz) if now else datetime.now(tz)
        offset = 1 if keyword == "tomorrow" else 0
        return current.date() + timedelta(days=offset)
    try:
        return parse_date(target)
    except InvalidDateError:
        raise InvalidDateError(
            f"Invalid target '{target}'. Use today, tomorrow, or YYYY-MM-DD."
        ) from None


def report_path(output_dir: str | Path, kind: str, date_context: date) -> Path:
    return Path(output_dir) / kind / f"{format_date(date_context)}.json"


def _get_classifier() -> RetrogradeClassifier:
    table_path = get_settings().retrograde_table_path.strip()
    if not table_path:
        return RetrogradeClassifier()
    logger.info("Using retrograde table from %s", table_path)
    return RetrogradeClassifier(load_retrograde_table(table_path))


def _build_report(kind: str, date_context: date, classifier: RetrogradeClassifier | None) -> BaseModel:
    if kind == "mercury":
        return run_mercury_stage(date_context, classifier=classifier)
    if kind == "moon":
        return run_moon_stage(date_context)
    if kind == "transits":
        return run_transits_stage(date_context)
    raise ValueError(f"Unknown report kind '{kind}'. Expected one of {', '.join(REPORT_KINDS)}.")


def _render(report: BaseModel) -> str:
    data: dict[str, Any] = report.model_dump(mode="json", by_alias=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


def _write_atomic(path: Path, content: str) -> None:
    # The report appears under its final name only once fully written
    tmp = path.with_name(f"{path.name}.tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def run_pipeline(
    date_context: date,
    output_dir: str | Path | None = None,
    kinds: Iterable[str] = REPORT_KINDS,
    classifier: RetrogradeClassifier | None = None,
) -> dict[str, Path | None]:
    """Calculate and write each requested report for a date.

    Existing files are left untouched. Returns kind -> written path,
    or None when the file was already there.
    """
    base_dir = Path(output_dir if output_dir is not None else get_settings().output_dir)
    kinds = list(kinds)
    for kind in kinds:
        if kind not in REPORT_KINDS:
            raise ValueError(f"Unknown report kind '{kind}'. Expected one of {', '.join(REPORT_KINDS)}.")

    written: dict[str, Path | None] = {}
    for kind in kinds:
        path = report_path(base_dir, kind, date_context)
        if path.exists():
            logger.info("%s already exists. Skipping.", path)
            written[kind] = None
            continue

        if kind == "mercury" and classifier is None:
            classifier = _get_classifier()
        report = _build_report(kind, date_context, classifier)

        path.parent.mkdir(parents=True, exist_ok=True)
        _write_atomic(path, _render(report))
        logger.info("Created %s", path)
        written[kind] = path

    return written
