"""Pipeline entry point for running as a module: python -m pipeline."""

from __future__ import annotations

import argparse
import logging
import sys

from astrologly.config import get_settings
from ephemeris.errors import EphemerisError

from pipeline.orchestrator import REPORT_KINDS, resolve_target_date, run_pipeline

logger = logging.getLogger("pipeline")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Write dated Mercury, Moon and transit JSON files.")
    parser.add_argument(
        "--target",
        default="tomorrow",
        help="today, tomorrow, or an explicit YYYY-MM-DD date (default: tomorrow).",
    )
    parser.add_argument(
        "--only",
        action="append",
        choices=REPORT_KINDS,
        help="Report to generate; repeat for several (default: all).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Base directory for mercury/, moon/ and transits/ (default: OUTPUT_DIR).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one pass for the target date. Returns the process exit status."""
    args = _parser().parse_args(argv)
    settings = get_settings()
    _configure_logging(settings.log_level)

    try:
        target_date = resolve_target_date(args.target, settings.timezone)
    except EphemerisError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Calculating celestial data for %s", target_date)
    try:
        written = run_pipeline(
            target_date,
            output_dir=args.output_dir,
            kinds=args.only or REPORT_KINDS,
        )
    except (EphemerisError, OSError, ValueError) as exc:
        logger.error("Celestial calculation failed: %s", exc)
        return 1

    created = sum(1 for path in written.values() if path is not None)
    logger.info("Celestial calculation complete: %d created, %d skipped", created, len(written) - created)
    return 0


if __name__ == "__main__":
    sys.exit(main())
