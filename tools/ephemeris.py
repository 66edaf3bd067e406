#!/usr/bin/env python3
"""
Ephemeris printer

Prints the heliocentric ecliptic position (AU) and the scene position of
every catalog body at a UTC date.

Usage:
    python3 -m tools.ephemeris                         # now
    python3 -m tools.ephemeris --date 2000-01-01T12:00
    python3 -m tools.ephemeris --date 2024-06-21 --scale 8
"""

import argparse
import logging
import sys
from datetime import datetime, timezone

from core.astro_time import as_utc, datetime_to_jd
from universe.catalog import BODIES, scene_positions
from universe.orbital_elements import PLANET_ORBITAL_ELEMENTS
from universe.orbital_solver import DEFAULT_SCALE_FACTOR, position_for

logger = logging.getLogger("ephemeris")


def parse_date(text: str) -> datetime:
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not an ISO date: {text!r}") from None


def ephemeris_rows(when: datetime, scale: float) -> list:
    """(body id, raw AU position or None, scene position) for every body."""
    scene = scene_positions(when, scale)
    rows = []
    for body_id in BODIES:
        raw = position_for(body_id, when) if body_id in PLANET_ORBITAL_ELEMENTS else None
        rows.append((body_id, raw, scene[body_id]))
    return rows


def format_rows(rows) -> str:
    lines = [f"{'body':<10} {'x_au':>9} {'y_au':>9} {'z_au':>9} {'r_au':>8}   "
             f"{'scene_x':>9} {'scene_y':>9} {'scene_z':>9}"]
    for body_id, raw, scene in rows:
        if raw is None:
            au = f"{'-':>9} {'-':>9} {'-':>9} {'-':>8}"
        else:
            au = f"{raw.x:9.4f} {raw.y:9.4f} {raw.z:9.4f} {raw.length():8.4f}"
        lines.append(f"{body_id:<10} {au}   {scene.x:9.3f} {scene.y:9.3f} {scene.z:9.3f}")
    return "\n".join(lines)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Print planet positions for a UTC date")
    ap.add_argument("--date", type=parse_date, default=None, help="ISO date/time, UTC (default: now)")
    ap.add_argument("--scale", type=float, default=DEFAULT_SCALE_FACTOR, help="Display scale factor")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    when = args.date or datetime.now(timezone.utc)
    print(f"{when.isoformat()}  JD {datetime_to_jd(when):.4f}")
    print(format_rows(ephemeris_rows(when, args.scale)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
