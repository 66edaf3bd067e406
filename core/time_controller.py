"""
TimeController: simulated clock shared by the orrery views.

Produces the timestamp fed to the orbital solver. The JD is advanced every
frame with floating-point precision: no threshold accumulation, no jumps to
whole seconds.

Available speeds (simulated seconds per wall-clock second):
    SPEEDS = [0, 1h, 6h, 1d, 10d, 30d, 1yr]

Controls:
    tc.speed_up()      : next speed step (resumes if paused)
    tc.speed_down()    : previous step (0 = pause)
    tc.reverse()       : flip the direction of time
    tc.realtime()      : jump back to "now", keep the current speed
    tc.toggle_pause()
    tc.skip_days(n)    : jump n days (negative = back)
    tc.step(dt_wall)   : call once per frame, returns the updated datetime
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from core.astro_time import (
    DAYS_PER_YEAR,
    SECONDS_PER_DAY,
    as_utc,
    datetime_to_jd,
    days_since_j2000,
    jd_to_datetime,
)


# Simulated seconds per wall-clock second
SPEEDS = [0, 3600, 6 * 3600, 86400, 10 * 86400, 30 * 86400,
          DAYS_PER_YEAR * 86400]
SPEED_LABELS = ["PAUSED", "1h/s", "6h/s", "1d/s", "10d/s", "30d/s", "1yr/s"]

# 10 simulated days per wall second (24h every 100ms tick)
DEFAULT_SPEED_IDX = 4

# Skip buttons jump a month back/forward
SKIP_DAYS = 30


class TimeController:
    """
    Simulated time with smooth per-frame advancement.

    Parameters
    ----------
    start_utc : UTC datetime to start from (default: now)
    speed_idx : index into SPEEDS
    paused    : start paused (the viewer opens on a still frame)
    """

    def __init__(self,
                 start_utc: Optional[datetime] = None,
                 speed_idx: int = DEFAULT_SPEED_IDX,
                 paused: bool = True):
        if start_utc is None:
            start_utc = datetime.now(timezone.utc)
        self._jd        = datetime_to_jd(start_utc)
        self._speed_idx = max(0, min(speed_idx, len(SPEEDS) - 1))
        self._direction = +1    # +1 forward, -1 backward
        self._paused    = paused or self._speed_idx == 0

    # ── Properties ───────────────────────────────────────────────────────────

    @property
    def jd(self) -> float:
        return self._jd

    @property
    def utc(self) -> datetime:
        return jd_to_datetime(self._jd)

    @property
    def days_since_j2000(self) -> float:
        return days_since_j2000(self.utc)

    @property
    def speed(self) -> float:
        """Signed simulated seconds per wall second (0 while paused)."""
        if self._paused:
            return 0.0
        return SPEEDS[self._speed_idx] * self._direction

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def speed_label(self) -> str:
        if self._paused:
            return "PAUSED"
        lbl = SPEED_LABELS[self._speed_idx]
        return ("<< " if self._direction < 0 else "") + lbl

    @property
    def speed_idx(self) -> int:
        return self._speed_idx

    # ── Controls ─────────────────────────────────────────────────────────────

    def speed_up(self):
        """Increase speed (or resume if paused)."""
        if self._paused and self._speed_idx > 0:
            self._paused = False
        elif self._speed_idx < len(SPEEDS) - 1:
            self._speed_idx += 1
            self._paused = False

    def speed_down(self):
        """Decrease speed (pause at 0)."""
        if self._speed_idx > 0:
            self._speed_idx -= 1
        if self._speed_idx == 0:
            self._paused = True

    def toggle_pause(self):
        if self._speed_idx == 0:
            self._speed_idx = DEFAULT_SPEED_IDX
        self._paused = not self._paused

    def reverse(self):
        """Flip the direction of time."""
        self._direction *= -1

    def realtime(self):
        """Reset the clock to the system time."""
        self._jd = datetime_to_jd(datetime.now(timezone.utc))

    def set_time(self, dt: datetime):
        self._jd = datetime_to_jd(as_utc(dt))

    def set_speed_idx(self, idx: int):
        self._speed_idx = max(0, min(idx, len(SPEEDS) - 1))
        self._paused    = (self._speed_idx == 0)

    def jump(self, delta_seconds: float):
        """Jump by delta_seconds (may be negative)."""
        self._jd += delta_seconds / SECONDS_PER_DAY

    def skip_days(self, days: float = SKIP_DAYS):
        self._jd += days

    # ── Frame update ─────────────────────────────────────────────────────────

    def step(self, dt_wall: float) -> datetime:
        """
        Advance the clock by dt_wall real seconds and return the new time.
        dt_wall: real seconds since the last frame (typically 1/60).
        """
        if not self._paused:
            sim_secs = dt_wall * SPEEDS[self._speed_idx] * self._direction
            self._jd += sim_secs / SECONDS_PER_DAY
        return self.utc
