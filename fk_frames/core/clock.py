# -*- coding: utf-8 -*-
"""Restartable progress clock for the frame animation.

The clock does not read time itself; the host passes a monotonic timestamp in
milliseconds to :meth:`AnimationClock.tick`. Tests feed synthetic values.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

logger = logging.getLogger(__name__)

UNITS_PER_JOINT = 2.0
DEFAULT_SEGMENT_MS = 4000.0


class AnimationClock:
    """Maps elapsed time to a sawtooth progress in ``[0, units_per_cycle)``.

    One joint window is ``UNITS_PER_JOINT`` units long and lasts
    ``segment_ms``; the cycle duration grows in proportion to the units.
    """

    def __init__(self, segment_ms: float = DEFAULT_SEGMENT_MS, units_per_cycle: float = UNITS_PER_JOINT):
        self.segment_ms = float(segment_ms)
        self._units = float(units_per_cycle)
        self._enabled = False
        self._epoch: Optional[float] = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def epoch(self) -> Optional[float]:
        return self._epoch

    @property
    def units_per_cycle(self) -> float:
        return self._units

    @property
    def duration_ms(self) -> float:
        return self.segment_ms * self._units / UNITS_PER_JOINT

    def set_units(self, units_per_cycle: float) -> None:
        """Change the cycle length (in progress units) and restart."""
        units_per_cycle = float(units_per_cycle)
        if units_per_cycle != self._units:
            self._units = units_per_cycle
            self.rearm()

    def enable(self) -> None:
        """Arm the clock; the next tick becomes the epoch."""
        self._enabled = True
        self._epoch = None
        logger.debug("clock armed (%.1f units, %.0f ms)", self._units, self.duration_ms)

    def disable(self) -> None:
        self._enabled = False
        self._epoch = None
        logger.debug("clock stopped")

    def rearm(self) -> None:
        """Restart from progress 0 on the next tick, if running."""
        if self._enabled:
            self._epoch = None
            logger.debug("clock re-armed")

    def tick(self, now_ms: float) -> float:
        if not self._enabled:
            return 0.0
        now_ms = float(now_ms)
        if not math.isfinite(now_ms):
            return 0.0
        if self._epoch is None or now_ms < self._epoch:
            self._epoch = now_ms
        duration = self.duration_ms
        units = self._units
        if duration <= 0.0 or units <= 0.0:
            return 0.0
        elapsed = now_ms - self._epoch
        progress = (elapsed % duration) / (duration / units)
        # rounding can land exactly on the upper bound; that is the wrap
        if progress >= units:
            progress = 0.0
        return progress
