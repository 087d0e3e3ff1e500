# -*- coding: utf-8 -*-
"""Geometry helpers.

Points are plain ``(x, y)`` tuples in a y-up math convention. Flipping the
y-axis for screen output is left to whoever draws them.
"""

from __future__ import annotations

import math
from typing import Tuple

Point = Tuple[float, float]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to ``[lo, hi]``. NaN collapses to ``lo``."""
    if value != value:
        return lo
    return max(lo, min(hi, value))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def polar_offset(origin: Point, length: float, angle: float) -> Point:
    """Point reached by moving ``length`` from ``origin`` along ``angle``."""
    return origin[0] + length * math.cos(angle), origin[1] + length * math.sin(angle)


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])
