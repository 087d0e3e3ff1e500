# -*- coding: utf-8 -*-
"""Input sanitizing done at the control boundary.

The kinematics core never checks its inputs; sliders and number boxes pass
their values through these helpers first.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Tuple

if TYPE_CHECKING:
    from .kinematics import JointAngles
    from .sequencer import AnimationSelector

ANGLE_MIN_DEG = -180.0
ANGLE_MAX_DEG = 180.0


def clamp_degrees(value: Any, lo: float = ANGLE_MIN_DEG, hi: float = ANGLE_MAX_DEG) -> float:
    """Coerce a user-entered angle to a finite value in ``[lo, hi]``.

    Empty, unparsable and non-finite input reads as 0.
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(v):
        return 0.0
    return max(lo, min(hi, v))


def degrees_to_radians(value: Any) -> float:
    return math.radians(clamp_degrees(value))


def dependency_key(angles: "JointAngles", selector: "AnimationSelector") -> Tuple[float, float, float, float, int]:
    """Inputs whose change must restart the animation clock."""
    return (
        float(angles.theta_base),
        float(angles.theta1),
        float(angles.theta2),
        float(angles.theta3),
        int(selector.target_joint),
    )
