import math

import pytest

from fk_frames.core.geometry import clamp, distance, lerp, polar_offset


def test_clamp():
    assert clamp(5.0, 0.0, 2.0) == 2.0
    assert clamp(-1.0, 0.0, 2.0) == 0.0
    assert clamp(float("nan"), 0.0, 2.0) == 0.0


def test_polar_offset_and_distance():
    p = polar_offset((1.0, 2.0), 5.0, math.atan2(4.0, 3.0))
    assert p == pytest.approx((4.0, 6.0))
    assert distance((1.0, 2.0), p) == pytest.approx(5.0)


def test_polar_offset_is_y_up():
    assert polar_offset((0.0, 0.0), 3.0, math.pi / 2) == pytest.approx((0.0, 3.0), abs=1e-12)


def test_lerp():
    assert lerp(2.0, 4.0, 0.25) == 2.5
