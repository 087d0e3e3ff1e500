import math

import pytest

from fk_frames.core.animator import (
    ROTATING,
    TRANSLATING,
    AnimationFrame,
    FrameAnimator,
    JointPose,
    pose_for_joint,
)
from fk_frames.core.kinematics import ForwardKinematicsSolver, JointAngles

POSE = JointPose(start_position=(10.0, 20.0), start_angle=0.25, target_angle=1.25, translation_length=80.0)


def test_phase_start():
    f = FrameAnimator.animate(POSE, 0.0)
    assert f.position == (10.0, 20.0)
    assert f.absolute_angle == 0.25
    assert f.phase == ROTATING
    assert f.phase_local_progress == 0.0


def test_end_of_rotation():
    f = FrameAnimator.animate(POSE, 1.0)
    assert f.position == (10.0, 20.0)
    assert f.absolute_angle == 1.25
    assert f.phase == ROTATING
    assert f.phase_local_progress == 1.0


def test_end_of_translation():
    f = FrameAnimator.animate(POSE, 2.0)
    assert f.absolute_angle == 1.25
    assert f.phase == TRANSLATING
    assert f.position == pytest.approx((10.0 + 80.0 * math.cos(1.25), 20.0 + 80.0 * math.sin(1.25)))


def test_mid_rotation_interpolates_angle():
    f = FrameAnimator.animate(POSE, 0.5)
    assert f.absolute_angle == pytest.approx(0.75)
    assert f.position == (10.0, 20.0)


def test_mid_translation_moves_along_target_heading():
    f = FrameAnimator.animate(POSE, 1.5)
    assert f.phase == TRANSLATING
    assert f.phase_local_progress == pytest.approx(0.5)
    assert f.position == pytest.approx((10.0 + 40.0 * math.cos(1.25), 20.0 + 40.0 * math.sin(1.25)))


def test_out_of_range_progress_is_clamped():
    assert FrameAnimator.animate(POSE, -1.0) == FrameAnimator.animate(POSE, 0.0)
    assert FrameAnimator.animate(POSE, 7.0) == FrameAnimator.animate(POSE, 2.0)


def test_frame_axes():
    f = AnimationFrame((0.0, 0.0), math.pi / 2, ROTATING, 1.0)
    assert f.i_hat(30.0) == pytest.approx((0.0, 30.0))
    assert f.j_hat(30.0) == pytest.approx((-30.0, 0.0), abs=1e-12)


def test_pose_for_each_joint_lands_on_the_solved_joint():
    r = ForwardKinematicsSolver.solve(JointAngles.from_degrees(45, 30, -60))
    for j in (1, 2, 3):
        pose = pose_for_joint(r, j)
        assert pose.start_position == r.joint(j - 1)
        assert pose.start_angle == r.absolute(j - 1)
        assert pose.target_angle == r.absolute(j)
        end = FrameAnimator.animate(pose, 2.0)
        assert end.position == pytest.approx(r.joint(j))


def test_first_joint_starts_from_base_frame():
    r = ForwardKinematicsSolver.solve(JointAngles(0.6, 0.1, 0.1))
    pose = pose_for_joint(r, 1)
    assert pose.start_position == r.base
    assert pose.start_angle == 0.0
    assert pose.translation_length == 80.0


def test_base_yaw_frame():
    assert FrameAnimator.animate_base_yaw(1.0, 0.0).angle == 0.0
    assert FrameAnimator.animate_base_yaw(1.0, 0.5).angle == pytest.approx(0.5)
    y = FrameAnimator.animate_base_yaw(1.0, 1.0)
    assert (y.angle, y.phase) == (1.0, ROTATING)
    y = FrameAnimator.animate_base_yaw(1.0, 1.75)
    assert (y.angle, y.phase) == (1.0, TRANSLATING)
    assert y.phase_local_progress == pytest.approx(0.75)
