# -*- coding: utf-8 -*-
"""Two-phase frame interpolation.

Local progress runs 0..2 for one joint: on [0, 1] the frame rotates in place
from the start angle to the target angle, on (1, 2] it slides along the new
heading by the link length. Read right-to-left, this is ``Rot(theta) @
Trans(L, 0)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import Point, clamp, lerp, polar_offset
from .kinematics import KinematicsResult

ROTATING = "rotating"
TRANSLATING = "translating"

@dataclass(frozen=True)
class JointPose:
    start_position: Point
    start_angle: float
    target_angle: float
    translation_length: float


@dataclass(frozen=True)
class AnimationFrame:
    position: Point
    absolute_angle: float
    phase: str
    phase_local_progress: float

    def i_hat(self, size: float) -> Point:
        """Local x axis of the frame, ``size`` long."""
        return size * math.cos(self.absolute_angle), size * math.sin(self.absolute_angle)

    def j_hat(self, size: float) -> Point:
        a = self.absolute_angle + math.pi / 2
        return size * math.cos(a), size * math.sin(a)


@dataclass(frozen=True)
class YawFrame:
    """Base frame yaw during the 3D base-yaw window."""

    angle: float
    phase: str
    phase_local_progress: float


def _split(local_progress: float):
    p = clamp(local_progress, 0.0, 2.0)
    if p <= 1.0:
        return p, ROTATING, p
    return p, TRANSLATING, p - 1.0


class FrameAnimator:
    @staticmethod
    def animate(pose: JointPose, local_progress: float) -> AnimationFrame:
        p, phase, sub = _split(local_progress)
        if phase == ROTATING:
            if p >= 1.0:
                angle = pose.target_angle
            else:
                angle = lerp(pose.start_angle, pose.target_angle, p)
            return AnimationFrame(pose.start_position, angle, phase, sub)

        position = polar_offset(pose.start_position, pose.translation_length * sub, pose.target_angle)
        return AnimationFrame(position, pose.target_angle, phase, sub)

    @staticmethod
    def animate_base_yaw(theta_base: float, local_progress: float) -> YawFrame:
        """Yaw from 0 to ``theta_base``, then hold for the second half."""
        p, phase, sub = _split(local_progress)
        if p >= 1.0:
            return YawFrame(theta_base, phase, sub)
        return YawFrame(theta_base * p, phase, sub)


def pose_for_joint(result: KinematicsResult, joint: int) -> JointPose:
    """Start/target pose of joint 1..3 taken from a solved chain.

    The frame starts at the previous joint with the previous absolute angle
    (0 for the base frame) and ends at this joint's absolute angle after
    travelling this joint's scaled link length.
    """
    return JointPose(
        start_position=result.joint(joint - 1),
        start_angle=result.absolute(joint - 1),
        target_angle=result.absolute(joint),
        translation_length=result.scaled_lengths[joint - 1],
    )
