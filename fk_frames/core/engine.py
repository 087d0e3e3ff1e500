# -*- coding: utf-8 -*-
"""Kinematics + animation facade used by the host.

Holds the current angles/selector handed over by the control layer, the
clock, and the sequencer. The only state that survives between calls is the
clock epoch; kinematics are solved fresh for every frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .animator import AnimationFrame, FrameAnimator, YawFrame, pose_for_joint
from .clock import AnimationClock
from .config import EngineConfig
from .controls import dependency_key
from .geometry import Point
from .kinematics import ForwardKinematicsSolver, JointAngles, Kinematics3DResult, KinematicsResult
from .sequencer import BASE_YAW, AnimationSelector, PhaseSequencer
from .transforms import MatrixOverlay, matrix_overlay

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineFrame:
    raw_progress: float
    active_joint: int
    local_progress: float
    frame: Optional[AnimationFrame] = None
    yaw: Optional[YawFrame] = None
    axes: Optional[Tuple[Point, Point]] = None
    overlay: Optional[MatrixOverlay] = None


class KinematicsAnimationEngine:
    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.sequencer = PhaseSequencer.for_chain(self.config.joint_count, self.config.include_base_yaw)
        self.clock = AnimationClock(self.config.segment_ms)
        self._angles = JointAngles()
        self._selector = AnimationSelector()
        self._key: Optional[Tuple[float, float, float, float, int]] = None

    @property
    def angles(self) -> JointAngles:
        return self._angles

    @property
    def selector(self) -> AnimationSelector:
        return self._selector

    def set_inputs(
        self,
        angles: Optional[JointAngles] = None,
        selector: Optional[AnimationSelector] = None,
    ) -> None:
        """Take new inputs from the control layer.

        Toggling ``selector.enabled`` arms or stops the clock; while enabled,
        any change of angles or target joint restarts it from 0.
        """
        if angles is not None:
            self._angles = angles
        if selector is not None:
            self._selector = selector

        key = dependency_key(self._angles, self._selector)
        changed = key != self._key
        self._key = key

        if not self._selector.enabled:
            if self.clock.enabled:
                self.clock.disable()
            return

        self.clock.set_units(self.sequencer.units_for(self._selector))
        if not self.clock.enabled:
            self.clock.enable()
        elif changed:
            logger.debug("animation inputs changed, restarting clock")
            self.clock.rearm()

    def solve(self) -> KinematicsResult:
        return ForwardKinematicsSolver.solve(self._angles, self.config.link_lengths, self.config.placement)

    def solve_3d(self) -> Kinematics3DResult:
        return ForwardKinematicsSolver.solve_3d(self._angles, self.config.link_lengths, self.config.placement)

    def frame(self, now_ms: float) -> Optional[EngineFrame]:
        """Animated frame for ``now_ms``; ``None`` while disabled."""
        if not self._selector.enabled:
            return None
        raw = self.clock.tick(now_ms)
        seg = self.sequencer.resolve(self._selector, raw)
        if seg is None:
            return None
        if seg.active_joint == BASE_YAW:
            yaw = FrameAnimator.animate_base_yaw(self._angles.theta_base, seg.local_progress)
            return EngineFrame(raw, seg.active_joint, seg.local_progress, yaw=yaw)
        pose = pose_for_joint(self.solve(), seg.active_joint)
        frame = FrameAnimator.animate(pose, seg.local_progress)
        size = self.config.frame_axis_size
        overlay = matrix_overlay(
            seg.active_joint,
            self._angles.relative(seg.active_joint),
            self.config.link_lengths.as_tuple()[seg.active_joint - 1],
            seg.local_progress,
        )
        return EngineFrame(
            raw,
            seg.active_joint,
            seg.local_progress,
            frame=frame,
            axes=(frame.i_hat(size), frame.j_hat(size)),
            overlay=overlay,
        )
