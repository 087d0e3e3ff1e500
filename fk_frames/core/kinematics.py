# -*- coding: utf-8 -*-
"""Forward kinematics for the 3-link arm.

The planar chain lives in the x-y plane (y-up). In 3D mode the whole chain is
additionally yawed about the vertical axis through the base; that rotation is
applied outside the chain, it is not an extra link.

Nothing here validates its inputs. Zero or negative link lengths give
degenerate joints and NaN angles give NaN positions; see ``controls`` for the
sanitizing done before values reach this module.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np
from scipy.spatial.transform import Rotation

from .controls import degrees_to_radians
from .geometry import Point, distance


@dataclass(frozen=True)
class JointAngles:
    """Joint angles in radians. ``theta_base`` is only used in 3D mode."""

    theta1: float = 0.0
    theta2: float = 0.0
    theta3: float = 0.0
    theta_base: float = 0.0

    @classmethod
    def from_degrees(
        cls,
        theta1: Any = 0.0,
        theta2: Any = 0.0,
        theta3: Any = 0.0,
        theta_base: Any = 0.0,
    ) -> "JointAngles":
        return cls(
            theta1=degrees_to_radians(theta1),
            theta2=degrees_to_radians(theta2),
            theta3=degrees_to_radians(theta3),
            theta_base=degrees_to_radians(theta_base),
        )

    def to_degrees(self) -> Dict[str, float]:
        return {
            "theta_base": math.degrees(self.theta_base),
            "theta1": math.degrees(self.theta1),
            "theta2": math.degrees(self.theta2),
            "theta3": math.degrees(self.theta3),
        }

    def relative(self, joint: int) -> float:
        """Incremental angle of joint 1..3."""
        return (self.theta1, self.theta2, self.theta3)[joint - 1]


@dataclass(frozen=True)
class LinkLengths:
    """Link lengths in millimetres."""

    L1: float = 40.0
    L2: float = 70.0
    L3: float = 50.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.L1, self.L2, self.L3


@dataclass(frozen=True)
class PlacementConfig:
    """Units and placement: pixels per mm and the base position in pixels."""

    scale: float = 2.0
    base_x: float = 0.0
    base_y: float = 0.0

    @property
    def base(self) -> Point:
        return float(self.base_x), float(self.base_y)


@dataclass(frozen=True)
class CumulativeAngles:
    absolute1: float
    absolute2: float
    absolute3: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.absolute1, self.absolute2, self.absolute3


@dataclass(frozen=True)
class KinematicsResult:
    base: Point
    joint1: Point
    joint2: Point
    joint3: Point
    angles: CumulativeAngles
    link_lengths: Tuple[float, float, float]
    reach: float
    scaled_lengths: Tuple[float, float, float]

    @property
    def all_joints(self) -> Tuple[Point, Point, Point, Point]:
        return self.base, self.joint1, self.joint2, self.joint3

    def joint(self, index: int) -> Point:
        """Position of joint ``index`` (0 is the base)."""
        return self.all_joints[index]

    def absolute(self, index: int) -> float:
        """Absolute angle of the frame at joint ``index`` (0 is the base frame)."""
        if index == 0:
            return 0.0
        return self.angles.as_tuple()[index - 1]


@dataclass(frozen=True, eq=False)
class Kinematics3DResult:
    """Planar solution plus its yawed 3D embedding.

    ``joints`` is a read-only (4, 3) array: base, joint1, joint2, joint3.
    """

    planar: KinematicsResult
    theta_base: float
    joints: np.ndarray

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Kinematics3DResult):
            return NotImplemented
        return (
            self.planar == other.planar
            and self.theta_base == other.theta_base
            and np.array_equal(self.joints, other.joints)
        )

    @property
    def reach(self) -> float:
        return float(np.linalg.norm(self.joints[3] - self.joints[0]))


class ForwardKinematicsSolver:
    """Joint angles + link lengths + placement -> joint positions.

    Stateless; every call builds a fresh result.
    """

    @staticmethod
    def solve(
        angles: JointAngles,
        link_lengths: Optional[LinkLengths] = None,
        placement: Optional[PlacementConfig] = None,
    ) -> KinematicsResult:
        if link_lengths is None:
            link_lengths = LinkLengths()
        if placement is None:
            placement = PlacementConfig()

        scale = placement.scale
        s1 = link_lengths.L1 * scale
        s2 = link_lengths.L2 * scale
        s3 = link_lengths.L3 * scale

        base = placement.base

        a1 = angles.theta1
        a2 = angles.theta1 + angles.theta2
        a3 = angles.theta1 + angles.theta2 + angles.theta3

        j1 = (base[0] + s1 * math.cos(a1), base[1] + s1 * math.sin(a1))
        j2 = (j1[0] + s2 * math.cos(a2), j1[1] + s2 * math.sin(a2))
        j3 = (j2[0] + s3 * math.cos(a3), j2[1] + s3 * math.sin(a3))

        return KinematicsResult(
            base=base,
            joint1=j1,
            joint2=j2,
            joint3=j3,
            angles=CumulativeAngles(a1, a2, a3),
            link_lengths=(distance(base, j1), distance(j1, j2), distance(j2, j3)),
            reach=distance(base, j3),
            scaled_lengths=(s1, s2, s3),
        )

    @staticmethod
    def solve_degrees(
        theta1: Any = 0.0,
        theta2: Any = 0.0,
        theta3: Any = 0.0,
        link_lengths: Optional[LinkLengths] = None,
        placement: Optional[PlacementConfig] = None,
    ) -> KinematicsResult:
        """Same as :meth:`solve` with angles in degrees (clamped to [-180, 180])."""
        angles = JointAngles.from_degrees(theta1, theta2, theta3)
        return ForwardKinematicsSolver.solve(angles, link_lengths, placement)

    @staticmethod
    def solve_3d(
        angles: JointAngles,
        link_lengths: Optional[LinkLengths] = None,
        placement: Optional[PlacementConfig] = None,
    ) -> Kinematics3DResult:
        """Solve the planar chain, then yaw it about the vertical (+y) axis.

        The planar point (x, y) is embedded as (x, y, 0) and rotated about the
        vertical line through the base, so the base itself never moves.
        """
        planar = ForwardKinematicsSolver.solve(angles, link_lengths, placement)
        pts = np.array([[p[0], p[1], 0.0] for p in planar.all_joints], dtype=float)
        pivot = pts[0].copy()
        yaw = Rotation.from_euler("y", float(angles.theta_base))
        joints = yaw.apply(pts - pivot) + pivot
        joints.setflags(write=False)
        return Kinematics3DResult(planar=planar, theta_base=float(angles.theta_base), joints=joints)
