# -*- coding: utf-8 -*-
"""Turns raw clock progress into (active joint, local progress).

A single joint loops through its own two-phase window. "Play all" walks an
ordered list of windows, one per joint (optionally preceded by the base-yaw
window in 3D mode). 2D and 3D are the same algorithm with different window
lists.

Window boundaries are closed-open, so a value exactly on a boundary belongs
to the later window. The last window also accepts the upper bound.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .clock import UNITS_PER_JOINT
from .geometry import clamp

ALL_JOINTS = 0
BASE_YAW = -1


@dataclass(frozen=True)
class AnimationSelector:
    """Which joint to animate. ``target_joint == 0`` plays the whole chain."""

    target_joint: int = 1
    enabled: bool = False

    @property
    def play_all(self) -> bool:
        return self.target_joint == ALL_JOINTS


@dataclass(frozen=True)
class Window:
    joint: int
    start: float
    size: float

    @property
    def end(self) -> float:
        return self.start + self.size


@dataclass(frozen=True)
class ActiveSegment:
    active_joint: int
    local_progress: float


class PhaseSequencer:
    def __init__(self, window_sizes: Sequence[Tuple[int, float]]):
        """``window_sizes`` is an ordered list of ``(joint, size)`` pairs."""
        windows: List[Window] = []
        start = 0.0
        for joint, size in window_sizes:
            windows.append(Window(int(joint), start, float(size)))
            start += float(size)
        self._windows = tuple(windows)
        self._total = start

    @classmethod
    def for_chain(cls, joint_count: int = 3, include_base_yaw: bool = False) -> "PhaseSequencer":
        sizes: List[Tuple[int, float]] = []
        if include_base_yaw:
            sizes.append((BASE_YAW, UNITS_PER_JOINT))
        sizes.extend((j, UNITS_PER_JOINT) for j in range(1, int(joint_count) + 1))
        return cls(sizes)

    @property
    def windows(self) -> Tuple[Window, ...]:
        return self._windows

    @property
    def total(self) -> float:
        return self._total

    @property
    def joints(self) -> Tuple[int, ...]:
        return tuple(w.joint for w in self._windows)

    def units_for(self, selector: AnimationSelector) -> float:
        """Cycle length the clock should run for ``selector``."""
        if selector.play_all:
            return self._total
        return UNITS_PER_JOINT

    def window_at(self, raw_progress: float) -> Optional[Window]:
        if not self._windows:
            return None
        p = clamp(raw_progress, 0.0, self._total)
        for w in self._windows:
            if w.start <= p < w.end:
                return w
        return self._windows[-1]

    def resolve(self, selector: AnimationSelector, raw_progress: float) -> Optional[ActiveSegment]:
        """Return the active joint and its local progress in ``[0, 2]``.

        ``None`` when the selector names a joint that has no window.
        """
        if not selector.play_all:
            if selector.target_joint not in self.joints:
                return None
            return ActiveSegment(selector.target_joint, clamp(raw_progress, 0.0, UNITS_PER_JOINT))

        w = self.window_at(raw_progress)
        if w is None:
            return None
        p = clamp(raw_progress, 0.0, self._total)
        local = p - w.start
        if w.size != UNITS_PER_JOINT and w.size > 0.0:
            local = local * (UNITS_PER_JOINT / w.size)
        return ActiveSegment(w.joint, clamp(local, 0.0, UNITS_PER_JOINT))


def resolve(
    selector: AnimationSelector,
    raw_progress: float,
    joint_count: int = 3,
    include_base_yaw: bool = False,
) -> Optional[ActiveSegment]:
    return PhaseSequencer.for_chain(joint_count, include_base_yaw).resolve(selector, raw_progress)
