# -*- coding: utf-8 -*-
"""Engine configuration.

All defaults live on :class:`EngineConfig`; callers pass the object in rather
than relying on module-level constants.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

from .clock import DEFAULT_SEGMENT_MS
from .kinematics import LinkLengths, PlacementConfig


class ConfigError(ValueError):
    """Raised for a malformed configuration."""


def _num(data: Dict[str, Any], key: str, default: float, positive: bool = False) -> float:
    raw = data.get(key, default)
    try:
        val = float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key}: expected a number, got {raw!r}") from e
    if not math.isfinite(val):
        raise ConfigError(f"{key}: must be finite, got {raw!r}")
    if positive and val <= 0.0:
        raise ConfigError(f"{key}: must be > 0, got {raw!r}")
    return val


@dataclass
class EngineConfig:
    link_lengths: LinkLengths = field(default_factory=LinkLengths)
    placement: PlacementConfig = field(default_factory=PlacementConfig)
    segment_ms: float = DEFAULT_SEGMENT_MS
    include_base_yaw: bool = False
    frame_axis_size: float = 30.0
    tick_interval_ms: int = 16

    @property
    def joint_count(self) -> int:
        return 3

    def to_dict(self) -> Dict[str, Any]:
        return {
            "link_lengths": {
                "L1": float(self.link_lengths.L1),
                "L2": float(self.link_lengths.L2),
                "L3": float(self.link_lengths.L3),
            },
            "placement": {
                "scale": float(self.placement.scale),
                "base_x": float(self.placement.base_x),
                "base_y": float(self.placement.base_y),
            },
            "segment_ms": float(self.segment_ms),
            "include_base_yaw": bool(self.include_base_yaw),
            "frame_axis_size": float(self.frame_axis_size),
            "tick_interval_ms": int(self.tick_interval_ms),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Build a config; missing keys default, unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ConfigError(f"config must be a mapping, got {type(data).__name__}")
        d = cls()
        links = data.get("link_lengths") or {}
        place = data.get("placement") or {}
        if not isinstance(links, dict) or not isinstance(place, dict):
            raise ConfigError("link_lengths and placement must be mappings")
        return cls(
            link_lengths=LinkLengths(
                L1=_num(links, "L1", d.link_lengths.L1),
                L2=_num(links, "L2", d.link_lengths.L2),
                L3=_num(links, "L3", d.link_lengths.L3),
            ),
            placement=PlacementConfig(
                scale=_num(place, "scale", d.placement.scale, positive=True),
                base_x=_num(place, "base_x", d.placement.base_x),
                base_y=_num(place, "base_y", d.placement.base_y),
            ),
            segment_ms=_num(data, "segment_ms", d.segment_ms, positive=True),
            include_base_yaw=bool(data.get("include_base_yaw", d.include_base_yaw)),
            frame_axis_size=_num(data, "frame_axis_size", d.frame_axis_size, positive=True),
            tick_interval_ms=int(_num(data, "tick_interval_ms", d.tick_interval_ms, positive=True)),
        )


def load_config(path: Union[str, Path]) -> EngineConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    return EngineConfig.from_dict(data)
