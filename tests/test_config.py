import json

import pytest

from fk_frames.core.config import ConfigError, EngineConfig, load_config
from fk_frames.core.controls import clamp_degrees, dependency_key
from fk_frames.core.kinematics import JointAngles, LinkLengths, PlacementConfig
from fk_frames.core.sequencer import AnimationSelector


def test_defaults():
    cfg = EngineConfig()
    assert cfg.link_lengths == LinkLengths(40.0, 70.0, 50.0)
    assert cfg.placement == PlacementConfig(2.0, 0.0, 0.0)
    assert cfg.segment_ms == 4000.0
    assert cfg.include_base_yaw is False


def test_dict_round_trip_and_partial_input():
    cfg = EngineConfig.from_dict({"link_lengths": {"L2": 90}, "include_base_yaw": True, "unknown": 1})
    assert cfg.link_lengths == LinkLengths(40.0, 90.0, 50.0)
    assert cfg.include_base_yaw is True
    assert EngineConfig.from_dict(cfg.to_dict()) == cfg


@pytest.mark.parametrize(
    "data",
    [
        {"placement": {"scale": 0}},
        {"placement": {"scale": "big"}},
        {"segment_ms": -5},
        {"segment_ms": float("inf")},
        {"link_lengths": [1, 2, 3]},
    ],
)
def test_invalid_config_raises(data):
    with pytest.raises(ConfigError):
        EngineConfig.from_dict(data)


def test_non_mapping_config_raises():
    with pytest.raises(ConfigError):
        EngineConfig.from_dict([1, 2])


def test_load_config(tmp_path):
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"placement": {"scale": 0.1}, "segment_ms": 2000}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.placement.scale == 0.1
    assert cfg.segment_ms == 2000.0


def test_load_config_bad_json(tmp_path):
    path = tmp_path / "engine.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (45, 45.0),
        ("30.5", 30.5),
        (270, 180.0),
        (-999, -180.0),
        ("", 0.0),
        (None, 0.0),
        (float("nan"), 0.0),
        (float("-inf"), 0.0),
    ],
)
def test_clamp_degrees(raw, expected):
    assert clamp_degrees(raw) == expected


def test_from_degrees_sanitizes():
    a = JointAngles.from_degrees(90, float("nan"), 400, "abc")
    assert a.theta2 == 0.0
    assert a.theta_base == 0.0
    assert a.to_degrees()["theta1"] == pytest.approx(90.0)
    assert a.to_degrees()["theta3"] == pytest.approx(180.0)


def test_dependency_key_tracks_angles_and_target_joint():
    a = JointAngles(0.1, 0.2, 0.3)
    k = dependency_key(a, AnimationSelector(1, True))
    assert k == dependency_key(a, AnimationSelector(1, False))
    assert k != dependency_key(a, AnimationSelector(2, True))
    assert k != dependency_key(JointAngles(0.1, 0.2, 0.31), AnimationSelector(1, True))
