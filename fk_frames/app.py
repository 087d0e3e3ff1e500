# -*- coding: utf-8 -*-
"""Application entry point.

Runs the animation engine headless under a Qt event loop and logs each frame.
A renderer would connect to ``AnimationDriver.frameReady`` instead.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import List, Optional

from PyQt6.QtCore import QCoreApplication, QTimer

from .core.config import ConfigError, EngineConfig, load_config
from .core.engine import EngineFrame, KinematicsAnimationEngine
from .core.kinematics import JointAngles
from .core.sequencer import AnimationSelector
from .ui.animation_driver import AnimationDriver

logger = logging.getLogger("fk_frames")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="fk-frames", description="Animate 3-link forward kinematics frames.")
    p.add_argument("--theta1", type=float, default=45.0, help="joint 1 angle (deg)")
    p.add_argument("--theta2", type=float, default=30.0, help="joint 2 angle (deg)")
    p.add_argument("--theta3", type=float, default=-60.0, help="joint 3 angle (deg)")
    p.add_argument("--theta-base", type=float, default=0.0, help="base yaw (deg, 3D only)")
    p.add_argument("--joint", type=int, choices=[0, 1, 2, 3], default=0, help="joint to animate, 0 = all")
    p.add_argument("--3d", dest="three_d", action="store_true", help="include the base-yaw window")
    p.add_argument("--seconds", type=float, default=4.0, help="how long to run")
    p.add_argument("--config", default=None, help="JSON engine config")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def _describe(frame: Optional[EngineFrame]) -> str:
    if frame is None:
        return "idle"
    if frame.yaw is not None:
        y = frame.yaw
        return f"base yaw {math.degrees(y.angle):7.2f} deg  {y.phase} {y.phase_local_progress:.2f}"
    f = frame.frame
    return (
        f"J{frame.active_joint} ({f.position[0]:8.2f}, {f.position[1]:8.2f}) "
        f"{math.degrees(f.absolute_angle):7.2f} deg  {f.phase} {f.phase_local_progress:.2f}"
        f"  [{frame.overlay.highlight}]"
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        config = load_config(args.config) if args.config else EngineConfig()
    except (OSError, ConfigError) as e:
        logger.error("could not load config: %s", e)
        return 2
    if args.three_d:
        config.include_base_yaw = True

    engine = KinematicsAnimationEngine(config)
    engine.set_inputs(
        angles=JointAngles.from_degrees(args.theta1, args.theta2, args.theta3, args.theta_base),
        selector=AnimationSelector(args.joint, False),
    )
    result = engine.solve()
    logger.info(
        "joints: %s  reach %.2f px",
        ", ".join(f"({x:.2f}, {y:.2f})" for x, y in result.all_joints),
        result.reach,
    )

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    driver = AnimationDriver(engine)
    driver.frameReady.connect(lambda fr: logger.info("%s", _describe(fr)))
    driver.set_enabled(True)
    QTimer.singleShot(int(args.seconds * 1000), lambda: (driver.set_enabled(False), app.quit()))
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
