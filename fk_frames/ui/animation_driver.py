# -*- coding: utf-8 -*-
"""Qt timer that drives the animation engine.

Renderers connect to :attr:`AnimationDriver.frameReady`; it carries an
``EngineFrame`` on every timer tick, and a single ``None`` when animation is
switched off.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QElapsedTimer, QObject, QTimer, pyqtSignal

from ..core.engine import KinematicsAnimationEngine
from ..core.kinematics import JointAngles
from ..core.sequencer import AnimationSelector
from ..utils.qt_safe import safe_slot

logger = logging.getLogger(__name__)


class AnimationDriver(QObject):
    frameReady = pyqtSignal(object)

    def __init__(
        self,
        engine: KinematicsAnimationEngine,
        parent: Optional[QObject] = None,
        time_source: Optional[Callable[[], float]] = None,
    ):
        super().__init__(parent)
        self.engine = engine
        self._elapsed = QElapsedTimer()
        self._elapsed.start()
        self._time_source = time_source or (lambda: float(self._elapsed.elapsed()))

        self._timer = QTimer(self)
        self._timer.setInterval(int(self.engine.config.tick_interval_ms))
        self._timer.timeout.connect(self._on_tick)

    def is_running(self) -> bool:
        return self._timer.isActive()

    def set_angles(self, angles: JointAngles) -> None:
        self.engine.set_inputs(angles=angles)

    def set_target_joint(self, joint: int) -> None:
        sel = self.engine.selector
        self.engine.set_inputs(selector=AnimationSelector(int(joint), sel.enabled))

    def set_enabled(self, enabled: bool) -> None:
        sel = self.engine.selector
        self.engine.set_inputs(selector=AnimationSelector(sel.target_joint, bool(enabled)))
        if enabled:
            if not self._timer.isActive():
                logger.debug("animation driver started (%d ms)", self._timer.interval())
                self._timer.start()
                # One immediate tick so the first frame does not wait a full interval
                self._on_tick()
        else:
            if self._timer.isActive():
                self._timer.stop()
                logger.debug("animation driver stopped")
            self.frameReady.emit(None)

    @safe_slot
    def _on_tick(self):
        frame = self.engine.frame(self._time_source())
        self.frameReady.emit(frame)
