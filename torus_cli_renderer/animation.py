#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/animation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import enum
import logging
import queue
import time
from dataclasses import dataclass

from .config import TorusConfig
from .input import Key

logger = logging.getLogger(__name__)


class ControllerState(enum.Enum):
    RUNNING = 'running'
    STOPPED = 'stopped'


@dataclass
class AnimationState:
    """Rotation angles and per-frame speeds (radians)."""
    a: float = 0.0        # tilt
    b: float = 0.0        # spin
    a_speed: float = 0.04
    b_speed: float = 0.08


def frame_delay(interval: float, elapsed: float) -> float:
    """Time left in the frame budget; zero once the budget is spent."""
    return max(0.0, interval - elapsed)


class AnimationController:
    """
    Owns the animation state and drives the render loop.

    Every tick drains the key queue without waiting, renders the current
    angles, advances them by their speeds and sleeps out the rest of the
    frame interval. A slow frame is followed immediately by the next one;
    there is no catch-up.
    """

    def __init__(self, renderer, display, events: queue.Queue,
                 config: TorusConfig = None, clock=time.monotonic, sleep=time.sleep):
        self.renderer = renderer
        self.display = display
        self.events = events
        self.config = config if config is not None else renderer.config
        self.state = AnimationState(a_speed=self.config.tilt_speed,
                                    b_speed=self.config.spin_speed)
        self.status = ControllerState.RUNNING
        self.frames = 0

        self._clock = clock
        self._sleep = sleep
        self._stats_start = None
        self._stats_frames = 0

    @property
    def running(self) -> bool:
        return self.status is ControllerState.RUNNING

    def apply(self, key: Key):
        """Apply one keyboard command to the speeds or the run state."""
        state = self.state
        step = self.config.speed_step

        if key is Key.UP:
            state.a_speed += step
        elif key is Key.DOWN:
            state.a_speed -= step
        elif key is Key.RIGHT:
            state.b_speed += step
        elif key is Key.LEFT:
            state.b_speed -= step
        elif key in (Key.RESET, Key.START):
            state.a_speed = self.config.tilt_speed
            state.b_speed = self.config.spin_speed
        elif key is Key.PAUSE:
            state.a_speed = 0.0
            state.b_speed = 0.0
        elif key is Key.QUIT:
            self.status = ControllerState.STOPPED
            logger.info("Quit requested")
            return
        else:
            return
        logger.debug(f"{key.name}: speeds now "
                     f"tilt={state.a_speed:.2f} spin={state.b_speed:.2f}")

    def drain(self):
        """Apply every key already queued. Stops early on QUIT."""
        while self.running:
            try:
                key = self.events.get_nowait()
            except queue.Empty:
                break
            self.apply(key)

    def tick(self) -> float:
        """Run one frame. Returns the sleep applied afterwards."""
        start = self._clock()

        self.drain()
        if not self.running:
            return 0.0

        state = self.state
        self.renderer.render(self.display, state.a, state.b)
        state.a += state.a_speed
        state.b += state.b_speed
        self.frames += 1

        now = self._clock()
        self._update_stats(now)
        delay = frame_delay(self.config.frame_interval, now - start)
        if delay > 0:
            self._sleep(delay)
        return delay

    def run(self) -> int:
        """Tick until stopped. Returns the number of frames rendered."""
        logger.info(f"Animation started ({self.config.width}x{self.config.height})")
        while self.running:
            self.tick()
        logger.info(f"Animation stopped after {self.frames} frames")
        return self.frames

    def _update_stats(self, now):
        if self._stats_start is None:
            self._stats_start = now
        self._stats_frames += 1
        if now - self._stats_start >= 1.0:
            fps = self._stats_frames / (now - self._stats_start)
            logger.debug(f"FPS: {fps:.1f}")
            self._stats_start = now
            self._stats_frames = 0
