#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import os
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)

DEFAULT_SIZE = (240, 80)


def detect_terminal_size() -> Tuple[int, int]:
    """
    Return the terminal size as (columns, rows).
    Falls back to DEFAULT_SIZE when stdout is not attached to a terminal.
    """
    try:
        columns, rows = os.get_terminal_size()
    except (OSError, ValueError) as e:
        logger.debug(f"Terminal size unavailable ({e}), using {DEFAULT_SIZE}")
        return DEFAULT_SIZE
    if columns <= 0 or rows <= 0:
        return DEFAULT_SIZE
    return columns, rows


@dataclass
class TorusConfig:
    """Configuration for the torus animation."""
    width: int = DEFAULT_SIZE[0]
    height: int = DEFAULT_SIZE[1]

    # Torus geometry
    r1: float = 1.0          # tube radius
    r2: float = 2.0          # distance from torus center to tube center
    k2: float = 5.0          # camera distance
    theta_step: float = 0.07
    phi_step: float = 0.02

    # Rotation speeds (radians per frame)
    tilt_speed: float = 0.04
    spin_speed: float = 0.08
    speed_step: float = 0.01

    # Timing (seconds)
    frame_interval: float = 0.05
    poll_timeout: float = 0.1

    @property
    def k1(self) -> float:
        """Projection scale, sized so the torus fills about 3/4 of the width."""
        return self.width * self.k2 * 3 / (8 * (self.r1 + self.r2))

    @classmethod
    def detect_terminal(cls, **overrides) -> 'TorusConfig':
        """
        Build a config sized to the current terminal.
        The size is read once; the animation does not follow later resizes.
        """
        width, height = detect_terminal_size()
        overrides.setdefault('width', width)
        overrides.setdefault('height', height)
        return cls(**overrides)
