#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/projector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import NamedTuple, Optional

from .sampler import SurfaceSample


class Rotation(NamedTuple):
    """Sines and cosines of the tilt (a) and spin (b) angles."""
    sin_a: float
    cos_a: float
    sin_b: float
    cos_b: float


class ScreenPoint(NamedTuple):
    x: int
    y: int
    depth: float
    brightness: float


class Projector:
    """
    Maps torus surface samples to screen cells.

    The cross-section circle (radius r1, centered r2 from the axis) is
    rotated by `a` around the X axis and by `b` around the Z axis, pushed
    k2 units away from the viewer and perspective-projected with scale k1.

    Brightness is the dot product of the rotated surface normal with the
    light direction (0, 1, -1), expanded in terms of the same sines and
    cosines used for the rotation. It ranges over [-sqrt(2), sqrt(2)];
    values <= 0 mean the surface faces away from the light.
    """
    __slots__ = ('width', 'height', 'r1', 'r2', 'k1', 'k2', 'half_w', 'half_h')

    def __init__(self, width: int, height: int,
                 r1: float = 1.0, r2: float = 2.0, k2: float = 5.0):
        self.width = width
        self.height = height
        self.r1 = r1
        self.r2 = r2
        self.k2 = k2
        self.k1 = width * k2 * 3 / (8 * (r1 + r2))
        self.half_w = width / 2
        self.half_h = height / 2

    @classmethod
    def from_config(cls, config) -> 'Projector':
        return cls(config.width, config.height,
                   r1=config.r1, r2=config.r2, k2=config.k2)

    @staticmethod
    def rotation(a: float, b: float) -> Rotation:
        """Precompute the per-frame trigonometry for angles (a, b)."""
        return Rotation(math.sin(a), math.cos(a), math.sin(b), math.cos(b))

    def project(self, sample: SurfaceSample, rot: Rotation) -> Optional[ScreenPoint]:
        """Return the projected point, or None if it lands off-screen."""
        sin_a, cos_a, sin_b, cos_b = rot
        sin_t = math.sin(sample.theta)
        cos_t = math.cos(sample.theta)
        sin_p = math.sin(sample.phi)
        cos_p = math.cos(sample.phi)

        circle_x = self.r2 + self.r1 * cos_t
        circle_y = self.r1 * sin_t

        x = circle_x * (cos_b * cos_p + sin_a * sin_b * sin_p) - circle_y * cos_a * sin_b
        y = circle_x * (sin_b * cos_p - sin_a * cos_b * sin_p) + circle_y * cos_a * cos_b
        z = self.k2 + cos_a * circle_x * sin_p + circle_y * sin_a
        ooz = self.k1 / z

        xp = int(self.half_w + x * ooz)
        yp = int(self.half_h - y * ooz)
        if xp < 0 or xp >= self.width or yp < 0 or yp >= self.height:
            return None

        l = (cos_p * cos_t * sin_b - cos_a * cos_t * sin_p - sin_a * sin_t
             + cos_b * (cos_a * sin_t - cos_t * sin_a * sin_p))
        return ScreenPoint(xp, yp, z, l)
