#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/sampler.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import Iterator, NamedTuple, Tuple

TWO_PI = 2.0 * math.pi


class SurfaceSample(NamedTuple):
    theta: float  # angle around the tube cross-section
    phi: float    # angle around the torus center axis


def step_count(step: float) -> int:
    """Number of angles i * step that lie in [0, 2*pi)."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    count = int(TWO_PI / step)
    # Guard against rounding in the division on either side of 2*pi
    while count * step < TWO_PI:
        count += 1
    while count > 0 and (count - 1) * step >= TWO_PI:
        count -= 1
    return count


def _trig_table(step: float, count: int) -> Tuple[Tuple[float, float], ...]:
    return tuple((math.sin(i * step), math.cos(i * step)) for i in range(count))


class TorusSampler:
    """
    Enumerates (theta, phi) sample points on the torus surface.

    Iteration is theta-major, phi-minor and yields the same sequence every
    time it is restarted. Angles are computed as i * step so no rounding
    error accumulates along a row.

    theta_trig and phi_trig hold (sin, cos) of every angle, in iteration
    order, for the renderer's inner loop.
    """
    __slots__ = ('theta_step', 'phi_step', 'theta_count', 'phi_count',
                 'theta_trig', 'phi_trig')

    def __init__(self, theta_step: float = 0.07, phi_step: float = 0.02):
        self.theta_step = theta_step
        self.phi_step = phi_step
        self.theta_count = step_count(theta_step)
        self.phi_count = step_count(phi_step)
        self.theta_trig = _trig_table(theta_step, self.theta_count)
        self.phi_trig = _trig_table(phi_step, self.phi_count)

    def __len__(self):
        return self.theta_count * self.phi_count

    def __iter__(self) -> Iterator[SurfaceSample]:
        theta_step, phi_step = self.theta_step, self.phi_step
        phi_count = self.phi_count
        for i in range(self.theta_count):
            theta = i * theta_step
            for j in range(phi_count):
                yield SurfaceSample(theta, j * phi_step)
