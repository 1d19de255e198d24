#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .config import TorusConfig
from .framebuffer import FrameBuffer, LUMINANCE_RAMP, MAX_LUMINANCE_INDEX
from .projector import Projector
from .sampler import TorusSampler


class Renderer:
    """
    Depth-tested torus rasterizer.

    rasterize(a, b) fills the frame buffer for one frame; render(display, a, b)
    also flushes it to a display.

    Pipeline:
      1. Reset the character and depth grids
      2. Precompute the rotation for (a, b) and the per-phi terms
      3. Per theta row, project every phi sample; drop back-facing and
         off-screen points
      4. Keep the nearest sample per cell, shaded by brightness

    The inner loop is Projector.project and FrameBuffer.plot inlined, with
    the same arithmetic in the same order, so both give identical frames.
    """

    def __init__(self, config: TorusConfig):
        self.config = config
        self.sampler = TorusSampler(config.theta_step, config.phi_step)
        self.projector = Projector.from_config(config)
        self.frame = FrameBuffer(config.width, config.height)

    def rasterize(self, a: float, b: float) -> FrameBuffer:
        frame = self.frame
        frame.reset()

        # ── Locals for the hot loop ─────────────────────────────────────
        proj = self.projector
        sin_a, cos_a, sin_b, cos_b = proj.rotation(a, b)
        r1, r2, k1, k2 = proj.r1, proj.r2, proj.k1, proj.k2
        half_w, half_h = proj.half_w, proj.half_h
        width, height = frame.width, frame.height
        chars, zbuf = frame.chars, frame.depth
        ramp, top = LUMINANCE_RAMP, MAX_LUMINANCE_INDEX

        # ── Terms that depend only on phi and the rotation ──────────────
        phi_terms = [
            (sin_p, cos_p,
             cos_b * cos_p + sin_a * sin_b * sin_p,
             sin_b * cos_p - sin_a * cos_b * sin_p)
            for sin_p, cos_p in self.sampler.phi_trig
        ]

        for sin_t, cos_t in self.sampler.theta_trig:
            circle_x = r2 + r1 * cos_t
            circle_y = r1 * sin_t
            x_off = circle_y * cos_a * sin_b
            y_off = circle_y * cos_a * cos_b
            z_row = cos_a * circle_x
            z_off = circle_y * sin_a
            l_ct = cos_a * cos_t
            l_st = sin_a * sin_t
            l_cs = cos_a * sin_t
            l_tc = cos_t * sin_a

            for sin_p, cos_p, x_rot, y_rot in phi_terms:
                l = (cos_p * cos_t * sin_b - l_ct * sin_p - l_st
                     + cos_b * (l_cs - l_tc * sin_p))
                if l <= 0:
                    continue

                z = k2 + z_row * sin_p + z_off
                ooz = k1 / z
                xp = int(half_w + (circle_x * x_rot - x_off) * ooz)
                yp = int(half_h - (circle_x * y_rot + y_off) * ooz)
                if xp < 0 or xp >= width or yp < 0 or yp >= height:
                    continue

                idx = xp + width * yp
                if z < zbuf[idx]:
                    zbuf[idx] = z
                    lum = int(l * 12)
                    chars[idx] = ramp[lum if lum < top else top]
        return frame

    def render(self, display, a: float, b: float) -> FrameBuffer:
        """
        Rasterize one frame and show it. Display errors propagate to the
        caller; a frame is never retried.
        """
        frame = self.rasterize(a, b)
        display.show(frame)
        return frame
