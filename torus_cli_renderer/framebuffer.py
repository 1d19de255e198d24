#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/framebuffer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

# Brightness ramp, faintest to brightest
LUMINANCE_RAMP = ".,-~:;=!*#$@%&"
MAX_LUMINANCE_INDEX = len(LUMINANCE_RAMP) - 1

CURSOR_HOME = "\x1b[H"


def luminance_index(brightness: float) -> int:
    """
    Quantize a positive brightness into a ramp index.
    brightness * 12 is floored and clamped to [0, 13].
    """
    idx = math.floor(brightness * 12)
    if idx < 0:
        return 0
    if idx > MAX_LUMINANCE_INDEX:
        return MAX_LUMINANCE_INDEX
    return idx


def luminance_char(brightness: float) -> str:
    return LUMINANCE_RAMP[luminance_index(brightness)]


class FrameBuffer:
    """
    Character grid plus a parallel depth grid, stored row-major in flat lists.

    Storage is allocated once; reset() clears both grids in place before
    every frame so nothing leaks from one frame into the next.
    """
    __slots__ = ['width', 'height', 'chars', 'depth']

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"frame size must be positive, got {width}x{height}")
        self.width, self.height = width, height
        size = width * height
        self.chars = [' '] * size
        self.depth = [math.inf] * size

    def reset(self):
        size = self.width * self.height
        self.chars[:] = [' '] * size
        self.depth[:] = [math.inf] * size

    def plot(self, x, y, depth, brightness) -> bool:
        """
        Write one shaded sample into cell (x, y).
        Only front-facing samples (brightness > 0) strictly nearer than the
        stored depth win the cell. Returns True when the cell was written.
        """
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return False
        if brightness <= 0:
            return False
        idx = x + self.width * y
        if depth < self.depth[idx]:
            self.depth[idx] = depth
            self.chars[idx] = luminance_char(brightness)
            return True
        return False

    def char_at(self, x, y) -> str:
        return self.chars[x + self.width * y]

    def depth_at(self, x, y) -> float:
        return self.depth[x + self.width * y]

    def rows(self):
        """Yield each row of the character grid as a string, top to bottom."""
        w = self.width
        chars = self.chars
        for start in range(0, w * self.height, w):
            yield ''.join(chars[start:start + w])

    def to_text(self) -> str:
        """
        Full-screen redraw: cursor home, then every row followed by a line
        break (one break per `width` characters).
        """
        return CURSOR_HOME + ''.join(row + '\n' for row in self.rows())
