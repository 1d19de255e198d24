#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/display.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys

from .framebuffer import FrameBuffer


class StreamDisplay:
    """Writes each frame to a text stream as a cursor-home full redraw."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def show(self, frame: FrameBuffer):
        self.stream.write(frame.to_text())
        self.stream.flush()


class CursesDisplay:
    """
    Draws frames on a curses window, row by row from the top-left cell.

    Rows and columns beyond the window are clipped, since the frame size
    is fixed at startup while the window is whatever curses reports.
    """

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def show(self, frame: FrameBuffer):
        stdscr = self.stdscr
        max_y, max_x = stdscr.getmaxyx()
        rows = min(frame.height, max_y)
        cols = min(frame.width, max_x)
        for y, row in enumerate(frame.rows()):
            if y >= rows:
                break
            if y == max_y - 1 and cols == max_x:
                # addstr into the bottom-right cell fails after it scrolls
                # the cursor off-screen; insstr leaves the cursor in place.
                # A full-width insert pushes the old row off the right edge.
                stdscr.insstr(y, 0, row[:cols])
            else:
                stdscr.addstr(y, 0, row[:cols])
        stdscr.refresh()
