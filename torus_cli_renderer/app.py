#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/app.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import os
import queue

from .animation import AnimationController
from .config import TorusConfig
from .display import CursesDisplay
from .input import CursesKeySource, InputPoller
from .renderer import Renderer

logger = logging.getLogger(__name__)


class TorusApp:
    """
    Interactive session: wires the input poller, the renderer and the
    animation controller together on a curses screen.
    """

    def __init__(self, stdscr, config: TorusConfig):
        self.stdscr = stdscr
        self.config = config

        # ── Curses setup ────────────────────────────────────────────────
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        stdscr.clear()

        # ── Pipeline ────────────────────────────────────────────────────
        self.events = queue.Queue()
        self.renderer = Renderer(config)
        self.display = CursesDisplay(stdscr)
        self.controller = AnimationController(self.renderer, self.display,
                                              self.events, config)

        # ── Input on its own window so the poller never refreshes stdscr ─
        # Refreshed once here, so getch in the poller finds it untouched
        # and never writes to the terminal itself.
        input_win = curses.newwin(1, 1, 0, 0)
        input_win.refresh()
        self.poller = InputPoller(CursesKeySource(input_win), self.events,
                                  timeout=config.poll_timeout)

    def run(self) -> int:
        self.poller.start()
        try:
            return self.controller.run()
        finally:
            self.shutdown()

    def shutdown(self):
        """Stop the poller and wait for it; it exits within one poll timeout."""
        self.poller.stop()
        self.poller.join(timeout=self.config.poll_timeout * 10)
        if self.poller.is_alive():
            logger.warning("Input poller did not stop in time")


def main(stdscr, config: TorusConfig) -> int:
    """Entry point called from curses.wrapper."""
    app = TorusApp(stdscr, config)
    return app.run()


def run_session(config: TorusConfig) -> int:
    """Run the animation in a curses session; the terminal is restored on exit."""
    # Report a bare Escape after 25ms instead of the default second
    os.environ.setdefault('ESCDELAY', '25')
    return curses.wrapper(main, config)
