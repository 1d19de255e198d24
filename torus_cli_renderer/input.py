#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/input.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import enum
import logging
import queue
import threading
from typing import Optional

from .errors import InputPollerError

logger = logging.getLogger(__name__)

KEY_ESCAPE = 27


class Key(enum.Enum):
    """Keyboard commands understood by the animation."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    RESET = 'r'
    START = 's'
    PAUSE = 'p'
    QUIT = 'escape'


_KEYMAP = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    ord('r'): Key.RESET,
    ord('s'): Key.START,
    ord('p'): Key.PAUSE,
    KEY_ESCAPE: Key.QUIT,
}


def classify_key(code: int) -> Optional[Key]:
    """Map a curses key code to a Key, or None for keys with no command."""
    return _KEYMAP.get(code)


class CursesKeySource:
    """
    Reads key codes from a curses window with a bounded wait.

    The window should be used for input only; the poller thread calls getch
    on it while the main thread draws on the screen.
    """

    def __init__(self, window):
        self.window = window
        self.window.keypad(True)
        self._timeout_ms = None

    def read_key(self, timeout: float) -> Optional[int]:
        """Wait up to `timeout` seconds for a key; None if nothing arrived."""
        timeout_ms = max(0, int(timeout * 1000))
        if timeout_ms != self._timeout_ms:
            self.window.timeout(timeout_ms)
            self._timeout_ms = timeout_ms
        try:
            code = self.window.getch()
        except curses.error as e:
            raise InputPollerError(f"reading key failed: {e}") from e
        if code == -1:
            return None
        return code


class InputPoller(threading.Thread):
    """
    Background thread forwarding classified key presses into a queue.

    Each iteration checks the stop event, then waits at most `timeout`
    seconds for a key, so stop() followed by join() returns within one
    poll interval. Keys with no command are dropped here.

    A failing key source ends the thread; the exception is logged and kept
    in `error`.
    """

    def __init__(self, source, events: queue.Queue, timeout: float = 0.1):
        super().__init__(name='input-poller', daemon=True)
        self.source = source
        self.events = events
        self.timeout = timeout
        self.error = None
        self._stop_event = threading.Event()

    def stop(self):
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def run(self):
        try:
            while not self._stop_event.is_set():
                code = self.source.read_key(self.timeout)
                if code is None:
                    continue
                key = classify_key(code)
                if key is None:
                    logger.debug(f"Ignoring key code {code}")
                    continue
                self.events.put(key)
        except Exception as e:
            self.error = e
            logger.exception(f"Input poller stopped: {e}")
