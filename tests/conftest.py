import curses
import queue
import time

import pytest

from torus_cli_renderer.config import TorusConfig


class FakeClock:
    """Manual clock; sleep() advances time and is recorded."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class RecordingDisplay:
    """Keeps a text snapshot of every frame shown."""

    def __init__(self):
        self.frames = []

    def show(self, frame):
        self.frames.append(frame.to_text())


class FakeRenderer:
    """Records the angles it was asked to render; optionally costs time."""

    def __init__(self, config, clock=None, cost=0.0):
        self.config = config
        self.clock = clock
        self.cost = cost
        self.calls = []
        self.on_render = None

    def render(self, display, a, b):
        self.calls.append((a, b))
        if self.clock is not None:
            self.clock.advance(self.cost)
        if self.on_render is not None:
            self.on_render(len(self.calls))


class GridScreen:
    """
    Curses screen stand-in that keeps the written characters.
    addstr overwrites and fails on the bottom-right cell like curses does;
    insstr inserts and shifts the rest of the line right.
    """

    def __init__(self, rows, cols, fail_writes=False):
        self.rows, self.cols = rows, cols
        self.fail_writes = fail_writes
        self.grid = [[' '] * cols for _ in range(rows)]
        self.refreshes = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def clear(self):
        self.grid = [[' '] * self.cols for _ in range(self.rows)]

    def addstr(self, y, x, text):
        if self.fail_writes:
            raise curses.error("addwstr() returned ERR")
        if y == self.rows - 1 and x + len(text) >= self.cols:
            raise curses.error("addwstr() returned ERR")
        self.grid[y][x:x + len(text)] = list(text)

    def insstr(self, y, x, text):
        row = self.grid[y]
        self.grid[y] = (row[:x] + list(text) + row[x:])[:self.cols]

    def refresh(self):
        self.refreshes += 1

    def line(self, y):
        return ''.join(self.grid[y])


class FakeWindow:
    """Input window handing out scripted key codes, then timing out."""

    def __init__(self, codes=(), error=None):
        self.codes = list(codes)
        self.error = error
        self.timeout_calls = []
        self.keypad_enabled = False
        self.refreshes = 0

    def keypad(self, flag):
        self.keypad_enabled = flag

    def timeout(self, ms):
        self.timeout_calls.append(ms)

    def refresh(self):
        self.refreshes += 1

    def getch(self):
        if self.error is not None:
            raise self.error
        if self.codes:
            return self.codes.pop(0)
        time.sleep(0.005)
        return -1


@pytest.fixture
def config():
    return TorusConfig(width=80, height=24)


@pytest.fixture
def small_config():
    return TorusConfig(width=40, height=20)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def events():
    return queue.Queue()


@pytest.fixture
def display():
    return RecordingDisplay()
