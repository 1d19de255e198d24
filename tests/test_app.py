import curses
import logging

import pytest

from conftest import FakeWindow, GridScreen
from torus_cli_renderer.animation import ControllerState
from torus_cli_renderer.app import TorusApp
from torus_cli_renderer.config import TorusConfig
from torus_cli_renderer.input import KEY_ESCAPE


@pytest.fixture
def app_config():
    return TorusConfig(width=20, height=8, theta_step=0.5, phi_step=0.5,
                       poll_timeout=0.01)


@pytest.fixture
def input_window(monkeypatch):
    window = FakeWindow()
    monkeypatch.setattr(curses, 'curs_set', lambda visibility: None)
    monkeypatch.setattr(curses, 'newwin', lambda *args: window)
    return window


def test_escape_stops_animation_and_poller(app_config, input_window):
    input_window.codes = [curses.KEY_UP, KEY_ESCAPE]
    screen = GridScreen(8, 20)
    app = TorusApp(screen, app_config)

    frames = app.run()

    assert app.controller.status is ControllerState.STOPPED
    assert frames == app.controller.frames
    assert app.poller.stopped
    assert not app.poller.is_alive()
    assert app.poller.error is None
    assert input_window.keypad_enabled
    assert input_window.refreshes == 1


def test_render_failure_still_stops_poller(app_config, input_window):
    app = TorusApp(GridScreen(8, 20, fail_writes=True), app_config)

    with pytest.raises(curses.error):
        app.run()

    assert app.poller.stopped
    assert not app.poller.is_alive()


def test_shutdown_warns_when_poller_hangs(app_config, input_window, caplog):
    class StuckPoller:
        stopped = False
        join_timeout = None

        def stop(self):
            self.stopped = True

        def join(self, timeout=None):
            self.join_timeout = timeout

        def is_alive(self):
            return True

    app = TorusApp(GridScreen(8, 20), app_config)
    app.poller = StuckPoller()

    with caplog.at_level(logging.WARNING, logger="torus_cli_renderer.app"):
        app.shutdown()

    assert app.poller.stopped
    assert app.poller.join_timeout == pytest.approx(app_config.poll_timeout * 10)
    assert "did not stop" in caplog.text
