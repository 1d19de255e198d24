import math

import pytest

from torus_cli_renderer.projector import Projector, ScreenPoint
from torus_cli_renderer.sampler import SurfaceSample


@pytest.fixture
def projector():
    return Projector(80, 24, r1=1.0, r2=2.0, k2=5.0)


def test_scale_follows_width(projector):
    assert projector.k1 == 50.0
    assert Projector(160, 24).k1 == 100.0


def test_rotation_trig():
    rot = Projector.rotation(0.0, math.pi / 2)
    assert rot.sin_a == 0.0
    assert rot.cos_a == 1.0
    assert rot.sin_b == pytest.approx(1.0)
    assert rot.cos_b == pytest.approx(0.0, abs=1e-12)


def test_outer_equator_point(projector):
    rot = projector.rotation(0.0, 0.0)
    point = projector.project(SurfaceSample(0.0, 0.0), rot)
    assert point == ScreenPoint(70, 12, 5.0, 0.0)


def test_top_of_tube_faces_light(projector):
    rot = projector.rotation(0.0, 0.0)
    point = projector.project(SurfaceSample(math.pi / 2, 0.0), rot)
    assert (point.x, point.y) == (60, 2)
    assert point.depth == pytest.approx(5.0)
    assert point.brightness == pytest.approx(1.0)


def test_offscreen_point_is_discarded(projector):
    rot = projector.rotation(0.0, 0.0)
    # Nearest side of the tube top projects above the frame
    assert projector.project(SurfaceSample(math.pi / 2, 3 * math.pi / 2), rot) is None


def test_brightness_bounded_by_sqrt_two(projector):
    rot = projector.rotation(0.3, 1.1)
    tiny = Projector(1000, 1000)
    for i in range(0, 63, 3):
        for j in range(0, 63, 3):
            point = tiny.project(SurfaceSample(i / 10, j / 10), rot)
            if point is not None:
                assert -math.sqrt(2) - 1e-9 <= point.brightness <= math.sqrt(2) + 1e-9


def test_from_config(config):
    projector = Projector.from_config(config)
    assert projector.k1 == config.k1
    assert (projector.width, projector.height) == (80, 24)
