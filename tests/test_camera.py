import math

import numpy as np
import pytest

from quadkit.camera import (
    Camera2D,
    Camera3D,
    Projection,
    angle_lerp,
    short_angle_dist,
)


def _ndc(matrix, point):
    clip = matrix @ np.array([*point, 1.0])
    return clip[:3] / clip[3]


def test_default_2d_matrix_is_identity():
    assert np.allclose(Camera2D().matrix(), np.eye(4))


def test_default_camera_maps_origin_to_screen_center():
    width, height = 800.0, 600.0
    assert Camera2D().world_to_screen((0.0, 0.0), width, height) == pytest.approx(
        (width / 2, height / 2)
    )


def test_target_maps_to_screen_center():
    width, height = 640.0, 480.0
    camera = Camera2D(target=(5.0, 7.0))
    assert camera.world_to_screen((5.0, 7.0), width, height) == pytest.approx(
        (width / 2, height / 2)
    )


def test_display_rect_corners_match_screen_corners():
    camera = Camera2D.from_display_rect(0.0, 0.0, 320.0, 152.0)
    assert camera.world_to_screen((0.0, 0.0), 640.0, 480.0) == pytest.approx(
        (0.0, 0.0), abs=1e-9
    )
    assert camera.world_to_screen((320.0, 152.0), 640.0, 480.0) == pytest.approx(
        (640.0, 480.0)
    )


@pytest.mark.parametrize("point", [(0.0, 0.0), (1.5, -2.0), (10.0, 3.25)])
def test_screen_world_round_trip(point):
    camera = Camera2D(rotation=30.0, zoom=(0.5, 0.25), target=(3.0, -2.0), offset=(0.1, 0.2))
    screen = camera.world_to_screen(point, 1024.0, 768.0)
    assert camera.screen_to_world(screen, 1024.0, 768.0) == pytest.approx(point)


def test_rotation_preserves_distance_from_target():
    camera = Camera2D(rotation=73.0)
    m = camera.matrix()
    p = m @ np.array([3.0, 4.0, 0.0, 1.0])
    assert math.hypot(p[0], p[1]) == pytest.approx(math.hypot(3.0, 4.0))


def test_depth_enabled():
    assert Camera2D().depth_enabled() is False
    assert Camera3D().depth_enabled() is True


def test_perspective_target_at_center_and_depth_range():
    camera = Camera3D(position=(-20.0, 15.0, 0.0), up=(0.0, 1.0, 0.0))
    m = camera.matrix(800.0, 600.0)
    center = _ndc(m, camera.target)
    assert center[:2] == pytest.approx((0.0, 0.0), abs=1e-9)

    eye = np.array(camera.position)
    direction = np.array(camera.target) - eye
    direction /= np.linalg.norm(direction)
    near_z = _ndc(m, eye + direction * Camera3D.Z_NEAR)[2]
    far_z = _ndc(m, eye + direction * Camera3D.Z_FAR)[2]
    assert far_z == pytest.approx(1.0, abs=1e-6)
    assert near_z == pytest.approx(-far_z, abs=1e-6)


def test_orthographic_target_at_center():
    camera = Camera3D(
        position=(-15.0, 15.0, -5.0),
        target=(0.0, 5.0, -5.0),
        up=(0.0, 1.0, 0.0),
        projection=Projection.ORTHOGRAPHIC,
    )
    m = camera.matrix(800.0, 600.0)
    assert _ndc(m, camera.target)[:2] == pytest.approx((0.0, 0.0), abs=1e-9)
    assert m[3] == pytest.approx([0.0, 0.0, 0.0, 1.0])


def test_explicit_aspect_matches_screen_ratio():
    assert np.allclose(Camera3D(aspect=2.0).matrix(), Camera3D().matrix(800.0, 400.0))


def test_missing_screen_size_without_aspect():
    with pytest.raises(ValueError):
        Camera3D().matrix()


def test_short_angle_dist_wraps():
    assert short_angle_dist(350.0, 10.0) == pytest.approx(20.0)
    assert short_angle_dist(10.0, 350.0) == pytest.approx(-short_angle_dist(350.0, 10.0))


@pytest.mark.parametrize("a0", [0.0, 45.0, 170.0, 359.0])
@pytest.mark.parametrize("a1", [0.0, 90.0, 200.0, 355.0])
def test_short_angle_dist_is_short(a0, a1):
    d = short_angle_dist(a0, a1)
    assert abs(d) <= 180.0 + 1e-9
    assert math.fmod(a0 + d - a1, 360.0) == pytest.approx(0.0, abs=1e-9) or abs(
        abs(math.fmod(a0 + d - a1, 360.0)) - 360.0
    ) < 1e-9


def test_angle_lerp_endpoints():
    assert angle_lerp(10.0, 350.0, 0.0) == 10.0
    assert angle_lerp(10.0, 350.0, 1.0) % 360.0 == pytest.approx(350.0)