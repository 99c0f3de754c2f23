import numpy as np
import pytest

from armview.scene import (
    FULL_TURN,
    GlobalConfig,
    MouseButton,
    RobotConfig,
    ViewState,
    axis_lines,
    grid_lines,
    normalize_angle,
    perspective,
    rotate,
    translate,
)


@pytest.mark.parametrize("angle", [-12000, -1, 0, 100, 5760, 5761, 20000])
def test_normalize_angle_range_and_congruence(angle):
    result = normalize_angle(angle)
    assert 0 <= result <= FULL_TURN
    assert (result - angle) % FULL_TURN == 0


def test_normalize_angle_keeps_full_turn():
    assert normalize_angle(5760) == 5760


def test_translate_moves_origin():
    point = translate(3.0, -4.0, 7.5) @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(point, [3.0, -4.0, 7.5, 1.0])


@pytest.mark.parametrize("axis", [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 2, 3)])
def test_rotate_is_orthonormal_and_fixes_axis(axis):
    m = rotate(37.0, *axis)
    r = m[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.isclose(np.linalg.det(r), 1.0)
    assert np.allclose(r @ np.array(axis, dtype=float), axis)


def test_rotate_inverse():
    assert np.allclose(rotate(55.0, 0, 1, 1) @ rotate(-55.0, 0, 1, 1), np.eye(4))


def test_rotate_quarter_turn_about_z():
    point = rotate(90, 0, 0, 1) @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(point, [0.0, 1.0, 0.0, 1.0])


def test_rotate_zero_axis_raises():
    with pytest.raises(ValueError):
        rotate(10, 0, 0, 0)


def _project_depth(matrix, z):
    clip = matrix @ np.array([0.0, 0.0, z, 1.0])
    return clip[2] / clip[3]


def test_perspective_maps_near_and_far_planes():
    m = perspective(800, 600)
    assert np.isclose(_project_depth(m, -1.0), -1.0)
    assert np.isclose(_project_depth(m, -20000.0), 1.0)
    assert m[3, 2] == -1.0


def test_perspective_aspect_ratio():
    m = perspective(1200, 400)
    assert np.isclose(m[1, 1], m[0, 0] * 1200 / 400)


@pytest.mark.parametrize("size", [(-1, 100), (100, -1), (100, 0)])
def test_perspective_rejects_bad_size(size):
    with pytest.raises(ValueError):
        perspective(*size)


def test_grid_lines_lie_on_floor_within_extent():
    step, num = 50, 15
    segments = grid_lines(step, num)
    assert len(segments) == 2 * (2 * num + 1)
    for start, end in segments:
        assert start[2] == 0 and end[2] == 0
        assert all(abs(c) <= num * step for c in start + end)
        length = np.linalg.norm(np.subtract(end, start))
        assert length == 2 * num * step


def test_grid_lines_default_matches_explicit():
    assert grid_lines() == grid_lines(50, 15)


def test_axis_lines():
    segments = axis_lines(900, 700)
    assert segments[0] == ((-900, 0, 0), (900, 0, 0))
    assert segments[1] == ((0, -900, 0), (0, 900, 0))
    assert segments[2] == ((0, 0, 0), (0, 0, 700))


def test_config_defaults():
    config = RobotConfig()
    assert config.d == config.a == config.alpha == config.joints == [0.0] * 7
    flags = GlobalConfig()
    assert not any(vars(flags).values())


def test_view_defaults():
    view = ViewState()
    assert (view.x_rot, view.y_rot, view.z_rot) == (-2584, 1376, 0.0)
    assert (view.zoom, view.x_tran, view.y_tran) == (-1600, 0, -500)


def test_set_x_rotation_notifies_only_on_change():
    view = ViewState()
    seen = []
    view.x_rotation_listeners.append(seen.append)
    assert view.set_x_rotation(320) is True
    assert view.set_x_rotation(320) is False
    assert seen == [320]
    assert view.x_rot == 320


def test_set_y_rotation_notifies_only_on_change():
    view = ViewState()
    seen = []
    view.y_rotation_listeners.append(seen.append)
    assert view.set_y_rotation(view.y_rot) is False
    assert view.set_y_rotation(-64) is True
    assert seen == [-64]


def test_left_drag_rotates():
    view = ViewState()
    x0, y0 = view.x_rot, view.y_rot
    view.press(10, 10)
    view.drag(10, 10, MouseButton.LEFT)
    assert (view.x_rot, view.y_rot) == (x0, y0)
    view.drag(12, 15, MouseButton.LEFT)
    assert view.x_rot > x0
    assert view.y_rot < y0
    assert view.last_pos == (12, 15)


def test_right_drag_zooms_and_reverses():
    view = ViewState()
    zoom = view.zoom
    view.press(0, 0)
    view.drag(0, 8, MouseButton.RIGHT)
    assert view.zoom > zoom
    view.drag(0, 0, MouseButton.RIGHT)
    assert view.zoom == zoom


def test_middle_drag_pans_and_reverses():
    view = ViewState()
    start = (view.x_tran, view.y_tran)
    view.press(5, 5)
    view.drag(9, 2, MouseButton.MIDDLE)
    assert view.x_tran > start[0]
    assert view.y_tran > start[1]
    view.drag(5, 5, MouseButton.MIDDLE)
    assert (view.x_tran, view.y_tran) == start


def test_drag_without_buttons_only_moves_cursor():
    view = ViewState()
    before = (view.x_rot, view.y_rot, view.zoom, view.x_tran, view.y_tran)
    view.press(0, 0)
    view.drag(30, 40, MouseButton.NONE)
    assert (view.x_rot, view.y_rot, view.zoom, view.x_tran, view.y_tran) == before
    assert view.last_pos == (30, 40)


def test_view_matrix_translation_and_rotation():
    view = ViewState()
    m = view.view_matrix()
    assert np.allclose(m[:3, 3], [view.x_tran, view.y_tran, view.zoom - 40])
    r = m[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.allclose(m[3], [0, 0, 0, 1])