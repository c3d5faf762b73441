import math

import numpy as np
import pytest

from bonobo.camera import FPSCamera, perspective
from bonobo.inputs import Action, InputHandler, Key, MouseButton


def _press(ih, key, scancode=0):
    ih.feed_keyboard(key, scancode, Action.PRESS)
    ih.advance()


def test_perspective_maps_near_and_far_planes():
    near, far = 0.5, 50.0
    p = perspective(math.pi / 3, 1.5, near, far)
    for depth, expected in ((near, -1.0), (far, 1.0)):
        clip = p @ np.array([0.0, 0.0, -depth, 1.0])
        assert clip[2] / clip[3] == pytest.approx(expected)


def test_perspective_rejects_degenerate_input():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 1.0, 1.0)


def test_projection_inverse_is_inverse():
    cam = FPSCamera(math.pi / 4, 16 / 9, 0.1, 100.0)
    assert np.allclose(cam.projection @ cam.projection_inverse, np.identity(4))
    assert np.allclose(cam.clip_to_view_matrix(), cam.projection_inverse)
    assert np.allclose(cam.view_to_clip_matrix(), cam.projection)


def test_aspect_setter_recomputes_projection():
    cam = FPSCamera(math.pi / 4, 1.0, 0.1, 100.0)
    cam.aspect = 2.0
    assert cam.aspect == 2.0
    assert np.allclose(cam.projection, perspective(math.pi / 4, 2.0, 0.1, 100.0))
    cam.fov = math.pi / 2
    assert cam.fov == math.pi / 2
    assert cam.near == 0.1 and cam.far == 100.0


def test_clip_world_matrices_are_inverse():
    cam = FPSCamera(math.pi / 4, 1.0, 0.1, 100.0)
    cam.world.set_translate((1.0, 2.0, 3.0))
    cam.world.set_rotate_y(0.7)
    assert np.allclose(cam.clip_to_world_matrix() @ cam.world_to_clip_matrix(), np.identity(4))
    assert np.allclose(cam.view_to_world_matrix() @ cam.world_to_view_matrix(), np.identity(4))


def test_clip_to_world_uses_world_transform():
    cam = FPSCamera(math.pi / 4, 1.0, 0.1, 100.0)
    xyw = (0.5, -0.25, 2.0)
    view = cam.clip_to_view(xyw)
    cam.world.set_translate((4.0, 5.0, 6.0))
    assert np.allclose(cam.clip_to_world(xyw), view + np.array([4.0, 5.0, 6.0]))
    assert view[2] == pytest.approx(-2.0)


def test_forward_key_moves_along_front():
    cam = FPSCamera(math.pi / 4, 1.0, 0.1, 100.0)
    ih = InputHandler()
    front = cam.world.front()
    _press(ih, Key.W)
    cam.update(2.0, ih)
    assert np.allclose(cam.world.translation, front * 2.0)


def test_shift_and_control_modifiers():
    ih_plain = InputHandler()
    _press(ih_plain, Key.D)
    plain = FPSCamera(1.0, 1.0, 0.1, 10.0)
    plain.update(1.0, ih_plain)

    ih_shift = InputHandler()
    _press(ih_shift, Key.D)
    _press(ih_shift, Key.LEFT_SHIFT)
    fast = FPSCamera(1.0, 1.0, 0.1, 10.0)
    fast.update(1.0, ih_shift)

    ih_ctrl = InputHandler()
    _press(ih_ctrl, Key.D)
    _press(ih_ctrl, Key.LEFT_CONTROL)
    slow = FPSCamera(1.0, 1.0, 0.1, 10.0)
    slow.update(1.0, ih_ctrl)

    assert np.allclose(fast.world.translation, 4.0 * plain.world.translation)
    assert np.allclose(slow.world.translation, 0.25 * plain.world.translation)


def test_opposite_keys_cancel():
    cam = FPSCamera(1.0, 1.0, 0.1, 10.0)
    ih = InputHandler()
    _press(ih, Key.Q)
    _press(ih, Key.E)
    cam.update(1.0, ih)
    assert np.allclose(cam.world.translation, np.zeros(3))


def test_keyboard_capture_blocks_movement():
    cam = FPSCamera(1.0, 1.0, 0.1, 10.0)
    ih = InputHandler()
    _press(ih, Key.W)
    ih.set_ui_capture(False, True)
    cam.update(1.0, ih)
    assert np.allclose(cam.world.translation, np.zeros(3))
    cam.update(1.0, ih, ignore_keys=False)
    ih.set_ui_capture(False, False)
    cam.update(1.0, ih, ignore_keys=True)
    assert np.allclose(cam.world.translation, np.zeros(3))


def test_mouse_look_requires_left_button():
    cam = FPSCamera(1.0, 1.0, 0.1, 10.0)
    ih = InputHandler()
    ih.feed_mouse_motion((0.0, 0.0))
    cam.update(0.0, ih)
    ih.feed_mouse_motion((0.3, 0.2))
    cam.update(0.0, ih)
    assert np.allclose(cam.world.rotation, np.identity(3))
    assert np.allclose(cam.mouse_position, [0.3, 0.2])

    ih.feed_mouse_buttons(MouseButton.LEFT, Action.PRESS)
    ih.advance()
    ih.feed_mouse_motion((0.6, 0.5))
    cam.update(0.0, ih)
    r = cam.world.rotation
    assert not np.allclose(r, np.identity(3))
    assert np.allclose(r @ r.T, np.identity(3))


def test_dumps_loads_round_trip():
    cam = FPSCamera(0.9, 1.25, 0.2, 300.0)
    cam.movement_speed = np.array([2.0, 3.0, 4.0])
    cam.mouse_sensitivity = np.array([0.5, 0.75])
    cam.world.set_translate((1.0, -2.0, 3.5))
    cam.world.set_rotate(0.4, (1.0, 1.0, 0.0))

    other = FPSCamera(1.0, 1.0, 0.1, 10.0)
    other.loads(cam.dumps())
    assert other.fov == cam.fov and other.aspect == cam.aspect
    assert other.near == cam.near and other.far == cam.far
    assert np.allclose(other.movement_speed, cam.movement_speed)
    assert np.allclose(other.mouse_sensitivity, cam.mouse_sensitivity)
    assert np.allclose(other.world.matrix(), cam.world.matrix())
    assert np.allclose(other.projection, cam.projection)


def test_loads_rejects_short_text():
    cam = FPSCamera(1.0, 1.0, 0.1, 10.0)
    with pytest.raises(ValueError):
        cam.loads("1 2 3")