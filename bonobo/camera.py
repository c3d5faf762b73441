"""First-person camera driven by an input handler."""

from __future__ import annotations

import math

import numpy as np

from bonobo.inputs import InputHandler, InputState, Key, MouseButton
from bonobo.transform import TRSTransform


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect must be non-zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must be non-zero")
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


class FPSCamera:
    """A camera with a perspective projection and WASD/mouse-look movement."""

    def __init__(self, fovy: float, aspect: float, near: float, far: float) -> None:
        self.world = TRSTransform()
        self.movement_speed = np.ones(3)
        self.mouse_sensitivity = np.ones(2)
        self.mouse_position = np.zeros(2)
        self.set_projection(fovy, aspect, near, far)

    def set_projection(self, fovy: float, aspect: float, near: float, far: float) -> None:
        projection = perspective(fovy, aspect, near, far)
        self._fov = float(fovy)
        self._aspect = float(aspect)
        self._near = float(near)
        self._far = float(far)
        self.projection = projection
        self.projection_inverse = np.linalg.inv(projection)

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self.set_projection(value, self._aspect, self._near, self._far)

    @property
    def aspect(self) -> float:
        return self._aspect

    @aspect.setter
    def aspect(self, value: float) -> None:
        self.set_projection(self._fov, value, self._near, self._far)

    @property
    def near(self) -> float:
        return self._near

    @property
    def far(self) -> float:
        return self._far

    def update(
        self,
        delta_seconds: float,
        input_handler: InputHandler,
        ignore_keys: bool = False,
        ignore_mouse: bool = False,
    ) -> None:
        """Apply mouse-look and keyboard movement for one frame."""
        ih = input_handler
        new_position = np.array(ih.mouse_position, dtype=float)
        diff = new_position - self.mouse_position
        self.mouse_position = new_position

        if (
            not ih.mouse_captured_by_ui
            and not ignore_mouse
            and ih.mouse_state(MouseButton.LEFT) & InputState.PRESSED
        ):
            diff[1] = -diff[1]
            diff = diff * self.mouse_sensitivity
            self.world.pre_rotate_x(float(diff[1]))
            self.world.rotate_y(float(-diff[0]))

        if ih.keyboard_captured_by_ui or ignore_keys:
            return

        def held(key: Key) -> bool:
            return bool(ih.keycode_state(key) & InputState.PRESSED)

        move = float(held(Key.W)) - float(held(Key.S))
        strafe = float(held(Key.D)) - float(held(Key.A))
        levitate = float(held(Key.E)) - float(held(Key.Q))

        if held(Key.LEFT_CONTROL):
            modifier = 0.25
        elif held(Key.LEFT_SHIFT):
            modifier = 4.0
        else:
            modifier = 1.0

        change = modifier * (
            self.world.front() * move
            + self.world.right() * strafe
            + self.world.up() * levitate
        )
        self.world.translate(self.movement_speed * change * float(delta_seconds))

    def view_to_world_matrix(self) -> np.ndarray:
        return self.world.matrix()

    def world_to_view_matrix(self) -> np.ndarray:
        return self.world.matrix_inverse()

    def clip_to_world_matrix(self) -> np.ndarray:
        return self.view_to_world_matrix() @ self.projection_inverse

    def world_to_clip_matrix(self) -> np.ndarray:
        return self.projection @ self.world_to_view_matrix()

    def clip_to_view_matrix(self) -> np.ndarray:
        return self.projection_inverse.copy()

    def view_to_clip_matrix(self) -> np.ndarray:
        return self.projection.copy()

    def clip_to_world(self, xyw) -> np.ndarray:
        view = np.append(self.clip_to_view(xyw), 1.0)
        return (self.world.matrix() @ view)[:3]

    def clip_to_view(self, xyw) -> np.ndarray:
        xyw = np.asarray(xyw, dtype=float)
        if xyw.shape != (3,):
            raise ValueError(f"expected a 3-component vector, got shape {xyw.shape}")
        factors = np.array(
            [self.projection_inverse[0, 0], self.projection_inverse[1, 1], -1.0]
        )
        return xyw * factors

    def dumps(self) -> str:
        """Projection line, speed/sensitivity line, then the world transform."""

        def fmt(values) -> str:
            return " ".join(repr(float(x)) for x in values)

        return (
            fmt((self._fov, self._aspect, self._near, self._far))
            + "\n"
            + fmt(list(self.movement_speed) + list(self.mouse_sensitivity))
            + "\n"
            + self.world.dumps()
        )

    def loads(self, text: str) -> None:
        """Restore a camera written by :meth:`dumps`."""
        tokens = text.split()
        if len(tokens) < 9:
            raise ValueError(f"expected at least 9 numbers, got {len(tokens)}")
        try:
            head = [float(tok) for tok in tokens[:9]]
        except ValueError as err:
            raise ValueError(f"malformed camera text: {err}") from err
        world = TRSTransform()
        world.loads(" ".join(tokens[9:]))
        self.set_projection(*head[:4])
        self.movement_speed = np.array(head[4:7])
        self.mouse_sensitivity = np.array(head[7:9])
        self.world = world