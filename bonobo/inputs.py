"""Keyboard and mouse state tracking, with per-tick press/release edges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag

_UINT64_MASK = (1 << 64) - 1
_NEVER = _UINT64_MASK
_MOUSE_BUTTON_SLOTS = 7


class InputState(IntFlag):
    NONE = 0
    PRESSED = 1 << 0
    RELEASED = 1 << 1
    JUST_PRESSED = 1 << 2
    JUST_RELEASED = 1 << 3


class Action(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Key(IntEnum):
    SPACE = 32
    A = 65
    D = 68
    E = 69
    Q = 81
    S = 83
    W = 87
    ESCAPE = 256
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


@dataclass
class _Record:
    down_tick: int = _NEVER
    up_tick: int = _NEVER
    is_down: bool = False


Position = tuple[float, float]


class InputHandler:
    """Accumulates input events and reports states relative to the current tick."""

    def __init__(self) -> None:
        self._scancodes: dict[int, _Record] = {}
        self._keycodes: dict[int, _Record] = {}
        self._mouse: dict[int, _Record] = {}
        self.mouse_position: Position = (-1.0, -1.0)
        self._switch_positions: list[Position] = [self.mouse_position] * _MOUSE_BUTTON_SLOTS
        self.mouse_captured_by_ui = False
        self.keyboard_captured_by_ui = False
        self.tick = 0

    def advance(self) -> None:
        """Move to the next tick; edges recorded in the last tick become visible."""
        self.tick = (self.tick + 1) & _UINT64_MASK

    def _down(self, records: dict[int, _Record], loc: int) -> None:
        record = records.setdefault(loc, _Record())
        record.is_down = True
        record.down_tick = self.tick

    def _up(self, records: dict[int, _Record], loc: int) -> None:
        record = records.setdefault(loc, _Record())
        record.is_down = False
        record.up_tick = self.tick

    def _state(self, records: dict[int, _Record], loc: int) -> InputState:
        record = records.get(loc)
        if record is None:
            return InputState.RELEASED
        state = InputState.PRESSED if record.is_down else InputState.RELEASED
        previous = (self.tick - 1) & _UINT64_MASK
        if previous == record.down_tick:
            state |= InputState.JUST_PRESSED
        if previous == record.up_tick:
            state |= InputState.JUST_RELEASED
        return state

    def feed_keyboard(self, key: int, scancode: int, action: int) -> None:
        if action == Action.PRESS:
            self._down(self._scancodes, int(scancode))
            self._down(self._keycodes, int(key))
        elif action == Action.RELEASE:
            self._up(self._scancodes, int(scancode))
            self._up(self._keycodes, int(key))

    def feed_mouse_buttons(self, button: int, action: int) -> None:
        button = int(button)
        if not 0 <= button < _MOUSE_BUTTON_SLOTS:
            raise IndexError(f"mouse button {button} out of range")
        if action == Action.PRESS:
            self._down(self._mouse, button)
        elif action == Action.RELEASE:
            self._up(self._mouse, button)
        self._switch_positions[button] = self.mouse_position

    def feed_mouse_motion(self, position) -> None:
        x, y = position
        self.mouse_position = (float(x), float(y))

    def scancode_state(self, scancode: int) -> InputState:
        return self._state(self._scancodes, int(scancode))

    def keycode_state(self, key: int) -> InputState:
        return self._state(self._keycodes, int(key))

    def mouse_state(self, button: int) -> InputState:
        return self._state(self._mouse, int(button))

    def mouse_position_at_state_shift(self, button: int) -> Position:
        """Mouse position at the last press or release of ``button``."""
        button = int(button)
        if not 0 <= button < _MOUSE_BUTTON_SLOTS:
            raise IndexError(f"mouse button {button} out of range")
        return self._switch_positions[button]

    def set_ui_capture(self, mouse_capture: bool, keyboard_capture: bool) -> None:
        self.mouse_captured_by_ui = bool(mouse_capture)
        self.keyboard_captured_by_ui = bool(keyboard_capture)