"""Keyboard and joystick input dispatched to multicast events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

from silhouette.event import MulticastEvent

KEY_UNKNOWN = -1
KEY_COUNT = 101
BUTTON_COUNT = 32


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release with its modifier state."""

    code: int = KEY_UNKNOWN
    alt: bool = False
    control: bool = False
    shift: bool = False
    system: bool = False


@dataclass(frozen=True)
class JoystickButtonEvent:
    joystick_id: int
    button: int


@dataclass(frozen=True)
class JoystickMoveEvent:
    joystick_id: int
    axis: Hashable
    position: float


class InputEventManager:
    """Routes input events to per-key and per-button multicast events.

    Joystick state is tracked from the events handled, and queries answer
    for the most recently used joystick.
    """

    def __init__(self):
        self._key_pressed = [MulticastEvent() for _ in range(KEY_COUNT)]
        self._key_released = [MulticastEvent() for _ in range(KEY_COUNT)]
        self._button_pressed = [MulticastEvent() for _ in range(BUTTON_COUNT)]
        self._button_released = [MulticastEvent() for _ in range(BUTTON_COUNT)]
        self.any_button_pressed_event = MulticastEvent()
        self.any_button_released_event = MulticastEvent()
        self.last_key_event = KeyEvent()
        self.last_joystick_id = 0
        self._axes: dict[tuple[int, Hashable], float] = {}
        self._pressed_buttons: set[tuple[int, int]] = set()

    @staticmethod
    def _checked(index: int, count: int, what: str) -> int:
        if not 0 <= index < count:
            raise IndexError(f"{what} {index} out of range 0..{count - 1}")
        return index

    def key_pressed_event(self, key: int) -> MulticastEvent:
        return self._key_pressed[self._checked(key, KEY_COUNT, "key")]

    def key_released_event(self, key: int) -> MulticastEvent:
        return self._key_released[self._checked(key, KEY_COUNT, "key")]

    def button_pressed_event(self, button: int) -> MulticastEvent:
        return self._button_pressed[self._checked(button, BUTTON_COUNT, "button")]

    def button_released_event(self, button: int) -> MulticastEvent:
        return self._button_released[self._checked(button, BUTTON_COUNT, "button")]

    def handle_key_pressed(self, event: KeyEvent) -> None:
        if KEY_UNKNOWN < event.code < KEY_COUNT:
            self.last_key_event = event
            self._key_pressed[event.code].broadcast()

    def handle_key_released(self, event: KeyEvent) -> None:
        if KEY_UNKNOWN < event.code < KEY_COUNT:
            self.last_key_event = event
            self._key_released[event.code].broadcast()

    def handle_button_pressed(self, event: JoystickButtonEvent) -> None:
        if 0 <= event.button < BUTTON_COUNT:
            self.last_joystick_id = event.joystick_id
            self._pressed_buttons.add((event.joystick_id, event.button))
            self._button_pressed[event.button].broadcast()
            self.any_button_pressed_event.broadcast(event.button)

    def handle_button_released(self, event: JoystickButtonEvent) -> None:
        if 0 <= event.button < BUTTON_COUNT:
            self._pressed_buttons.discard((event.joystick_id, event.button))
            self._button_released[event.button].broadcast()
            self.any_button_released_event.broadcast(event.button)

    def handle_joystick_moved(self, event: JoystickMoveEvent) -> None:
        self._axes[(event.joystick_id, event.axis)] = float(event.position)
        # Only a positive deflection beyond 1 makes a joystick the active one.
        if event.position > 1.0:
            self.last_joystick_id = event.joystick_id

    def get_axis(self, axis: Hashable) -> float:
        """Position of an axis on the most recently used joystick, -100..100."""
        return self._axes.get((self.last_joystick_id, axis), 0.0)

    def is_button_pressed(self, button: int) -> bool:
        return (self.last_joystick_id, button) in self._pressed_buttons