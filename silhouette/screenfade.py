"""A component that fades the whole screen to and from a colour."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from silhouette.colour import BLACK, Colour
from silhouette.component import Component
from silhouette.mathutil import (
    Rect,
    Transform,
    Vec2,
    float_greater_or_equal,
    float_is_zero,
    float_less_or_equal,
)
from silhouette.rendermanager import DEFAULT_NATIVE_RESOLUTION
from silhouette.renderlayer import RenderLayer


class FadeDirection(Enum):
    FADE_IN = 0
    FADE_OUT = 1
    PAUSE = 2


@dataclass(frozen=True)
class FilledRect:
    """A rectangle drawn filled with one colour."""

    rect: Rect
    fill: Colour


class ScreenFadeComponent(Component):
    """Covers the native screen area with a colour of varying opacity.

    fade_percent 0 shows the scene, 1 shows only the colour.
    """

    def __init__(self, colour: Colour = BLACK, native_resolution: Vec2 = DEFAULT_NATIVE_RESOLUTION):
        super().__init__()
        self.colour = colour
        self.native_resolution = native_resolution
        self.rectangle = Rect(0.0, 0.0, 0.0, 0.0)
        self.direction = FadeDirection.PAUSE
        self.fade_percent = 0.0
        self.fade_out_speed = 0.0
        self.fade_in_speed = 0.0
        self._fill = colour
        self._update_colour()

    def on_added_to_object(self, owner: Any) -> None:
        self.rectangle = Rect(
            0.0, 0.0, float(self.native_resolution.x), float(self.native_resolution.y)
        )

    def tick(self, delta_time: float) -> None:
        if self.direction is FadeDirection.FADE_IN:
            self.fade_percent -= delta_time * self.fade_in_speed
            if float_less_or_equal(self.fade_percent, 0.0):
                self.direction = FadeDirection.PAUSE
                self.fade_percent = 0.0
            self._update_colour()
        elif self.direction is FadeDirection.FADE_OUT:
            self.fade_percent += delta_time * self.fade_out_speed
            if float_greater_or_equal(self.fade_percent, 1.0):
                self.direction = FadeDirection.PAUSE
                self.fade_percent = 1.0
            self._update_colour()

    def gather_draw(self, render_manager: Any, transform: Transform) -> None:
        if not float_is_zero(self.fade_percent):
            render_manager.add_drawable(
                RenderLayer.UI_SCREEN_FADE, FilledRect(self.rectangle, self._fill)
            )

    def start_fade_in(self, fade_time: float, from_max: bool) -> None:
        """Fade back to the scene over fade_time seconds."""
        if fade_time <= 0:
            raise ValueError("fade_time must be positive")
        self.direction = FadeDirection.FADE_IN
        self.fade_in_speed = 1.0 / fade_time
        if from_max:
            self.fade_percent = 1.0

    def start_fade_out(self, fade_time: float, from_zero: bool) -> None:
        """Fade to the solid colour over fade_time seconds."""
        if fade_time <= 0:
            raise ValueError("fade_time must be positive")
        self.direction = FadeDirection.FADE_OUT
        self.fade_out_speed = 1.0 / fade_time
        if from_zero:
            self.fade_percent = 0.0

    def fill_colour(self) -> Colour:
        """The colour the rectangle was last filled with."""
        return self._fill

    def _update_colour(self) -> None:
        alpha = int(255.0 * self.fade_percent) & 0xFF
        self._fill = Colour(self.colour.r, self.colour.g, self.colour.b, alpha)