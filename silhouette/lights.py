"""Components that submit point and area lights to the shader manager."""

from __future__ import annotations

from typing import Optional

from silhouette.component import Component
from silhouette.mathutil import Rect, Vec2, to_float_vec
from silhouette.shaders import ShaderManager

WHITE_LIGHT = (1.0, 1.0, 1.0)


def _scaled(colour, brightness: float) -> tuple[float, float, float]:
    r, g, b = colour
    return (brightness * r, brightness * g, brightness * b)


class _LightComponent(Component):
    def __init__(self, shader_manager: Optional[ShaderManager] = None):
        super().__init__()
        self._shader_manager = shader_manager
        self.colour = WHITE_LIGHT
        self.brightness = 1.0
        self.enabled = True

    @property
    def shader_manager(self) -> ShaderManager:
        """The given shader manager, or else the one of the owner's world."""
        if self._shader_manager is not None:
            return self._shader_manager
        return self.world.render_manager.shader_manager

    def toggle_enabled(self) -> None:
        self.enabled = not self.enabled


class PointLightComponent(_LightComponent):
    """A round light at an offset from the owner's top-left corner."""

    def __init__(self, shader_manager: Optional[ShaderManager] = None):
        super().__init__(shader_manager)
        self.offset = Vec2(0, 0)
        self.radius = 300.0

    def tick(self, delta_time: float) -> None:
        if self.enabled:
            self.shader_manager.add_point_light(
                to_float_vec(self.owner.top_left() + self.offset),
                _scaled(self.colour, self.brightness),
                self.radius,
            )

    def toggle_enabled(self) -> None:
        super().toggle_enabled()


class AreaLightComponent(_LightComponent):
    """A light filling the owner's bounding box."""

    def __init__(self, shader_manager: Optional[ShaderManager] = None):
        super().__init__(shader_manager)
        self.border_size = Vec2(1, 1)
        self.light_vector = Vec2(0.0, 0.0)

    def tick(self, delta_time: float) -> None:
        if self.enabled:
            bounds = self.owner.bounds
            self.shader_manager.add_area_light(
                Rect(float(bounds.left), float(bounds.top), float(bounds.width), float(bounds.height)),
                to_float_vec(self.border_size),
                self.light_vector,
                _scaled(self.colour, self.brightness),
            )

    def toggle_enabled(self) -> None:
        super().toggle_enabled()