"""Shader programs and the per-frame light buffers fed to them."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Sequence, Union

from silhouette.mathutil import Rect, Transform, Vec2, sign

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

MAX_POINT_LIGHTS = 8
MAX_AREA_LIGHTS = 8

HIT_FLASH_COLOUR = (0.376, 0.0, 0.047)

_STAGES = {".vert": "vertex", ".geom": "geometry", ".frag": "fragment"}


class ShaderProgram:
    """Shader sources by stage, plus the uniform values set on them."""

    def __init__(self):
        self.sources: dict[str, str] = {}
        self.uniforms: dict[str, Any] = {}

    @property
    def loaded(self) -> bool:
        return bool(self.sources)

    def load(self, *args: PathLike) -> None:
        """Load shader files; each file's stage comes from its extension."""
        if not args:
            raise ValueError("no shader files given")
        sources = {}
        for arg in args:
            path = Path(arg)
            stage = _STAGES.get(path.suffix.lower())
            if stage is None:
                raise ValueError(f"unknown shader stage for {path}")
            sources[stage] = path.read_text()
        self.sources = sources

    def set_uniform(self, name: str, value: Any) -> None:
        self.uniforms[name] = list(value) if isinstance(value, list) else value


def _vec3(colour: Sequence[float]) -> tuple[float, float, float]:
    r, g, b = colour
    return (float(r), float(g), float(b))


class ShaderManager:
    """Owns the light and hit-flash shaders and gathers lights each frame.

    Each frame, call clear_lights, add the lights that should render, then
    set_light_uniforms.
    """

    def __init__(self):
        self.light_shader = ShaderProgram()
        self.hit_flash_shader = ShaderProgram()

        self._point_position = [Vec2(0.0, 0.0)] * MAX_POINT_LIGHTS
        self._point_colour = [(0.0, 0.0, 0.0)] * MAX_POINT_LIGHTS
        self._point_radius = [0.0] * MAX_POINT_LIGHTS
        self._point_num = 0

        self._area_centre = [Vec2(0.0, 0.0)] * MAX_AREA_LIGHTS
        self._area_extent = [Vec2(0.0, 0.0)] * MAX_AREA_LIGHTS
        self._area_border = [Vec2(0.0, 0.0)] * MAX_AREA_LIGHTS
        self._area_vector = [Vec2(0.0, 0.0)] * MAX_AREA_LIGHTS
        self._area_colour = [(0.0, 0.0, 0.0)] * MAX_AREA_LIGHTS
        self._area_num = 0

    @property
    def point_light_count(self) -> int:
        return self._point_num

    @property
    def area_light_count(self) -> int:
        return self._area_num

    def load_shaders(self, directory: PathLike = "Resources/Shaders") -> None:
        """Load both shaders; a failure is logged and leaves that shader unloaded."""
        directory = Path(directory)
        try:
            self.light_shader.load(directory / "LightShader.vert", directory / "LightShader.frag")
        except (OSError, ValueError) as exc:
            log.error("Failed to load light shader: %s", exc)

        try:
            self.hit_flash_shader.load(directory / "HitFlash.frag")
        except (OSError, ValueError) as exc:
            log.error("Failed to load hit flash shader: %s", exc)
        else:
            self.hit_flash_shader.set_uniform("flashColour", HIT_FLASH_COLOUR)

    def clear_lights(self) -> None:
        self._point_num = 0
        self._area_num = 0

    def add_point_light(self, position: Vec2, colour: Sequence[float], radius: float) -> None:
        if self._point_num >= MAX_POINT_LIGHTS:
            log.error("Maximum point lights exceeded.")
            return
        i = self._point_num
        self._point_position[i] = Vec2(float(position.x), float(position.y))
        self._point_colour[i] = _vec3(colour)
        self._point_radius[i] = float(radius)
        self._point_num += 1

    def add_area_light(
        self,
        area: Rect,
        border_size: Vec2,
        light_vector: Vec2,
        colour: Sequence[float],
    ) -> None:
        if self._area_num >= MAX_AREA_LIGHTS:
            log.error("Maximum area lights exceeded.")
            return
        i = self._area_num
        self._area_centre[i] = Vec2(area.left + 0.5 * area.width, area.top + 0.5 * area.height)
        self._area_extent[i] = Vec2(0.5 * area.width, 0.5 * area.height)
        self._area_border[i] = Vec2(max(float(border_size.x), 1.0), max(float(border_size.y), 1.0))
        self._area_vector[i] = Vec2(float(light_vector.x), float(light_vector.y))
        self._area_colour[i] = _vec3(colour)
        self._area_num += 1

    def set_light_uniforms(self) -> None:
        shader = self.light_shader
        shader.set_uniform("pointLightPosition", self._point_position)
        shader.set_uniform("pointLightColour", self._point_colour)
        shader.set_uniform("pointLightRadius", self._point_radius)
        shader.set_uniform("pointLightNum", self._point_num)

        shader.set_uniform("areaLightCentre", self._area_centre)
        shader.set_uniform("areaLightExtent", self._area_extent)
        shader.set_uniform("areaLightBorder", self._area_border)
        shader.set_uniform("areaLightVector", self._area_vector)
        shader.set_uniform("areaLightColour", self._area_colour)
        shader.set_uniform("areaLightNum", self._area_num)

    def set_normal_transform(self, rotation: float, scale: Vec2) -> None:
        """Pass the 2x2 rotation and flip of a sprite for its normal map."""
        transform = (
            Transform.identity()
            .rotated(rotation)
            .scaled(sign(float(scale.x)), sign(float(scale.y)))
        )
        matrix = transform.gl_matrix
        self.light_shader.set_uniform("normalTransform0", Vec2(matrix[0], matrix[1]))
        self.light_shader.set_uniform("normalTransform1", Vec2(matrix[4], matrix[5]))

    def clear_normal_transform(self) -> None:
        self.light_shader.set_uniform("normalTransform0", Vec2(1.0, 0.0))
        self.light_shader.set_uniform("normalTransform1", Vec2(0.0, 1.0))

    def set_hit_flash_uniforms(self, clock_time: float) -> None:
        self.hit_flash_shader.set_uniform("modTime", math.fmod(clock_time, 60.0))