"""Gathers drawables per layer and draws them with the right shader and view."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Protocol

from silhouette.mathutil import Rect, Transform, Vec2
from silhouette.perftimer import PerfTimer
from silhouette.renderlayer import RenderLayer, ShaderType, ViewType, shader_type, view_type
from silhouette.shaders import ShaderManager, ShaderProgram

DEFAULT_NATIVE_RESOLUTION = Vec2(384, 288)


@dataclass(frozen=True)
class View:
    """A 2D camera: the world area shown and the screen fraction it fills."""

    center: Vec2 = Vec2(500.0, 500.0)
    size: Vec2 = Vec2(1000.0, 1000.0)
    viewport: Rect = Rect(0.0, 0.0, 1.0, 1.0)

    @classmethod
    def from_rect(cls, rect: Rect) -> View:
        return cls(
            Vec2(rect.left + rect.width / 2.0, rect.top + rect.height / 2.0),
            Vec2(float(rect.width), float(rect.height)),
        )

    @property
    def top_left(self) -> Vec2:
        return Vec2(self.center.x - self.size.x / 2.0, self.center.y - self.size.y / 2.0)


@dataclass(frozen=True)
class RenderStates:
    shader: Optional[ShaderProgram] = None
    transform: Transform = Transform()


class RenderTarget(Protocol):
    """What draw_all draws to: a sized surface with a current view."""

    size: Any

    def set_view(self, view: View) -> None: ...

    def draw(self, drawable: Any, states: RenderStates) -> None: ...


@dataclass(frozen=True)
class _RenderInfo:
    drawable: Any
    transform: Transform
    normal_rotation: float
    normal_scale: Vec2


def calculate_viewport(view: View, screen_ratio: float) -> Rect:
    """A viewport that letterboxes the view to keep its aspect on the screen."""
    view_ratio = view.size.x / view.size.y
    view_screen_ratio = view_ratio / screen_ratio
    if view_screen_ratio < 1.0:
        padding = (1.0 - view_screen_ratio) * 0.5
        return Rect(padding, 0.0, view_screen_ratio, 1.0)
    if view_screen_ratio > 1.0:
        inverse = 1.0 / view_screen_ratio
        padding = (1.0 - inverse) * 0.5
        return Rect(0.0, padding, 1.0, inverse)
    return Rect(0.0, 0.0, 1.0, 1.0)


class RenderManager:
    """Queues drawables by layer until the next draw_all."""

    def __init__(
        self,
        shader_manager: ShaderManager,
        native_resolution: Vec2 = DEFAULT_NATIVE_RESOLUTION,
    ):
        self.shader_manager = shader_manager
        self.native_resolution = native_resolution
        self._layers: dict[RenderLayer, list[_RenderInfo]] = {layer: [] for layer in RenderLayer}

    def __len__(self) -> int:
        return sum(len(infos) for infos in self._layers.values())

    def add_drawable(
        self,
        layer: int,
        drawable: Any,
        transform: Transform = Transform(),
        normal_rotation: float = 0.0,
        normal_scale: Vec2 = Vec2(1.0, 1.0),
    ) -> None:
        """Queue a drawable; the rotation and scale are used only on lit layers."""
        self._layers[RenderLayer(layer)].append(
            _RenderInfo(drawable, transform, normal_rotation, normal_scale)
        )

    def draw_all(self, target: RenderTarget, main_view: View, clock_time: float) -> None:
        """Draw every queued drawable, layer by layer, then empty the queues."""
        with PerfTimer("RenderManager.draw_all"):
            shaders = self.shader_manager
            shaders.set_light_uniforms()
            shaders.set_hit_flash_uniforms(clock_time)

            width, height = target.size
            screen_ratio = float(width) / float(height)
            native = self.native_resolution
            window_view = View.from_rect(Rect(0.0, 0.0, native.x, native.y))
            window_view = replace(window_view, viewport=calculate_viewport(window_view, screen_ratio))
            main_view = replace(main_view, viewport=calculate_viewport(main_view, screen_ratio))

            layer_shaders = {
                ShaderType.LIT: shaders.light_shader,
                ShaderType.HIT_FLASH: shaders.hit_flash_shader,
            }

            for layer in RenderLayer:
                infos = self._layers[layer]
                if not infos:
                    continue
                kind = shader_type(layer)
                shader = layer_shaders.get(kind)
                target.set_view(main_view if view_type(layer) is ViewType.MAIN else window_view)
                for info in infos:
                    if kind is ShaderType.LIT:
                        shaders.set_normal_transform(info.normal_rotation, info.normal_scale)
                    target.draw(info.drawable, RenderStates(shader, info.transform))
                infos.clear()