"""The world: grid, view, systems and the tick and draw cycle."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from silhouette.component import GameSystem
from silhouette.hitresult import PATCH_HEIGHT, PATCH_WIDTH, HitResult
from silhouette.mathutil import Rect, Vec2, round_to_int_vec
from silhouette.namehash import NameHash
from silhouette.perftimer import PerfTimer
from silhouette.rendermanager import RenderManager, View
from silhouette.shaders import ShaderManager
from silhouette.worldgrid import DEFAULT_TILES_PER_ROW, WorldGrid

INVALID_FRAME = -999

S = TypeVar("S", bound=GameSystem)


class World:
    """Holds the world grid and runs ticks and draws around the main view."""

    def __init__(self, render_manager: Optional[RenderManager] = None):
        self.world_grid = WorldGrid()
        self.render_manager = (
            render_manager if render_manager is not None else RenderManager(ShaderManager())
        )
        self.main_view = View()
        self.tick_number = 0
        self.world_time = 0.0
        self._systems: dict[NameHash, GameSystem] = {}

    def init(self, tileset_texture: Any = None, tiles_per_row: int = DEFAULT_TILES_PER_ROW) -> None:
        self.world_grid.build_vertex_arrays(tileset_texture, tiles_per_row)

    def tick(self, delta_time: float) -> None:
        """Tick objects in an area three views wide around the main view."""
        with PerfTimer("World.tick"):
            view = self.main_view
            top_left = round_to_int_vec(view.center - 1.5 * view.size)
            size = round_to_int_vec(3.0 * view.size)
            self.world_grid.tick_objects(delta_time, Rect.from_vectors(top_left, size))
            self.tick_number += 1
            self.world_time += delta_time

    def draw(self, target: Any, clock_time: float) -> None:
        """Draw the main view plus half a patch around it for spilling sprites."""
        view = self.main_view
        patch = Vec2(PATCH_WIDTH, PATCH_HEIGHT)
        view_top_left = view.center - 0.5 * view.size
        draw_top_left = round_to_int_vec(view_top_left - 0.5 * patch)
        draw_size = round_to_int_vec(view.size) + patch
        self.world_grid.gather_draw(self.render_manager, Rect.from_vectors(draw_top_left, draw_size))
        self.render_manager.draw_all(target, view, clock_time)

    def get_system(self, system_type: type[S]) -> S:
        """The world's instance of a system type, created on first request."""
        key = system_type.static_type()
        system = self._systems.get(key)
        if system is None:
            system = self._systems[key] = system_type()
        return system

    def add_object(self, obj: Any) -> None:
        obj.world = self
        self.world_grid.add_object(obj)
        obj.init()

    def update_object_position(self, obj: Any) -> None:
        self.world_grid.update_object_position(obj)

    def check_for_solid(self, rect: Rect, ignore: Any = None) -> HitResult:
        return self.world_grid.check_for_solid(rect, ignore)

    def set_main_view(self, view: View) -> None:
        self.main_view = view

    def ticks_since(self, past_tick: int) -> int:
        return self.tick_number - past_tick

    def ticks_until(self, future_tick: int) -> int:
        return future_tick - self.tick_number