"""Spatial partition of the world into cells of tiles and objects."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from silhouette.hitresult import (
    INVALID_TILE,
    PATCH_HEIGHT,
    PATCH_TILES,
    PATCH_WIDTH,
    TILE_HEIGHT,
    TILE_WIDTH,
    HitResult,
)
from silhouette.mathutil import Rect, Transform, Vec2, clamp, to_float_vec
from silhouette.objectbucket import ObjectBucket
from silhouette.perftimer import PerfTimer
from silhouette.renderlayer import RenderLayer
from silhouette.tilepatch import Tileset, TilePatch

DEFAULT_TILES_PER_ROW = 20


class WorldGridCell:
    """One patch-sized cell: an optional tile patch and a bucket of objects."""

    def __init__(self, coords: Vec2):
        self.coords = coords
        self.position = WorldGrid.coords_to_position(coords)
        self.tile_patch: Optional[TilePatch] = None
        self.object_bucket = ObjectBucket()

    def box(self) -> Rect:
        return Rect(self.position.x, self.position.y, PATCH_WIDTH, PATCH_HEIGHT)

    def add_tile(self, position: Vec2, tile_id: int) -> None:
        tile_xy = self._position_to_tile_xy(position)
        if self.tile_patch is None:
            self.tile_patch = TilePatch()
        self.tile_patch.set_tile_id(tile_xy, tile_id)

    def build_vertex_array(self, tileset: Tileset) -> None:
        if self.tile_patch is not None:
            self.tile_patch.set_tileset(tileset)
            self.tile_patch.create_vertex_array(tileset.tiles_per_row)

    def check_for_solid_tile(self, rect: Rect) -> HitResult:
        """The first tile in this cell overlapped by rect; every tile is solid."""
        if self.tile_patch is None:
            return HitResult.no_hit()
        start = self._clamped_position_to_tile_xy(Vec2(rect.left, rect.top))
        end = self._clamped_position_to_tile_xy(
            Vec2(rect.left + rect.width - 1, rect.top + rect.height - 1)
        )
        for y in range(start.y, end.y + 1):
            for x in range(start.x, end.x + 1):
                tile_xy = Vec2(x, y)
                tile_id = self.tile_patch.tile_id(tile_xy)
                if tile_id != INVALID_TILE:
                    return HitResult.tile(tile_id, self._tile_xy_to_position(tile_xy))
        return HitResult.no_hit()

    def check_for_solid_object(self, rect: Rect, ignore: Any = None) -> HitResult:
        ref = self.object_bucket.find_first_hit_by_channel(rect, "Solid", ignore)
        return HitResult.object(ref) if ref else HitResult.no_hit()

    def gather_draw(self, render_manager: Any) -> None:
        if self.tile_patch is not None:
            transform = Transform.identity().translated(to_float_vec(self.position))
            render_manager.add_drawable(RenderLayer.MAIN_TILES_LIT, self.tile_patch, transform)
        self.object_bucket.gather_draw(render_manager)

    def _position_to_tile_xy(self, position: Vec2) -> Vec2:
        if not self.box().contains(position):
            raise ValueError(f"position {position} is outside cell {self.coords}")
        relative = position - self.position
        return Vec2(int(relative.x // TILE_WIDTH), int(relative.y // TILE_HEIGHT))

    def _clamped_position_to_tile_xy(self, position: Vec2) -> Vec2:
        relative = position - self.position
        return Vec2(
            clamp(int(relative.x // TILE_WIDTH), 0, PATCH_TILES - 1),
            clamp(int(relative.y // TILE_HEIGHT), 0, PATCH_TILES - 1),
        )

    def _tile_xy_to_position(self, tile_xy: Vec2) -> Vec2:
        return self.position + Vec2(TILE_WIDTH * tile_xy.x, TILE_HEIGHT * tile_xy.y)


class WorldGrid:
    """Cells created on demand, plus a bucket of persistent objects."""

    def __init__(self):
        self._cells: dict[Vec2, WorldGridCell] = {}
        self.persistent_bucket = ObjectBucket()
        self.tileset = Tileset()

    @property
    def cells(self) -> Mapping[Vec2, WorldGridCell]:
        return MappingProxyType(self._cells)

    @staticmethod
    def position_to_coords(position: Vec2) -> Vec2:
        """Cell coordinates of a world position; negatives round away from zero."""
        return Vec2(int(position.x // PATCH_WIDTH), int(position.y // PATCH_HEIGHT))

    @staticmethod
    def coords_to_position(coords: Vec2) -> Vec2:
        return Vec2(coords.x * PATCH_WIDTH, coords.y * PATCH_HEIGHT)

    def get_cell(self, coords: Vec2) -> WorldGridCell:
        """The cell at coords, created if it does not exist."""
        key = Vec2(int(coords.x), int(coords.y))
        cell = self._cells.get(key)
        if cell is None:
            cell = self._cells[key] = WorldGridCell(key)
        return cell

    def get_cell_for_position(self, position: Vec2) -> WorldGridCell:
        return self.get_cell(self.position_to_coords(position))

    def cells_in_rect(self, rect: Rect) -> Iterator[WorldGridCell]:
        """Existing cells overlapping rect, column by column; none are created."""
        start = self.position_to_coords(Vec2(rect.left, rect.top))
        end = self.position_to_coords(
            Vec2(rect.left + rect.width - 1, rect.top + rect.height - 1)
        )
        for x in range(start.x, end.x + 1):
            for y in range(start.y, end.y + 1):
                cell = self._cells.get(Vec2(x, y))
                if cell is not None:
                    yield cell

    def add_tile(self, position: Vec2, tile_id: int) -> None:
        self.get_cell_for_position(position).add_tile(position, tile_id)

    def build_vertex_arrays(self, texture: Any = None, tiles_per_row: int = DEFAULT_TILES_PER_ROW) -> None:
        self.tileset = Tileset(texture, tiles_per_row)
        for cell in self._cells.values():
            cell.build_vertex_array(self.tileset)

    def add_object(self, obj: Any) -> None:
        if obj is None:
            raise ValueError("object must not be None")
        if obj.is_persistent():
            self.persistent_bucket.add_object(obj)
            return
        coords = self.position_to_coords(obj.top_left())
        obj.cached_grid_coords = coords
        self.get_cell(coords).object_bucket.add_object(obj)

    def update_object_position(self, obj: Any) -> None:
        """Move a non-persistent object to the cell its position now falls in."""
        if obj is None:
            raise ValueError("object must not be None")
        if obj.is_persistent():
            return
        old_coords = obj.cached_grid_coords
        new_coords = self.position_to_coords(obj.top_left())
        if old_coords != new_coords:
            old_cell = self.get_cell(old_coords)
            new_cell = self.get_cell(new_coords)
            old_cell.object_bucket.transfer_object(obj, new_cell.object_bucket)
            obj.cached_grid_coords = new_coords

    def tick_objects(self, delta_time: float, tick_area: Rect) -> None:
        """Tick objects in cells overlapping tick_area, then persistent ones."""
        with PerfTimer("WorldGrid.tick_objects"):
            refs = []
            for cell in self.cells_in_rect(tick_area):
                refs.extend(cell.object_bucket.gather_all_objects())
            refs.extend(self.persistent_bucket.gather_all_objects())
            for ref in refs:
                obj = ref.get()
                if obj is not None:
                    obj.game_object_tick(delta_time)

    def check_for_solid(self, rect: Rect, ignore: Any = None) -> HitResult:
        """A solid tile overlapped by rect, else a solid object, else no hit."""
        for cell in self.cells_in_rect(rect):
            result = cell.check_for_solid_tile(rect)
            if result.is_hit():
                return result

        # Padding catches objects in neighbouring cells that spill over an edge.
        padded = Rect(
            rect.left - PATCH_WIDTH // 2,
            rect.top - PATCH_HEIGHT // 2,
            rect.width + PATCH_WIDTH,
            rect.height + PATCH_HEIGHT,
        )
        for cell in self.cells_in_rect(padded):
            result = cell.check_for_solid_object(rect, ignore)
            if result.is_hit():
                return result
        return HitResult.no_hit()

    def gather_draw(self, render_manager: Any, gather_rect: Rect) -> None:
        with PerfTimer("WorldGrid.gather_draw"):
            for cell in self.cells_in_rect(gather_rect):
                cell.gather_draw(render_manager)
            self.persistent_bucket.gather_draw(render_manager)