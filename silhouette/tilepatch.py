"""Fixed-size patches of tiles and the quads built to draw them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from silhouette.hitresult import INVALID_TILE, PATCH_TILES, TILE_HEIGHT, TILE_WIDTH
from silhouette.mathutil import Vec2

_QUAD_CORNERS = ((0, 0), (1, 0), (1, 1), (0, 1))


@dataclass
class Tileset:
    """A tileset texture and how many tiles make up one of its rows."""

    texture: Any = None
    tiles_per_row: int = 128


@dataclass(frozen=True)
class Vertex:
    position: Vec2
    tex_coords: Vec2


@dataclass(frozen=True)
class QuadBatch:
    """Quads (four vertices each) to draw with one texture."""

    vertices: tuple
    texture: Any


class TilePatch:
    """A square grid of tile ids, PATCH_TILES on each side.

    Empty positions hold INVALID_TILE and produce no quad.
    """

    def __init__(self):
        self.tileset: Optional[Tileset] = None
        self._grid = [[INVALID_TILE] * PATCH_TILES for _ in range(PATCH_TILES)]
        self.vertices: list[Vertex] = []

    @staticmethod
    def _index(tile_xy: Vec2) -> tuple[int, int]:
        x, y = int(tile_xy.x), int(tile_xy.y)
        if not (0 <= x < PATCH_TILES and 0 <= y < PATCH_TILES):
            raise IndexError(f"tile position {tile_xy} outside the patch")
        return x, y

    def set_tileset(self, tileset: Optional[Tileset]) -> None:
        self.tileset = tileset

    def set_tile_id(self, tile_xy: Vec2, tile_id: int) -> None:
        x, y = self._index(tile_xy)
        self._grid[y][x] = tile_id

    def tile_id(self, tile_xy: Vec2) -> int:
        x, y = self._index(tile_xy)
        return self._grid[y][x]

    def count_valid_tiles(self) -> int:
        return sum(1 for row in self._grid for tile in row if tile != INVALID_TILE)

    def create_vertex_array(self, tiles_per_row: int) -> None:
        """Rebuild the quads, one per valid tile, in row-major order."""
        if tiles_per_row <= 0:
            raise ValueError("tiles_per_row must be positive")
        vertices: list[Vertex] = []
        for y, row in enumerate(self._grid):
            for x, tile in enumerate(row):
                if tile == INVALID_TILE:
                    continue
                tex_x, tex_y = tile % tiles_per_row, tile // tiles_per_row
                vertices.extend(
                    Vertex(
                        Vec2(float((x + cx) * TILE_WIDTH), float((y + cy) * TILE_HEIGHT)),
                        Vec2(float((tex_x + cx) * TILE_WIDTH), float((tex_y + cy) * TILE_HEIGHT)),
                    )
                    for cx, cy in _QUAD_CORNERS
                )
        self.vertices = vertices

    def draw(self, target: Any, states: Any) -> None:
        """Draw the quads with the tileset texture; nothing without a tileset."""
        if self.tileset is not None:
            target.draw(QuadBatch(tuple(self.vertices), self.tileset.texture), states)