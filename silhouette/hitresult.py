"""Results of solidity checks, and the tile grid constants they refer to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from silhouette.mathutil import Vec2
from silhouette.reference import WeakRef

INVALID_TILE = -1

TILE_WIDTH = 26
TILE_HEIGHT = 22

# Tiles per patch in each dimension.
PATCH_TILES = 20

PATCH_WIDTH = TILE_WIDTH * PATCH_TILES
PATCH_HEIGHT = TILE_HEIGHT * PATCH_TILES


class HitKind(Enum):
    NO_HIT = 0
    HIT_TILE = 1
    HIT_OBJECT = 2


@dataclass(frozen=True)
class HitResult:
    """What, if anything, was found solid at a location.

    Tile fields are filled for a tile hit, the object reference for an
    object hit.
    """

    kind: HitKind = HitKind.NO_HIT
    tile_id: int = INVALID_TILE
    tile_position: Vec2 = Vec2(0, 0)
    object_ref: WeakRef = field(default_factory=WeakRef)

    @classmethod
    def no_hit(cls) -> HitResult:
        return cls()

    @classmethod
    def tile(cls, tile_id: int, tile_position: Vec2) -> HitResult:
        return cls(HitKind.HIT_TILE, tile_id, tile_position)

    @classmethod
    def object(cls, ref: WeakRef) -> HitResult:
        return cls(HitKind.HIT_OBJECT, object_ref=ref)

    def is_hit(self) -> bool:
        return self.kind is not HitKind.NO_HIT