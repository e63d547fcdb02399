"""Sprites cut from a sheet, with flipbook animation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from silhouette.colour import WHITE, Colour
from silhouette.component import Component
from silhouette.event import MulticastEvent
from silhouette.mathutil import Rect, Transform, Vec2, to_float_vec
from silhouette.renderlayer import RenderLayer


class AnimationMode(Enum):
    NONE = 0
    SUBIMAGES_PER_TICK = 1
    SUBIMAGES_PER_SECOND = 2


class Alignment(Enum):
    TOP_LEFT = 0
    TOP_CENTRE = 1
    TOP_RIGHT = 2
    LEFT_CENTRE = 3
    CENTRE = 4
    RIGHT_CENTRE = 5
    BOTTOM_LEFT = 6
    BOTTOM_CENTRE = 7
    BOTTOM_RIGHT = 8


_LEFT = {Alignment.TOP_LEFT, Alignment.LEFT_CENTRE, Alignment.BOTTOM_LEFT}
_MIDDLE_X = {Alignment.TOP_CENTRE, Alignment.CENTRE, Alignment.BOTTOM_CENTRE}
_TOP = {Alignment.TOP_LEFT, Alignment.TOP_CENTRE, Alignment.TOP_RIGHT}
_MIDDLE_Y = {Alignment.LEFT_CENTRE, Alignment.CENTRE, Alignment.RIGHT_CENTRE}


def _texture_size(texture: Any) -> Vec2:
    width, height = texture.size
    return Vec2(int(width), int(height))


@dataclass
class Sprite:
    """A textured rectangle with its local transform and tint."""

    texture: Any = None
    texture_rect: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    origin: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    position: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    rotation: float = 0.0
    colour: Colour = WHITE


class SpriteComponent(Component):
    """Draws part of a texture, optionally animating through subimages.

    The texture must be a uniform grid with no spacing; an animation's
    subimages form a rectangular block starting at first_subimage.
    """

    def __init__(self, texture: Any = None):
        super().__init__()
        self.sprite = Sprite(texture)
        if texture is not None:
            size = _texture_size(texture)
            self.sprite.texture_rect = Rect(0, 0, size.x, size.y)
        self.event_animation_end = MulticastEvent()

        self.visible = True
        self.layer = RenderLayer.MAIN_OBJECTS_LIT
        self.hit_flash = False

        self.subimages_enabled = False
        self.subimage_size = Vec2(32, 32)
        self.first_subimage = Vec2(0, 0)
        self.num_subimages = 1
        self.subimages_per_row = 1
        self.current_subimage = 0

        self.animation_mode = AnimationMode.NONE
        self.animation_loop = True
        self.animation_rate = 1.0
        self._animation_counter = 0.0

    def setup_subimages(
        self,
        subimage_size: Vec2,
        first_subimage: Vec2,
        num_subimages: int,
        subimages_per_row: int,
        current_subimage: int,
    ) -> None:
        if num_subimages < 1:
            raise ValueError("num_subimages must be at least 1")
        if subimages_per_row < 1:
            raise ValueError("subimages_per_row must be at least 1")
        self.subimages_enabled = True
        self.subimage_size = subimage_size
        self.first_subimage = first_subimage
        self.num_subimages = num_subimages
        self.subimages_per_row = subimages_per_row
        self.current_subimage = current_subimage
        self._update_sprite_rect()

    def animate(
        self,
        mode: AnimationMode = AnimationMode.SUBIMAGES_PER_TICK,
        rate: float = 1.0,
        loop: bool = True,
    ) -> None:
        self.animation_mode = mode
        self.animation_loop = loop
        self.animation_rate = rate

    def tick(self, delta_time: float) -> None:
        if self.animation_mode is AnimationMode.NONE:
            return
        if self.animation_mode is AnimationMode.SUBIMAGES_PER_TICK:
            self._animation_counter += self.animation_rate
        else:
            self._animation_counter += self.animation_rate * delta_time
        frames = int(self._animation_counter)
        if frames > 0:
            self._animation_counter -= frames
            self._advance_subimage(frames)
            self._update_sprite_rect()

    def gather_draw(self, render_manager: Any, transform: Transform) -> None:
        if not self.visible or self.sprite.texture is None:
            return
        if self.hit_flash:
            render_manager.add_drawable(RenderLayer.FRONT_EFFECTS_HIT_FLASH, self.sprite, transform)
        else:
            render_manager.add_drawable(
                self.layer, self.sprite, transform, self.sprite.rotation, self.sprite.scale
            )

    def size(self) -> Vec2:
        """The drawn size: the subimage size if set up, else the whole texture."""
        if self.sprite.texture is None:
            return Vec2(0, 0)
        if self.subimages_enabled:
            return self.subimage_size
        return _texture_size(self.sprite.texture)

    def centre_origin(self) -> None:
        self.sprite.origin = 0.5 * to_float_vec(self.size())

    def centre_origin_and_align(self, alignment: Alignment) -> None:
        """Centre the origin and place the sprite against the owner's bounds."""
        self.centre_origin()
        owner_size = self.owner.bounds_size()
        sprite_size = self.size()

        if alignment in _LEFT:
            x = sprite_size.x // 2
        elif alignment in _MIDDLE_X:
            x = owner_size.x // 2
        else:
            x = owner_size.x - sprite_size.x // 2

        if alignment in _TOP:
            y = sprite_size.y // 2
        elif alignment in _MIDDLE_Y:
            y = owner_size.y // 2
        else:
            y = owner_size.y - sprite_size.y // 2

        self.sprite.position = to_float_vec(Vec2(x, y))

    def _advance_subimage(self, frames: int) -> None:
        self.current_subimage += frames
        while self.current_subimage >= self.num_subimages:
            if self.animation_loop:
                self.current_subimage -= self.num_subimages
            else:
                self.current_subimage = max(self.num_subimages - 1, 0)
                self.animation_rate = 0.0
            self.event_animation_end.broadcast()

    def _update_sprite_rect(self) -> None:
        row = self.first_subimage.y + self.current_subimage // self.subimages_per_row
        col = self.first_subimage.x + self.current_subimage % self.subimages_per_row
        width, height = self.subimage_size.x, self.subimage_size.y
        self.sprite.texture_rect = Rect(col * width, row * height, width, height)

    @property
    def texture(self) -> Optional[Any]:
        return self.sprite.texture