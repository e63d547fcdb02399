"""Draw layers in drawing order, with the shader and view each uses."""

from __future__ import annotations

from enum import IntEnum


class RenderLayer(IntEnum):
    BACK_TILES_LIT = 0
    MAIN_TILES_LIT = 1
    BACK_OBJECTS_UNLIT = 2
    MAIN_OBJECTS_LIT = 3
    FRONT_EFFECTS_UNLIT = 4
    FRONT_EFFECTS_HIT_FLASH = 5
    UI_UNLIT = 6
    UI_SCREEN_FADE = 7


class ShaderType(IntEnum):
    DEFAULT = 0
    LIT = 1
    HIT_FLASH = 2


class ViewType(IntEnum):
    MAIN = 0
    WINDOW = 1


FIRST_LAYER = RenderLayer.BACK_TILES_LIT
LAYER_COUNT = len(RenderLayer)

_LAYER_INFO: dict[RenderLayer, tuple[ShaderType, ViewType]] = {
    RenderLayer.BACK_TILES_LIT: (ShaderType.LIT, ViewType.MAIN),
    RenderLayer.MAIN_TILES_LIT: (ShaderType.LIT, ViewType.MAIN),
    RenderLayer.BACK_OBJECTS_UNLIT: (ShaderType.DEFAULT, ViewType.MAIN),
    RenderLayer.MAIN_OBJECTS_LIT: (ShaderType.LIT, ViewType.MAIN),
    RenderLayer.FRONT_EFFECTS_UNLIT: (ShaderType.DEFAULT, ViewType.MAIN),
    RenderLayer.FRONT_EFFECTS_HIT_FLASH: (ShaderType.HIT_FLASH, ViewType.MAIN),
    RenderLayer.UI_UNLIT: (ShaderType.DEFAULT, ViewType.WINDOW),
    RenderLayer.UI_SCREEN_FADE: (ShaderType.DEFAULT, ViewType.WINDOW),
}


def shader_type(layer: int) -> ShaderType:
    """The shader a layer is drawn with; ValueError for an unknown layer."""
    return _LAYER_INFO[RenderLayer(layer)][0]


def view_type(layer: int) -> ViewType:
    """The view a layer is drawn in; ValueError for an unknown layer."""
    return _LAYER_INFO[RenderLayer(layer)][1]