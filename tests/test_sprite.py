import pytest
from PIL import Image

from silhouette.gameobject import GameObject
from silhouette.mathutil import Rect, Transform, Vec2, to_float_vec
from silhouette.renderlayer import RenderLayer
from silhouette.sprite import Alignment, AnimationMode, SpriteComponent


class _Recorder:
    def __init__(self):
        self.calls = []

    def add_drawable(self, layer, drawable, transform=None, normal_rotation=0.0, normal_scale=None):
        self.calls.append((layer, drawable, normal_rotation, normal_scale))


def _sheet():
    return Image.new("RGBA", (132, 88))


def _rect_tuple(rect):
    return (rect.left, rect.top, rect.width, rect.height)


def test_size_without_texture_is_zero():
    assert SpriteComponent(None).size() == Vec2(0, 0)


def test_size_is_texture_size_then_subimage_size():
    sprite = SpriteComponent(_sheet())
    assert sprite.size() == Vec2(132, 88)
    sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 3, 3, 0)
    assert sprite.size() == Vec2(44, 44)


def test_setup_selects_subimage_rect():
    sprite = SpriteComponent(_sheet())
    sprite.setup_subimages(Vec2(44, 44), Vec2(1, 1), 2, 2, 1)
    assert _rect_tuple(sprite.sprite.texture_rect) == (88, 44, 44, 44)


def test_setup_rejects_zero_subimages():
    sprite = SpriteComponent(_sheet())
    with pytest.raises(ValueError):
        sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 0, 1, 0)


def test_animation_per_tick_advances():
    sprite = SpriteComponent(_sheet())
    sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 3, 3, 0)
    sprite.animate(AnimationMode.SUBIMAGES_PER_TICK, 0.5, True)
    sprite.tick(1 / 60)
    assert sprite.current_subimage == 0
    sprite.tick(1 / 60)
    assert sprite.current_subimage == 1
    assert _rect_tuple(sprite.sprite.texture_rect) == (44, 0, 44, 44)


def test_looping_animation_wraps_and_fires_end_event():
    sprite = SpriteComponent(_sheet())
    sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 3, 3, 0)
    sprite.animate(AnimationMode.SUBIMAGES_PER_TICK, 1.0, True)
    ends = []
    sprite.event_animation_end.bind_free_function(lambda: ends.append(True))
    for _ in range(3):
        sprite.tick(1 / 60)
    assert sprite.current_subimage == 0
    assert len(ends) == 1


def test_non_looping_animation_stops_on_last_frame():
    sprite = SpriteComponent(_sheet())
    sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 3, 3, 0)
    sprite.animate(AnimationMode.SUBIMAGES_PER_TICK, 1.0, False)
    ends = []
    sprite.event_animation_end.bind_free_function(lambda: ends.append(True))
    for _ in range(5):
        sprite.tick(1 / 60)
    assert sprite.current_subimage == 2
    assert sprite.animation_rate == 0.0
    assert len(ends) == 1


def test_animation_per_second_uses_delta_time():
    sprite = SpriteComponent(_sheet())
    sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 3, 3, 0)
    sprite.animate(AnimationMode.SUBIMAGES_PER_SECOND, 2.0, True)
    sprite.tick(0.25)
    assert sprite.current_subimage == 0
    sprite.tick(0.25)
    assert sprite.current_subimage == 1


def test_no_animation_mode_keeps_frame():
    sprite = SpriteComponent(_sheet())
    sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 3, 3, 1)
    sprite.animate(AnimationMode.NONE)
    sprite.tick(1.0)
    assert sprite.current_subimage == 1


def test_centre_origin_is_half_size():
    sprite = SpriteComponent(_sheet())
    sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 1, 1, 0)
    sprite.centre_origin()
    assert sprite.sprite.origin * 2 == to_float_vec(sprite.size())


def test_top_left_alignment_puts_position_at_origin():
    obj = GameObject(Rect(0, 0, 26, 42))
    sprite = obj.add_component(SpriteComponent(_sheet()))
    sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 1, 1, 0)
    sprite.centre_origin_and_align(Alignment.TOP_LEFT)
    assert sprite.sprite.position == sprite.sprite.origin


def test_bottom_right_alignment():
    obj = GameObject(Rect(0, 0, 26, 42))
    sprite = obj.add_component(SpriteComponent(_sheet()))
    sprite.setup_subimages(Vec2(44, 44), Vec2(0, 0), 1, 1, 0)
    sprite.centre_origin_and_align(Alignment.BOTTOM_RIGHT)
    assert sprite.sprite.position == Vec2(26 - 22, 42 - 22)


def test_gather_draw_uses_layer_and_hit_flash():
    sprite = SpriteComponent(_sheet())
    recorder = _Recorder()
    sprite.gather_draw(recorder, Transform.identity())
    sprite.hit_flash = True
    sprite.gather_draw(recorder, Transform.identity())
    assert [call[0] for call in recorder.calls] == [
        RenderLayer.MAIN_OBJECTS_LIT,
        RenderLayer.FRONT_EFFECTS_HIT_FLASH,
    ]
    assert recorder.calls[0][1] is sprite.sprite


def test_gather_draw_skips_invisible_or_untextured():
    recorder = _Recorder()
    SpriteComponent(None).gather_draw(recorder, Transform.identity())
    hidden = SpriteComponent(_sheet())
    hidden.visible = False
    hidden.gather_draw(recorder, Transform.identity())
    assert recorder.calls == []