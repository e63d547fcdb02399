import pytest

from silhouette.mathutil import Rect, Transform, Vec2
from silhouette.renderlayer import RenderLayer
from silhouette.rendermanager import RenderManager, View, calculate_viewport
from silhouette.shaders import ShaderManager


class _FakeTarget:
    def __init__(self, size=(800, 600), shaders=None):
        self.size = size
        self.shaders = shaders
        self.view = None
        self.draws = []

    def set_view(self, view):
        self.view = view

    def draw(self, drawable, states):
        normal = None
        if self.shaders is not None:
            normal = self.shaders.light_shader.uniforms.get("normalTransform0")
        self.draws.append((drawable, states, self.view, normal))


def _manager(native=Vec2(384, 288)):
    shaders = ShaderManager()
    return RenderManager(shaders, native), shaders


def test_viewport_matching_ratio_is_full_screen():
    view = View(Vec2(50.0, 50.0), Vec2(100.0, 100.0))
    assert calculate_viewport(view, 1.0) == Rect(0.0, 0.0, 1.0, 1.0)


def test_viewport_pillarbox_on_wide_screen():
    view = View(Vec2(50.0, 50.0), Vec2(100.0, 100.0))
    viewport = calculate_viewport(view, 2.0)
    assert viewport == Rect(0.25, 0.0, 0.5, 1.0)


def test_viewport_letterbox_is_centred():
    view = View(Vec2(100.0, 50.0), Vec2(200.0, 100.0))
    viewport = calculate_viewport(view, 1.0)
    assert viewport.left == 0.0
    assert viewport.width == 1.0
    assert viewport.top * 2 + viewport.height == pytest.approx(1.0)
    assert viewport.height < 1.0


def test_view_from_rect_round_trip():
    view = View.from_rect(Rect(10.0, 20.0, 30.0, 40.0))
    assert view.size == Vec2(30.0, 40.0)
    assert view.top_left == Vec2(10.0, 20.0)


def test_add_drawable_rejects_unknown_layer():
    manager, _ = _manager()
    with pytest.raises(ValueError):
        manager.add_drawable(99, object())


def test_draw_all_orders_layers_and_clears():
    manager, shaders = _manager()
    target = _FakeTarget(shaders=shaders)
    manager.add_drawable(RenderLayer.UI_UNLIT, "ui")
    manager.add_drawable(RenderLayer.MAIN_OBJECTS_LIT, "lit")
    manager.add_drawable(RenderLayer.FRONT_EFFECTS_HIT_FLASH, "flash")
    manager.add_drawable(RenderLayer.BACK_TILES_LIT, "tiles")
    assert len(manager) == 4
    manager.draw_all(target, View(), 1.5)
    assert [d[0] for d in target.draws] == ["tiles", "lit", "flash", "ui"]
    assert len(manager) == 0
    target.draws.clear()
    manager.draw_all(target, View(), 1.5)
    assert target.draws == []


def test_draw_all_picks_shaders():
    manager, shaders = _manager()
    target = _FakeTarget(shaders=shaders)
    manager.add_drawable(RenderLayer.MAIN_OBJECTS_LIT, "lit")
    manager.add_drawable(RenderLayer.FRONT_EFFECTS_HIT_FLASH, "flash")
    manager.add_drawable(RenderLayer.UI_UNLIT, "ui")
    manager.draw_all(target, View(), 0.0)
    states = {d[0]: d[1] for d in target.draws}
    assert states["lit"].shader is shaders.light_shader
    assert states["flash"].shader is shaders.hit_flash_shader
    assert states["ui"].shader is None


def test_draw_all_picks_views():
    native = Vec2(384, 288)
    manager, shaders = _manager(native)
    target = _FakeTarget(shaders=shaders)
    main_view = View(Vec2(10.0, 10.0), Vec2(384.0, 288.0))
    manager.add_drawable(RenderLayer.MAIN_OBJECTS_LIT, "lit")
    manager.add_drawable(RenderLayer.UI_SCREEN_FADE, "fade")
    manager.draw_all(target, main_view, 0.0)
    views = {d[0]: d[2] for d in target.draws}
    assert views["lit"].center == main_view.center
    assert views["fade"].size == Vec2(384.0, 288.0)
    assert views["fade"].top_left == Vec2(0.0, 0.0)
    assert views["lit"].viewport == views["fade"].viewport


def test_draw_all_passes_transform_and_normal():
    manager, shaders = _manager()
    target = _FakeTarget(shaders=shaders)
    transform = Transform.identity().translated(Vec2(5.0, 6.0))
    manager.add_drawable(
        RenderLayer.MAIN_OBJECTS_LIT, "sprite", transform, 0.0, Vec2(-1.0, 1.0)
    )
    manager.draw_all(target, View(), 0.0)
    ((drawable, states, _, normal),) = target.draws
    assert states.transform == transform
    assert normal == Vec2(-1.0, 0.0)


def test_draw_all_sets_frame_uniforms():
    manager, shaders = _manager()
    shaders.add_point_light(Vec2(1.0, 2.0), (1.0, 1.0, 1.0), 10.0)
    manager.draw_all(_FakeTarget(), View(), 1.5)
    assert shaders.hit_flash_shader.uniforms["modTime"] == pytest.approx(1.5)
    assert shaders.light_shader.uniforms["pointLightNum"] == 1