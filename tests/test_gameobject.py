import pytest

from silhouette.component import Component
from silhouette.gameobject import GameObject
from silhouette.hitresult import HitResult
from silhouette.mathutil import Rect, Vec2
from silhouette.objectbucket import ObjectBucket


class _FakeWorld:
    def __init__(self, solids=()):
        self.solids = list(solids)
        self.updated = []

    def check_for_solid(self, rect, ignore=None):
        for solid in self.solids:
            if solid.intersects(rect):
                return HitResult.tile(7, solid.position)
        return HitResult.no_hit()

    def update_object_position(self, obj):
        self.updated.append(obj)


class _GoProbe(Component):
    def __init__(self, log=None):
        super().__init__()
        self.log = log if log is not None else []
        self.transforms = []

    def tick(self, delta_time):
        self.log.append(("component", delta_time))

    def gather_draw(self, render_manager, transform):
        self.transforms.append((render_manager, transform))


class _GoOther(Component):
    pass


class _Persistent(GameObject):
    def is_persistent(self):
        return True


class _Logging(GameObject):
    def __init__(self, bounds, log):
        super().__init__(bounds)
        self.log = log

    def tick(self, delta_time):
        self.log.append(("object", delta_time))


def _placed(obj, solids=()):
    obj.world = _FakeWorld(solids)
    return obj


def test_move_x_without_obstacle():
    obj = _placed(GameObject(Rect(0, 0, 5, 5)))
    result = obj.try_move_x(7)
    assert not result.is_hit()
    assert obj.bounds.left == 7
    assert obj.world.updated == [obj]


def test_move_x_stops_at_wall():
    obj = _placed(GameObject(Rect(0, 0, 5, 5)), [Rect(10, 0, 5, 5)])
    result = obj.try_move_x(10)
    assert result.is_hit()
    assert result.tile_position == Vec2(10, 0)
    assert obj.bounds.left == 5
    assert not obj.bounds.intersects(Rect(10, 0, 5, 5))


def test_move_y_negative():
    obj = _placed(GameObject(Rect(0, 0, 5, 5)))
    obj.try_move_y(-3)
    assert obj.bounds.top == -3
    assert obj.bounds.left == 0


def test_float_moves_accumulate():
    obj = _placed(GameObject(Rect(0, 0, 5, 5)))
    obj.try_move_x(0.4)
    obj.try_move_x(0.4)
    assert obj.bounds.left == 0
    assert obj.world.updated == []
    obj.try_move_x(0.4)
    assert obj.bounds.left == 1


def test_blocked_from_start_does_not_update():
    obj = _placed(GameObject(Rect(0, 0, 5, 5)), [Rect(5, 0, 5, 5)])
    result = obj.try_move_x(3)
    assert result.is_hit()
    assert obj.bounds == Rect(0, 0, 5, 5)
    assert obj.world.updated == []


def test_persistent_object_not_reindexed():
    obj = _placed(_Persistent(Rect(0, 0, 5, 5)))
    obj.try_move_x(4)
    assert obj.bounds.left == 4
    assert obj.world.updated == []


def test_zero_move_needs_no_world():
    obj = GameObject(Rect(0, 0, 5, 5))
    assert not obj.try_move_x(0).is_hit()


def test_move_without_world_raises():
    obj = GameObject(Rect(0, 0, 5, 5))
    with pytest.raises(RuntimeError):
        obj.try_move_x(1)


def test_add_and_find_components():
    obj = GameObject(Rect(0, 0, 5, 5))
    first = obj.add_component(_GoProbe())
    second = obj.add_component(_GoProbe())
    other = obj.add_component(_GoOther())
    assert first.owner is obj
    assert obj.find_component(_GoProbe) is first
    assert obj.find_component(_GoOther) is other
    assert obj.find_all_components(_GoProbe) == [first, second]
    assert obj.find_component_by_type("_GoOther") is other
    assert obj.find_component_by_type("Missing") is None


def test_add_none_component_raises():
    with pytest.raises(ValueError):
        GameObject(Rect(0, 0, 1, 1)).add_component(None)


def test_tick_runs_components_then_object():
    log = []
    obj = _placed(_Logging(Rect(0, 0, 5, 5), log))
    ObjectBucket().add_object(obj)
    obj.add_component(_GoProbe(log))
    obj.game_object_tick(0.5)
    assert log == [("component", 0.5), ("object", 0.5)]


def test_tick_without_world_raises():
    with pytest.raises(RuntimeError):
        GameObject(Rect(0, 0, 5, 5)).game_object_tick(0.1)


def test_gather_draw_translates_to_top_left():
    obj = GameObject(Rect(3, 4, 5, 5))
    probe = obj.add_component(_GoProbe())
    marker = object()
    obj.gather_draw(marker)
    ((manager, transform),) = probe.transforms
    assert manager is marker
    assert transform.apply(Vec2(0, 0)) == Vec2(3.0, 4.0)


def test_geometry_helpers():
    obj = GameObject(Rect(10, 20, 6, 8))
    assert obj.top_left() == Vec2(10, 20)
    assert obj.bounds_size() == Vec2(6, 8)
    assert obj.centre() == Vec2(13, 24)


def test_default_channel_and_persistence():
    obj = GameObject(Rect(0, 0, 1, 1))
    assert obj.collision_channel() == "None"
    assert obj.is_persistent() is False


def test_destroy_removes_and_invalidates():
    bucket = ObjectBucket()
    obj = GameObject(Rect(0, 0, 1, 1))
    bucket.add_object(obj)
    ref = obj.weak_ref()
    assert ref.get() is obj
    obj.destroy()
    assert obj not in bucket
    assert ref.get() is None