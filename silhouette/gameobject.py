"""Game objects: pixel-exact bounds, components and collision-aware movement."""

from __future__ import annotations

from typing import Any, Optional, TypeVar, Union

from silhouette.component import Component
from silhouette.hitresult import HitResult
from silhouette.mathutil import Rect, Transform, Vec2, sign, to_float_vec
from silhouette.namehash import NameHash
from silhouette.reference import RefTracker, WeakRef

C = TypeVar("C", bound=Component)


class GameObject:
    """An object in the world with integer bounds and a list of components.

    ``world`` is set by the world that adds the object, ``bucket`` by the
    bucket that holds it and ``cached_grid_coords`` by the world grid.
    """

    def __init__(self, bounds: Rect):
        self.bounds = bounds
        self.ref_tracker = RefTracker()
        self.components: list[Component] = []
        self.world: Optional[Any] = None
        self.bucket: Optional[Any] = None
        self.cached_grid_coords = Vec2(0, 0)
        self._remainder_x = 0.0
        self._remainder_y = 0.0

    def weak_ref(self) -> WeakRef:
        return self.ref_tracker.make_reference(self)

    def init(self) -> None:
        """Called after the object has been added to the world."""

    def game_object_tick(self, delta_time: float) -> None:
        """Tick every component, then the object itself."""
        if self.world is None:
            raise RuntimeError("object has not been added to a world")
        if self.bucket is None:
            raise RuntimeError("object is not held by a bucket")
        for component in self.components:
            component.tick(delta_time)
        self.tick(delta_time)

    def tick(self, delta_time: float) -> None:
        """Per-frame behaviour of a derived object."""

    def gather_draw(self, render_manager: Any) -> None:
        transform = Transform.identity().translated(to_float_vec(self.top_left()))
        for component in self.components:
            component.gather_draw(render_manager, transform)

    def add_component(self, component: C) -> C:
        if component is None:
            raise ValueError("component must not be None")
        self.components.append(component)
        component.attach(self)
        return component

    def find_component_by_type(self, type_name: Union[NameHash, str]) -> Optional[Component]:
        """The first component whose exact type name matches."""
        wanted = type_name if isinstance(type_name, NameHash) else NameHash(type_name)
        return next((c for c in self.components if c.type_name() == wanted), None)

    def find_component(self, component_type: type[C]) -> Optional[C]:
        return self.find_component_by_type(component_type.static_type())

    def find_all_components(self, component_type: type[C]) -> list[C]:
        wanted = component_type.static_type()
        return [c for c in self.components if c.type_name() == wanted]

    def is_persistent(self) -> bool:
        """Persistent objects are ticked and drawn regardless of position."""
        return False

    def collision_channel(self) -> NameHash:
        """"None" is never detected; "Solid" blocks movement."""
        return NameHash("None")

    def top_left(self) -> Vec2:
        return Vec2(self.bounds.left, self.bounds.top)

    def centre(self) -> Vec2:
        return Vec2(
            self.bounds.left + self.bounds.width // 2,
            self.bounds.top + self.bounds.height // 2,
        )

    def bounds_size(self) -> Vec2:
        return Vec2(self.bounds.width, self.bounds.height)

    def try_move_x(self, dx: Union[int, float]) -> HitResult:
        """Move one pixel at a time, stopping at anything solid.

        A float move accumulates until at least a whole pixel can be moved.
        """
        if not isinstance(dx, int):
            self._remainder_x += dx
            step = int(self._remainder_x)
            if step == 0:
                return HitResult.no_hit()
            self._remainder_x -= step
            dx = step
        return self._move_pixels(dx, 0)

    def try_move_y(self, dy: Union[int, float]) -> HitResult:
        """As try_move_x, along the vertical axis."""
        if not isinstance(dy, int):
            self._remainder_y += dy
            step = int(self._remainder_y)
            if step == 0:
                return HitResult.no_hit()
            self._remainder_y -= step
            dy = step
        return self._move_pixels(0, dy)

    def _move_pixels(self, dx: int, dy: int) -> HitResult:
        step_x, step_y = sign(dx), sign(dy)
        remaining = dx if dx != 0 else dy
        step = sign(remaining)
        result = HitResult.no_hit()
        moved = False
        while remaining != 0:
            if self.world is None:
                raise RuntimeError("object has not been added to a world")
            candidate = self.bounds.offset(step_x, step_y)
            result = self.world.check_for_solid(candidate, self)
            if result.is_hit():
                break
            self.bounds = candidate
            remaining -= step
            moved = True
        if moved and not self.is_persistent():
            self.world.update_object_position(self)
        return result

    def destroy(self) -> None:
        """Remove the object from its bucket, invalidating all references to it."""
        if self.bucket is not None:
            self.bucket.destroy_object(self)