"""Containers that own game objects and hand out weak references to them."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

from silhouette.mathutil import Rect
from silhouette.namehash import NameHash
from silhouette.reference import WeakRef


def _channel(value: Union[NameHash, str]) -> NameHash:
    return value if isinstance(value, NameHash) else NameHash(value)


class ObjectBucket:
    """Holds game objects and controls their lifetime.

    Removal swaps the last object into the freed slot, so order is not kept.
    """

    def __init__(self):
        self._objects: list = []

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator:
        return iter(list(self._objects))

    def __contains__(self, obj) -> bool:
        return any(o is obj for o in self._objects)

    def _index_of(self, obj) -> Optional[int]:
        return next((i for i, o in enumerate(self._objects) if o is obj), None)

    def _remove_at(self, index: int) -> None:
        self._objects[index] = self._objects[-1]
        self._objects.pop()

    def add_object(self, obj) -> None:
        if obj is None:
            raise ValueError("object must not be None")
        if obj in self:
            raise ValueError("object is already in this bucket")
        self._objects.append(obj)
        obj.bucket = self

    def destroy_object(self, obj) -> None:
        """Remove the object and invalidate every reference to it."""
        index = self._index_of(obj)
        if index is None:
            return
        self._remove_at(index)
        obj.bucket = None
        obj.ref_tracker.invalidate()

    def transfer_object(self, obj, new_bucket: ObjectBucket) -> None:
        """Move the object to new_bucket if this bucket holds it."""
        index = self._index_of(obj)
        if index is None:
            return
        self._remove_at(index)
        new_bucket.add_object(obj)

    def gather_all_objects(self) -> list[WeakRef]:
        return [obj.weak_ref() for obj in self._objects]

    def gather_objects_by_channel(self, channel: Union[NameHash, str]) -> list[WeakRef]:
        wanted = _channel(channel)
        return [obj.weak_ref() for obj in self._objects if obj.collision_channel() == wanted]

    def gather_objects_hit_by_channel(
        self, rect: Rect, channel: Union[NameHash, str]
    ) -> list[WeakRef]:
        wanted = _channel(channel)
        return [
            obj.weak_ref()
            for obj in self._objects
            if obj.collision_channel() == wanted and obj.bounds.intersects(rect)
        ]

    def find_first_hit_by_channel(
        self, rect: Rect, channel: Union[NameHash, str], ignore: Any = None
    ) -> WeakRef:
        """A reference to the first object of the channel overlapping rect.

        The ignored object is skipped; an empty reference means no hit.
        """
        wanted = _channel(channel)
        for obj in self._objects:
            if (
                obj is not ignore
                and obj.collision_channel() == wanted
                and obj.bounds.intersects(rect)
            ):
                return obj.weak_ref()
        return WeakRef()

    def gather_draw(self, render_manager: Any) -> None:
        for obj in self._objects:
            obj.gather_draw(render_manager)