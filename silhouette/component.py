"""Base classes for object components and world-wide game systems."""

from __future__ import annotations

from typing import Any, Optional

from silhouette.mathutil import Transform
from silhouette.typeinfo import TypeInfoProvider


class Component(TypeInfoProvider):
    """A piece of behaviour attached to a game object."""

    owner: Optional[Any] = None

    def __init__(self):
        self.owner = None

    def attach(self, owner: Optional[Any]) -> None:
        """Set the owning object; a non-empty owner is told via on_added_to_object."""
        self.owner = owner
        if owner is not None:
            self.on_added_to_object(owner)

    def on_added_to_object(self, owner: Any) -> None:
        """Called when the component is attached to an object."""

    @property
    def world(self) -> Any:
        """The world of the owning object."""
        if self.owner is None:
            raise RuntimeError("component is not attached to an object")
        return self.owner.world

    def tick(self, delta_time: float) -> None:
        """Advance the component by one frame."""

    def gather_draw(self, render_manager: Any, transform: Transform) -> None:
        """Queue anything the component draws."""


class GameSystem(TypeInfoProvider):
    """A singleton-like service owned by a world."""

    def tick(self, delta_time: float) -> None:
        """Advance the system by one frame."""