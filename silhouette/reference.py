"""Weak references that are invalidated explicitly by an owner or tracker."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")
S = TypeVar("S")


class ControlBlock:
    """Shared liveness flag behind a family of weak references."""

    __slots__ = ("alive",)

    def __init__(self):
        self.alive = True

    def notify_dead(self) -> None:
        self.alive = False


class WeakRef(Generic[T]):
    """A reference that becomes empty once its control block dies."""

    __slots__ = ("_resource", "_control_block")

    def __init__(
        self,
        control_block: Optional[ControlBlock] = None,
        resource: Optional[T] = None,
    ):
        self._control_block = control_block
        self._resource = resource

    def is_valid(self) -> bool:
        return (
            self._resource is not None
            and self._control_block is not None
            and self._control_block.alive
        )

    def get(self) -> Optional[T]:
        return self._resource if self.is_valid() else None

    def reset(self) -> None:
        self._resource = None
        self._control_block = None

    def __bool__(self) -> bool:
        return self.is_valid()

    def __eq__(self, other) -> bool:
        if isinstance(other, WeakRef):
            # Validity is checked so a dead ref never matches a live one.
            valid = self.is_valid()
            return (valid and self._resource is other._resource) or (
                not valid and not other.is_valid()
            )
        if isinstance(other, RefOwner):
            return NotImplemented
        if other is None:
            return not self.is_valid()
        return (self.is_valid() or self._resource is None) and self._resource is other

    __hash__ = None

    def __repr__(self) -> str:
        state = "valid" if self.is_valid() else "invalid"
        return f"WeakRef({state}, {self._resource!r})"


class RefOwner(Generic[T]):
    """Owns a resource and hands out weak references to it."""

    def __init__(self, resource: Optional[T] = None):
        self._resource = resource
        self._control_block = ControlBlock() if resource is not None else None

    def get(self) -> Optional[T]:
        return self._resource

    def is_valid(self) -> bool:
        return self._resource is not None

    def get_reference(self) -> WeakRef[T]:
        return WeakRef(self._control_block, self._resource)

    def make_sub_reference(self, subobject: S) -> WeakRef[S]:
        """A reference to an object that lives exactly as long as the resource."""
        return WeakRef(self._control_block, subobject)

    def destroy(self) -> None:
        """Release the resource and invalidate every reference issued."""
        if self.is_valid():
            self._control_block.notify_dead()
            self._resource = None

    def __bool__(self) -> bool:
        return self.is_valid()

    def __eq__(self, other) -> bool:
        if isinstance(other, RefOwner):
            return self._resource is other._resource
        if isinstance(other, WeakRef):
            return self.get_reference() == other
        return self._resource is other

    __hash__ = None

    def __enter__(self) -> RefOwner[T]:
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()


class RefTracker:
    """Issues references to objects that share the tracker's lifetime."""

    def __init__(self):
        self._control_block = ControlBlock()

    def make_reference(self, resource: T) -> WeakRef[T]:
        return WeakRef(self._control_block, resource)

    def invalidate(self) -> None:
        """End the tracked lifetime, invalidating every reference issued."""
        self._control_block.notify_dead()

    @property
    def alive(self) -> bool:
        return self._control_block.alive

    def __enter__(self) -> RefTracker:
        return self

    def __exit__(self, *exc_info) -> None:
        self.invalidate()