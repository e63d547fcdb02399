"""Single-target callbacks and multicast events built on delegates."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar, Union

from silhouette.reference import WeakRef

R = TypeVar("R")

# A method is either a function taking the receiver first, or a method name.
Method = Union[Callable[..., Any], str]


def _call_method(receiver: Any, method: Method, args: tuple) -> Any:
    if isinstance(method, str):
        return getattr(receiver, method)(*args)
    return method(receiver, *args)


class Delegate:
    """Calls a method on a plain receiver.

    Whoever binds it must unbind it once the receiver is no longer usable.
    """

    __slots__ = ("_receiver", "_method")

    def __init__(self, receiver: Any, method: Method):
        self._receiver = receiver
        self._method = method

    def execute(self, *args: Any) -> Any:
        return _call_method(self._receiver, self._method, args)

    def bound_object(self) -> Any:
        return self._receiver

    def is_valid(self) -> bool:
        return self._receiver is not None


class WeakRefDelegate:
    """Calls a method on the target of a weak reference.

    Safe to bind and forget: it becomes invalid with the reference.
    """

    __slots__ = ("_receiver", "_method")

    def __init__(self, receiver: WeakRef, method: Method):
        self._receiver = receiver
        self._method = method

    def execute(self, *args: Any) -> Any:
        target = self._receiver.get()
        if target is None:
            raise ReferenceError("delegate receiver is no longer valid")
        return _call_method(target, self._method, args)

    def bound_object(self) -> Any:
        return self._receiver.get()

    def is_valid(self) -> bool:
        return self._receiver.is_valid()


class FreeDelegate:
    """Calls a plain function."""

    __slots__ = ("_function",)

    def __init__(self, function: Optional[Callable[..., Any]]):
        self._function = function

    def execute(self, *args: Any) -> Any:
        return self._function(*args)

    def bound_object(self) -> Any:
        return self._function

    def is_valid(self) -> bool:
        return self._function is not None


AnyDelegate = Union[Delegate, WeakRefDelegate, FreeDelegate]


class CallbackEvent(Generic[R]):
    """An event bound to at most one delegate whose result is returned."""

    def __init__(self):
        self._delegate: Optional[AnyDelegate] = None

    def bind_delegate(self, receiver: Any, method: Method) -> None:
        self._delegate = Delegate(receiver, method)

    def bind_weak_ref(self, receiver: WeakRef, method: Method) -> None:
        self._delegate = WeakRefDelegate(receiver, method)

    def bind_free_function(self, function: Callable[..., R]) -> None:
        self._delegate = FreeDelegate(function)

    def clear(self) -> None:
        self._delegate = None

    def is_bound(self) -> bool:
        return self._delegate is not None and self._delegate.is_valid()

    def execute(self, *args: Any) -> Optional[R]:
        """Run the bound delegate; return None when nothing valid is bound."""
        if self.is_bound():
            return self._delegate.execute(*args)
        return None


def _remove_swap(items: list, index: int) -> None:
    """Remove items[index] by moving the last item into its place."""
    items[index] = items[-1]
    items.pop()


class MulticastEvent:
    """An event that calls every bound delegate; results are discarded."""

    def __init__(self):
        self._delegates: list[AnyDelegate] = []

    def __len__(self) -> int:
        return len(self._delegates)

    def add_delegate(self, receiver: Any, method: Method) -> None:
        self._delegates.append(Delegate(receiver, method))

    def add_weak_ref(self, receiver: WeakRef, method: Method) -> None:
        self._delegates.append(WeakRefDelegate(receiver, method))

    def bind_free_function(self, function: Callable[..., Any]) -> None:
        self._delegates.append(FreeDelegate(function))

    def _remove_bound_to(self, target: Any) -> None:
        self._delegates = [d for d in self._delegates if d.bound_object() is not target]

    def remove_delegates_for_receiver(self, receiver: Any) -> None:
        self._remove_bound_to(receiver)

    def remove_delegate_for_free_function(self, function: Callable[..., Any]) -> None:
        self._remove_bound_to(function)

    def clear(self) -> None:
        self._delegates.clear()

    def broadcast(self, *args: Any) -> None:
        """Call every valid delegate; invalid ones are dropped on the way.

        A dropped delegate is replaced by the last one in the list, which is
        then called in its place. Delegates added during the broadcast are
        called too.
        """
        i = 0
        while i < len(self._delegates):
            delegate = self._delegates[i]
            if delegate is not None and delegate.is_valid():
                delegate.execute(*args)
                i += 1
            else:
                _remove_swap(self._delegates, i)