"""Named runtime type descriptions with single or multiple inheritance."""

from __future__ import annotations

from typing import ClassVar, Iterable

from silhouette.namehash import NameHash


def _as_name(value: NameHash | str) -> NameHash:
    return value if isinstance(value, NameHash) else NameHash(value)


class TypeInfoStore:
    """Registry of type descriptions by name."""

    _default: ClassVar[TypeInfoStore | None] = None

    def __init__(self):
        self._types: dict[NameHash, TypeInfo] = {}

    @classmethod
    def default(cls) -> TypeInfoStore:
        if cls._default is None:
            cls._default = cls()
        return cls._default

    def register(self, type_info: TypeInfo) -> None:
        """Add a type; an already registered name keeps its first entry."""
        self._types.setdefault(type_info.name, type_info)

    def find(self, type_name: NameHash | str) -> TypeInfo | None:
        return self._types.get(_as_name(type_name))


class TypeInfo:
    """A type name plus the names of its parent types."""

    def __init__(
        self,
        type_name: NameHash | str,
        parent_types: Iterable[NameHash | str] = (),
        store: TypeInfoStore | None = None,
    ):
        self.name = _as_name(type_name)
        self.parent_types = tuple(_as_name(p) for p in parent_types)
        self.store = store if store is not None else TypeInfoStore.default()
        self.store.register(self)

    def is_or_inherits_from(self, type_to_check: NameHash | str) -> bool:
        return self.name == _as_name(type_to_check) or self.inherits_from(type_to_check)

    def inherits_from(self, possible_parent_type: NameHash | str) -> bool:
        wanted = _as_name(possible_parent_type)
        for parent in self.parent_types:
            if parent == wanted:
                return True
            parent_info = self.store.find(parent)
            if parent_info is not None and parent_info.inherits_from(wanted):
                return True
        return False

    def __repr__(self) -> str:
        return f"TypeInfo({self.name!r}, parents={list(self.parent_types)!r})"


class TypeInfoProvider:
    """Base for classes that carry a registered TypeInfo.

    Every subclass is registered in the default store under its class name.
    Its parents are the TypeInfoProvider subclasses it derives from, unless
    given explicitly with the ``type_parents`` class keyword.
    """

    type_info: ClassVar[TypeInfo]

    def __init_subclass__(cls, type_parents: Iterable[str] | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if type_parents is None:
            type_parents = [
                base.__name__
                for base in cls.__bases__
                if issubclass(base, TypeInfoProvider) and base is not TypeInfoProvider
            ]
        cls.type_info = TypeInfo(cls.__name__, type_parents, TypeInfoStore.default())

    def type_name(self) -> NameHash:
        return self.type_info.name

    @classmethod
    def static_type(cls) -> NameHash:
        return cls.type_info.name


def downcast(obj: TypeInfoProvider | None, new_type: type[TypeInfoProvider]):
    """Return obj if its type is or inherits from new_type, otherwise None."""
    if obj is not None and obj.type_info.is_or_inherits_from(new_type.static_type()):
        return obj
    return None