from types import SimpleNamespace

import pytest

from silhouette.component import Component, GameSystem
from silhouette.namehash import NameHash
from silhouette.typeinfo import downcast


class _CompProbe(Component):
    def __init__(self):
        super().__init__()
        self.added_to = []

    def on_added_to_object(self, owner):
        self.added_to.append(owner)


class _SysProbe(GameSystem):
    pass


def test_attach_sets_owner_and_notifies():
    owner = SimpleNamespace(world="the world")
    plain = Component()
    Component.attach(plain, owner)
    assert plain.owner is owner

    probe = _CompProbe()
    Component.attach(probe, owner)
    assert probe.owner is owner
    assert probe.added_to == [owner]


def test_attach_none_does_not_notify():
    probe = _CompProbe()
    Component.attach(probe, None)
    assert probe.owner is None
    assert probe.added_to == []


def test_world_comes_from_owner():
    world = object()
    component = Component()
    Component.attach(component, SimpleNamespace(world=world))
    assert component.world is world


def test_world_without_owner_raises():
    with pytest.raises(RuntimeError):
        _ = Component().world


def test_component_type_names():
    assert Component.static_type() == NameHash("Component")
    assert _CompProbe().type_name() == NameHash("_CompProbe")


def test_component_subclass_inherits_from_component():
    assert _CompProbe.type_info.inherits_from("Component")
    assert not Component.type_info.inherits_from("_CompProbe")


def test_downcast_component():
    probe = _CompProbe()
    assert downcast(probe, Component) is probe
    assert downcast(Component(), _CompProbe) is None


def test_game_system_type_info():
    assert GameSystem.static_type() == NameHash("GameSystem")
    assert _SysProbe.type_info.is_or_inherits_from("GameSystem")
    assert not _SysProbe.type_info.inherits_from("Component")