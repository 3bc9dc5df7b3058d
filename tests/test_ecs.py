import pytest

from pixelblast.ecs import Component, Entity, Manager, component_type_id


class Recorder(Component):
    def __init__(self, log, name="rec"):
        self.log = log
        self.name = name

    def init(self):
        self.log.append((self.name, "init", self.entity))

    def update(self):
        self.log.append((self.name, "update"))

    def draw(self):
        self.log.append((self.name, "draw"))


class OtherRecorder(Recorder):
    pass


class Unused(Component):
    pass


def test_type_id_is_stable_and_assigned_in_order():
    class FirstFresh(Component):
        pass

    class SecondFresh(Component):
        pass

    first = component_type_id(FirstFresh)
    second = component_type_id(SecondFresh)
    assert first >= 0
    assert second > first
    assert component_type_id(FirstFresh) == first
    assert component_type_id(SecondFresh) == second


def test_type_ids_differ_between_types():
    assert component_type_id(Recorder) != component_type_id(OtherRecorder)


def test_add_component_attaches_and_initialises():
    log = []
    entity = Entity()
    comp = entity.add_component(Recorder, log, name="a")
    assert comp.entity is entity
    assert log == [("a", "init", entity)]
    assert entity.has_component(Recorder)
    assert entity.get_component(Recorder) is comp


def test_missing_component():
    entity = Entity()
    assert not entity.has_component(Unused)
    with pytest.raises(KeyError):
        entity.get_component(Unused)


def test_update_and_draw_follow_insertion_order():
    log = []
    entity = Entity()
    entity.add_component(Recorder, log, "first")
    entity.add_component(OtherRecorder, log, "second")
    log.clear()
    entity.update()
    entity.draw()
    assert log == [
        ("first", "update"),
        ("second", "update"),
        ("first", "draw"),
        ("second", "draw"),
    ]


def test_adding_same_type_twice_keeps_both_but_lookup_gives_latest():
    log = []
    entity = Entity()
    entity.add_component(Recorder, log, "old")
    newer = entity.add_component(Recorder, log, "new")
    assert entity.get_component(Recorder) is newer
    assert len(entity.components) == 2


def test_destroy_marks_inactive():
    entity = Entity()
    assert entity.active
    entity.destroy()
    assert not entity.active


def test_manager_add_entity_and_refresh():
    manager = Manager()
    keep = manager.add_entity()
    gone = manager.add_entity()
    assert manager.entities == (keep, gone)
    gone.destroy()
    manager.refresh()
    assert manager.entities == (keep,)


def test_manager_refresh_keeps_active_entities_in_order():
    manager = Manager()
    entities = [manager.add_entity() for _ in range(4)]
    entities[1].destroy()
    manager.refresh()
    assert manager.entities == (entities[0], entities[2], entities[3])


def test_manager_update_and_draw_reach_components():
    log = []
    manager = Manager()
    manager.add_entity().add_component(Recorder, log, "x")
    log.clear()
    manager.update()
    manager.draw()
    assert log == [("x", "update"), ("x", "draw")]