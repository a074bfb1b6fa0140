"""Task entity and API schema tests."""

import pydantic
import pytest

from tasklist.models import Task, TaskCreate, TaskOut


class TestTaskEquality:
    def test_transient_tasks_only_equal_themselves(self):
        first = Task("Buy milk")
        second = Task("Buy milk")
        assert first == first
        assert first != second

    def test_persisted_tasks_compare_by_id(self):
        assert Task("a", id=7) == Task("b", id=7)
        assert Task("a", id=7) != Task("a", id=8)

    def test_transient_never_equals_persisted(self):
        assert Task("a") != Task("a", id=1)
        assert Task("a", id=1) != Task("a")

    def test_hash_follows_id(self):
        assert hash(Task("a", id=3)) == hash(Task("b", id=3))
        assert len({Task("a", id=3), Task("b", id=3), Task("c", id=4)}) == 2

    def test_not_equal_to_other_types(self):
        assert Task("a", id=1) != 1
        assert Task("a") != "a"


class TestTaskLifecycle:
    def test_new_task_is_transient(self):
        task = Task("Buy milk")
        assert task.id is None
        assert not task.is_persisted

    def test_assign_id_once(self):
        task = Task("Buy milk")
        task.assign_id(5)
        assert task.id == 5
        assert task.is_persisted
        with pytest.raises(ValueError):
            task.assign_id(6)
        assert task.id == 5

    def test_id_is_read_only(self):
        task = Task("Buy milk", id=1)
        with pytest.raises(AttributeError):
            task.id = 2

    def test_name_is_settable(self):
        task = Task("Buy milk", id=1)
        task.name = "Buy bread"
        assert task.name == "Buy bread"

    def test_repr(self):
        assert repr(Task("Buy milk", id=4)) == "Task[id=4, name=Buy milk]"
        assert repr(Task("Buy milk")) == "Task[id=None, name=Buy milk]"


class TestSchemas:
    def test_task_create_requires_non_empty_name(self):
        assert TaskCreate(name="x").name == "x"
        with pytest.raises(pydantic.ValidationError):
            TaskCreate(name="")
        with pytest.raises(pydantic.ValidationError):
            TaskCreate()

    def test_task_out_from_entity(self):
        out = TaskOut.model_validate(Task("Buy milk", id=9))
        assert out.model_dump() == {"id": 9, "name": "Buy milk"}
