"""
Unit tests for the ORM models.
"""

import uuid

from src.taskboard.core.ids import PublicIdPrefix, generate_public_id
from src.taskboard.core.models import Priority, Todo, User
from src.taskboard.core.models.base import BaseModel


class TestBaseModel:
    def test_base_model_abstract(self):
        assert BaseModel.__abstract__ is True

    def test_equality_by_id(self):
        uid = uuid.uuid4()
        a = User(id=uid, pid="user_a", username="a", display_name="A")
        b = User(id=uid, pid="user_a", username="a", display_name="A")
        assert a == b
        assert a != User(id=uuid.uuid4(), pid="user_b", username="b", display_name="B")

    def test_unsaved_instances_are_not_equal(self):
        assert User(username="a", display_name="A") != User(username="a", display_name="A")


class TestPublicIds:
    def test_prefix_and_length(self):
        pid = generate_public_id(PublicIdPrefix.TODO)
        prefix, _, rest = pid.partition("_")
        assert prefix == "todo"
        assert len(rest) == 32
        int(rest, 16)

    def test_unique(self):
        assert len({generate_public_id(PublicIdPrefix.NOTE) for _ in range(100)}) == 100


class TestUser:
    def test_mention(self):
        assert User(username="maria", display_name="Maria Garcia").mention == "@maria"

    def test_repr(self):
        assert repr(User(username="maria", display_name="Maria Garcia")) == "<User(username='maria')>"


class TestTodo:
    def test_toggle(self):
        todo = Todo(title="t", user_pid="user_1", completed=False)
        assert todo.toggle() is True
        assert todo.completed is True
        assert todo.toggle() is False

    def test_repr_truncates(self):
        todo = Todo(title="x" * 40, user_pid="user_1")
        assert "x" * 30 + "..." in repr(todo)

    def test_priority_values(self):
        assert [p.value for p in Priority] == ["high", "medium", "low"]


async def test_defaults_applied_on_insert(test_session, users):
    todo = Todo(title="Buy milk", user_pid=users["alex"].pid)
    test_session.add(todo)
    await test_session.commit()
    await test_session.refresh(todo)

    assert todo.pid.startswith("todo_")
    assert todo.priority == "medium"
    assert todo.completed is False
    assert todo.created_at is not None
    assert todo.tags is None


async def test_string_list_roundtrip_on_sqlite(test_session, users):
    todo = Todo(title="Tags", user_pid=users["alex"].pid, tags=["work", "home"], mentions=["@maria"])
    test_session.add(todo)
    await test_session.commit()
    test_session.expire(todo)
    await test_session.refresh(todo)

    assert todo.tags == ["work", "home"]
    assert todo.mentions == ["@maria"]
