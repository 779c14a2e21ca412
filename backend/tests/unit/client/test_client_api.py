"""TaskboardClient against the in-process app."""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from src.taskboard.client import ApiClientError, TaskboardClient
from src.taskboard.core.schemas import TodoCreate, TodoUpdate


@pytest.fixture
async def client(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test/api/v1") as http:
        async with TaskboardClient(http_client=http) as api:
            yield api


async def test_users(client, users):
    everyone = await client.fetch_users()
    assert [u.username for u in everyone] == ["alex", "jamal", "james", "maria", "sarah"]
    assert ("users",) in client.cache

    sarah = await client.fetch_user_by_pid(users["sarah"].pid)
    assert sarah.display_name == "Sarah Chen"


async def test_unknown_user_raises(client, users):
    with pytest.raises(ApiClientError) as exc:
        await client.fetch_user_by_pid("user_missing")
    assert str(exc.value) == "Error fetching user: User not found"
    assert exc.value.status_code == 404
    assert exc.value.errors == ["User not found"]


async def test_create_invalidates_todo_lists(client, users):
    assert await client.fetch_todos() == []
    assert ("todos", None) in client.cache

    created = await client.create_todo(TodoCreate(title="Ship it", userPid=users["alex"].pid, tags=["work"]))
    assert created.tags == ["work"]
    assert ("todos", None) not in client.cache

    todos = await client.fetch_todos(users["alex"].pid)
    assert [t.pid for t in todos] == [created.pid]


async def test_update_toggle_delete(client, users):
    created = await client.create_todo({"title": "T", "userPid": users["alex"].pid})
    await client.fetch_todo_by_pid(created.pid)
    await client.fetch_todos()

    updated = await client.update_todo(created.pid, TodoUpdate(priority="high"))
    assert updated.priority == "high"
    assert ("todo", created.pid) not in client.cache
    assert ("todos", None) not in client.cache

    toggled = await client.toggle_todo_completion(created.pid)
    assert toggled.completed is True

    await client.fetch_todo_by_pid(created.pid)
    await client.delete_todo(created.pid)
    assert ("todo", created.pid) not in client.cache

    with pytest.raises(ApiClientError, match="Error deleting todo: Todo not found"):
        await client.delete_todo(created.pid)


async def test_notes_invalidate(client, users):
    todo = await client.create_todo({"title": "T", "userPid": users["alex"].pid})
    assert await client.fetch_notes_by_todo_pid(todo.pid) == []
    await client.fetch_todos()

    note = await client.create_note({"content": "hi", "todoPid": todo.pid, "userPid": users["maria"].pid})
    assert ("notes", todo.pid) not in client.cache
    assert ("todos", None) not in client.cache

    notes = await client.fetch_notes_by_todo_pid(todo.pid)
    assert [n.pid for n in notes] == [note.pid]


async def test_validation_errors_surface(client, users):
    with pytest.raises(ApiClientError) as exc:
        await client.create_todo({"userPid": users["alex"].pid})
    assert exc.value.status_code == 400
    assert str(exc.value) == "Error creating todo: Title is required"


async def test_transport_failure():
    def boom(request):
        raise httpx.ConnectError("refused", request=request)

    http = AsyncClient(transport=httpx.MockTransport(boom), base_url="http://test/api/v1")
    async with http:
        api = TaskboardClient(http_client=http)
        with pytest.raises(ApiClientError, match="Error fetching todos: refused"):
            await api.fetch_todos()


async def test_create_note_refreshes_cached_todo(client, users):
    todo = await client.create_todo({"title": "T", "userPid": users["alex"].pid})
    assert (await client.fetch_todo_by_pid(todo.pid)).notes == []

    await client.create_note({"content": "first", "todoPid": todo.pid, "userPid": users["maria"].pid})

    assert ("todo", todo.pid) not in client.cache
    refreshed = await client.fetch_todo_by_pid(todo.pid)
    assert [n.content for n in refreshed.notes] == ["first"]
