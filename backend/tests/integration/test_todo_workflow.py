"""End-to-end workflow: fetch through the client, narrow locally, mutate, refetch."""

from httpx import ASGITransport, AsyncClient

from src.taskboard.client import SortOption, TaskboardClient, TodoFilters, TodoListView


async def test_board_workflow(test_app, users):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test/api/v1") as http:
        api = TaskboardClient(http_client=http)
        alex = users["alex"].pid

        for i in range(12):
            await api.create_todo(
                {
                    "title": f"Task {i}",
                    "userPid": alex,
                    "priority": ["low", "medium", "high"][i % 3],
                    "tags": ["work"] if i % 2 else ["home"],
                    "mentions": ["@maria"] if i % 4 == 0 else [],
                }
            )

        view = TodoListView(items_per_page=5)
        view.set_todos(await api.fetch_todos(alex))
        assert view.total_pages == 3
        view.go_to_page(3)
        assert len(view.page.items) == 2

        view.set_filters(TodoFilters(user="maria"))
        assert view.current_page == 1
        assert [t.title for t in view.visible] == ["Task 8", "Task 4", "Task 0"]

        view.set_sort(SortOption.PRIORITY_DESC)
        assert [t.priority for t in view.visible] == ["high", "medium", "low"]

        target = view.visible[0]
        await api.create_note({"content": "on it", "todoPid": target.pid, "userPid": users["maria"].pid})
        await api.toggle_todo_completion(target.pid)

        refreshed = await api.fetch_todo_by_pid(target.pid)
        assert refreshed.completed is True
        assert [n.content for n in refreshed.notes] == ["on it"]

        await api.delete_todo(target.pid)
        assert len(await api.fetch_todos(alex)) == 11
