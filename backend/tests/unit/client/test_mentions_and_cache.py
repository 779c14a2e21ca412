from types import SimpleNamespace

import pytest

from src.taskboard.client.cache import QueryCache
from src.taskboard.client.mentions import extract_mentions, filter_users_for_mentions


def _users(*names):
    return [SimpleNamespace(username=name) for name in names]


class TestMentions:
    def test_extract(self):
        assert extract_mentions("ping @maria and @Alex_2, not me@") == ["maria", "Alex_2"]
        assert extract_mentions("nothing here") == []

    def test_requires_at_prefix(self):
        assert filter_users_for_mentions(_users("alex"), "alex") == []

    def test_case_insensitive_substring(self):
        users = _users("alex", "maria", "james", "jamal")
        assert [u.username for u in filter_users_for_mentions(users, "@JA")] == ["james", "jamal"]

    def test_excludes_already_mentioned(self):
        users = _users("james", "jamal")
        found = filter_users_for_mentions(users, "@ja", already_mentioned=["james"])
        assert [u.username for u in found] == ["jamal"]

    def test_at_most_five(self):
        users = _users(*[f"user{i}" for i in range(8)])
        assert len(filter_users_for_mentions(users, "@")) == 5


class TestQueryCache:
    def test_invalidate_by_prefix(self):
        cache = QueryCache()
        cache.set(("todos", None), [1])
        cache.set(("todos", "user_1"), [2])
        cache.set(("todo", "todo_1"), 3)
        cache.set(("users",), [])

        assert cache.invalidate(("todos",)) == 2
        assert ("todos", None) not in cache
        assert ("todo", "todo_1") in cache
        assert cache.invalidate(("todo", "todo_1")) == 1
        assert len(cache) == 1

    def test_clear_and_default(self):
        cache = QueryCache()
        cache.set(("users",), [])
        cache.clear()
        assert cache.get(("users",), "none") == "none"

    @pytest.mark.asyncio
    async def test_fetch_loads_once(self):
        cache = QueryCache()
        calls = []

        async def loader():
            calls.append(1)
            return "value"

        assert await cache.fetch(("user", "u1"), loader) == "value"
        assert await cache.fetch(("user", "u1"), loader) == "value"
        assert len(calls) == 1
