"""Query cache keyed by tuples, invalidated by key prefix."""

from typing import Any, Callable, Awaitable, Dict, Hashable, Tuple

QueryKey = Tuple[Hashable, ...]

_MISSING = object()


class QueryCache:
    """In-memory result cache for client queries.

    Keys look like ``("todos", user_pid)`` or ``("todo", pid)``.
    ``invalidate(("todos",))`` drops every key starting with ``"todos"``.
    """

    def __init__(self) -> None:
        self._entries: Dict[QueryKey, Any] = {}

    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: QueryKey, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: QueryKey, value: Any) -> None:
        self._entries[key] = value

    def invalidate(self, prefix: QueryKey) -> int:
        """Drop every entry whose key starts with ``prefix``; return how many."""
        size = len(prefix)
        stale = [key for key in self._entries if key[:size] == prefix]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()

    async def fetch(self, key: QueryKey, loader: Callable[[], Awaitable[Any]]) -> Any:
        """Return the cached value or load, store and return it."""
        value = self._entries.get(key, _MISSING)
        if value is _MISSING:
            value = await loader()
            self._entries[key] = value
        return value
