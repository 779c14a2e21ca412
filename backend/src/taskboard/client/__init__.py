"""Python client for the Taskboard API plus local list helpers."""

from .api import ApiClientError, TaskboardClient
from .cache import QueryCache
from .filters import (
    Page,
    PaginationInfo,
    SortOption,
    TodoFilters,
    TodoListView,
    filter_todos,
    get_tag_counts,
    paginate,
    priority_to_number,
    sort_todos,
)
from .mentions import extract_mentions, filter_users_for_mentions

__all__ = [
    "ApiClientError",
    "TaskboardClient",
    "QueryCache",
    "Page",
    "PaginationInfo",
    "SortOption",
    "TodoFilters",
    "TodoListView",
    "filter_todos",
    "sort_todos",
    "paginate",
    "priority_to_number",
    "get_tag_counts",
    "extract_mentions",
    "filter_users_for_mentions",
]
