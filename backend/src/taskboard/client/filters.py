"""
Local filter, sort and paginate for a list of todos.

The functions here are pure: inputs are never mutated, and they work
on any objects exposing ``priority``, ``tags``, ``mentions``, ``title``,
``description`` and ``created_at``.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Generic, List, Optional, Sequence, TypeVar, Union

from ..config import get_settings

T = TypeVar("T")

DEFAULT_ITEMS_PER_PAGE = 5

PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}


class SortOption(str, Enum):
    """How to order a todo list."""

    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"
    PRIORITY_ASC = "priority-asc"
    PRIORITY_DESC = "priority-desc"


@dataclass(frozen=True)
class TodoFilters:
    """Filters that compose with AND; ``None`` or empty means "any"."""

    priority: Optional[str] = None
    tag: Optional[str] = None
    user: Optional[str] = None  # matched against mentions, "@" optional
    search: Optional[str] = None


@dataclass(frozen=True)
class PaginationInfo:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    @property
    def start_item(self) -> int:
        """1-based index of the first item on the page, 0 when empty."""
        if self.total_items == 0:
            return 0
        return (self.current_page - 1) * self.items_per_page + 1

    @property
    def end_item(self) -> int:
        return min(self.current_page * self.items_per_page, self.total_items)


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    info: PaginationInfo


def priority_to_number(priority: Optional[str]) -> int:
    """Rank used for sorting: low=1, medium=2, high=3, anything else 0."""
    return PRIORITY_RANK.get(priority or "", 0)


def _mention(user: str) -> str:
    return user if user.startswith("@") else f"@{user}"


def filter_todos(todos: Optional[Sequence[T]], filters: TodoFilters) -> List[T]:
    """Apply every set filter to the todos."""
    if not todos:
        return []

    result = list(todos)

    if filters.priority:
        result = [t for t in result if t.priority == filters.priority]

    if filters.tag:
        result = [t for t in result if filters.tag in (t.tags or [])]

    if filters.user:
        mention = _mention(filters.user)
        result = [t for t in result if mention in (t.mentions or [])]

    if filters.search:
        needle = filters.search.lower()
        result = [
            t
            for t in result
            if needle in t.title.lower() or needle in (t.description or "").lower()
        ]

    return result


def _created_key(todo) -> float:
    created = getattr(todo, "created_at", None)
    return created.timestamp() if created is not None else 0.0


def sort_todos(todos: Optional[Sequence[T]], option: Union[SortOption, str]) -> List[T]:
    """Stable sort by creation date or priority rank."""
    if not todos:
        return []

    option = SortOption(option)
    if option is SortOption.DATE_ASC:
        return sorted(todos, key=_created_key)
    if option is SortOption.DATE_DESC:
        return sorted(todos, key=_created_key, reverse=True)
    if option is SortOption.PRIORITY_ASC:
        return sorted(todos, key=lambda t: priority_to_number(t.priority))
    return sorted(todos, key=lambda t: priority_to_number(t.priority), reverse=True)


def page_count(total_items: int, items_per_page: int = DEFAULT_ITEMS_PER_PAGE) -> int:
    """ceil(total / size), never less than 1."""
    if items_per_page < 1:
        raise ValueError("items_per_page must be at least 1")
    return max(1, math.ceil(total_items / items_per_page))


def paginate(
    todos: Sequence[T], page: int = 1, items_per_page: int = DEFAULT_ITEMS_PER_PAGE
) -> Page[T]:
    """Slice one page; out-of-range pages are clamped."""
    total_pages = page_count(len(todos), items_per_page)
    current = min(max(page, 1), total_pages)
    start = (current - 1) * items_per_page
    return Page(
        items=list(todos[start:start + items_per_page]),
        info=PaginationInfo(
            current_page=current,
            total_pages=total_pages,
            total_items=len(todos),
            items_per_page=items_per_page,
        ),
    )


def get_tag_counts(todos: Sequence) -> Dict[str, int]:
    """How many todos carry each tag."""
    counts: Dict[str, int] = {}
    for todo in todos:
        for tag in todo.tags or []:
            counts[tag] = counts.get(tag, 0) + 1
    return counts


@dataclass
class TodoListView(Generic[T]):
    """Filter, sort and page state for one list screen.

    Changing the todos, the filters or the sort order goes back to page 1.
    """

    todos: List[T] = field(default_factory=list)
    filters: TodoFilters = field(default_factory=TodoFilters)
    sort: SortOption = SortOption.DATE_DESC
    items_per_page: int = field(default_factory=lambda: get_settings().items_per_page)
    current_page: int = 1

    def set_todos(self, todos: Sequence[T]) -> None:
        self.todos = list(todos)
        self.current_page = 1

    def set_filters(self, filters: Optional[TodoFilters] = None, **changes) -> None:
        """Replace the filters, or update some of them by keyword."""
        base = filters if filters is not None else self.filters
        self.filters = replace(base, **changes) if changes else base
        self.current_page = 1

    def set_sort(self, option: Union[SortOption, str]) -> None:
        self.sort = SortOption(option)
        self.current_page = 1

    def go_to_page(self, page: int) -> None:
        self.current_page = min(max(page, 1), self.total_pages)

    @property
    def visible(self) -> List[T]:
        """Filtered and sorted todos across all pages."""
        return sort_todos(filter_todos(self.todos, self.filters), self.sort)

    @property
    def total_pages(self) -> int:
        return page_count(len(self.visible), self.items_per_page)

    @property
    def page(self) -> Page[T]:
        return paginate(self.visible, self.current_page, self.items_per_page)
