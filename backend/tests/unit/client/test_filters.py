"""Tests for local filter, sort and paginate."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest

from src.taskboard.client.filters import (
    SortOption,
    TodoFilters,
    TodoListView,
    filter_todos,
    get_tag_counts,
    paginate,
    priority_to_number,
    sort_todos,
)

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


@dataclass
class Item:
    title: str
    priority: str = "medium"
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    mentions: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None


@pytest.fixture
def todos():
    return [
        Item("Write report", "high", "quarterly numbers", ["work"], ["@maria"], BASE),
        Item("Buy milk", "low", None, ["home"], [], BASE + timedelta(days=1)),
        Item("Plan trip", "medium", "Book the REPORT venue", ["home", "travel"], ["@alex"], BASE + timedelta(days=2)),
        Item("Fix bug", "high", "", ["work"], ["@alex", "@maria"], BASE + timedelta(days=3)),
    ]


class TestFilterTodos:
    def test_no_filters_returns_copy(self, todos):
        result = filter_todos(todos, TodoFilters())
        assert result == todos
        assert result is not todos

    def test_none_and_empty_input(self):
        assert filter_todos(None, TodoFilters(priority="high")) == []
        assert filter_todos([], TodoFilters()) == []

    def test_priority(self, todos):
        assert [t.title for t in filter_todos(todos, TodoFilters(priority="high"))] == ["Write report", "Fix bug"]

    def test_tag(self, todos):
        assert [t.title for t in filter_todos(todos, TodoFilters(tag="home"))] == ["Buy milk", "Plan trip"]

    @pytest.mark.parametrize("user", ["alex", "@alex"])
    def test_user_matches_mentions(self, todos, user):
        assert [t.title for t in filter_todos(todos, TodoFilters(user=user))] == ["Plan trip", "Fix bug"]

    def test_search_title_or_description_case_insensitive(self, todos):
        found = filter_todos(todos, TodoFilters(search="report"))
        assert [t.title for t in found] == ["Write report", "Plan trip"]

    def test_filters_compose(self, todos):
        found = filter_todos(todos, TodoFilters(priority="high", user="maria", tag="work", search="fix"))
        assert [t.title for t in found] == ["Fix bug"]

    def test_empty_strings_ignored(self, todos):
        assert filter_todos(todos, TodoFilters(priority="", tag="", user="", search="")) == todos

    def test_idempotent(self, todos):
        filters = TodoFilters(tag="work", search="b")
        once = filter_todos(todos, filters)
        assert filter_todos(once, filters) == once


class TestSortTodos:
    def test_priority_rank(self):
        assert [priority_to_number(p) for p in ("low", "medium", "high", "urgent", None)] == [1, 2, 3, 0, 0]

    def test_date_desc_example(self):
        a = Item("A", "low", created_at=BASE)
        b = Item("B", "high", created_at=BASE + timedelta(days=1))
        assert [t.title for t in sort_todos([a, b], SortOption.DATE_DESC)] == ["B", "A"]
        assert [t.title for t in sort_todos([a, b], "priority-asc")] == ["A", "B"]

    def test_date_asc(self, todos):
        shuffled = [todos[2], todos[0], todos[3], todos[1]]
        assert sort_todos(shuffled, SortOption.DATE_ASC) == todos

    def test_missing_date_sorts_as_epoch(self, todos):
        undated = Item("Undated")
        assert sort_todos(todos + [undated], SortOption.DATE_ASC)[0] is undated
        assert sort_todos(todos + [undated], SortOption.DATE_DESC)[-1] is undated

    def test_priority_desc_is_stable(self, todos):
        result = sort_todos(todos, SortOption.PRIORITY_DESC)
        assert [t.title for t in result] == ["Write report", "Fix bug", "Plan trip", "Buy milk"]

    def test_does_not_mutate(self, todos):
        before = list(todos)
        sort_todos(todos, SortOption.PRIORITY_ASC)
        assert todos == before

    def test_unknown_option(self, todos):
        with pytest.raises(ValueError):
            sort_todos(todos, "alphabetical")

    def test_empty(self):
        assert sort_todos(None, SortOption.DATE_ASC) == []


class TestPaginate:
    def test_twelve_items_three_pages(self):
        items = list(range(12))
        page = paginate(items, 3)
        assert page.items == [10, 11]
        assert page.info.total_pages == 3
        assert page.info.total_items == 12
        assert page.info.items_per_page == 5
        assert (page.info.start_item, page.info.end_item) == (11, 12)

    def test_empty_list_has_one_page(self):
        page = paginate([], 1)
        assert page.items == []
        assert page.info.total_pages == 1
        assert (page.info.start_item, page.info.end_item) == (0, 0)

    @pytest.mark.parametrize("requested, expected", [(0, 1), (-3, 1), (9, 3)])
    def test_out_of_range_is_clamped(self, requested, expected):
        assert paginate(list(range(12)), requested).info.current_page == expected

    def test_custom_page_size(self):
        page = paginate(list(range(7)), 2, items_per_page=3)
        assert page.items == [3, 4, 5]
        assert page.info.total_pages == 3

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            paginate([1], 1, items_per_page=0)


def test_tag_counts(todos):
    assert get_tag_counts(todos) == {"work": 2, "home": 2, "travel": 1}


class TestTodoListView:
    def make_view(self, count=12):
        items = [Item(f"t{i}", created_at=BASE + timedelta(hours=i), tags=["even" if i % 2 == 0 else "odd"]) for i in range(count)]
        view = TodoListView()
        view.set_todos(items)
        return view

    def test_defaults_to_newest_first(self):
        view = self.make_view()
        assert view.sort is SortOption.DATE_DESC
        assert [t.title for t in view.page.items] == ["t11", "t10", "t9", "t8", "t7"]

    def test_filter_change_resets_page(self):
        view = self.make_view()
        view.go_to_page(3)
        assert view.current_page == 3
        view.set_filters(tag="even")
        assert view.current_page == 1
        assert view.page.info.total_items == 6

    def test_sort_change_resets_page(self):
        view = self.make_view()
        view.go_to_page(2)
        view.set_sort("date-asc")
        assert view.current_page == 1
        assert view.page.items[0].title == "t0"

    def test_replacing_todos_resets_page(self):
        view = self.make_view()
        view.go_to_page(2)
        view.set_todos(view.todos[:3])
        assert view.current_page == 1

    def test_go_to_page_clamps(self):
        view = self.make_view()
        view.go_to_page(99)
        assert view.current_page == 3


def test_date_orders_are_reverses(todos):
    desc = sort_todos(todos, SortOption.DATE_DESC)
    asc = sort_todos(desc, SortOption.DATE_ASC)
    assert asc == list(reversed(desc))


def test_priority_desc_example():
    a = Item("A", "high", created_at=BASE)
    b = Item("B", "low", created_at=BASE + timedelta(days=1))
    assert [t.title for t in sort_todos([b, a], SortOption.PRIORITY_DESC)] == ["A", "B"]
    assert [t.title for t in sort_todos([b, a], SortOption.DATE_ASC)] == ["A", "B"]
