from __future__ import annotations

import logging

import pytest

from todo_registry_api.app.core.config import Settings
from todo_registry_api.app.core.result import Err, Ok
from todo_registry_api.app.main import create_app
from todo_registry_api.app.services.registry import TodoPage, TodoRegistry


def test_registry_scenario(registry: TodoRegistry) -> None:
    assert registry.add("buy milk") == Ok(0)
    assert registry.add("walk dog") == Ok(1)
    assert registry.read(0) == Ok("buy milk")
    assert registry.update(1, "walk cat") == Ok()
    assert registry.read(1) == Ok("walk cat")
    assert registry.delete(0) == Ok()
    assert registry.read(0) == Err("not found")


def test_add_returns_unused_id_and_text_is_readable(registry: TodoRegistry) -> None:
    texts = ["", "ünïcödé ✓", "a" * 10_000, "line\nbreak"]
    ids = []
    for text in texts:
        result = registry.add(text)
        assert result.is_ok()
        assert result.value not in ids
        ids.append(result.value)
        assert registry.read(result.value) == Ok(text)
    assert len(registry) == len(texts)


def test_operations_on_unknown_id_return_not_found(registry: TodoRegistry) -> None:
    assert registry.read(42) == Err("not found")
    assert registry.update(42, "x") == Err("not found")
    assert registry.delete(42) == Err("not found")
    assert len(registry) == 0


def test_delete_twice_reports_not_found(registry: TodoRegistry) -> None:
    todo_id = registry.add("once").value
    assert registry.delete(todo_id) == Ok()
    assert registry.delete(todo_id) == Err("not found")
    assert todo_id not in registry


def test_deleted_ids_are_not_reused(registry: TodoRegistry) -> None:
    first = registry.add("first").value
    registry.delete(first)
    second = registry.add("second").value
    assert second != first
    assert registry.read(first) == Err("not found")


def test_full_id_space_rejects_add() -> None:
    registry = TodoRegistry()
    for expected in range(65536):
        assert registry.add(f"todo {expected}") == Ok(expected)
    assert registry.add("one too many") == Err("registry full")
    assert len(registry) == 65536
    assert registry.read(65535) == Ok("todo 65535")


def test_capacity_is_enforced(small_registry: TodoRegistry) -> None:
    for _ in range(small_registry.capacity):
        assert small_registry.add("x").is_ok()
    assert small_registry.add("y") == Err("registry full")


def test_ids_wrap_around_and_skip_ids_in_use(small_registry: TodoRegistry) -> None:
    assert [small_registry.add(t).value for t in "abcd"] == [0, 1, 2, 3]
    small_registry.delete(2)
    small_registry.delete(0)
    # Counter wrapped to 0, which is free again.
    assert small_registry.add("e") == Ok(0)
    # 1 is still in use, so the next free id is 2.
    assert small_registry.add("f") == Ok(2)
    assert small_registry.add("g") == Err("registry full")


def test_update_keeps_position_in_read_all(registry: TodoRegistry) -> None:
    for text in ["a", "b", "c"]:
        registry.add(text)
    registry.update(0, "A")
    assert registry.read_all(1) == Ok(TodoPage(items=["A", "b", "c"], next=None))


def test_read_all_pages(small_registry: TodoRegistry) -> None:
    for text in ["a", "b", "c"]:
        small_registry.add(text)

    assert small_registry.read_all(1) == Ok(TodoPage(items=["a", "b"], next=2))
    assert small_registry.read_all(2) == Ok(TodoPage(items=["c"], next=None))
    assert small_registry.read_all(3) == Err("Invalid Page 3")


def test_read_all_page_zero_is_first_page(small_registry: TodoRegistry) -> None:
    small_registry.add("a")
    assert small_registry.read_all(0) == small_registry.read_all(1)


def test_read_all_on_empty_registry(registry: TodoRegistry) -> None:
    assert registry.read_all(0) == Err("Invalid Page 1")
    assert registry.read_all(1) == Err("Invalid Page 1")


def test_read_all_exact_page_boundary_has_no_next(small_registry: TodoRegistry) -> None:
    small_registry.add("a")
    small_registry.add("b")
    assert small_registry.read_all(1) == Ok(TodoPage(items=["a", "b"], next=None))


def test_following_cursors_returns_every_item_once() -> None:
    registry = TodoRegistry(page_size=10)
    texts = [f"todo {i}" for i in range(37)]
    for text in texts:
        registry.add(text)
    registry.delete(5)
    expected = [t for i, t in enumerate(texts) if i != 5]

    collected = []
    page = 1
    while page is not None:
        result = registry.read_all(page)
        assert result.is_ok()
        collected.extend(result.value.items)
        page = result.value.next

    assert collected == expected
    assert len(collected) == len(registry)


def test_queries_do_not_mutate(registry: TodoRegistry) -> None:
    registry.add("a")
    before = registry.read_all(1)
    registry.read(0)
    registry.read(99)
    registry.read_all(7)
    assert registry.read_all(1) == before
    assert len(registry) == 1


@pytest.mark.parametrize("capacity", [0, -1, 65537])
def test_invalid_capacity_is_rejected(capacity: int) -> None:
    with pytest.raises(ValueError):
        TodoRegistry(capacity=capacity)


def test_invalid_page_size_is_rejected() -> None:
    with pytest.raises(ValueError):
        TodoRegistry(page_size=0)


def test_page_size_must_keep_page_numbers_in_nat16() -> None:
    with pytest.raises(ValueError):
        TodoRegistry(page_size=1)
    with pytest.raises(ValueError):
        create_app(Settings(page_size=1))


def test_single_item_pages_reach_the_last_item() -> None:
    registry = TodoRegistry(capacity=65535, page_size=1)
    for i in range(65535):
        registry.add(f"todo {i}")

    assert registry.read_all(65534) == Ok(TodoPage(items=["todo 65533"], next=65535))
    assert registry.read_all(65535) == Ok(TodoPage(items=["todo 65534"], next=None))


def test_expected_errors_log_at_debug(small_registry: TodoRegistry, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="todo_registry_api.app.services.registry")
    for _ in range(small_registry.capacity):
        small_registry.add("x")

    small_registry.add("overflow")
    small_registry.read(99)
    small_registry.read_all(9)

    messages = {record.getMessage(): record.levelno for record in caplog.records}
    assert messages["Registry full (4 items), rejecting add"] == logging.DEBUG
    assert messages["Read of unknown todo 99"] == logging.DEBUG
    assert messages["Read of empty page 9 (4 todos)"] == logging.DEBUG
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
