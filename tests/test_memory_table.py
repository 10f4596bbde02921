from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest

from src.school_fees.school_fees.database.memory import MemoryTable


@dataclass(frozen=True)
class Book:
    book_id: int
    title: str
    shelf: Optional[str] = None


def test_insert_mints_sequential_ids():
    table = MemoryTable(Book, key_field="book_id")

    first = table.insert(title="A")
    second = table.insert(title="B", shelf="3")

    assert (first.book_id, second.book_id) == (1, 2)
    assert table.get(2) == Book(book_id=2, title="B", shelf="3")
    assert len(table) == 2


def test_update_keeps_untouched_fields():
    table = MemoryTable(Book, key_field="book_id")
    table.insert(title="A", shelf="1")

    updated = table.update(1, {"shelf": "9"})

    assert updated == Book(book_id=1, title="A", shelf="9")
    assert table.get(1) == updated


def test_update_cannot_change_key():
    table = MemoryTable(Book, key_field="book_id")
    table.insert(title="A")

    updated = table.update(1, {"book_id": 42, "title": "B"})

    assert updated.book_id == 1
    assert table.get(42) is None


def test_update_missing_returns_none():
    table = MemoryTable(Book, key_field="book_id")
    assert table.update(7, {"title": "x"}) is None


def test_delete_then_get_is_absent_and_ids_are_not_reused():
    table = MemoryTable(Book, key_field="book_id")
    table.insert(title="A")

    assert table.delete(1) is True
    assert table.get(1) is None
    assert table.delete(1) is False
    assert table.insert(title="B").book_id == 2


def test_filter_and_find_scan_in_insertion_order():
    table = MemoryTable(Book, key_field="book_id")
    for title, shelf in (("A", "1"), ("B", "2"), ("C", "1")):
        table.insert(title=title, shelf=shelf)

    assert [b.title for b in table.filter(lambda b: b.shelf == "1")] == ["A", "C"]
    assert table.find(lambda b: b.shelf == "2").title == "B"
    assert table.find(lambda b: b.shelf == "7") is None


def test_failed_insert_does_not_consume_an_id():
    table = MemoryTable(Book, key_field="book_id")

    with pytest.raises(TypeError):
        table.insert(title="A", colour="red")

    assert len(table) == 0
    assert table.insert(title="B").book_id == 1
