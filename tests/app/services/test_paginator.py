"""Testes da paginação por offset com término em página incompleta."""

from __future__ import annotations

import pytest

from app.domain import Contact
from app.services.paginator import fetch_all


def _contacts(count: int, start: int = 0) -> list[Contact]:
    return [Contact(emails=(f"user{i}@example.com",)) for i in range(start, start + count)]


class _Pages:
    def __init__(self, total: int) -> None:
        self.total = total
        self.calls: list[tuple[int, int]] = []

    @property
    def offsets(self) -> list[int]:
        return [offset for offset, _ in self.calls]

    def __call__(self, offset: int, limit: int) -> list[Contact]:
        self.calls.append((offset, limit))
        return _contacts(max(0, min(limit, self.total - offset)), offset)


def test_exact_multiple_needs_one_extra_call() -> None:
    pages = _Pages(total=10)
    contacts = fetch_all(pages, chunk_size=10)
    assert pages.calls == [(0, 10), (10, 10)]
    assert len(contacts) == 10


def test_partial_last_page_stops() -> None:
    pages = _Pages(total=25)
    contacts = fetch_all(pages, chunk_size=10)
    assert pages.offsets == [0, 10, 20]
    assert [c.email for c in contacts][-1] == "user24@example.com"


def test_limit_is_chunk_size_on_every_call() -> None:
    pages = _Pages(total=7)
    contacts = fetch_all(pages, chunk_size=3)
    assert pages.calls == [(0, 3), (3, 3), (6, 3)]
    assert len(contacts) == 7


def test_empty_first_page() -> None:
    pages = _Pages(total=0)
    assert fetch_all(pages, chunk_size=10) == []
    assert pages.offsets == [0]


@pytest.mark.parametrize("chunk_size", [0, -5])
def test_invalid_chunk_size(chunk_size: int) -> None:
    with pytest.raises(ValueError, match="chunk_size"):
        fetch_all(lambda offset, limit: [], chunk_size)
