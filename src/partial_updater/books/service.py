"""Book update use case backed by an in-memory store."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from partial_updater.adapters.pydantic import parse_partial_update

from .model import Book, UpdateBookInput

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from partial_updater.domain.ports.presence import CancellationSignal
    from partial_updater.domain.updater import PartialUpdater

log = logging.getLogger(__name__)

SAMPLE_BOOKS: tuple[Book, ...] = (
    Book(id=17, title="Animal Farm", author="George Orwell", edition=4),
)


class BookNotFoundError(LookupError):
    """Raised when no book exists for the requested id."""


class InMemoryBookStore:
    """Keeps books in a dict and hands out copies to mutate."""

    def __init__(self, books: Iterable[Book] = SAMPLE_BOOKS) -> None:
        self._books: dict[int, Book] = {book.id: replace(book) for book in books}

    def get(self, book_id: int) -> Book:
        try:
            return replace(self._books[book_id])
        except KeyError:
            raise BookNotFoundError(f"book {book_id} not found") from None

    def save(self, book: Book) -> None:
        self._books[book.id] = replace(book)


def update_book(
    book_id: int,
    payload: Mapping[str, Any] | str | bytes,
    *,
    updater: PartialUpdater[UpdateBookInput, Book],
    store: InMemoryBookStore,
    cancel: CancellationSignal | None = None,
) -> Book:
    """Apply the fields present in ``payload`` to book ``book_id`` and store it.

    The update is applied to a staging copy; the store only sees the book if
    every action succeeded.
    """

    book = store.get(book_id)
    request = parse_partial_update(UpdateBookInput, payload)
    updater.apply_request(request, book, cancel=cancel)
    store.save(book)
    log.info("Updated book %s (fields: %s)", book_id, ", ".join(request.present_fields) or "-")
    return book
