"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from partial_updater.books import InMemoryBookStore, build_book_updater, update_book

if TYPE_CHECKING:
    from collections.abc import Mapping

    from partial_updater.books import Book, UpdateBookInput
    from partial_updater.domain.updater import PartialUpdater


log = getLogger(__name__)


def patch_book(
    book_id: int,
    payload: Mapping[str, Any] | str | bytes,
    *,
    updater: PartialUpdater[UpdateBookInput, Book] | None = None,
    store: InMemoryBookStore | None = None,
) -> Book:
    """Partially update a book using the configured collaborators."""

    effective_updater = updater if updater is not None else build_book_updater()
    effective_store = store if store is not None else InMemoryBookStore()
    log.debug(
        "Patching book %s with %d registered field(s)",
        book_id,
        len(effective_updater),
    )
    return update_book(book_id, payload, updater=effective_updater, store=effective_store)
