"""Book example built on the partial updater."""

from __future__ import annotations

from .model import Book, UpdateBookInput
from .service import SAMPLE_BOOKS, BookNotFoundError, InMemoryBookStore, update_book
from .updater import build_book_updater

__all__ = [
    "SAMPLE_BOOKS",
    "Book",
    "BookNotFoundError",
    "InMemoryBookStore",
    "UpdateBookInput",
    "build_book_updater",
    "update_book",
]
