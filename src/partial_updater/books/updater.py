"""Wiring of book input fields to book mutations."""

from __future__ import annotations

from partial_updater.domain.updater import PartialUpdater

from .model import Book, UpdateBookInput


def build_book_updater() -> PartialUpdater[UpdateBookInput, Book]:
    """Return the updater mapping ``UpdateBookInput`` fields onto ``Book``."""

    return (
        PartialUpdater(UpdateBookInput)
        .register(lambda source: source.title, _set_title)
        .register(lambda source: source.author, _set_author)
        .register(lambda source: source.increment, _increment_edition)
    )


def _set_title(source: UpdateBookInput, destination: Book) -> None:
    if source.title is None:
        raise ValueError("title may not be null")
    destination.title = source.title


def _set_author(source: UpdateBookInput, destination: Book) -> None:
    if source.author is None:
        raise ValueError("author may not be null")
    destination.author = source.author


def _increment_edition(source: UpdateBookInput, destination: Book) -> None:
    if source.increment:
        destination.edition += 1
