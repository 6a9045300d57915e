"""Book destination entity and its partial update input."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import AliasChoices, Field

from partial_updater.adapters.pydantic import PartialUpdateModel


@dataclass(slots=True)
class Book:
    id: int
    title: str
    author: str
    edition: int = 1


class UpdateBookInput(PartialUpdateModel):
    """Fields a client may send to change a book.

    Every field is optional so that an omitted field and an explicit null can
    both be represented; which of the two happened is tracked separately.
    """

    title: str | None = Field(
        default=None,
        validation_alias=AliasChoices("title", "differentlyNamedTitle"),
    )
    author: str | None = None
    increment: bool | None = Field(default=None, alias="incrementEdition")
