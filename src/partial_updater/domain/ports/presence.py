"""Ports describing which fields a request actually carried."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class PartialUpdateRequest[TSource]:
    """A parsed source value plus the field names present on the wire.

    ``present_fields`` lists a field if and only if the request explicitly
    wrote it, including an explicit null. It is never derived from the values
    held by ``source``.
    """

    source: TSource
    present_fields: tuple[str, ...]


@runtime_checkable
class PartialUpdateParser[TSource](Protocol):
    """Callable port turning a raw request payload into a partial update request."""

    def __call__(self, payload: object) -> PartialUpdateRequest[TSource]:
        ...


@runtime_checkable
class CancellationSignal(Protocol):
    """Anything exposing ``is_set()``, e.g. ``threading.Event`` or ``asyncio.Event``."""

    def is_set(self) -> bool:
        ...


__all__ = ["CancellationSignal", "PartialUpdateParser", "PartialUpdateRequest"]
