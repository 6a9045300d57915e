"""Update dispatcher domain."""

from __future__ import annotations

from .errors import InvalidFieldReferenceError, UpdateCancelledError
from .field_reference import declared_fields, resolve_field_name
from .ports import CancellationSignal, PartialUpdateParser, PartialUpdateRequest
from .updater import PartialUpdater, UpdateAction

__all__ = [
    "CancellationSignal",
    "InvalidFieldReferenceError",
    "PartialUpdateParser",
    "PartialUpdateRequest",
    "PartialUpdater",
    "UpdateAction",
    "UpdateCancelledError",
    "declared_fields",
    "resolve_field_name",
]
