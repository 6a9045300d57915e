"""Adapters feeding the updater from concrete request layers."""

from __future__ import annotations

from .pydantic import (
    InvalidPayloadError,
    PartialUpdateModel,
    PydanticPartialUpdateParser,
    parse_partial_update,
    present_fields,
)

__all__ = [
    "InvalidPayloadError",
    "PartialUpdateModel",
    "PydanticPartialUpdateParser",
    "parse_partial_update",
    "present_fields",
]
