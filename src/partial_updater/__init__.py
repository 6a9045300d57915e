from __future__ import annotations

from importlib import metadata

from .domain import (
    CancellationSignal,
    InvalidFieldReferenceError,
    PartialUpdateParser,
    PartialUpdater,
    PartialUpdateRequest,
    UpdateAction,
    UpdateCancelledError,
    resolve_field_name,
)

try:
    __version__ = metadata.version("partial-updater")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "CancellationSignal",
    "InvalidFieldReferenceError",
    "PartialUpdateParser",
    "PartialUpdateRequest",
    "PartialUpdater",
    "UpdateAction",
    "UpdateCancelledError",
    "__version__",
    "resolve_field_name",
]
