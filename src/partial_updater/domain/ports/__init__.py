"""Domain ports."""

from __future__ import annotations

from .presence import CancellationSignal, PartialUpdateParser, PartialUpdateRequest

__all__ = ["CancellationSignal", "PartialUpdateParser", "PartialUpdateRequest"]
