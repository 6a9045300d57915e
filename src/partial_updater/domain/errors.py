"""Errors raised by the update dispatcher."""

from __future__ import annotations


class InvalidFieldReferenceError(ValueError):
    """Raised when a field reference does not denote a direct field of the source."""


class UpdateCancelledError(RuntimeError):
    """Raised when a partial update is cancelled before all actions ran."""
