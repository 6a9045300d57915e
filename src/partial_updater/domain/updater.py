"""Field-aware dispatcher for partial (PATCH-style) updates."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self

from .errors import InvalidFieldReferenceError, UpdateCancelledError
from .field_reference import resolve_field_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .field_reference import FieldAccessor
    from .ports.presence import CancellationSignal, PartialUpdateRequest

log = logging.getLogger(__name__)

type UpdateAction[TSource, TDestination] = Callable[[TSource, TDestination], Any]


class PartialUpdater[TSource, TDestination]:
    """Map source fields to update actions and apply only the fields a request carried.

    Build one updater per (source type, destination type) pair, register one
    action per updatable field and share it across requests. Applying never
    mutates the registry, so concurrent applications against the same updater
    need no locking. Registration is not meant to run concurrently.
    """

    def __init__(self, source_type: type[TSource] | None = None) -> None:
        self._source_type = source_type
        self._actions: dict[str, UpdateAction[TSource, TDestination]] = {}

    @property
    def source_type(self) -> type[TSource] | None:
        return self._source_type

    @property
    def registered_fields(self) -> frozenset[str]:
        return frozenset(self._actions)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def register(
        self,
        field: str | FieldAccessor,
        action: UpdateAction[TSource, TDestination],
    ) -> Self:
        """Register ``action`` for ``field`` and return the updater for chaining.

        ``field`` is either the field name or an accessor such as
        ``lambda source: source.title``. Registering a field twice replaces
        the earlier action.
        """

        if isinstance(field, str):
            name = field
            if not name:
                raise InvalidFieldReferenceError("Field name must not be empty")
        else:
            name = resolve_field_name(field, self._source_type)

        if name in self._actions:
            log.debug("Replacing update action for field %r", name)
        else:
            log.debug("Registering update action for field %r", name)
        self._actions[name] = action
        return self

    def apply(
        self,
        source: TSource,
        destination: TDestination,
        present_fields: Iterable[str],
        *,
        cancel: CancellationSignal | None = None,
    ) -> None:
        """Run the actions registered for ``present_fields`` in order.

        Fields without a registered action are skipped. An exception raised
        by an action propagates and the remaining actions do not run; actions
        already applied are not rolled back.
        """

        applied = 0
        for name, action in self._pending(present_fields):
            _check_cancelled(cancel, name)
            result = action(source, destination)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError(
                    f"Update action for field {name!r} returned an awaitable; use apply_async"
                )
            applied += 1
        log.debug("Applied %d update action(s)", applied)

    async def apply_async(
        self,
        source: TSource,
        destination: TDestination,
        present_fields: Iterable[str],
        *,
        cancel: CancellationSignal | None = None,
    ) -> None:
        """Like ``apply``, awaiting each action's awaitable result before the next one."""

        applied = 0
        for name, action in self._pending(present_fields):
            _check_cancelled(cancel, name)
            result = action(source, destination)
            if inspect.isawaitable(result):
                await result
            applied += 1
        log.debug("Applied %d update action(s)", applied)

    def apply_request(
        self,
        request: PartialUpdateRequest[TSource],
        destination: TDestination,
        *,
        cancel: CancellationSignal | None = None,
    ) -> None:
        self.apply(request.source, destination, request.present_fields, cancel=cancel)

    async def apply_request_async(
        self,
        request: PartialUpdateRequest[TSource],
        destination: TDestination,
        *,
        cancel: CancellationSignal | None = None,
    ) -> None:
        await self.apply_async(
            request.source, destination, request.present_fields, cancel=cancel
        )

    def _pending(
        self,
        present_fields: Iterable[str],
    ) -> Iterator[tuple[str, UpdateAction[TSource, TDestination]]]:
        seen: set[str] = set()
        for name in present_fields:
            if name in seen:
                continue
            seen.add(name)
            action = self._actions.get(name)
            if action is None:
                log.debug("No update action registered for present field %r", name)
                continue
            yield name, action


def _check_cancelled(cancel: CancellationSignal | None, name: str) -> None:
    if cancel is not None and cancel.is_set():
        raise UpdateCancelledError(f"Partial update cancelled before field {name!r}")
