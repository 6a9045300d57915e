"""Presence reporting for pydantic request models.

Pydantic records which fields were explicitly supplied during validation in
``model_fields_set``, including fields explicitly set to ``None``. That set is
the presence contract the updater needs, exposed here without touching any
private pydantic state.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, AliasPath, BaseModel, ConfigDict

from partial_updater.domain.ports.presence import PartialUpdateRequest

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)


class InvalidPayloadError(ValueError):
    """Raised when a payload is not a JSON object."""


class PartialUpdateModel(BaseModel):
    """Base class for partial update inputs; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


def present_fields(model: BaseModel) -> tuple[str, ...]:
    """Return the fields explicitly set on ``model`` in declaration order."""

    fields_set = model.model_fields_set
    return tuple(name for name in type(model).model_fields if name in fields_set)


def parse_partial_update[TModel: BaseModel](
    model_type: type[TModel],
    payload: Mapping[str, Any] | str | bytes,
) -> PartialUpdateRequest[TModel]:
    """Validate ``payload`` and report the fields it carried, in payload order.

    Wire aliases are translated to field names. Raises ``InvalidPayloadError``
    for malformed JSON or a non-object payload and lets pydantic's
    ``ValidationError`` propagate.
    """

    if isinstance(payload, str | bytes | bytearray):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise InvalidPayloadError(f"Invalid JSON payload: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError(
            f"Partial update payload must be a JSON object, got {type(payload).__name__}"
        )

    model = model_type.model_validate(payload)
    fields = _ordered_presence(model_type, payload.keys(), model.model_fields_set)
    log.debug("%s payload carried fields: %s", model_type.__name__, ", ".join(fields))
    return PartialUpdateRequest(source=model, present_fields=fields)


class PydanticPartialUpdateParser[TModel: BaseModel]:
    """``PartialUpdateParser`` bound to one pydantic model type."""

    def __init__(self, model_type: type[TModel]) -> None:
        self.model_type = model_type

    def __call__(self, payload: object) -> PartialUpdateRequest[TModel]:
        if not isinstance(payload, Mapping | str | bytes | bytearray):
            raise TypeError(
                f"Partial update payload must be a JSON object, got {type(payload).__name__}"
            )
        return parse_partial_update(self.model_type, payload)  # pyright: ignore[reportUnknownArgumentType]


def _ordered_presence(
    model_type: type[BaseModel],
    keys: Iterable[str],
    fields_set: set[str],
) -> tuple[str, ...]:
    wire_names = _wire_names(model_type)
    ordered: list[str] = []
    for key in keys:
        name = wire_names.get(key)
        if name is not None and name in fields_set and name not in ordered:
            ordered.append(name)
    ordered.extend(
        name for name in model_type.model_fields if name in fields_set and name not in ordered
    )
    return tuple(ordered)


def _wire_names(model_type: type[BaseModel]) -> dict[str, str]:
    names: dict[str, str] = {}
    for name, info in model_type.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name
        for key in _alias_keys(info.validation_alias):
            names[key] = name
    return names


def _alias_keys(alias: str | AliasPath | AliasChoices | None) -> list[str]:
    if alias is None:
        return []
    if isinstance(alias, str):
        return [alias]
    if isinstance(alias, AliasPath):
        first = alias.path[0] if alias.path else None
        return [first] if isinstance(first, str) else []
    keys: list[str] = []
    for choice in alias.choices:
        keys.extend(_alias_keys(choice))
    return keys
