"""Resolve structural field accessors to field names.

A structural accessor is a callable that reads one field of the source, for
example ``lambda source: source.title`` or ``operator.attrgetter("title")``.
Instead of parsing the accessor's code, it is invoked once against a probe
that records every attribute read. The accessor is accepted only when it
reads exactly one top-level attribute and returns that attribute unchanged.
Identity wrappers such as ``typing.cast`` pass through untouched.
"""

# ruff: noqa: SLF001

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidFieldReferenceError

type FieldAccessor = Callable[[Any], object]


@dataclass(slots=True)
class _ProbeLog:
    reads: list[_FieldToken] = field(default_factory=list)
    derived: list[str] = field(default_factory=list)


class _FieldToken:
    __slots__ = ("__derived", "__log", "__path")

    def __init__(self, log: _ProbeLog, path: str, *, derived: bool = False) -> None:
        self.__log = log
        self.__path = path
        self.__derived = derived

    def __derive(self, path: str) -> _FieldToken:
        self.__log.derived.append(path)
        return _FieldToken(self.__log, path, derived=True)

    def __getattr__(self, name: str) -> _FieldToken:
        if name.startswith("__"):
            raise AttributeError(name)
        return self.__derive(f"{self.__path}.{name}")

    def __getitem__(self, key: object) -> _FieldToken:
        return self.__derive(f"{self.__path}[{key!r}]")

    def __call__(self, *_args: object, **_kwargs: object) -> _FieldToken:
        return self.__derive(f"{self.__path}(...)")

    def __bool__(self) -> bool:
        raise TypeError(f"truth test on {self.__path}")

    def __iter__(self) -> Any:
        raise TypeError(f"iteration over {self.__path}")

    def __repr__(self) -> str:
        kind = "derived" if self.__derived else "field"
        return f"<{kind} {self.__path}>"


class _SourceProbe:
    __slots__ = ("__log",)

    def __init__(self, log: _ProbeLog) -> None:
        self.__log = log

    def __getattr__(self, name: str) -> _FieldToken:
        if name.startswith("__"):
            raise AttributeError(name)
        token = _FieldToken(self.__log, name)
        self.__log.reads.append(token)
        return token

    def __getitem__(self, key: object) -> _FieldToken:
        path = f"[{key!r}]"
        self.__log.derived.append(path)
        return _FieldToken(self.__log, path, derived=True)


def resolve_field_name(accessor: FieldAccessor, source_type: type | None = None) -> str:
    """Return the name of the single top-level field ``accessor`` reads.

    Raises ``InvalidFieldReferenceError`` for computed expressions, nested
    paths, method calls, multiple reads, and, when ``source_type`` declares
    its fields, for names it does not declare.
    """

    if not callable(accessor):
        raise InvalidFieldReferenceError(f"Field accessor must be callable, got {accessor!r}")

    log = _ProbeLog()
    try:
        result = accessor(_SourceProbe(log))
    except Exception as exc:
        raise InvalidFieldReferenceError(
            f"Invalid field accessor {_describe(accessor)}: {exc}. "
            "Accessor must resolve to a top-level field."
        ) from exc

    if log.derived:
        raise InvalidFieldReferenceError(
            f"Invalid field accessor {_describe(accessor)}: resolves to "
            f"{', '.join(log.derived)}. Accessor must resolve to a top-level field."
        )
    if len(log.reads) != 1 or result is not log.reads[0]:
        raise InvalidFieldReferenceError(
            f"Invalid field accessor {_describe(accessor)}: must return exactly one "
            "top-level field of the source unchanged."
        )

    name = _token_name(log.reads[0])
    if source_type is not None:
        known = declared_fields(source_type)
        if known is not None and name not in known:
            raise InvalidFieldReferenceError(
                f"{source_type.__name__} has no field {name!r}"
            )
    return name


def declared_fields(source_type: type) -> frozenset[str] | None:
    """Return the field names ``source_type`` declares, or ``None`` if unknown.

    Dataclasses and pydantic models report their fields; other classes report
    their annotations across the MRO, so fields inherited from a base class
    count as fields of the derived class.
    """

    if dataclasses.is_dataclass(source_type):
        return frozenset(f.name for f in dataclasses.fields(source_type))
    model_fields = getattr(source_type, "model_fields", None)
    if isinstance(model_fields, Mapping):
        return frozenset(model_fields)
    names: set[str] = set()
    for klass in source_type.__mro__:
        names.update(inspect.get_annotations(klass))
    return frozenset(names) or None


def _token_name(token: _FieldToken) -> str:
    return token._FieldToken__path  # type: ignore[attr-defined]


def _describe(accessor: object) -> str:
    return getattr(accessor, "__qualname__", None) or repr(accessor)
