# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Member introspection and dot-path access over dataclasses, pydantic
models, plain objects and dicts."""

from __future__ import annotations

import dataclasses
import inspect
import types
import typing
from collections.abc import Callable, Mapping
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

_MISSING = object()

_PRIMITIVES = (str, bytes, bytearray, int, float, complex, bool, Decimal, Enum, UUID, date, time, timedelta)


# ------------------------------------------------------------------
# Value classification
# ------------------------------------------------------------------


def is_primitive(value: Any) -> bool:
    return isinstance(value, _PRIMITIVES)


def is_date(value: Any) -> bool:
    """True for ``date``, ``datetime`` and ``time`` values."""
    return isinstance(value, (date, time))


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_class_instance(value: Any) -> bool:
    """True for instances of user classes that can be mapped through the registry."""
    if value is None or is_primitive(value) or isinstance(value, (type, Mapping, list, tuple, set, frozenset)):
        return False
    return hasattr(value, "__dict__") or hasattr(type(value), "__slots__")


# ------------------------------------------------------------------
# Declared members
# ------------------------------------------------------------------


def declared_members(cls: type) -> list[str]:
    """Names of the members *cls* declares, in declaration order.

    Supports pydantic models, dataclasses and classes with annotations.
    ``ClassVar`` annotations are not members.
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return list(cls.model_fields)
    if dataclasses.is_dataclass(cls):
        return [f.name for f in dataclasses.fields(cls)]

    names: dict[str, None] = {}
    for klass in reversed(getattr(cls, "__mro__", ())):
        for name, annotation in inspect.get_annotations(klass).items():
            if "ClassVar" in str(annotation) or name.startswith("_"):
                continue
            names[name] = None
    return list(names)


def member_type(cls: type, name: str) -> type | None:
    """The class declared for member *name* of *cls*, when it is a mappable class."""
    annotation: Any = None
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        info = cls.model_fields.get(name)
        annotation = info.annotation if info is not None else None
    else:
        try:
            annotation = typing.get_type_hints(cls).get(name)
        except (NameError, TypeError):
            return None

    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        candidates = typing.get_args(annotation)
    else:
        candidates = (annotation,)
    for candidate in candidates:
        if isinstance(candidate, type) and declared_members(candidate) and not issubclass(candidate, _PRIMITIVES):
            return candidate
    return None


def is_member_set(obj: Any, name: str) -> bool:
    if isinstance(obj, Mapping):
        return name in obj
    return hasattr(obj, name)


def to_seed(obj: Any) -> dict[str, Any]:
    """Shallow dict of an object's member values.

    Nested objects are kept as they are (unlike ``dataclasses.asdict``) so
    that nested class instances can still be resolved by value.
    """
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, BaseModel) or dataclasses.is_dataclass(obj):
        return {name: getattr(obj, name) for name in declared_members(type(obj)) if hasattr(obj, name)}
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    slots = getattr(type(obj), "__slots__", ())
    return {name: getattr(obj, name) for name in slots if hasattr(obj, name)}


# ------------------------------------------------------------------
# Dot-path access
# ------------------------------------------------------------------


def _get_member(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, _MISSING)
    return getattr(obj, name, _MISSING)


def set_member(obj: Any, name: str, value: Any) -> None:
    if isinstance(obj, dict):
        obj[name] = value
    elif dataclasses.is_dataclass(obj) and obj.__dataclass_params__.frozen:  # type: ignore[union-attr]
        object.__setattr__(obj, name, value)
    elif isinstance(obj, BaseModel) and type(obj).model_config.get("frozen"):
        obj.__dict__[name] = value
        obj.__pydantic_fields_set__.add(name)
    else:
        setattr(obj, name, value)


def get_path(obj: Any, path: str, default: Any = None) -> Any:
    """Read ``a.b.c`` from *obj*; *default* when any segment is absent or ``None``."""
    current = obj
    for segment in path.split("."):
        if current is None:
            return default
        current = _get_member(current, segment)
        if current is _MISSING:
            return default
    return default if current is None else current


def set_path(
    obj: Any,
    path: str,
    value: Any,
    factory: Callable[[type], Any] | None = None,
) -> None:
    """Write *value* at ``a.b.c``, creating missing intermediate objects.

    An intermediate is created as an instance of the member's declared class
    (through *factory*), as a dict inside dicts, or as a ``SimpleNamespace``.
    """
    *parents, leaf = path.split(".")
    current = obj
    for segment in parents:
        child = _get_member(current, segment)
        if child is _MISSING or child is None:
            declared = None if isinstance(current, Mapping) else member_type(type(current), segment)
            if isinstance(current, Mapping):
                child = {}
            elif declared is not None and factory is not None:
                child = factory(declared)
            else:
                child = types.SimpleNamespace()
            set_member(current, segment, child)
        current = child
    set_member(current, leaf, value)
