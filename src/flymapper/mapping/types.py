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
"""Mapping records and the closed set of transformation descriptors.

A :class:`Mapping` associates one source class with one destination class
and holds an ordered table of :class:`PropertyRule` keyed by destination
member path.  Each rule carries exactly one transformation descriptor:

* :class:`Ignore` — always ``None``
* :class:`FromValue` — a literal captured at configuration time
* :class:`MapFrom` — a selector over the source, or a :class:`Resolver`
* :class:`ConvertUsing` — ``converter.convert(value(source))``
* :class:`MapWith` — nested mapping into an explicit destination class
* :class:`Condition` — source member when a predicate holds, else a default
* :class:`NullSubstitution` — source member, or a substitute when ``None``
* :class:`MapInitialize` — structural inference (the default rule)

Selectors are either callables taking the source object or dot-separated
member paths.  A path selector is recorded as ``source_member_path`` so
that the reverse deriver can invert the rule.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from flymapper.mapping.naming import NamingConvention

Selector: TypeAlias = "Callable[[Any], Any] | str"
Predicate: TypeAlias = "Callable[[Any], bool]"
MapAction: TypeAlias = "Callable[[Any, Any, Mapping], None]"


# ---------------------------------------------------------------------------
# Capability contracts
# ---------------------------------------------------------------------------


@runtime_checkable
class Converter(Protocol):
    """Anything exposing ``convert(value)`` can back a ConvertUsing rule."""

    def convert(self, value: Any) -> Any: ...


@runtime_checkable
class Resolver(Protocol):
    """Anything exposing ``resolve(source, destination, transformation)``
    can stand in for a MapFrom selector."""

    def resolve(self, source: Any, destination: Any, transformation: Any) -> Any: ...


# ---------------------------------------------------------------------------
# Transformation descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PreCondition:
    """Guard evaluated before any transformation.

    When ``predicate(source)`` is false the destination member is set to
    ``default`` and the transformation itself never runs.
    """

    predicate: Predicate
    default: Any = None


@dataclass(frozen=True, kw_only=True)
class _Transformation:
    pre_condition: PreCondition | None = None
    source_member_path: str | None = None


@dataclass(frozen=True)
class Ignore(_Transformation):
    pass


@dataclass(frozen=True)
class FromValue(_Transformation):
    value: Any


@dataclass(frozen=True)
class MapFrom(_Transformation):
    selector: Selector | Resolver


@dataclass(frozen=True)
class ConvertUsing(_Transformation):
    converter: Converter
    value: Selector


@dataclass(frozen=True)
class MapWith(_Transformation):
    destination: type
    from_value: Selector


@dataclass(frozen=True)
class Condition(_Transformation):
    predicate: Predicate
    default: Any = None


@dataclass(frozen=True)
class NullSubstitution(_Transformation):
    substitute: Any


@dataclass(frozen=True)
class MapInitialize(_Transformation):
    selector: Selector | None = None


Transformation: TypeAlias = (
    Ignore | FromValue | MapFrom | ConvertUsing | MapWith | Condition | NullSubstitution | MapInitialize
)


def with_pre_condition(transformation: Transformation, pre_condition: PreCondition) -> Transformation:
    """Return a copy of *transformation* guarded by *pre_condition*."""
    return dataclasses.replace(transformation, pre_condition=pre_condition)


# ---------------------------------------------------------------------------
# Mapping records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PropertyRule:
    destination_member_path: str
    transformation: Transformation


@dataclass(frozen=True)
class CreateMapOptions:
    """Options accepted by ``create_mapping``; both conventions optional."""

    source_member_naming_convention: NamingConvention | None = None
    destination_member_naming_convention: NamingConvention | None = None


@dataclass
class MapActionOptions:
    """Per-call hooks. When given they replace the mapping's own hooks."""

    before_map: MapAction | None = None
    after_map: MapAction | None = None


@dataclass(slots=True, eq=False)
class Mapping:
    """Directed transformation from ``source`` to ``destination``.

    Slotted, so no attribute beyond the declared ones can be attached after
    creation.  ``properties`` keeps insertion order; assigning an existing
    path replaces its rule in place.
    """

    source: type
    destination: type
    source_key: str
    destination_key: str
    properties: dict[str, PropertyRule] = field(default_factory=dict)
    source_member_naming_convention: NamingConvention | None = None
    destination_member_naming_convention: NamingConvention | None = None
    before_map_action: MapAction | None = None
    after_map_action: MapAction | None = None
    base_source: type | None = None
    base_destination: type | None = None

    def __repr__(self) -> str:
        return f"Mapping({self.source_key} -> {self.destination_key}, properties={list(self.properties)})"
