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
"""Fluent configuration of a registered Mapping.

Example::

    mapper.create_map(Person, PersonDTO).for_member(
        "full_name", map_from(lambda p: f"{p.first_name} {p.last_name}")
    ).for_member(
        "nickname", null_substitution("n/a")
    ).reverse_map()

Rule factories record the source member a rule reads whenever it is known
(path selectors, convention-resolved members), which is what makes the rule
invertible by ``reverse_map``.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from flymapper.mapping.naming import resolve_source_path
from flymapper.mapping.paths import declared_members
from flymapper.mapping.registry import MappingRegistry
from flymapper.mapping.reverse import inherit_base_mapping
from flymapper.mapping.types import (
    Condition,
    Converter,
    ConvertUsing,
    FromValue,
    Ignore,
    MapAction,
    MapFrom,
    MapInitialize,
    Mapping,
    MapWith,
    NullSubstitution,
    PreCondition,
    Predicate,
    PropertyRule,
    Resolver,
    Selector,
    Transformation,
    with_pre_condition,
)


# ---------------------------------------------------------------------------
# Rule factories
# ---------------------------------------------------------------------------


def _path_of(selector: Any) -> str | None:
    return selector if isinstance(selector, str) else None


def ignore() -> Ignore:
    return Ignore()


def from_value(value: Any) -> FromValue:
    return FromValue(value)


def map_from(selector: Selector | Resolver) -> MapFrom:
    """Compute a member from the source object.

    *selector* is a callable over the source, a dot-separated source path,
    or a :class:`Resolver`.
    """
    return MapFrom(selector, source_member_path=_path_of(selector))


def convert_using(converter: Converter, value: Selector) -> ConvertUsing:
    return ConvertUsing(converter, value, source_member_path=_path_of(value))


def map_with(destination: type, from_value: Selector) -> MapWith:
    return MapWith(destination, from_value, source_member_path=_path_of(from_value))


def condition(predicate: Predicate, default: Any = None) -> Condition:
    return Condition(predicate, default)


def null_substitution(substitute: Any) -> NullSubstitution:
    return NullSubstitution(substitute)


def pre_condition(predicate: Predicate, transformation: Transformation, default: Any = None) -> Transformation:
    """Guard *transformation*: when *predicate* fails the member gets *default*."""
    return with_pre_condition(transformation, PreCondition(predicate, default))


# ---------------------------------------------------------------------------
# Expression
# ---------------------------------------------------------------------------


def initialize_mapping_properties(mapping: Mapping) -> None:
    """Add a structural rule for each destination member the source can supply.

    A destination member is matched when its convention-resolved source path
    starts with a member the source class declares.
    """
    source_members = set(declared_members(mapping.source))
    for name in declared_members(mapping.destination):
        source_path = resolve_source_path(
            mapping.destination_member_naming_convention,
            mapping.source_member_naming_convention,
            name,
        )
        if source_path.split(".", 1)[0] in source_members:
            mapping.properties[name] = PropertyRule(name, MapInitialize(source_member_path=source_path))


class MappingExpression:
    """Chainable configuration for one registered mapping."""

    def __init__(self, mapping: Mapping, registry: MappingRegistry) -> None:
        self._mapping = mapping
        self._registry = registry

    @property
    def mapping(self) -> Mapping:
        return self._mapping

    def for_member(self, destination_path: str, transformation: Transformation) -> MappingExpression:
        """Set (or replace) the rule for *destination_path*."""
        reads_resolved_member = isinstance(transformation, (Condition, NullSubstitution)) or (
            isinstance(transformation, MapInitialize) and transformation.selector is None
        )
        if reads_resolved_member and transformation.source_member_path is None:
            transformation = dataclasses.replace(
                transformation,
                source_member_path=resolve_source_path(
                    self._mapping.destination_member_naming_convention,
                    self._mapping.source_member_naming_convention,
                    destination_path,
                ),
            )
        self._mapping.properties[destination_path] = PropertyRule(destination_path, transformation)
        return self

    def before_map(self, action: MapAction) -> MappingExpression:
        self._mapping.before_map_action = action
        return self

    def after_map(self, action: MapAction) -> MappingExpression:
        self._mapping.after_map_action = action
        return self

    def include_base(self, base_source: type, base_destination: type) -> MappingExpression:
        """Inherit every rule of the ``base_source -> base_destination`` mapping
        that this mapping does not define itself.

        Inheritance is resolved now; rules added to the base afterwards are
        not picked up.
        """
        base = self._registry.resolve(base_source, base_destination)
        self._mapping.base_source = base_source
        self._mapping.base_destination = base_destination
        inherit_base_mapping(self._mapping, base)
        return self

    def reverse_map(self) -> MappingExpression:
        """Derive, register and return the inverse mapping's expression."""
        return MappingExpression(self._registry.create_reverse_mapping(self._mapping), self._registry)
