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
"""Reverse mapping derivation and base mapping inheritance.

Only rules that recorded the source member they read from can be
inverted: they become a plain structural copy in the other direction.
Everything else (literals, ignores, computed selectors, converters) has no
general inverse and is left unmapped in the reverse mapping.  Predicates
and defaults of Condition/NullSubstitution rules do not survive either.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flymapper.mapping.types import MapInitialize, Mapping, PropertyRule

if TYPE_CHECKING:
    from flymapper.mapping.registry import MappingRegistry


def reverse_properties(forward: Mapping) -> dict[str, PropertyRule]:
    properties: dict[str, PropertyRule] = {}
    for destination_path, rule in forward.properties.items():
        source_path = rule.transformation.source_member_path
        if not source_path:
            continue
        properties[source_path] = PropertyRule(
            destination_member_path=source_path,
            transformation=MapInitialize(selector=destination_path, source_member_path=destination_path),
        )
    return properties


def inherit_base_mapping(mapping: Mapping, base: Mapping) -> None:
    """Copy every rule of *base* whose destination path *mapping* lacks."""
    for path, rule in base.properties.items():
        if path not in mapping.properties:
            mapping.properties[path] = rule


def derive_reverse_mapping(forward: Mapping, registry: MappingRegistry) -> Mapping:
    """Build (without registering) the inverse of *forward*.

    When the forward mapping has a base pair, the reversed base pair is
    probed in *registry*; its rules are inherited if it exists.
    """
    reverse = Mapping(
        source=forward.destination,
        destination=forward.source,
        source_key=forward.destination_key,
        destination_key=forward.source_key,
        properties=reverse_properties(forward),
        source_member_naming_convention=forward.destination_member_naming_convention,
        destination_member_naming_convention=forward.source_member_naming_convention,
        base_source=forward.base_destination,
        base_destination=forward.base_source,
    )

    if reverse.base_source is not None and reverse.base_destination is not None:
        base = registry.resolve_for_destination(reverse.base_destination, reverse.base_source, allow_missing=True)
        if base is not None:
            inherit_base_mapping(reverse, base)

    return reverse
