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
"""Tests for GraphMapper — hooks, list mapping, source coercion, async."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from flymapper.kernel.exceptions import IncompleteMappingError
from flymapper.mapping.graph import GraphMapper
from flymapper.mapping.registry import MappingRegistry
from flymapper.mapping.types import MapActionOptions, MapFrom, MapInitialize, Mapping, PropertyRule

# ---------------------------------------------------------------------------
# Test types
# ---------------------------------------------------------------------------


@dataclass
class User:
    id: int
    name: str


@dataclass
class UserDTO:
    id: int
    name: str


class HookRecorder:
    def __init__(self, tag: str, calls: list[tuple[str, Any, Any, Mapping]]) -> None:
        self._tag = tag
        self._calls = calls

    def __call__(self, source: Any, destination: Any, mapping: Mapping) -> None:
        self._calls.append((self._tag, source, destination, mapping))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> MappingRegistry:
    return MappingRegistry()


@pytest.fixture
def user_mapping(registry: MappingRegistry) -> Mapping:
    mapping = registry.create_mapping(User, UserDTO)
    mapping.properties["id"] = PropertyRule("id", MapInitialize())
    mapping.properties["name"] = PropertyRule("name", MapInitialize())
    return mapping


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestMapOne:
    def test_maps_every_rule(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        dto = GraphMapper(registry).map_one(User(id=1, name="ada"), user_mapping)

        assert dto == UserDTO(id=1, name="ada")

    def test_rules_run_in_insertion_order(self, registry: MappingRegistry) -> None:
        order: list[str] = []
        mapping = registry.create_mapping(User, UserDTO)
        mapping.properties["name"] = PropertyRule("name", MapFrom(lambda u: order.append("name") or u.name))
        mapping.properties["id"] = PropertyRule("id", MapFrom(lambda u: order.append("id") or u.id))

        GraphMapper(registry).map_one(User(id=1, name="ada"), mapping)

        assert order == ["name", "id"]

    def test_dict_source_is_coerced_without_mutation(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        raw = {"id": 2, "name": "grace"}

        dto = GraphMapper(registry).map_one(raw, user_mapping)

        assert dto == UserDTO(id=2, name="grace")
        assert raw == {"id": 2, "name": "grace"}

    def test_coverage_failure_lists_unmapped_members(self, registry: MappingRegistry) -> None:
        mapping = registry.create_mapping(User, UserDTO)
        mapping.properties["id"] = PropertyRule("id", MapInitialize())

        with pytest.raises(IncompleteMappingError) as exc_info:
            GraphMapper(registry).map_one(User(id=1, name="ada"), mapping)

        assert exc_info.value.unmapped_paths == ["name"]
        assert exc_info.value.code == "MAPPING_INCOMPLETE"

    def test_coverage_check_can_be_disabled(self, registry: MappingRegistry) -> None:
        mapping = registry.create_mapping(User, UserDTO)
        mapping.properties["id"] = PropertyRule("id", MapInitialize())

        dto = GraphMapper(registry, check_coverage=False).map_one(User(id=1, name="ada"), mapping)

        assert dto.id == 1
        assert not hasattr(dto, "name")


class TestHooks:
    def test_mapping_hooks_run_around_rules(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        calls: list[tuple[str, Any, Any, Mapping]] = []
        user_mapping.before_map_action = HookRecorder("before", calls)
        user_mapping.after_map_action = HookRecorder("after", calls)
        user = User(id=1, name="ada")

        dto = GraphMapper(registry).map_one(user, user_mapping)

        assert [tag for tag, *_ in calls] == ["before", "after"]
        _, before_source, before_destination, _ = calls[0]
        assert before_source is user
        assert before_destination is dto
        assert calls[1][2] is dto

    def test_before_hook_sees_unpopulated_destination(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        seen: dict[str, bool] = {}

        def before(source: Any, destination: Any, mapping: Mapping) -> None:
            seen["has_name"] = hasattr(destination, "name")

        user_mapping.before_map_action = before

        GraphMapper(registry).map_one(User(id=1, name="ada"), user_mapping)

        assert seen == {"has_name": False}

    def test_call_options_replace_mapping_hooks(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        calls: list[tuple[str, Any, Any, Mapping]] = []
        user_mapping.before_map_action = HookRecorder("mapping-before", calls)
        user_mapping.after_map_action = HookRecorder("mapping-after", calls)
        options = MapActionOptions(before_map=HookRecorder("call-before", calls))

        GraphMapper(registry).map_one(User(id=1, name="ada"), user_mapping, options)

        assert [tag for tag, *_ in calls] == ["call-before", "mapping-after"]

    def test_hooks_receive_a_snapshot(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        def tamper(source: Any, destination: Any, mapping: Mapping) -> None:
            mapping.properties.clear()

        user_mapping.before_map_action = tamper

        dto = GraphMapper(registry).map_one(User(id=1, name="ada"), user_mapping)

        assert dto == UserDTO(id=1, name="ada")
        assert list(user_mapping.properties) == ["id", "name"]


class TestMapMany:
    def test_maps_each_element(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        dtos = GraphMapper(registry).map_many([User(1, "a"), User(2, "b")], user_mapping)

        assert dtos == [UserDTO(1, "a"), UserDTO(2, "b")]

    def test_empty_list(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        assert GraphMapper(registry).map_many([], user_mapping) == []

    def test_option_hooks_see_whole_lists(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        calls: list[tuple[str, Any, Any, Mapping]] = []
        users = [User(1, "a"), User(2, "b")]
        options = MapActionOptions(
            before_map=HookRecorder("before", calls),
            after_map=HookRecorder("after", calls),
        )

        dtos = GraphMapper(registry).map_many(users, user_mapping, options)

        assert [tag for tag, *_ in calls] == ["before", "after"]
        assert calls[0][1] is users
        assert calls[1][2] is dtos
        assert calls[1][2] == [UserDTO(1, "a"), UserDTO(2, "b")]

    def test_element_level_hooks_are_suppressed(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        calls: list[tuple[str, Any, Any, Mapping]] = []
        user_mapping.before_map_action = HookRecorder("before", calls)
        user_mapping.after_map_action = HookRecorder("after", calls)

        GraphMapper(registry).map_many([User(1, "a"), User(2, "b")], user_mapping)

        assert calls == []


class TestAsync:
    @pytest.mark.asyncio
    async def test_map_one_async(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        dto = await GraphMapper(registry).map_one_async(User(1, "a"), user_mapping)

        assert dto == UserDTO(1, "a")

    @pytest.mark.asyncio
    async def test_map_many_async(self, registry: MappingRegistry, user_mapping: Mapping) -> None:
        dtos = await GraphMapper(registry).map_many_async([User(1, "a")], user_mapping)

        assert dtos == [UserDTO(1, "a")]
