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
"""Declarative type-to-type mapper inspired by AutoMapper.

Maps between any two types (dataclasses, pydantic models, plain annotated
classes) through registered mappings.  Members are matched by name, across
naming conventions if configured, and individual members can be computed,
converted, ignored, guarded by conditions or mapped through nested
mappings.  A forward mapping can derive its reverse.

Example::

    mapper = Mapper()
    mapper.create_map(UserEntity, UserDTO)
    dto = mapper.map(user_entity, UserDTO)

    # Computed member and reverse mapping
    mapper.create_map(Person, PersonDTO).for_member(
        "full_name", map_from(lambda p: f"{p.first_name} {p.last_name}")
    ).reverse_map()

    # Across naming conventions
    mapper.create_map(
        ApiUser,
        User,
        CreateMapOptions(
            source_member_naming_convention=CamelCaseNamingConvention(),
            destination_member_naming_convention=SnakeCaseNamingConvention(),
        ),
    )
"""

from __future__ import annotations

from typing import TypeVar

from flymapper.config.properties.mapper import MapperProperties
from flymapper.core.config import Config
from flymapper.mapping.expression import MappingExpression, initialize_mapping_properties
from flymapper.mapping.graph import GraphMapper
from flymapper.mapping.instantiate import Instantiator
from flymapper.mapping.naming import naming_convention_for
from flymapper.mapping.registry import MappingRegistry
from flymapper.mapping.types import CreateMapOptions, MapActionOptions, Mapping

S = TypeVar("S")
D = TypeVar("D")


class Mapper:
    """Owns a mapping registry and maps instances through it.

    Every Mapper has its own registry, so independent mappers (one per
    test, one per bounded context) never see each other's mappings.

    Usage::

        mapper = Mapper()
        mapper.create_map(Order, OrderSummary).for_member("total", map_from(lambda o: o.quantity * o.price))
        summary = mapper.map(order, OrderSummary)
        summaries = mapper.map_list(orders, OrderSummary)
    """

    def __init__(
        self,
        properties: MapperProperties | None = None,
        instantiator: Instantiator | None = None,
    ) -> None:
        self._properties = properties or MapperProperties()
        self._registry = MappingRegistry()
        self._graph = GraphMapper(self._registry, instantiator, check_coverage=self._properties.assert_coverage)
        self._default_options = CreateMapOptions(
            source_member_naming_convention=naming_convention_for(self._properties.source_naming_convention),
            destination_member_naming_convention=naming_convention_for(
                self._properties.destination_naming_convention
            ),
        )

    @classmethod
    def from_config(cls, config: Config, instantiator: Instantiator | None = None) -> Mapper:
        """Build a mapper from the ``flymapper.mapping`` configuration section."""
        return cls(config.bind(MapperProperties), instantiator)

    @property
    def registry(self) -> MappingRegistry:
        return self._registry

    def create_map(
        self,
        source: type[S],
        destination: type[D],
        options: CreateMapOptions | None = None,
    ) -> MappingExpression:
        """Register ``source -> destination`` and return its configuration expression.

        Destination members whose (convention-resolved) name the source
        declares get a structural rule straight away; everything else is
        configured through the returned expression.
        """
        mapping = self._registry.create_mapping(source, destination, options or self._default_options)
        initialize_mapping_properties(mapping)
        return MappingExpression(mapping, self._registry)

    def get_mapping(self, source: type, destination: type) -> Mapping:
        return self._registry.resolve(source, destination)

    def map(
        self,
        source: S,
        destination_type: type[D],
        source_type: type | None = None,
        options: MapActionOptions | None = None,
    ) -> D:
        """Map *source* to a new *destination_type* instance.

        *source_type* is needed when *source* is a plain dict (or any object
        that is not an instance of the registered source class).
        """
        mapping = self._resolve(source_type or type(source), destination_type)
        return self._graph.map_one(source, mapping, options)

    def map_list(
        self,
        sources: list[S],
        destination_type: type[D],
        source_type: type | None = None,
        options: MapActionOptions | None = None,
    ) -> list[D]:
        """Map a list of source objects in one call; hooks see the whole lists."""
        if not sources and source_type is None:
            return []
        mapping = self._resolve(source_type or type(sources[0]), destination_type)
        return self._graph.map_many(sources, mapping, options)

    async def map_async(
        self,
        source: S,
        destination_type: type[D],
        source_type: type | None = None,
        options: MapActionOptions | None = None,
    ) -> D:
        mapping = self._resolve(source_type or type(source), destination_type)
        return await self._graph.map_one_async(source, mapping, options)

    async def map_list_async(
        self,
        sources: list[S],
        destination_type: type[D],
        source_type: type | None = None,
        options: MapActionOptions | None = None,
    ) -> list[D]:
        if not sources and source_type is None:
            return []
        mapping = self._resolve(source_type or type(sources[0]), destination_type)
        return await self._graph.map_many_async(sources, mapping, options)

    def dispose(self) -> None:
        """Forget every mapping; the mapper can be configured again afterwards."""
        self._registry.reset()

    def _resolve(self, source_type: type, destination_type: type) -> Mapping:
        return self._registry.resolve_for_destination(destination_type, source_type)  # type: ignore[return-value]
