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
"""GraphMapper — runs a resolved Mapping over one instance or a list."""

from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

from flymapper.mapping.coverage import assert_coverage
from flymapper.mapping.dispatcher import TransformationDispatcher
from flymapper.mapping.instantiate import DefaultInstantiator, Instantiator
from flymapper.mapping.naming import resolve_source_path
from flymapper.mapping.registry import MappingRegistry
from flymapper.mapping.types import MapAction, MapActionOptions, Mapping


def _snapshot(mapping: Mapping) -> Mapping:
    # Hooks get a copy so they cannot swap out the live rule table.
    return dataclasses.replace(mapping, properties=dict(mapping.properties))


class GraphMapper:
    """Orchestrates hooks, rule iteration and the coverage check.

    Args:
        registry: Registry used to resolve nested mappings.
        instantiator: Creates destination objects and coerced sources.
        check_coverage: Run the coverage check after every mapped instance.
    """

    def __init__(
        self,
        registry: MappingRegistry,
        instantiator: Instantiator | None = None,
        check_coverage: bool = True,
    ) -> None:
        self._registry = registry
        self._instantiator = instantiator or DefaultInstantiator()
        self._check_coverage = check_coverage
        self._dispatcher = TransformationDispatcher(registry, self, self._instantiator)

    @property
    def instantiator(self) -> Instantiator:
        return self._instantiator

    def map_one(
        self,
        source: Any,
        mapping: Mapping,
        options: MapActionOptions | None = None,
        is_array_map: bool = False,
    ) -> Any:
        """Map one source instance through *mapping*.

        A source that is not an instance of ``mapping.source`` is rebuilt as
        one from its own members first; the caller's object is not touched.
        Per-call hooks take priority over the mapping's hooks, only one of
        the two runs, and neither runs for elements of a list.
        """
        options = options or MapActionOptions()
        if not isinstance(source, mapping.source):
            source = self._instantiator.instantiate(mapping.source, source)

        destination = self._instantiator.instantiate(mapping.destination)

        if not is_array_map:
            self._run_hook(options.before_map, mapping.before_map_action, source, destination, mapping)

        configured: list[str] = []
        for path, rule in list(mapping.properties.items()):
            configured.append(path)
            source_path = resolve_source_path(
                mapping.destination_member_naming_convention,
                mapping.source_member_naming_convention,
                path,
            )
            self._dispatcher.apply_one(destination, path, source, source_path, mapping, rule)

        if self._check_coverage:
            assert_coverage(destination, configured)

        if not is_array_map:
            self._run_hook(options.after_map, mapping.after_map_action, source, destination, mapping)

        return destination

    def map_many(
        self,
        sources: list[Any],
        mapping: Mapping,
        options: MapActionOptions | None = None,
    ) -> list[Any]:
        """Map every element of *sources*; hooks see the whole lists once."""
        options = options or MapActionOptions()
        destination: list[Any] = []

        if options.before_map is not None:
            options.before_map(sources, destination, _snapshot(mapping))

        destination.extend(self.map_one(source, mapping, is_array_map=True) for source in sources)

        if options.after_map is not None:
            options.after_map(sources, destination, _snapshot(mapping))

        return destination

    async def map_one_async(
        self,
        source: Any,
        mapping: Mapping,
        options: MapActionOptions | None = None,
    ) -> Any:
        """Defer to the next loop turn, then map atomically."""
        await asyncio.sleep(0)
        return self.map_one(source, mapping, options)

    async def map_many_async(
        self,
        sources: list[Any],
        mapping: Mapping,
        options: MapActionOptions | None = None,
    ) -> list[Any]:
        await asyncio.sleep(0)
        return self.map_many(sources, mapping, options)

    @staticmethod
    def _run_hook(
        explicit: MapAction | None,
        configured: MapAction | None,
        source: Any,
        destination: Any,
        mapping: Mapping,
    ) -> None:
        hook = explicit if explicit is not None else configured
        if hook is not None:
            hook(source, destination, _snapshot(mapping))
