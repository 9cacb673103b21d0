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
"""TransformationDispatcher — executes one property rule against a source object.

Rules are matched exhaustively over the closed set of transformation
descriptors.  Nested class instances (and lists of them) re-enter the
registry to find their own mapping and the graph mapper to run it; a
nested source class that was never registered raises
``MappingNotFoundError`` out of the outer map call.

Lists are classified by their first element only: an empty list or a
``None`` first element maps to ``[]``, a primitive first element to a
shallow copy, anything else element by element through the mapping found
for the first element.  Heterogeneous lists are therefore misclassified.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, assert_never

from flymapper.logging.events import get_event_logger
from flymapper.mapping.instantiate import Instantiator
from flymapper.mapping.paths import get_path, is_class_instance, is_date, is_sequence, set_path
from flymapper.mapping.registry import MappingRegistry
from flymapper.mapping.types import (
    Condition,
    ConvertUsing,
    FromValue,
    Ignore,
    MapFrom,
    MapInitialize,
    Mapping,
    MapWith,
    NullSubstitution,
    PropertyRule,
    Resolver,
    Selector,
)

if TYPE_CHECKING:
    from flymapper.mapping.graph import GraphMapper

logger = get_event_logger(__name__)


def select(source: Any, selector: Selector) -> Any:
    """Apply a callable selector, or read a dot-path selector."""
    if isinstance(selector, str):
        return get_path(source, selector)
    return selector(source)


class TransformationDispatcher:
    def __init__(self, registry: MappingRegistry, graph: GraphMapper, instantiator: Instantiator) -> None:
        self._registry = registry
        self._graph = graph
        self._instantiator = instantiator

    def apply_one(
        self,
        destination: Any,
        destination_path: str,
        source: Any,
        resolved_source_path: str,
        mapping: Mapping,
        rule: PropertyRule,
    ) -> None:
        """Compute the value of *destination_path* and write it into *destination*."""

        def write(value: Any) -> None:
            set_path(destination, destination_path, value, factory=self._instantiator.instantiate)

        transformation = rule.transformation
        pre_condition = transformation.pre_condition
        if pre_condition is not None and not pre_condition.predicate(source):
            write(pre_condition.default)
            return

        match transformation:
            case Ignore():
                write(None)
            case FromValue(value=value):
                write(value)
            case MapFrom(selector=selector):
                if isinstance(selector, Resolver):
                    write(selector.resolve(source, destination, transformation))
                else:
                    write(select(source, selector))
            case ConvertUsing(converter=converter, value=value_selector):
                write(converter.convert(select(source, value_selector)))
            case MapWith():
                write(self._map_with(transformation, source, destination_path, resolved_source_path))
            case Condition(predicate=predicate, default=default):
                write(get_path(source, resolved_source_path) if predicate(source) else default)
            case NullSubstitution(substitute=substitute):
                write(get_path(source, resolved_source_path, substitute))
            case MapInitialize(selector=selector):
                value = select(source, resolved_source_path if selector is None else selector)
                write(self._infer(value))
            case _:
                assert_never(transformation)

    # ------------------------------------------------------------------
    # Nested mapping
    # ------------------------------------------------------------------

    def _map_with(self, transformation: MapWith, source: Any, destination_path: str, source_path: str) -> Any:
        value = select(source, transformation.from_value)
        target = transformation.destination

        if value is None:
            logger.warning("mapwith.source_missing", source_path=source_path, destination_path=destination_path)
            return None

        if is_sequence(value):
            if not value or value[0] is None:
                return []
            nested = self._registry.resolve_for_destination(target, type(value[0]))
            return self._graph.map_many(list(value), nested)

        if not is_class_instance(value):
            logger.warning(
                "mapwith.source_primitive",
                destination_path=destination_path,
                destination=target.__name__,
                value=repr(value),
            )
            return None

        nested = self._registry.resolve_for_destination(target, type(value))
        return self._graph.map_one(value, nested)

    def _infer(self, value: Any) -> Any:
        """Structural mapping of a source value with no explicit rule."""
        if value is None:
            return None
        if is_date(value):
            return copy.copy(value)
        if is_sequence(value):
            if not value or value[0] is None:
                return []
            first = value[0]
            if not is_class_instance(first):
                return list(value)
            return self._graph.map_many(list(value), self._registry.resolve_by_value(first))
        if isinstance(value, dict):
            return dict(value)
        if isinstance(value, (set, frozenset)):
            return type(value)(value)
        if is_class_instance(value):
            return self._graph.map_one(value, self._registry.resolve_by_value(value))
        return value
