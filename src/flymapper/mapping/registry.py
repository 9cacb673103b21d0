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
"""MappingRegistry — stores mappings keyed by (source, destination) identity pairs."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from flymapper.kernel.exceptions import DuplicateMappingError, MappingNotFoundError
from flymapper.logging.events import get_event_logger
from flymapper.mapping.identity import TypeIdentityTable
from flymapper.mapping.reverse import derive_reverse_mapping
from flymapper.mapping.types import CreateMapOptions, Mapping

logger = get_event_logger(__name__)

# Identities are lowercase hex digests, so the delimiter never occurs inside one.
_KEY_DELIMITER = "->"


def _pair_key(source_identity: str, destination_identity: str) -> str:
    return f"{source_identity}{_KEY_DELIMITER}{destination_identity}"


class MappingRegistry:
    """Owns every registered :class:`Mapping` and the class identity table.

    Registration is a single-writer configuration step: registering the
    same ordered pair twice always raises :class:`DuplicateMappingError`
    and leaves the existing mapping untouched.
    """

    def __init__(self) -> None:
        self._mappings: dict[str, Mapping] = {}
        self._identities = TypeIdentityTable()

    def __len__(self) -> int:
        return len(self._mappings)

    def __iter__(self) -> Iterator[Mapping]:
        return iter(list(self._mappings.values()))

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.has_mapping(*pair)

    @property
    def identities(self) -> TypeIdentityTable:
        return self._identities

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def create_mapping(
        self,
        source: type,
        destination: type,
        options: CreateMapOptions | None = None,
    ) -> Mapping:
        """Register an empty mapping for ``source -> destination``.

        The returned mapping's ``properties`` are populated afterwards by the
        configuration layer.
        """
        options = options or CreateMapOptions()
        key = self._claim_key(source, destination)
        mapping = Mapping(
            source=source,
            destination=destination,
            source_key=source.__name__,
            destination_key=destination.__name__,
            source_member_naming_convention=options.source_member_naming_convention,
            destination_member_naming_convention=options.destination_member_naming_convention,
        )
        self._mappings[key] = mapping
        logger.debug("mapping.created", source=mapping.source_key, destination=mapping.destination_key)
        return mapping

    def create_reverse_mapping(self, forward: Mapping) -> Mapping:
        """Derive and register the inverse of *forward*."""
        key = self._claim_key(forward.destination, forward.source)
        reverse = derive_reverse_mapping(forward, self)
        self._mappings[key] = reverse
        logger.debug(
            "mapping.reversed",
            source=reverse.source_key,
            destination=reverse.destination_key,
            properties=len(reverse.properties),
        )
        return reverse

    def reset(self) -> None:
        """Drop every mapping and every class identity."""
        count = len(self._mappings)
        self._mappings = {}
        self._identities.clear()
        logger.debug("mapping.reset", discarded=count)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def has_mapping(self, source: type, destination: type) -> bool:
        return self._lookup(source, destination) is not None

    def resolve(self, source_type: type, destination_type: type) -> Mapping:
        mapping = self._lookup(source_type, destination_type)
        if mapping is None:
            raise MappingNotFoundError(source_type, destination_type)
        return mapping

    def resolve_for_destination(
        self,
        destination_type: type,
        actual_source_type: type,
        allow_missing: bool = False,
    ) -> Mapping | None:
        """Resolve by destination and the runtime source class.

        Unlike :meth:`resolve`, classes without an identity of their own are
        looked up through their nearest registered ancestor.  With
        ``allow_missing=True`` a missing mapping yields ``None``; this is the
        speculative probe used while deriving reverse mappings for classes
        that may not take part in any hierarchy.
        """
        mapping = self._lookup(actual_source_type, destination_type, inherit=True)
        if mapping is None and not allow_missing:
            raise MappingNotFoundError(actual_source_type, destination_type)
        return mapping

    def resolve_by_value(self, instance: Any) -> Mapping:
        """Find the mapping whose source is the runtime class of *instance*.

        Candidates are matched on the source identity of the class (or its
        nearest registered ancestor) and then on the source class name.  The
        first registered match wins.
        """
        cls = type(instance)
        for candidate in cls.__mro__:
            if candidate not in self._identities:
                continue
            prefix = self._identities.identity(candidate) + _KEY_DELIMITER
            for key, mapping in self._mappings.items():
                if key.startswith(prefix) and mapping.source_key == candidate.__name__:
                    return mapping
        raise MappingNotFoundError(cls)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _identity(self, cls: type, inherit: bool) -> str:
        if cls in self._identities or inherit:
            return self._identities.identity(cls, create=False)
        return ""

    def _lookup(self, source: type, destination: type, inherit: bool = False) -> Mapping | None:
        source_identity = self._identity(source, inherit)
        destination_identity = self._identity(destination, inherit)
        if not source_identity or not destination_identity:
            return None
        return self._mappings.get(_pair_key(source_identity, destination_identity))

    def _claim_key(self, source: type, destination: type) -> str:
        key = _pair_key(self._identities.identity(source), self._identities.identity(destination))
        if key in self._mappings:
            raise DuplicateMappingError(source, destination)
        return key
