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
"""Stable per-class identities used to key the mapping registry.

Identities are keyed by the class object itself, never by name: two
classes called ``UserDTO`` in different modules (or two identically shaped
classes defined in the same test) must not collide.  Each class gets a
digest of its serialized definition salted with the order in which it was
first seen, so the table behaves like an arena indexed by arrival.
"""

from __future__ import annotations

import hashlib
import weakref

from flymapper.mapping.paths import declared_members


def _serialize_definition(cls: type) -> str:
    members = ",".join(declared_members(cls))
    return f"{cls.__module__}.{cls.__qualname__}({members})"


class TypeIdentityTable:
    """Append-only table of class identities.

    An identity never changes once assigned.  Entries disappear only when
    the class itself is garbage collected or on :meth:`clear`.
    """

    def __init__(self) -> None:
        self._identities: weakref.WeakKeyDictionary[type, str] = weakref.WeakKeyDictionary()
        self._counter = 0

    def __len__(self) -> int:
        return len(self._identities)

    def __contains__(self, cls: object) -> bool:
        return cls in self._identities

    def identity(self, cls: type, create: bool = True) -> str:
        """Return the identity of *cls*.

        With ``create=False`` nothing is assigned: the nearest ancestor in
        the MRO that already has an identity answers instead, and ``""``
        is returned when none does.
        """
        existing = self._identities.get(cls)
        if existing is not None:
            return existing

        if create:
            return self._assign(cls)

        owner = self.owner_of(cls)
        return self._identities[owner] if owner is not None else ""

    def owner_of(self, cls: type) -> type | None:
        """The class in *cls*'s MRO whose identity stands for *cls*, if any."""
        for candidate in getattr(cls, "__mro__", (cls,)):
            if candidate in self._identities:
                return candidate
        return None

    def clear(self) -> None:
        self._identities = weakref.WeakKeyDictionary()
        self._counter = 0

    def _assign(self, cls: type) -> str:
        self._counter += 1
        digest = hashlib.blake2b(
            f"{_serialize_definition(cls)}#{self._counter}".encode(),
            digest_size=8,
        ).hexdigest()
        self._identities[cls] = digest
        return digest
