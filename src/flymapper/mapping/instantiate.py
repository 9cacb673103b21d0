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
"""Instantiation of destination objects and coerced source objects."""

from __future__ import annotations

import dataclasses
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from flymapper.mapping.paths import declared_members, set_member, to_seed

T = TypeVar("T")


@runtime_checkable
class Instantiator(Protocol):
    """Creates a new instance of a class, optionally seeded from a data bag."""

    def instantiate(self, cls: type[T], seed: Any = None) -> T: ...


class DefaultInstantiator:
    """Builds instances without calling ``__init__``.

    Members with a default (dataclass defaults and factories, pydantic
    defaults) are populated; required members stay unset until a rule
    writes them, which is what the coverage check looks for.  Seed values
    are copied for declared members only, or for every key when the class
    declares none.
    """

    def instantiate(self, cls: type[T], seed: Any = None) -> T:
        values = to_seed(seed)

        if issubclass(cls, BaseModel):
            declared = set(cls.model_fields)
            return cls.model_construct(**{k: v for k, v in values.items() if k in declared})  # type: ignore[return-value]

        instance = object.__new__(cls)
        if dataclasses.is_dataclass(cls):
            for f in dataclasses.fields(cls):
                if f.default is not dataclasses.MISSING:
                    set_member(instance, f.name, f.default)
                elif f.default_factory is not dataclasses.MISSING:
                    set_member(instance, f.name, f.default_factory())

        declared_names = declared_members(cls)
        for name, value in values.items():
            if not declared_names or name in declared_names:
                set_member(instance, name, value)
        return instance
