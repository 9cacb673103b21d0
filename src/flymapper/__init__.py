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
"""flymapper — declarative object graph mapping.

Register a mapping between two classes, configure the members that need
more than a name match, and map instances (or lists, or awaitables of
either) through it.
"""

from flymapper.kernel.exceptions import (
    DuplicateMappingError,
    FlyMapperException,
    IncompleteMappingError,
    MappingNotFoundError,
)
from flymapper.mapper import Mapper
from flymapper.mapping import (
    CamelCaseNamingConvention,
    CreateMapOptions,
    MapActionOptions,
    MappingExpression,
    PascalCaseNamingConvention,
    SnakeCaseNamingConvention,
    condition,
    convert_using,
    from_value,
    ignore,
    map_from,
    map_with,
    null_substitution,
    pre_condition,
)

__version__ = "0.1.0"

__all__ = [
    "CamelCaseNamingConvention",
    "CreateMapOptions",
    "DuplicateMappingError",
    "FlyMapperException",
    "IncompleteMappingError",
    "MapActionOptions",
    "Mapper",
    "MappingExpression",
    "MappingNotFoundError",
    "PascalCaseNamingConvention",
    "SnakeCaseNamingConvention",
    "condition",
    "convert_using",
    "from_value",
    "ignore",
    "map_from",
    "map_with",
    "null_substitution",
    "pre_condition",
]
