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
"""flymapper Mapping — the mapping resolution and execution engine."""

from flymapper.mapping.coverage import assert_coverage, unmapped_paths
from flymapper.mapping.expression import (
    MappingExpression,
    condition,
    convert_using,
    from_value,
    ignore,
    map_from,
    map_with,
    null_substitution,
    pre_condition,
)
from flymapper.mapping.graph import GraphMapper
from flymapper.mapping.identity import TypeIdentityTable
from flymapper.mapping.instantiate import DefaultInstantiator, Instantiator
from flymapper.mapping.naming import (
    CamelCaseNamingConvention,
    NamingConvention,
    PascalCaseNamingConvention,
    SnakeCaseNamingConvention,
    naming_convention_for,
    resolve_source_path,
)
from flymapper.mapping.registry import MappingRegistry
from flymapper.mapping.types import (
    Condition,
    Converter,
    ConvertUsing,
    CreateMapOptions,
    FromValue,
    Ignore,
    MapActionOptions,
    MapFrom,
    MapInitialize,
    Mapping,
    MapWith,
    NullSubstitution,
    PreCondition,
    PropertyRule,
    Resolver,
    Transformation,
)

__all__ = [
    # Records and descriptors
    "Condition",
    "Converter",
    "ConvertUsing",
    "CreateMapOptions",
    "FromValue",
    "Ignore",
    "MapActionOptions",
    "MapFrom",
    "MapInitialize",
    "MapWith",
    "Mapping",
    "NullSubstitution",
    "PreCondition",
    "PropertyRule",
    "Resolver",
    "Transformation",
    # Engine
    "DefaultInstantiator",
    "GraphMapper",
    "Instantiator",
    "MappingRegistry",
    "TypeIdentityTable",
    "assert_coverage",
    "unmapped_paths",
    # Naming
    "CamelCaseNamingConvention",
    "NamingConvention",
    "PascalCaseNamingConvention",
    "SnakeCaseNamingConvention",
    "naming_convention_for",
    "resolve_source_path",
    # Configuration
    "MappingExpression",
    "condition",
    "convert_using",
    "from_value",
    "ignore",
    "map_from",
    "map_with",
    "null_substitution",
    "pre_condition",
]
