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
"""Mapping engine configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from flymapper.core.config import config_properties


@config_properties(prefix="flymapper.mapping")
@dataclass
class MapperProperties:
    """Defaults applied by Mapper.create_map (flymapper.mapping.*).

    Naming conventions are given by name (camel_case, pascal_case,
    snake_case); an empty string means members are matched verbatim.
    """

    source_naming_convention: str = ""
    destination_naming_convention: str = ""
    assert_coverage: bool = True
