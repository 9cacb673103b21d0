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
"""LoggingPort — the port through which the mapper configures logging."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from flymapper.config.properties.logging import LoggingProperties
from flymapper.core.config import Config

ENGINE_LOGGER = "flymapper"


@runtime_checkable
class LoggingPort(Protocol):
    """Port defining the logging contract for flymapper."""

    def configure(self, config: Config) -> None: ...
    def get_logger(self, name: str) -> Any: ...
    def set_level(self, name: str, level: str) -> None: ...


def level_number(level: str) -> int:
    """Numeric stdlib level for *level*; unknown names fall back to INFO."""
    return getattr(logging, level.upper(), logging.INFO)


def split_levels(props: LoggingProperties) -> tuple[str, dict[str, str]]:
    """Return the root level and the per-logger levels, engine logger included."""
    levels = {name: str(value).upper() for name, value in props.level.items()}
    root = levels.pop("root", "INFO")
    levels.setdefault(ENGINE_LOGGER, props.engine.upper())
    return root, levels
