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
"""StdlibLoggingAdapter — LoggingPort rendering mapper events through stdlib logging.

Loggers it hands out accept the same ``logger.warning(event, **context)``
calls as structlog loggers.  The context travels on the record as
``record.event_context`` and is rendered by :class:`EventFormatter`.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from flymapper.config.properties.logging import LoggingProperties
from flymapper.core.config import Config
from flymapper.logging.events import EVENT_CONTEXT_ATTR, get_event_logger
from flymapper.logging.port import level_number, split_levels


class EventFormatter(logging.Formatter):
    """Renders event key=value ... lines, or one JSON object per record."""

    def __init__(self, as_json: bool = False) -> None:
        super().__init__("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        self._as_json = as_json

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = getattr(record, EVENT_CONTEXT_ATTR, {})
        if self._as_json:
            payload = {
                "timestamp": self.formatTime(record),
                "level": record.levelname,
                "logger": record.name,
                "event": record.getMessage(),
                **context,
            }
            return json.dumps(payload, default=str)
        line = super().format(record)
        if context:
            line += " " + " ".join(f"{key}={value}" for key, value in context.items())
        return line


class StdlibLoggingAdapter:
    """LoggingPort for applications that route everything through stdlib logging."""

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        props = config.bind(LoggingProperties)
        self._root_level, self._module_levels = split_levels(props)
        self._format = props.format.lower()

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(EventFormatter(as_json=self._format == "json"))
        logging.basicConfig(handlers=[handler], level=level_number(self._root_level), force=True)

        for name, level in self._module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return get_event_logger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(level_number(level))
