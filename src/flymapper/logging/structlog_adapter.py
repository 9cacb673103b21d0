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
"""StructlogAdapter — default LoggingPort implementation using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from flymapper.config.properties.logging import LoggingProperties
from flymapper.core.config import Config
from flymapper.logging.events import EVENT_CONTEXT_ATTR
from flymapper.logging.port import level_number, split_levels


def add_mapping_pair(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Add ``pair="Source->Destination"`` to events about one mapping."""
    source = event_dict.get("source")
    destination = event_dict.get("destination")
    if source is not None and destination is not None and "pair" not in event_dict:
        event_dict["pair"] = f"{source}->{destination}"
    return event_dict


def add_event_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Lift the context of a stdlib event record into the event dict."""
    record = event_dict.get("_record")
    context = getattr(record, EVENT_CONTEXT_ATTR, None)
    if context:
        for key, value in context.items():
            event_dict.setdefault(key, value)
    return event_dict


class StructlogAdapter:
    """Default logging adapter backed by structlog.

    The mapping engine logs its events (mapping.created,
    mapwith.source_missing ...) through stdlib loggers under
    ``flymapper``.  This adapter installs a
    :class:`structlog.stdlib.ProcessorFormatter` on the root handler so
    those records are rendered the same way as events from structlog
    loggers handed out by :meth:`get_logger`.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        props = config.bind(LoggingProperties)
        self._root_level, self._module_levels = split_levels(props)
        self._format = props.format.lower()

        renderer: Any = (
            structlog.processors.JSONRenderer() if self._format == "json" else structlog.dev.ConsoleRenderer()
        )
        shared: list[Any] = [
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_mapping_pair,
            structlog.processors.TimeStamper(fmt="iso"),
        ]
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.filter_by_level,
                *shared,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.UnicodeDecoder(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=[structlog.contextvars.merge_contextvars, add_event_context, *shared],
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )
        logging.basicConfig(handlers=[handler], level=level_number(self._root_level), force=True)

        for name, level in self._module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(level_number(level))
