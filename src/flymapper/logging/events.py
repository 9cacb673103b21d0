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
"""Event-style loggers over stdlib logging.

The mapping engine logs through these, so its events reach whatever
handlers the application installed on the ``flymapper`` logger tree.
Calls keep the structlog shape, ``logger.warning(event, **context)``;
the context travels on the record as ``record.event_context``.
"""

from __future__ import annotations

import logging
from typing import Any

EVENT_CONTEXT_ATTR = "event_context"


class EventLogger:
    """Wraps a :class:`logging.Logger` with structlog-style event methods."""

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, event: str, context: dict[str, Any]) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, event, extra={EVENT_CONTEXT_ATTR: context}, stacklevel=3)

    def debug(self, event: str, **context: Any) -> None:
        self._log(logging.DEBUG, event, context)

    def info(self, event: str, **context: Any) -> None:
        self._log(logging.INFO, event, context)

    def warning(self, event: str, **context: Any) -> None:
        self._log(logging.WARNING, event, context)

    def error(self, event: str, **context: Any) -> None:
        self._log(logging.ERROR, event, context)


def get_event_logger(name: str) -> EventLogger:
    return EventLogger(logging.getLogger(name))
