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
"""Tests for EventLogger — structlog-style event calls over stdlib loggers."""

import logging

import pytest

from flymapper.logging.events import EventLogger, get_event_logger


class TestEventLogger:
    def test_wraps_named_stdlib_logger(self):
        logger = get_event_logger("flymapper.events.test")
        assert isinstance(logger, EventLogger)
        assert logger.name == "flymapper.events.test"

    def test_record_points_at_calling_function(self, caplog: pytest.LogCaptureFixture):
        logger = get_event_logger("flymapper.events.caller")
        with caplog.at_level(logging.INFO, logger="flymapper.events.caller"):
            logger.info("mapping.reset", discarded=2)
        [record] = caplog.records
        assert record.funcName == "test_record_points_at_calling_function"
        assert record.event_context == {"discarded": 2}

    def test_each_level_method(self, caplog: pytest.LogCaptureFixture):
        logger = get_event_logger("flymapper.events.levels")
        with caplog.at_level(logging.DEBUG, logger="flymapper.events.levels"):
            logger.debug("a")
            logger.info("b")
            logger.warning("c")
            logger.error("d")
        assert [r.levelno for r in caplog.records] == [logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR]
