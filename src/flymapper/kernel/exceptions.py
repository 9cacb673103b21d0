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
"""Unified exception hierarchy for flymapper.

All mapper exceptions inherit from FlyMapperException, enabling unified
error handling: catch FlyMapperException to handle every mapper failure,
or catch a specific subclass for targeted handling.

Categories:
- ConfigurationException: Registration-time errors (duplicate mappings)
- MappingException: Map-time errors (missing mappings, incomplete coverage)
"""

from __future__ import annotations

from typing import Any, ClassVar

from flymapper.kernel.types import ErrorCategory


def _type_name(cls: Any) -> str | None:
    if cls is None:
        return None
    return getattr(cls, "__name__", None) or type(cls).__name__


# =============================================================================
# Base Exception
# =============================================================================


class FlyMapperException(Exception):
    """Base exception for all flymapper errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "MAPPING_NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.TECHNICAL

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Categories
# =============================================================================


class ConfigurationException(FlyMapperException):
    """Mapping registration and configuration errors."""

    category = ErrorCategory.CONFIGURATION


class MappingException(FlyMapperException):
    """Errors raised while executing a mapping."""

    category = ErrorCategory.MAPPING


# =============================================================================
# Domain Exceptions
# =============================================================================


class DuplicateMappingError(ConfigurationException):
    """A mapping for the exact (source, destination) pair already exists."""

    def __init__(self, source: type, destination: type) -> None:
        super().__init__(
            f"Mapping for source {_type_name(source)} and destination {_type_name(destination)} already exists",
            code="MAPPING_DUPLICATE",
            context={"source": _type_name(source), "destination": _type_name(destination)},
        )


class MappingNotFoundError(MappingException):
    """No mapping is registered for the requested pair (or source value)."""

    def __init__(self, source: Any, destination: Any = None) -> None:
        source_name = _type_name(source)
        destination_name = _type_name(destination)
        if destination_name is None:
            message = f"Mapping not found for source {source_name}"
        else:
            message = f"Mapping not found for source {source_name} and destination {destination_name}"
        super().__init__(
            message,
            code="MAPPING_NOT_FOUND",
            context={"source": source_name, "destination": destination_name},
        )


class IncompleteMappingError(MappingException):
    """Destination members were neither configured nor set during mapping.

    Raised once per mapping call with every offending path, never one error
    per path.
    """

    def __init__(self, destination: type, unmapped_paths: list[str]) -> None:
        listing = ", ".join(unmapped_paths)
        super().__init__(
            f"The following members are unmapped on {_type_name(destination)}: {listing}",
            code="MAPPING_INCOMPLETE",
            context={"destination": _type_name(destination), "unmapped_paths": list(unmapped_paths)},
        )

    @property
    def unmapped_paths(self) -> list[str]:
        return self.context["unmapped_paths"]
