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
"""Naming conventions and destination-to-source member path resolution.

A convention knows how to split an identifier into words and how to join
words back into an identifier::

    resolve_source_path(SnakeCaseNamingConvention(), CamelCaseNamingConvention(), "address.zip_code")
    # -> "address.zipCode"
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

_CASED_WORDS = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z0-9]+")


@runtime_checkable
class NamingConvention(Protocol):
    separator_character: str
    splitting_expression: re.Pattern[str]

    def transform_property_name(self, parts: Sequence[str]) -> str: ...


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


@dataclass(frozen=True)
class CamelCaseNamingConvention:
    """``zipCode``"""

    separator_character: str = ""
    splitting_expression: re.Pattern[str] = field(default=_CASED_WORDS, repr=False)

    def transform_property_name(self, parts: Sequence[str]) -> str:
        if not parts:
            return ""
        first, *rest = parts
        return first.lower() + "".join(_capitalize(p) for p in rest)


@dataclass(frozen=True)
class PascalCaseNamingConvention:
    """``ZipCode``"""

    separator_character: str = ""
    splitting_expression: re.Pattern[str] = field(default=_CASED_WORDS, repr=False)

    def transform_property_name(self, parts: Sequence[str]) -> str:
        return "".join(_capitalize(p) for p in parts)


@dataclass(frozen=True)
class SnakeCaseNamingConvention:
    """``zip_code``"""

    separator_character: str = "_"
    splitting_expression: re.Pattern[str] = field(default=re.compile(r"[^_]+"), repr=False)

    def transform_property_name(self, parts: Sequence[str]) -> str:
        return self.separator_character.join(p.lower() for p in parts)


_CONVENTIONS: dict[str, type] = {
    "camel_case": CamelCaseNamingConvention,
    "pascal_case": PascalCaseNamingConvention,
    "snake_case": SnakeCaseNamingConvention,
}


def naming_convention_for(name: str | None) -> NamingConvention | None:
    """Look a convention up by its configuration name; empty means none."""
    if not name:
        return None
    key = name.strip().lower().replace("-", "_")
    try:
        return _CONVENTIONS[key]()
    except KeyError:
        raise ValueError(f"Unknown naming convention '{name}'. Expected one of: {', '.join(_CONVENTIONS)}") from None


def _resolve_segment(
    destination_convention: NamingConvention,
    source_convention: NamingConvention,
    segment: str,
) -> str:
    parts = destination_convention.splitting_expression.findall(segment)
    if not parts:
        return segment
    return source_convention.transform_property_name(parts)


def resolve_source_path(
    destination_convention: NamingConvention | None,
    source_convention: NamingConvention | None,
    destination_path: str,
) -> str:
    """Translate a destination member path into the matching source member path.

    Each dot-separated segment is split by the destination convention and
    re-joined by the source convention.  When either convention is missing,
    or both are the same convention, the path is returned unchanged.
    """
    if destination_convention is None or source_convention is None:
        return destination_path
    if destination_convention == source_convention:
        return destination_path
    return ".".join(
        _resolve_segment(destination_convention, source_convention, segment)
        for segment in destination_path.split(".")
    )
