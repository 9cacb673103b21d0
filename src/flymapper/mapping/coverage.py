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
"""Post-mapping coverage check."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from flymapper.kernel.exceptions import IncompleteMappingError
from flymapper.mapping.paths import declared_members, is_class_instance, is_member_set


def unmapped_paths(destination: Any, configured_paths: Iterable[str]) -> list[str]:
    """Declared member paths of *destination* that are neither configured nor set.

    Nested objects that are set are walked too, except below a configured
    path (the rule for that path owns its whole subtree).
    """
    missing: list[str] = []
    _collect(destination, "", set(configured_paths), missing, set())
    return missing


def _collect(obj: Any, prefix: str, configured: set[str], missing: list[str], seen: set[int]) -> None:
    if id(obj) in seen:
        return
    seen.add(id(obj))

    for name in declared_members(type(obj)):
        path = f"{prefix}{name}"
        if path in configured:
            continue
        if not is_member_set(obj, name):
            missing.append(path)
            continue
        value = getattr(obj, name)
        if is_class_instance(value):
            _collect(value, f"{path}.", configured, missing, seen)


def assert_coverage(destination: Any, configured_paths: Iterable[str]) -> None:
    """Raise one IncompleteMappingError listing every unmapped path."""
    missing = unmapped_paths(destination, configured_paths)
    if missing:
        raise IncompleteMappingError(type(destination), missing)
