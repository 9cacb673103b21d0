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
"""Tests for the flymapper exception hierarchy."""

from flymapper.kernel.exceptions import (
    ConfigurationException,
    DuplicateMappingError,
    FlyMapperException,
    IncompleteMappingError,
    MappingException,
    MappingNotFoundError,
)
from flymapper.kernel.types import ErrorCategory


class UserEntity:
    pass


class UserDTO:
    pass


class TestFlyMapperException:
    def test_basic_creation(self):
        exc = FlyMapperException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = FlyMapperException("bad mapping", code="MAPPING_001", context={"source": "Order"})
        assert exc.code == "MAPPING_001"
        assert exc.context["source"] == "Order"

    def test_context_defaults_to_empty_dict(self):
        exc = FlyMapperException("test")
        exc.context["key"] = "value"
        exc2 = FlyMapperException("test2")
        assert exc2.context == {}

    def test_default_category_is_technical(self):
        assert FlyMapperException.category is ErrorCategory.TECHNICAL


class TestExceptionHierarchy:
    def test_duplicate_is_configuration(self):
        assert issubclass(DuplicateMappingError, ConfigurationException)
        assert DuplicateMappingError.category is ErrorCategory.CONFIGURATION

    def test_not_found_is_mapping(self):
        assert issubclass(MappingNotFoundError, MappingException)
        assert MappingNotFoundError.category is ErrorCategory.MAPPING

    def test_incomplete_is_mapping(self):
        assert issubclass(IncompleteMappingError, MappingException)

    def test_catch_all_flymapper_exceptions(self):
        exceptions = [
            DuplicateMappingError(UserEntity, UserDTO),
            MappingNotFoundError(UserEntity, UserDTO),
            IncompleteMappingError(UserDTO, ["email"]),
        ]
        for exc in exceptions:
            try:
                raise exc
            except FlyMapperException as caught:
                assert caught is exc


class TestDomainExceptions:
    def test_duplicate_mapping(self):
        exc = DuplicateMappingError(UserEntity, UserDTO)
        assert exc.code == "MAPPING_DUPLICATE"
        assert exc.context == {"source": "UserEntity", "destination": "UserDTO"}
        assert "UserEntity" in str(exc) and "UserDTO" in str(exc)

    def test_not_found_for_pair(self):
        exc = MappingNotFoundError(UserEntity, UserDTO)
        assert exc.code == "MAPPING_NOT_FOUND"
        assert str(exc) == "Mapping not found for source UserEntity and destination UserDTO"

    def test_not_found_for_value(self):
        exc = MappingNotFoundError(UserEntity)
        assert str(exc) == "Mapping not found for source UserEntity"
        assert exc.context["destination"] is None

    def test_incomplete_lists_every_path(self):
        exc = IncompleteMappingError(UserDTO, ["email", "address.city"])
        assert exc.code == "MAPPING_INCOMPLETE"
        assert exc.unmapped_paths == ["email", "address.city"]
        assert str(exc) == "The following members are unmapped on UserDTO: email, address.city"
