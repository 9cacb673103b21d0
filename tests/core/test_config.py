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
"""Tests for Config — dot access, files, profiles, env overrides and binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel

from flymapper.core.config import Config, config_properties


class TestConfig:
    def test_get_simple_value(self):
        config = Config({"app": {"port": 8080}})
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_falsy_values_are_returned(self):
        config = Config({"flymapper": {"mapping": {"assert-coverage": False}}})
        assert config.get("flymapper.mapping.assert-coverage", True) is False

    def test_get_section(self):
        config = Config({"flymapper": {"mapping": {"a": 1}}})
        assert config.get_section("flymapper.mapping") == {"a": 1}
        assert config.get_section("flymapper.missing") == {}

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("FLYMAPPER_MAPPING_SOURCE_NAMING_CONVENTION", "camel_case")
        config = Config({"flymapper": {"mapping": {"source-naming-convention": "snake_case"}}})
        assert config.get("flymapper.mapping.source-naming-convention") == "camel_case"


class TestPlaceholders:
    def test_config_reference(self):
        config = Config({"naming": {"default": "snake_case"}, "mapping": {"source": "${naming.default}"}})
        assert config.get("mapping.source") == "snake_case"

    def test_env_reference(self, monkeypatch):
        monkeypatch.setenv("SOURCE_CONVENTION", "pascal_case")
        config = Config({"mapping": {"source": "${SOURCE_CONVENTION}"}})
        assert config.get("mapping.source") == "pascal_case"

    def test_default_value(self):
        config = Config({"mapping": {"source": "${UNSET_CONVENTION_FOR_TEST:camel_case}"}})
        assert config.get("mapping.source") == "camel_case"

    def test_unresolvable_raises(self):
        config = Config({"mapping": {"source": "${nowhere.to.be.found}"}})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("mapping.source")

    def test_circular_reference_raises(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="Max recursion depth"):
            config.get("a")


class TestFromFile:
    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "flymapper.yaml"
        config_file.write_text("flymapper:\n  mapping:\n    source-naming-convention: camel_case\n")
        config = Config.from_file(config_file)
        assert config.get("flymapper.mapping.source-naming-convention") == "camel_case"

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "flymapper.toml"
        config_file.write_text('[flymapper.mapping]\nassert-coverage = false\n')
        config = Config.from_file(config_file)
        assert config.get("flymapper.mapping.assert-coverage") is False

    def test_packaged_defaults_are_loaded(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("flymapper.logging.format") == "console"
        assert config.get("flymapper.mapping.assert-coverage") is True
        assert config.loaded_sources == ["flymapper-defaults.yaml (defaults)"]

    def test_defaults_can_be_skipped(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml", load_defaults=False)
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_file_overrides_defaults(self, tmp_path: Path):
        config_file = tmp_path / "flymapper.yaml"
        config_file.write_text("flymapper:\n  logging:\n    format: json\n")
        config = Config.from_file(config_file)
        assert config.get("flymapper.logging.format") == "json"
        assert config.get("flymapper.logging.level.root") == "INFO"


class TestProfileConfigMerging:
    def test_merge_profile_config(self, tmp_path):
        base = tmp_path / "flymapper.yaml"
        base.write_text("flymapper:\n  mapping:\n    source-naming-convention: camel_case\n")

        profile = tmp_path / "flymapper-dev.yaml"
        profile.write_text("flymapper:\n  mapping:\n    assert-coverage: false\n")

        config = Config.from_file(base, active_profiles=["dev"], load_defaults=False)
        assert config.get("flymapper.mapping.source-naming-convention") == "camel_case"
        assert config.get("flymapper.mapping.assert-coverage") is False
        assert config.loaded_sources == [str(base), f"{profile} (profile: dev)"]

    def test_later_profile_wins(self, tmp_path):
        base = tmp_path / "flymapper.yaml"
        base.write_text("naming:\n  source: base\n")
        (tmp_path / "flymapper-dev.yaml").write_text("naming:\n  source: dev\n")
        (tmp_path / "flymapper-local.yaml").write_text("naming:\n  source: local\n")

        config = Config.from_file(base, active_profiles=["dev", "local"])
        assert config.get("naming.source") == "local"

    def test_missing_profile_file_is_skipped(self, tmp_path):
        base = tmp_path / "flymapper.yaml"
        base.write_text("naming:\n  source: base\n")

        config = Config.from_file(base, active_profiles=["nonexistent"])
        assert config.get("naming.source") == "base"

    def test_env_vars_still_win(self, tmp_path, monkeypatch):
        base = tmp_path / "flymapper.yaml"
        base.write_text("naming:\n  source: base\n")
        (tmp_path / "flymapper-dev.yaml").write_text("naming:\n  source: dev\n")

        monkeypatch.setenv("FLYMAPPER_NAMING_SOURCE", "env-wins")
        config = Config.from_file(base, active_profiles=["dev"])
        assert config.get("naming.source") == "env-wins"


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="flymapper.sample")
        @dataclass
        class SampleProperties:
            name: str = "default"
            retries: int = 1

        config = Config({"flymapper": {"sample": {"name": "custom", "retries": 3}}})
        props = config.bind(SampleProperties)
        assert props.name == "custom"
        assert props.retries == 3

    def test_bind_coerces_env_strings(self, monkeypatch):
        @config_properties(prefix="flymapper.sample")
        @dataclass
        class SampleProperties:
            retries: int = 1
            enabled: bool = False

        monkeypatch.setenv("FLYMAPPER_SAMPLE_RETRIES", "7")
        monkeypatch.setenv("FLYMAPPER_SAMPLE_ENABLED", "yes")
        props = Config({}).bind(SampleProperties)
        assert props.retries == 7
        assert props.enabled is True

    def test_bind_to_pydantic_model(self):
        @config_properties(prefix="flymapper.sample")
        class SampleModel(BaseModel):
            source_naming_convention: str = ""
            limit: int = 10

        config = Config({"flymapper": {"sample": {"source-naming-convention": "snake_case", "limit": "20"}}})
        props = config.bind(SampleModel)
        assert props.source_naming_convention == "snake_case"
        assert props.limit == 20

    def test_pydantic_validation_failure(self):
        @config_properties(prefix="flymapper.sample")
        class SampleModel(BaseModel):
            limit: int = 10

        config = Config({"flymapper": {"sample": {"limit": "many"}}})
        with pytest.raises(ValueError, match="Configuration validation failed"):
            config.bind(SampleModel)

    def test_undecorated_class_is_rejected(self):
        @dataclass
        class Plain:
            name: str = ""

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
