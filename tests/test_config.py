"""Tests for configuration loading and validation."""

import pytest
import yaml

from apexscope.config import (
    ConfigError,
    ScopeConfig,
    get_default_config,
    load_config,
    validate_config,
)
from apexscope.workspace import WorkspaceFolder


class TestDefaultConfig:
    def test_default_scopes(self):
        config = get_default_config()
        assert config.scope[:3] == ["global", "public", "private"]
        assert "testmethod" in config.scope

    def test_default_suffixes(self):
        assert ".cls" in get_default_config().suffixes

    def test_defaults_not_shared(self):
        a = get_default_config()
        a.scope.append("extra")
        assert "extra" not in get_default_config().scope


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config == get_default_config()

    def test_empty_file_returns_defaults(self, tmp_path):
        config_file = tmp_path / "apexscope.yaml"
        config_file.write_text("")
        assert load_config(config_file) == get_default_config()

    def test_valid_yaml(self, tmp_path):
        config_file = tmp_path / "apexscope.yaml"
        config_file.write_text(yaml.dump({
            "scope": ["Public", "private"],
            "suffixes": [".cls"],
            "workspace_folders": {"main": "/src/main"},
        }))
        config = load_config(config_file)
        assert config.scope == ["public", "private"]
        assert config.suffixes == [".cls"]
        assert config.folders == [WorkspaceFolder("main", "/src/main")]

    def test_single_scope_string(self, tmp_path):
        config_file = tmp_path / "apexscope.yaml"
        config_file.write_text(yaml.dump({"scope": "global"}))
        assert load_config(config_file).scope == ["global"]

    def test_unknown_keys_ignored(self, tmp_path):
        config_file = tmp_path / "apexscope.yaml"
        config_file.write_text(yaml.dump({"title": "Docs", "scope": ["public"]}))
        assert load_config(config_file).scope == ["public"]

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "apexscope.yaml"
        config_file.write_text("scope: [public, private\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(config_file)
        assert exc_info.value.file == str(config_file)

    def test_root_must_be_mapping(self, tmp_path):
        config_file = tmp_path / "apexscope.yaml"
        config_file.write_text(yaml.dump(["public"]))
        with pytest.raises(ConfigError):
            load_config(config_file)

    def test_scope_must_be_strings(self, tmp_path):
        config_file = tmp_path / "apexscope.yaml"
        config_file.write_text(yaml.dump({"scope": [1, 2]}))
        with pytest.raises(ConfigError, match="list of strings"):
            load_config(config_file)

    def test_workspace_folders_must_be_mapping(self, tmp_path):
        config_file = tmp_path / "apexscope.yaml"
        config_file.write_text(yaml.dump({"workspace_folders": ["a"]}))
        with pytest.raises(ConfigError):
            load_config(config_file)


class TestValidateConfig:
    def test_default_is_valid(self):
        validate_config(get_default_config())

    def test_empty_scope_rejected(self):
        with pytest.raises(ConfigError):
            validate_config(ScopeConfig(scope=[]))

    def test_multi_word_scope_rejected(self):
        with pytest.raises(ConfigError, match="single keywords"):
            validate_config(ScopeConfig(scope=["static testmethod"]))

    def test_suffix_needs_dot(self):
        with pytest.raises(ConfigError):
            validate_config(ScopeConfig(suffixes=["cls"]))


class TestConfigError:
    def test_to_json(self):
        err = ConfigError("bad", file="apexscope.yaml")
        assert err.to_json() == {
            "error": "config_invalid",
            "message": "bad",
            "file": "apexscope.yaml",
        }

    def test_str_without_file(self):
        assert str(ConfigError("bad")) == "bad"

    def test_str_with_file(self):
        assert str(ConfigError("bad", file="x.yaml")) == "bad | file: x.yaml"
