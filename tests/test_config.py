"""
Tests for rpmver.config.loader module.

Tests configuration loading and merging including:
- Built-in defaults
- Project file discovery
- Explicit file layering
- Error handling
- Policy and logger construction
"""

from __future__ import annotations

import pytest
import yaml

from rpmver.config import (
    DEFAULT_CONFIG,
    load_effective_config,
    logger_from_config,
    policy_from_config,
)
from rpmver.config.loader import _deep_merge_dicts
from rpmver.exceptions import ConfigError
from rpmver.logging import DefaultLogger, get_logger
from rpmver.policy import UpdatePolicy


class TestConfigLoading:
    """Tests for basic configuration loading."""

    def test_defaults_only(self, tmp_test_dir):
        """Test that with no files the defaults are returned."""
        config = load_effective_config(start_dir=tmp_test_dir)
        assert config == DEFAULT_CONFIG

    def test_defaults_not_mutated(self, create_yaml_file, tmp_test_dir):
        """Test that loading never changes DEFAULT_CONFIG."""
        path = create_yaml_file("cfg.yaml", {"policy": {"ignore_epoch": True}})
        config = load_effective_config(path, start_dir=tmp_test_dir)
        config["logging"]["debug"] = True
        assert DEFAULT_CONFIG["policy"]["ignore_epoch"] is False
        assert DEFAULT_CONFIG["logging"]["debug"] is False

    def test_explicit_file(self, create_yaml_file, sample_config_data, tmp_test_dir):
        """Test merging an explicit file over the defaults."""
        path = create_yaml_file("cfg.yaml", sample_config_data)

        config = load_effective_config(path, start_dir=tmp_test_dir)

        assert config["policy"]["allow_downgrade"] is True
        assert config["policy"]["ignore_epoch"] is False
        assert config["validation"]["require_leading_digit"] is True
        assert config["validation"]["allowed_symbols"] == ".-+~:_"

    def test_project_file_found_upward(self, create_yaml_file, tmp_test_dir):
        """Test that .rpmver.yaml in an ancestor directory is used."""
        create_yaml_file(".rpmver.yaml", {"policy": {"ignore_release": True}})
        nested = tmp_test_dir / "a" / "b"
        nested.mkdir(parents=True)

        config = load_effective_config(start_dir=nested)

        assert config["policy"]["ignore_release"] is True

    def test_explicit_overrides_project(self, create_yaml_file, tmp_test_dir):
        """Test that the explicit file wins over the project file."""
        create_yaml_file(".rpmver.yaml", {"logging": {"verbose": True, "debug": True}})
        path = create_yaml_file("override.yaml", {"logging": {"debug": False}})

        config = load_effective_config(path, start_dir=tmp_test_dir)

        assert config["logging"] == {"verbose": True, "debug": False}

    def test_unknown_keys_kept(self, create_yaml_file, tmp_test_dir):
        """Test that extra sections pass through."""
        path = create_yaml_file("cfg.yaml", {"resolver": {"arch": "x86_64"}})
        config = load_effective_config(path, start_dir=tmp_test_dir)
        assert config["resolver"] == {"arch": "x86_64"}

    def test_verbose_logging(self, create_yaml_file, tmp_test_dir, capsys):
        """Test that loading reports each layer."""
        path = create_yaml_file("cfg.yaml", {"policy": {}})
        load_effective_config(path, start_dir=tmp_test_dir, logger=get_logger(verbose=True))
        out = capsys.readouterr().out
        assert "[CONFIG] Loading:" in out
        assert "[CONFIG] Deep merged 2 layer(s)" in out


class TestConfigErrors:
    """Tests for error handling."""

    def test_missing_file_raises(self, tmp_test_dir):
        """Test that a missing explicit file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_effective_config(tmp_test_dir / "nonexistent.yaml", start_dir=tmp_test_dir)

    def test_invalid_yaml_raises(self, tmp_test_dir):
        """Test that a YAML syntax error raises a chained ConfigError."""
        path = tmp_test_dir / "bad.yaml"
        path.write_text("policy: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError) as excinfo:
            load_effective_config(path, start_dir=tmp_test_dir)

        assert isinstance(excinfo.value.__cause__, yaml.YAMLError)

    def test_empty_file_raises(self, tmp_test_dir):
        """Test that an empty file raises ConfigError."""
        path = tmp_test_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigError, match="empty"):
            load_effective_config(path, start_dir=tmp_test_dir)

    def test_non_mapping_raises(self, create_yaml_file, tmp_test_dir):
        """Test that a top-level list raises ConfigError."""
        path = create_yaml_file("list.yaml", ["a", "b"])
        with pytest.raises(ConfigError, match="mapping"):
            load_effective_config(path, start_dir=tmp_test_dir)


class TestDeepMerge:
    """Tests for _deep_merge_dicts."""

    def test_nested_dicts_merge(self):
        """Test that nested dicts merge key by key."""
        merged = _deep_merge_dicts({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}})
        assert merged == {"a": {"x": 1, "y": 3}}

    def test_lists_replaced(self):
        """Test that lists are replaced, not concatenated."""
        merged = _deep_merge_dicts({"a": [1, 2]}, {"a": [3]})
        assert merged == {"a": [3]}

    def test_inputs_untouched(self):
        """Test that neither input is mutated."""
        base = {"a": {"x": 1}}
        overlay = {"a": {"x": 2}}
        _deep_merge_dicts(base, overlay)
        assert base == {"a": {"x": 1}}
        assert overlay == {"a": {"x": 2}}


class TestConfigBuilders:
    """Tests for policy_from_config and logger_from_config."""

    def test_policy_from_defaults(self):
        """Test that the default config yields the default policy."""
        assert policy_from_config(DEFAULT_CONFIG) == UpdatePolicy()

    def test_policy_from_config(self):
        """Test reading every policy flag."""
        cfg = {"policy": {"allow_downgrade": True, "ignore_epoch": True, "ignore_release": True}}
        assert policy_from_config(cfg) == UpdatePolicy(True, True, True)

    def test_policy_missing_section(self):
        """Test that a missing or null section falls back to defaults."""
        assert policy_from_config({}) == UpdatePolicy()
        assert policy_from_config({"policy": None}) == UpdatePolicy()

    def test_logger_from_config(self, capsys):
        """Test that the logging section drives verbosity."""
        logger = logger_from_config({"logging": {"debug": True}})
        assert isinstance(logger, DefaultLogger)
        logger.debug("TEST", "hello")
        assert "[TEST] hello" in capsys.readouterr().out
