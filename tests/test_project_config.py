"""
Unit tests for diagram_patterns.project_config module.

Tests:
- Configuration dataclasses
- JSON serialization/deserialization
- Config file discovery and loading
"""

import json
import logging

import pytest

from diagram_patterns.project_config import (
    CONFIG_FILENAME,
    DispatchConfig,
    FlyweightConfig,
    LoggingConfig,
    ProjectConfig,
    find_config_file,
    load_config,
)


@pytest.fixture
def isolated_dirs(tmp_path, monkeypatch):
    """Run with empty working and home directories."""
    cwd = tmp_path / "cwd"
    home = tmp_path / "home"
    cwd.mkdir()
    home.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return cwd, home


class TestSections:
    """Tests for the section dataclasses."""

    def test_dispatch_default_not_strict(self):
        assert DispatchConfig().strict is False

    def test_flyweight_defaults(self):
        config = FlyweightConfig()
        assert config.color_marker == "Color"
        assert config.max_size is None

    def test_logging_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.json_file is None
        assert config.level_value == logging.INFO

    def test_level_value_case_insensitive(self):
        assert LoggingConfig(level="debug").level_value == logging.DEBUG

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            LoggingConfig(level="LOUD").level_value

    def test_numeric_level(self):
        assert LoggingConfig(level=10).level_value == logging.DEBUG


class TestProjectConfig:
    """Tests for ProjectConfig."""

    def test_to_dict(self):
        data = ProjectConfig().to_dict()
        assert data["dispatch"] == {"strict": False}
        assert data["flyweight"]["color_marker"] == "Color"
        assert data["logging"]["level"] == "INFO"

    def test_to_json_is_valid(self):
        data = json.loads(ProjectConfig().to_json())
        assert set(data) == {"dispatch", "flyweight", "logging"}

    def test_from_dict(self):
        config = ProjectConfig.from_dict({
            "dispatch": {"strict": True},
            "flyweight": {"max_size": 10},
        })
        assert config.dispatch.strict is True
        assert config.flyweight.max_size == 10
        assert config.flyweight.color_marker == "Color"

    def test_from_dict_ignores_unknown(self):
        config = ProjectConfig.from_dict({
            "_comment": "ignored",
            "dispatch": {"strict": True, "bogus": 1},
            "unknown_section": {"a": 1},
            "logging": "not a section",
        })
        assert config.dispatch.strict is True
        assert not hasattr(config.dispatch, "bogus")
        assert config.logging.level == "INFO"

    def test_from_json_rejects_non_object(self):
        with pytest.raises(ValueError, match="JSON object"):
            ProjectConfig.from_json('[1, 2]')

    @pytest.mark.parametrize("data, key", [
        ({"flyweight": {"max_size": "3"}}, "flyweight.max_size"),
        ({"flyweight": {"max_size": True}}, "flyweight.max_size"),
        ({"flyweight": {"color_marker": 5}}, "flyweight.color_marker"),
        ({"dispatch": {"strict": "yes"}}, "dispatch.strict"),
        ({"logging": {"level": ["DEBUG"]}}, "logging.level"),
    ])
    def test_from_dict_rejects_wrong_types(self, data, key):
        with pytest.raises(ValueError, match=key):
            ProjectConfig.from_dict(data)

    @pytest.mark.parametrize("size", [0, -2])
    def test_from_dict_rejects_non_positive_pool_bound(self, size):
        with pytest.raises(ValueError, match="must be positive"):
            ProjectConfig.from_dict({"flyweight": {"max_size": size}})

    def test_from_dict_accepts_numeric_level(self):
        config = ProjectConfig.from_dict({"logging": {"level": 10}})
        assert config.logging.level_value == logging.DEBUG

    def test_from_json(self):
        config = ProjectConfig.from_json('{"logging": {"level": "DEBUG"}}')
        assert config.logging.level == "DEBUG"

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        original = ProjectConfig.from_dict({"flyweight": {"color_marker": "Rgb"}})
        original.save(path)

        loaded = ProjectConfig.load(path)
        assert loaded.flyweight.color_marker == "Rgb"
        assert loaded.to_dict() == original.to_dict()

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ProjectConfig.load(tmp_path / "missing.json")


class TestConfigDiscovery:
    """Tests for find_config_file / load_config."""

    def test_nothing_found(self, isolated_dirs):
        assert find_config_file() is None

    def test_explicit_wins(self, isolated_dirs, tmp_path):
        cwd, _ = isolated_dirs
        (cwd / CONFIG_FILENAME).write_text("{}")
        explicit = tmp_path / "explicit.json"
        explicit.write_text("{}")
        assert find_config_file(explicit) == explicit

    def test_missing_explicit_falls_back(self, isolated_dirs, tmp_path):
        cwd, _ = isolated_dirs
        (cwd / CONFIG_FILENAME).write_text("{}")
        assert find_config_file(tmp_path / "nope.json") == cwd / CONFIG_FILENAME

    def test_home_config(self, isolated_dirs):
        _, home = isolated_dirs
        (home / CONFIG_FILENAME).write_text("{}")
        assert find_config_file() == home / CONFIG_FILENAME

    def test_load_config_defaults(self, isolated_dirs):
        assert load_config().to_dict() == ProjectConfig().to_dict()

    def test_load_config_from_cwd(self, isolated_dirs):
        cwd, _ = isolated_dirs
        (cwd / CONFIG_FILENAME).write_text('{"dispatch": {"strict": true}}')
        assert load_config().dispatch.strict is True

    def test_invalid_json_falls_back(self, isolated_dirs, caplog):
        cwd, _ = isolated_dirs
        (cwd / CONFIG_FILENAME).write_text("{not json")
        with caplog.at_level(logging.ERROR):
            config = load_config()
        assert config.dispatch.strict is False
        assert "Failed to load config" in caplog.text
