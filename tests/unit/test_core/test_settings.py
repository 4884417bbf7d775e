"""Tests for configuration loading."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from gochef.core.config import ConfigLoader, CookSettings, LoggingSettings, PrepareSettings, Settings
from gochef.core.exceptions import ConfigurationError


class TestDefaults:
    """Tests for default settings."""

    def test_prepare_defaults(self) -> None:
        settings = PrepareSettings()

        assert settings.source_suffix == ".go"
        assert settings.hidden_prefix == "."
        assert settings.constraint_prefix == "//go:build "

    def test_cook_defaults(self) -> None:
        settings = CookSettings()

        assert settings.go_binary == "go"
        assert settings.output_path == os.devnull
        assert settings.main_file == "main.go"
        assert settings.file_pattern.format(index=3) == "main3.go"

    def test_logging_defaults(self) -> None:
        assert LoggingSettings().level == "WARNING"


class TestValidation:
    """Tests for settings validation."""

    def test_empty_suffix_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PrepareSettings(source_suffix="")

    def test_pattern_requires_index(self) -> None:
        with pytest.raises(ValidationError):
            CookSettings(file_pattern="extra.go")

    def test_level_normalized(self) -> None:
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(level="LOUD")


class TestEnvironment:
    """Tests for environment variable overrides."""

    def test_cook_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOCHEF_COOK_GO_BINARY", "/opt/go/bin/go")

        assert CookSettings().go_binary == "/opt/go/bin/go"


class TestYamlConfig:
    """Tests for YAML configuration files."""

    def test_from_yaml(self, tmp_path: Path) -> None:
        """Test that sections map onto the settings classes."""
        config = tmp_path / "gochef.yaml"
        config.write_text(
            "prepare:\n"
            "  hidden_prefix: _\n"
            "cook:\n"
            "  go_binary: go1.22\n"
            "logging:\n"
            "  level: info\n"
        )

        settings = Settings.from_yaml(config)

        assert settings.prepare.hidden_prefix == "_"
        assert settings.prepare.source_suffix == ".go"
        assert settings.cook.go_binary == "go1.22"
        assert settings.logging.level == "INFO"

    def test_load_without_file_uses_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        assert Settings.load().cook.main_file == "main.go"

    def test_load_default_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that ./gochef.yaml is picked up."""
        (tmp_path / "gochef.yaml").write_text("cook:\n  main_file: deps.go\n")
        monkeypatch.chdir(tmp_path)

        assert Settings.load().cook.main_file == "deps.go"

    def test_load_from_root(self, tmp_path: Path) -> None:
        """Test that gochef.yaml is looked up in the given root."""
        (tmp_path / "gochef.yaml").write_text("cook:\n  main_file: deps.go\n")

        assert Settings.load(root=tmp_path).cook.main_file == "deps.go"

    def test_working_directory_config_ignored_for_other_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the working directory does not leak into another root."""
        cwd = tmp_path / "cwd"
        root = tmp_path / "module"
        cwd.mkdir()
        root.mkdir()
        (cwd / "gochef.yaml").write_text("cook:\n  main_file: deps.go\n")
        (cwd / ".env").write_text("GOCHEF_COOK_GO_BINARY=gotip\n")
        monkeypatch.delenv("GOCHEF_COOK_GO_BINARY", raising=False)
        monkeypatch.chdir(cwd)

        settings = Settings.load(root=root)

        assert settings.cook.main_file == "main.go"
        assert settings.cook.go_binary == "go"

    def test_env_file_in_root(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that .env is read from the root, with or without a YAML file."""
        (tmp_path / ".env").write_text("GOCHEF_COOK_GO_BINARY=gotip\n")
        monkeypatch.delenv("GOCHEF_COOK_GO_BINARY", raising=False)

        assert Settings.load(root=tmp_path).cook.go_binary == "gotip"

        (tmp_path / "gochef.yaml").write_text("prepare:\n  hidden_prefix: _\n")

        settings = Settings.load(root=tmp_path)
        assert settings.cook.go_binary == "gotip"
        assert settings.prepare.hidden_prefix == "_"


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_dot_notation(self, tmp_path: Path) -> None:
        config = tmp_path / "c.yaml"
        config.write_text("cook:\n  go_binary: gotip\n")
        loader = ConfigLoader(config)
        loader.load()

        assert loader.get("cook.go_binary") == "gotip"
        assert loader.get("cook.missing", "x") == "x"
        assert loader.get_section("prepare") == {}

    def test_empty_file(self, tmp_path: Path) -> None:
        config = tmp_path / "c.yaml"
        config.write_text("")

        assert ConfigLoader(config).load() == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigLoader(tmp_path / "nope.yaml").load()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "c.yaml"
        config.write_text("cook: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader(config).load()

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        config = tmp_path / "c.yaml"
        config.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigLoader(config).load()
