"""
Tests for the config component.

Loading goes through the file system and environment ports, so most tests
use in-memory mocks; a few exercise the real adapters against tmp_path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import ValidationError

from dtcg_validator.components.config import (
    CONFIG_PATH_ENV,
    ConfigError,
    LoadConfigInput,
    ValidatorConfig,
    load_config,
    run,
    run_load,
)

# --- Mock Ports ---


class MockFileSystem:
    """In-memory file system keyed by path."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self._files = {Path(k): v for k, v in (files or {}).items()}

    def read_text(self, path: Path) -> str:
        return self._files[Path(path)]

    def read_yaml(self, path: Path) -> Any:
        return yaml.safe_load(self.read_text(path))

    def exists(self, path: Path) -> bool:
        return Path(path) in self._files


class MockEnvironment:
    """Environment backed by a plain dict."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = values or {}

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)


# --- Fixtures ---


@pytest.fixture
def env() -> MockEnvironment:
    return MockEnvironment()


# --- Model ---


class TestValidatorConfig:
    def test_defaults(self) -> None:
        config = ValidatorConfig()
        assert config.fail_on_warnings is False
        assert config.output_format == "text"
        assert config.analyze is True
        assert config.log_level == "WARNING"

    def test_log_level_is_normalised(self) -> None:
        assert ValidatorConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            ValidatorConfig(log_level="chatty")

    def test_unknown_field(self) -> None:
        with pytest.raises(ValidationError):
            ValidatorConfig.model_validate({"colour": "red"})

    def test_output_format_choices(self) -> None:
        with pytest.raises(ValidationError):
            ValidatorConfig(output_format="xml")  # type: ignore[arg-type]


# --- Loading ---


class TestRunLoad:
    def test_explicit_file(self, env: MockEnvironment) -> None:
        fs = MockFileSystem({"cfg.yaml": "fail_on_warnings: true\noutput_format: json\n"})
        result = run_load(LoadConfigInput(config_path="cfg.yaml"), fs=fs, env=env)
        assert result.success
        assert result.source == Path("cfg.yaml")
        assert result.config.fail_on_warnings is True
        assert result.config.output_format == "json"

    def test_env_var_path(self) -> None:
        fs = MockFileSystem({"/etc/dtcg.yaml": "analyze: false\n"})
        env = MockEnvironment({CONFIG_PATH_ENV: "/etc/dtcg.yaml"})
        result = run_load(LoadConfigInput(), fs=fs, env=env)
        assert result.success
        assert result.config.analyze is False

    def test_explicit_path_beats_env_var(self) -> None:
        fs = MockFileSystem({"a.yaml": "analyze: false\n", "b.yaml": "analyze: true\n"})
        env = MockEnvironment({CONFIG_PATH_ENV: "b.yaml"})
        result = run_load(LoadConfigInput(config_path="a.yaml"), fs=fs, env=env)
        assert result.config.analyze is False

    def test_missing_default_file_gives_defaults(self, env: MockEnvironment) -> None:
        result = run_load(LoadConfigInput(), fs=MockFileSystem(), env=env)
        assert result.success
        assert result.source is None
        assert result.config == ValidatorConfig()

    def test_missing_explicit_file(self, env: MockEnvironment) -> None:
        result = run_load(LoadConfigInput(config_path="nope.yaml"), fs=MockFileSystem(), env=env)
        assert not result.success
        assert result.errors == ["Config file not found: nope.yaml"]

    def test_empty_file_gives_defaults(self, env: MockEnvironment) -> None:
        fs = MockFileSystem({"cfg.yaml": ""})
        result = run_load(LoadConfigInput(config_path="cfg.yaml"), fs=fs, env=env)
        assert result.success
        assert result.config == ValidatorConfig()

    def test_bad_yaml(self, env: MockEnvironment) -> None:
        fs = MockFileSystem({"cfg.yaml": "analyze: [unclosed\n"})
        result = run_load(LoadConfigInput(config_path="cfg.yaml"), fs=fs, env=env)
        assert not result.success
        assert result.errors[0].startswith("Invalid YAML syntax in config file")

    def test_non_mapping(self, env: MockEnvironment) -> None:
        fs = MockFileSystem({"cfg.yaml": "- a\n- b\n"})
        result = run_load(LoadConfigInput(config_path="cfg.yaml"), fs=fs, env=env)
        assert result.errors == ["Config file must contain a mapping"]

    @pytest.mark.parametrize(
        "error",
        [
            IsADirectoryError(21, "Is a directory"),
            PermissionError(13, "Permission denied"),
            UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
        ],
    )
    def test_unreadable_file(self, env: MockEnvironment, error: Exception) -> None:
        class UnreadableFileSystem(MockFileSystem):
            def read_yaml(self, path: Path) -> Any:
                raise error

        fs = UnreadableFileSystem({"cfg.yaml": ""})
        result = run_load(LoadConfigInput(config_path="cfg.yaml"), fs=fs, env=env)
        assert not result.success
        assert result.errors[0].startswith("Cannot read config file: ")

    def test_directory_path(self, env: MockEnvironment, tmp_path: Path) -> None:
        result = run(LoadConfigInput(config_path=tmp_path), env=env)
        assert not result.success
        assert result.errors[0].startswith("Cannot read config file: ")

    def test_schema_errors_name_the_field(self, env: MockEnvironment) -> None:
        fs = MockFileSystem({"cfg.yaml": "output_format: xml\n"})
        result = run_load(LoadConfigInput(config_path="cfg.yaml"), fs=fs, env=env)
        assert not result.success
        assert len(result.errors) == 1
        assert result.errors[0].startswith("output_format:")

    def test_run_uses_injected_ports(self, env: MockEnvironment) -> None:
        fs = MockFileSystem({"cfg.yaml": "log_level: info\n"})
        result = run(LoadConfigInput(config_path="cfg.yaml"), fs=fs, env=env)
        assert result.config.log_level == "INFO"


class TestLoadConfig:
    def test_raises_on_bad_file(self, env: MockEnvironment) -> None:
        fs = MockFileSystem({"cfg.yaml": "unknown_key: 1\n"})
        with pytest.raises(ConfigError) as exc_info:
            load_config("cfg.yaml", fs=fs, env=env)
        assert exc_info.value.path == Path("cfg.yaml")
        assert exc_info.value.errors

    def test_real_adapters(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "dtcg-validator.yaml"
        config_file.write_text("fail_on_warnings: true\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))
        assert load_config().fail_on_warnings is True

    def test_default_file_at_project_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
        (tmp_path / "dtcg-validator.yaml").write_text("analyze: false\n", encoding="utf-8")
        nested = tmp_path / "tokens"
        nested.mkdir()
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        monkeypatch.chdir(nested)
        assert load_config().analyze is False

    def test_nearest_config_wins_over_project_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
        (tmp_path / "dtcg-validator.yaml").write_text("analyze: false\n", encoding="utf-8")
        design = tmp_path / "design"
        design.mkdir()
        (design / "dtcg-validator.yaml").write_text("output_format: json\n", encoding="utf-8")
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        monkeypatch.chdir(design)
        config = load_config()
        assert config.output_format == "json"
        assert config.analyze is True
