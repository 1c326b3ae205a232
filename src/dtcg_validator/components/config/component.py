"""
Config component - load command-line settings from a YAML file.

Lookup order: explicit path, then DTCG_CONFIG_PATH, then
dtcg-validator.yaml at the project root. A missing default file means
defaults; a missing explicit file is an error.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from .adapters import default_environment, default_filesystem
from .models import ConfigError, LoadConfigInput, LoadConfigOutput, ValidatorConfig
from .ports import EnvironmentPort, FileSystemPort

DEFAULT_CONFIG_PATH = "dtcg-validator.yaml"
CONFIG_PATH_ENV = "DTCG_CONFIG_PATH"
PROJECT_ROOT_MARKERS = (DEFAULT_CONFIG_PATH, "pyproject.toml", ".git")


def _find_project_root(start: Path | None = None) -> Path:
    """Nearest directory, from the working directory up, holding a config or project marker."""
    start = start or Path.cwd()

    for directory in (start, *start.parents):
        if any((directory / marker).exists() for marker in PROJECT_ROOT_MARKERS):
            return directory

    return start


def _format_validation_error(e: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(loc) for loc in err['loc']) or 'config'}: {err['msg']}"
        for err in e.errors()
    ]


def run_load(
    inp: LoadConfigInput,
    *,
    fs: FileSystemPort,
    env: EnvironmentPort,
) -> LoadConfigOutput:
    """
    Resolve the config file and parse it into a ValidatorConfig.

    Args:
        inp: Optional explicit config path (the --config option).
        fs: Reads and checks the YAML file.
        env: Supplies DTCG_CONFIG_PATH.

    Returns:
        LoadConfigOutput; read, YAML and schema problems become errors,
        never exceptions.
    """
    explicit = True
    if inp.config_path is not None:
        config_path = Path(inp.config_path)
    else:
        env_path = env.get(CONFIG_PATH_ENV)
        if env_path:
            config_path = Path(env_path)
        else:
            config_path = _find_project_root() / DEFAULT_CONFIG_PATH
            explicit = False

    if not fs.exists(config_path):
        if not explicit:
            return LoadConfigOutput(config=ValidatorConfig())
        return LoadConfigOutput(
            config=ValidatorConfig(),
            source=config_path,
            errors=[f"Config file not found: {config_path}"],
            success=False,
        )

    try:
        data = fs.read_yaml(config_path)
    except yaml.YAMLError as e:
        return LoadConfigOutput(
            config=ValidatorConfig(),
            source=config_path,
            errors=[f"Invalid YAML syntax in config file: {e}"],
            success=False,
        )
    except (OSError, UnicodeDecodeError) as e:
        return LoadConfigOutput(
            config=ValidatorConfig(),
            source=config_path,
            errors=[f"Cannot read config file: {e}"],
            success=False,
        )

    if data is None:
        data = {}
    if not isinstance(data, dict):
        return LoadConfigOutput(
            config=ValidatorConfig(),
            source=config_path,
            errors=["Config file must contain a mapping"],
            success=False,
        )

    try:
        config = ValidatorConfig.model_validate(data)
    except ValidationError as e:
        return LoadConfigOutput(
            config=ValidatorConfig(),
            source=config_path,
            errors=_format_validation_error(e),
            success=False,
        )

    return LoadConfigOutput(config=config, source=config_path)


def load_config(
    config_path: Path | str | None = None,
    *,
    fs: FileSystemPort = default_filesystem,
    env: EnvironmentPort = default_environment,
) -> ValidatorConfig:
    """
    Load configuration, failing fast on a bad file.

    Raises:
        ConfigError: If the file is missing (when named explicitly),
            not valid YAML, or does not match the schema.
    """
    result = run_load(LoadConfigInput(config_path=config_path), fs=fs, env=env)
    if not result.success:
        raise ConfigError(result.source or Path(DEFAULT_CONFIG_PATH), result.errors)
    return result.config


def run(
    inp: LoadConfigInput,
    *,
    fs: FileSystemPort = default_filesystem,
    env: EnvironmentPort = default_environment,
) -> LoadConfigOutput:
    """Component entry point."""
    return run_load(inp, fs=fs, env=env)
