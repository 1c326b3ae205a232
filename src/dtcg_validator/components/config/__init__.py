"""
Config component - load and validate command-line settings.
"""

from .component import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH, load_config, run, run_load
from .models import (
    ConfigError,
    LoadConfigInput,
    LoadConfigOutput,
    OutputFormat,
    ValidatorConfig,
)
from .ports import EnvironmentPort, FileSystemPort

__all__ = [
    # Component entry points
    "run",
    "run_load",
    "load_config",
    # Models
    "LoadConfigInput",
    "LoadConfigOutput",
    "ValidatorConfig",
    "OutputFormat",
    # Ports
    "FileSystemPort",
    "EnvironmentPort",
    # Exceptions
    "ConfigError",
    # Constants
    "DEFAULT_CONFIG_PATH",
    "CONFIG_PATH_ENV",
]
