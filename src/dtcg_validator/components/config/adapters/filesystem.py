"""
Local disk and process environment behind the config ports.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml


class LocalFileSystemAdapter:
    """Reads token and config files as UTF-8 from disk."""

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def read_yaml(self, path: Path) -> Any:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)

    def exists(self, path: Path) -> bool:
        return Path(path).exists()


class OsEnvironmentAdapter:
    def get(self, key: str, default: str | None = None) -> str | None:
        return os.environ.get(key, default)


default_filesystem = LocalFileSystemAdapter()
default_environment = OsEnvironmentAdapter()
