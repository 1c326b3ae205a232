"""
Ports the config loader depends on.

The CLI also reads token files through FileSystemPort, so tests can swap in
an in-memory file system for both.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class FileSystemPort(Protocol):
    def read_text(self, path: Path) -> str:
        """Token file contents; raises OSError or UnicodeDecodeError."""
        ...

    def read_yaml(self, path: Path) -> Any:
        """Parsed dtcg-validator.yaml; raises yaml.YAMLError on bad syntax."""
        ...

    def exists(self, path: Path) -> bool: ...


class EnvironmentPort(Protocol):
    def get(self, key: str, default: str | None = None) -> str | None:
        """Environment lookup; the loader only asks for DTCG_CONFIG_PATH."""
        ...
