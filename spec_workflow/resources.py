"""Access to the command files, templates and manifest shipped with the package."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from spec_workflow.exceptions import SetupError
from spec_workflow.logging import get_logger

logger = get_logger("resources")

MANIFEST_FILE = "manifest.yaml"
CLAUDE_MD_SECTION_FILE = "claude_md.md"


@dataclass(frozen=True)
class CommandInfo:
    """A static slash command shipped with the package."""

    name: str
    usage: str
    description: str

    @property
    def filename(self) -> str:
        return f"{self.name}.md"


@dataclass(frozen=True)
class Manifest:
    """What the installer lays down in a project."""

    directories: list[str] = field(default_factory=list)
    commands: list[CommandInfo] = field(default_factory=list)
    templates: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        return cls(
            directories=list(data.get("directories", [])),
            commands=[CommandInfo(**c) for c in data.get("commands", [])],
            templates=list(data.get("templates", [])),
        )


def get_data_dir() -> Path:
    """Locate the data files shipped with the package.

    Tries ``importlib.resources`` first (works for wheel installs),
    falls back to path traversal (works for editable installs).
    """
    try:
        from importlib.resources import files

        resolved = Path(str(files("spec_workflow") / "data"))
        if resolved.is_dir():
            return resolved
    except Exception as e:  # noqa: BLE001 — best-effort package resource lookup; falls back to file path
        logger.debug(f"Package resource lookup failed: {e}")

    fallback = Path(__file__).resolve().parent / "data"
    if fallback.is_dir():
        return fallback

    raise SetupError("Cannot locate spec workflow data files. Ensure the package is installed correctly.")


def load_manifest(data_dir: Path | None = None) -> Manifest:
    """Load the packaged manifest.yaml."""
    path = (data_dir or get_data_dir()) / MANIFEST_FILE
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SetupError(f"Cannot read manifest {path}: {e}") from e
    return Manifest.from_dict(data)


def read_data_file(relative: str, data_dir: Path | None = None) -> str:
    """Read a packaged text file relative to the data directory."""
    path = (data_dir or get_data_dir()) / relative
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise SetupError(f"Missing packaged file {relative}: {e}") from e
