"""spec-config.json management using Pydantic."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from spec_workflow.constants import CLAUDE_DIR, CONFIG_FILE, CONFIG_VERSION
from spec_workflow.exceptions import ConfigurationError


class SpecWorkflowSettings(BaseModel):
    """Settings read by the spec slash commands."""

    version: str = CONFIG_VERSION
    auto_create_directories: bool = True
    auto_reference_requirements: bool = True
    enforce_approval_workflow: bool = True
    default_feature_prefix: str = Field(default="feature-", pattern=r"^[A-Za-z0-9_-]*$")
    supported_formats: list[str] = Field(default_factory=lambda: ["markdown", "mermaid"])


class SpecConfig(BaseModel):
    """Complete contents of .claude/spec-config.json."""

    spec_workflow: SpecWorkflowSettings = Field(default_factory=SpecWorkflowSettings)

    @staticmethod
    def default_path(project_path: str | Path = ".") -> Path:
        return Path(project_path) / CLAUDE_DIR / CONFIG_FILE

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "SpecConfig":
        """Load configuration from JSON file.

        Args:
            config_path: Path to config file. Defaults to .claude/spec-config.json

        Returns:
            SpecConfig instance (defaults when the file does not exist)

        Raises:
            ConfigurationError: If the file is not valid JSON or fails validation
        """
        config_path = cls.default_path() if config_path is None else Path(config_path)

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f) or {}
            return cls.from_dict(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigurationError(f"Invalid configuration in {config_path}", {"error": str(e)}) from e

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SpecConfig":
        return cls(**data)

    def save(self, config_path: str | Path | None = None) -> Path:
        """Save configuration as indented JSON.

        Args:
            config_path: Path to save config. Defaults to .claude/spec-config.json

        Returns:
            Path written
        """
        config_path = self.default_path() if config_path is None else Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
            f.write("\n")

        return config_path

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
