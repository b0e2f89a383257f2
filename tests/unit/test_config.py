"""Tests for spec_workflow/config.py."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from spec_workflow.config import SpecConfig, SpecWorkflowSettings
from spec_workflow.constants import CONFIG_VERSION
from spec_workflow.exceptions import ConfigurationError


class TestSpecWorkflowSettings:
    """Tests for SpecWorkflowSettings model."""

    def test_default_values(self) -> None:
        settings = SpecWorkflowSettings()
        assert settings.version == CONFIG_VERSION
        assert settings.auto_create_directories is True
        assert settings.enforce_approval_workflow is True
        assert settings.supported_formats == ["markdown", "mermaid"]

    def test_invalid_prefix_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SpecWorkflowSettings(default_feature_prefix="bad prefix/")


class TestSpecConfig:
    """Tests for SpecConfig load/save."""

    def test_load_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        config = SpecConfig.load(tmp_path / "missing.json")
        assert config == SpecConfig()

    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / ".claude" / "spec-config.json"
        config = SpecConfig(spec_workflow=SpecWorkflowSettings(default_feature_prefix="feat-"))

        written = config.save(path)

        assert written == path
        assert json.loads(path.read_text())["spec_workflow"]["default_feature_prefix"] == "feat-"
        assert SpecConfig.load(path) == config

    def test_load_partial_file_fills_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "spec-config.json"
        path.write_text('{"spec_workflow": {"auto_create_directories": false}}')

        config = SpecConfig.load(path)

        assert config.spec_workflow.auto_create_directories is False
        assert config.spec_workflow.version == CONFIG_VERSION

    @pytest.mark.parametrize(
        "content",
        ["{not json", '{"spec_workflow": {"auto_create_directories": "sometimes"}}'],
        ids=["bad-json", "bad-type"],
    )
    def test_invalid_file_raises(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "spec-config.json"
        path.write_text(content)

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            SpecConfig.load(path)

    def test_default_path(self, tmp_path: Path) -> None:
        assert SpecConfig.default_path(tmp_path) == tmp_path / ".claude" / "spec-config.json"
