"""Tests for spec_workflow/resources.py."""

from pathlib import Path
from unittest.mock import patch

import pytest

from spec_workflow.exceptions import SetupError
from spec_workflow.resources import get_data_dir, load_manifest, read_data_file


class TestGetDataDir:
    """Tests for get_data_dir()."""

    def test_finds_packaged_data(self) -> None:
        assert (get_data_dir() / "manifest.yaml").is_file()

    def test_importlib_exception_falls_back(self) -> None:
        with patch("importlib.resources.files", side_effect=Exception("nope")):
            assert get_data_dir().is_dir()

    def test_both_fail_raises(self) -> None:
        with (
            patch("importlib.resources.files", side_effect=Exception("nope")),
            patch("spec_workflow.resources.Path.is_dir", return_value=False),
        ):
            with pytest.raises(SetupError, match="Cannot locate spec workflow data files"):
                get_data_dir()


class TestManifest:
    """Tests for load_manifest()."""

    def test_packaged_manifest(self) -> None:
        manifest = load_manifest()

        assert ".claude/steering" in manifest.directories
        assert [c.name for c in manifest.commands][:2] == ["spec-create", "spec-requirements"]
        assert manifest.commands[0].usage == "/spec-create <feature-name>"
        assert "tasks-template.md" in manifest.templates

    def test_every_listed_file_exists(self) -> None:
        data_dir = get_data_dir()
        manifest = load_manifest(data_dir)
        for command in manifest.commands:
            assert (data_dir / "commands" / command.filename).is_file()
        for template in manifest.templates:
            assert (data_dir / "templates" / template).is_file()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "manifest.yaml").write_text("commands: [unclosed\n")
        with pytest.raises(SetupError, match="Cannot read manifest"):
            load_manifest(tmp_path)

    def test_missing_data_file(self, tmp_path: Path) -> None:
        with pytest.raises(SetupError, match="Missing packaged file"):
            read_data_file("nope.md", tmp_path)
