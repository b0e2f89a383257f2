"""Install the spec workflow (.claude tree, commands, templates, CLAUDE.md) into a project."""

from __future__ import annotations

import re
from pathlib import Path

from spec_workflow.config import SpecConfig
from spec_workflow.constants import (
    CLAUDE_DIR,
    CLAUDE_MD,
    CLAUDE_MD_MARKER_END,
    CLAUDE_MD_MARKER_START,
    COMMANDS_DIR,
    TEMPLATES_DIR,
)
from spec_workflow.exceptions import SetupError
from spec_workflow.logging import get_logger
from spec_workflow.reporter import NullReporter, Reporter
from spec_workflow.resources import (
    CLAUDE_MD_SECTION_FILE,
    Manifest,
    get_data_dir,
    load_manifest,
    read_data_file,
)

logger = get_logger("installer")


class SpecWorkflowSetup:
    """Lay down the spec workflow files in a project directory."""

    def __init__(self, project_path: str | Path, data_dir: Path | None = None) -> None:
        self.project_path = Path(project_path)
        self.claude_dir = self.project_path / CLAUDE_DIR
        self.commands_dir = self.claude_dir / COMMANDS_DIR
        self.templates_dir = self.claude_dir / TEMPLATES_DIR
        self._data_dir = data_dir
        self._manifest: Manifest | None = None

    @property
    def data_dir(self) -> Path:
        if self._data_dir is None:
            self._data_dir = get_data_dir()
        return self._data_dir

    @property
    def manifest(self) -> Manifest:
        if self._manifest is None:
            self._manifest = load_manifest(self.data_dir)
        return self._manifest

    def claude_directory_exists(self) -> bool:
        return self.claude_dir.is_dir()

    def setup_directories(self) -> list[Path]:
        """Create the .claude directory structure."""
        created = []
        for relative in self.manifest.directories:
            path = self.project_path / relative
            path.mkdir(parents=True, exist_ok=True)
            created.append(path)
        logger.debug("Created %d directories under %s", len(created), self.project_path)
        return created

    def _copy_data_files(self, source_subdir: str, names: list[str], target_dir: Path) -> list[Path]:
        target_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for name in names:
            content = read_data_file(f"{source_subdir}/{name}", self.data_dir)
            dest = target_dir / name
            dest.write_text(content, encoding="utf-8")
            written.append(dest)
        return written

    def create_slash_commands(self) -> list[Path]:
        """Write the static /spec-* command files."""
        names = [c.filename for c in self.manifest.commands]
        return self._copy_data_files("commands", names, self.commands_dir)

    def create_templates(self) -> list[Path]:
        """Write the requirements/design/tasks and steering document templates."""
        return self._copy_data_files("templates", self.manifest.templates, self.templates_dir)

    def create_config_file(self) -> Path:
        """Write .claude/spec-config.json with default settings."""
        return SpecConfig().save(SpecConfig.default_path(self.project_path))

    def create_claude_md(self) -> Path:
        """Create CLAUDE.md or merge the workflow section into an existing one.

        The section is wrapped in markers so a re-run replaces it instead of
        appending a second copy.
        """
        section = read_data_file(CLAUDE_MD_SECTION_FILE, self.data_dir).strip()
        block = f"{CLAUDE_MD_MARKER_START}\n{section}\n{CLAUDE_MD_MARKER_END}"
        path = self.project_path / CLAUDE_MD

        if path.exists():
            content = path.read_text(encoding="utf-8")
            if CLAUDE_MD_MARKER_START in content and CLAUDE_MD_MARKER_END in content:
                pattern = f"{re.escape(CLAUDE_MD_MARKER_START)}.*?{re.escape(CLAUDE_MD_MARKER_END)}"
                content = re.sub(pattern, lambda _: block, content, count=1, flags=re.DOTALL)
            else:
                content = f"{content.rstrip()}\n\n{block}\n"
        else:
            content = f"{block}\n"

        path.write_text(content, encoding="utf-8")
        logger.info("Updated %s", path, extra={"path": str(path)})
        return path

    def run_setup(self, reporter: Reporter | None = None) -> list[Path]:
        """Run every installation step in order.

        Args:
            reporter: Receives one start/succeed pair per step

        Returns:
            Every directory and file created or updated

        Raises:
            SetupError: If a step fails
        """
        reporter = reporter or NullReporter()
        steps = [
            ("Creating directories", self.setup_directories),
            ("Creating slash commands", self.create_slash_commands),
            ("Creating templates", self.create_templates),
            ("Creating configuration", lambda: [self.create_config_file()]),
            ("Updating CLAUDE.md", lambda: [self.create_claude_md()]),
        ]

        created: list[Path] = []
        for label, step in steps:
            reporter.start(f"{label}...")
            try:
                paths = step()
            except OSError as e:
                reporter.fail(f"{label} failed")
                raise SetupError(f"{label} failed: {e}", {"project": str(self.project_path)}) from e
            except SetupError:
                reporter.fail(f"{label} failed")
                raise
            created.extend(paths)
            reporter.succeed(label)

        return created
