"""Pytest configuration and fixtures for spec workflow tests."""

from pathlib import Path

import pytest

from spec_workflow.models import Task

SAMPLE_TASKS_MD = """\
# Implementation Plan

## Tasks

- [x] 1. Set up authentication module
  - Create src/auth directory
  - _Leverage: src/utils/http.ts_
  - _Requirements: 1.1, 1.2_

- [ ] 2. Implement login flow
- [ ] 2.1 Build the login form
  - Validate email and password fields
  - _Requirements: 2.1_
- [ ] 2.2 Wire form to the API
  _Leverage: src/api/client.ts, src/hooks/useAuth.ts_

- [ ] 3. Add tests
"""


@pytest.fixture
def sample_tasks_md() -> str:
    """A tasks.md document with nested tasks and annotations."""
    return SAMPLE_TASKS_MD


@pytest.fixture
def sample_task() -> Task:
    """Create a sample task.

    Returns:
        Task with every optional field populated
    """
    return Task(
        id="3.2",
        description="Add session refresh",
        completed=False,
        details=("Refresh tokens before expiry", "Log out on refresh failure"),
        leverage="src/auth/session.ts",
        requirements=("2.1", "4.3"),
    )


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def spec_project(project_dir: Path, sample_tasks_md: str) -> Path:
    """A project with .claude/specs/user-auth/tasks.md in place."""
    spec_dir = project_dir / ".claude" / "specs" / "user-auth"
    spec_dir.mkdir(parents=True)
    (spec_dir / "tasks.md").write_text(sample_tasks_md, encoding="utf-8")
    return project_dir
