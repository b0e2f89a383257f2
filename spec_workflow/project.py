"""Inspect the target project and the local Claude Code installation."""

import subprocess
from pathlib import Path

from spec_workflow.constants import CLAUDE_CHECK_TIMEOUT_SECONDS
from spec_workflow.logging import get_logger

logger = get_logger("project")

# Project type detection patterns
PROJECT_PATTERNS = {
    "node": ["package.json", "yarn.lock", "pnpm-lock.yaml"],
    "python": ["pyproject.toml", "setup.py", "requirements.txt", "Pipfile"],
    "rust": ["Cargo.toml"],
    "go": ["go.mod"],
    "java": ["pom.xml", "build.gradle", "build.gradle.kts"],
    "ruby": ["Gemfile"],
    "php": ["composer.json"],
    "dotnet": ["*.csproj", "*.fsproj", "*.sln"],
}


def detect_project_type(project_path: str | Path = ".") -> list[str]:
    """Detect project types from marker files.

    Args:
        project_path: Project root

    Returns:
        Every matching project type, in PROJECT_PATTERNS order
    """
    root = Path(project_path)
    detected = []

    for project_type, patterns in PROJECT_PATTERNS.items():
        for pattern in patterns:
            if "*" in pattern:
                found = any(root.glob(pattern))
            else:
                found = (root / pattern).exists()
            if found:
                detected.append(project_type)
                break

    logger.debug("Detected project types for %s: %s", root, detected)
    return detected


def validate_claude_code() -> bool:
    """Check that the ``claude`` executable is installed and runs."""
    try:
        result = subprocess.run(
            ["claude", "--version"],
            capture_output=True,
            text=True,
            timeout=CLAUDE_CHECK_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("claude --version failed: %s", e)
        return False

    return result.returncode == 0
