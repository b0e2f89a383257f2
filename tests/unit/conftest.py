"""Shared fixtures for unit tests."""

from unittest.mock import patch

import pytest

from spec_workflow.logging import setup_logging


@pytest.fixture(autouse=True)
def _no_claude_probe():
    """Never spawn the real ``claude`` executable from unit tests.

    Tests that exercise validate_claude_code patch subprocess.run themselves.
    """
    with patch("spec_workflow.commands.setup_cmd.validate_claude_code", return_value=True):
        yield


@pytest.fixture(autouse=True)
def _reset_logging():
    """CLI invocations rebind the stderr handler; restore the default afterwards."""
    yield
    setup_logging(console_output=True, json_output=False)
