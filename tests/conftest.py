"""Pytest configuration for permissions CLI tests."""

import logging

import pytest
from permissions_app_cli.catalog import Catalog
from permissions_app_cli.catalog import CommandEntry
from permissions_app_cli.catalog import RiskLevel
from permissions_app_cli.logging_setup import JsonlHandler
from permissions_app_cli.paths import CONFIG_ENV_VAR
from permissions_app_cli.paths import LOG_PATH_ENV_VAR


@pytest.fixture(autouse=True)
def settings_file(tmp_path, monkeypatch):
    """Point settings and logs at a temp directory for every test."""
    path = tmp_path / "config" / "settings.json"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    monkeypatch.setenv(LOG_PATH_ENV_VAR, str(tmp_path / "logs" / "allow-permissions.log.jsonl"))
    yield path

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, JsonlHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def small_catalog():
    """Five-entry catalog, small enough to reason about by hand."""
    return Catalog(
        entries=(
            CommandEntry("ls", "List directory contents", RiskLevel.SAFE),
            CommandEntry("rm", "Remove files", RiskLevel.DANGER),
            CommandEntry("git", "Version control", RiskLevel.SAFE),
            CommandEntry("mount", "Mount filesystems", RiskLevel.DANGER),
            CommandEntry("mcp__*", "All MCP tools", RiskLevel.SAFE),
        )
    )
