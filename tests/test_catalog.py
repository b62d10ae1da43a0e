"""Tests for the built-in command catalog."""

import dataclasses

import pytest
from permissions_app_cli.catalog import DEV_COMMANDS
from permissions_app_cli.catalog import MCP_WILDCARD
from permissions_app_cli.catalog import SYSTEM_COMMANDS
from permissions_app_cli.catalog import CommandEntry
from permissions_app_cli.catalog import EntryOrigin
from permissions_app_cli.catalog import RiskLevel
from permissions_app_cli.catalog import default_catalog


def test_catalog_shape():
    catalog = default_catalog()
    names = [entry.name for entry in catalog]

    assert len(catalog) == 123
    assert len(set(names)) == len(names)
    assert names[:3] == ["cd", "ls", "pwd"]
    assert catalog[len(catalog) - 1].name == MCP_WILDCARD
    assert all(entry.origin == EntryOrigin.CATALOG for entry in catalog)


def test_preset_lists_exist_in_catalog():
    names = {entry.name for entry in default_catalog()}
    assert DEV_COMMANDS <= names
    assert SYSTEM_COMMANDS <= names


def test_entries_are_immutable():
    entry = default_catalog()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "rm"


def test_custom_entry():
    entry = CommandEntry.custom("helm")
    assert entry == CommandEntry("helm", "Custom command - helm", RiskLevel.CAUTION, EntryOrigin.CUSTOM)
    assert not entry.is_wildcard_tool


def test_indices_where():
    catalog = default_catalog()
    assert catalog.indices_where(lambda entry: entry.name in {"ls", "cd"}) == [0, 1]
