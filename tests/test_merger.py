"""Tests for permission mapping and replace/merge reconciliation."""

from permissions_app_cli.catalog import CommandEntry
from permissions_app_cli.catalog import RiskLevel
from permissions_app_cli.merger import ConfigMode
from permissions_app_cli.merger import MergeMode
from permissions_app_cli.merger import display_name
from permissions_app_cli.merger import merge_permissions
from permissions_app_cli.merger import to_permission


def entry(name: str) -> CommandEntry:
    return CommandEntry(name, f"{name} command", RiskLevel.SAFE)


class TestToPermission:
    def test_shell_command_is_wrapped(self):
        assert to_permission(entry("git")) == "Bash(git:*)"

    def test_mcp_wildcard_is_verbatim(self):
        assert to_permission(entry("mcp__*")) == "mcp__*"

    def test_any_mcp_prefixed_name_is_verbatim(self):
        assert to_permission(entry("mcp__github__create_issue")) == "mcp__github__create_issue"

    def test_custom_entries_map_like_catalog_entries(self):
        assert to_permission(CommandEntry.custom("foo")) == "Bash(foo:*)"
        assert to_permission(CommandEntry.custom("bar")) == "Bash(bar:*)"


class TestDisplayName:
    def test_strips_bash_wrapper(self):
        assert display_name("Bash(git:*)") == "git"

    def test_leaves_other_tools_alone(self):
        assert display_name("mcp__*") == "mcp__*"
        assert display_name("Read(*)") == "Read(*)"
        assert display_name("Bash(npm run test)") == "Bash(npm run test)"


class TestReplaceMode:
    def test_uses_only_new_selection(self):
        result = merge_permissions([entry("ls"), entry("mcp__*")], ConfigMode.replace())
        assert result.tools == ["Bash(ls:*)", "mcp__*"]
        assert result.skipped == []

    def test_discards_existing_even_when_overlapping(self):
        config_mode = ConfigMode(MergeMode.REPLACE, ("Bash(git:*)", "Bash(rm:*)"))
        result = merge_permissions([entry("git")], config_mode)
        assert result.tools == ["Bash(git:*)"]


class TestMergeMode:
    def test_appends_new_and_skips_present(self):
        result = merge_permissions([entry("git"), entry("ls")], ConfigMode.merge(["Bash(git:*)"]))

        assert result.tools == ["Bash(git:*)", "Bash(ls:*)"]
        assert result.added == ["Bash(ls:*)"]
        assert result.skipped == ["Bash(git:*)"]

    def test_preserves_existing_order_and_opaque_entries(self):
        existing = ["Read(*)", "Bash(npm run test)", "Bash(cd:*)"]
        result = merge_permissions([entry("cd"), entry("pwd")], ConfigMode.merge(existing))
        assert result.tools == ["Read(*)", "Bash(npm run test)", "Bash(cd:*)", "Bash(pwd:*)"]

    def test_new_tools_keep_selection_order(self):
        result = merge_permissions([entry("zip"), entry("awk"), entry("ls")], ConfigMode.merge(["mcp__*"]))
        assert result.tools == ["mcp__*", "Bash(zip:*)", "Bash(awk:*)", "Bash(ls:*)"]

    def test_repeated_custom_entry_is_added_once(self):
        entries = [CommandEntry.custom("helm"), CommandEntry.custom("helm")]
        result = merge_permissions(entries, ConfigMode.merge([]))
        assert result.tools == ["Bash(helm:*)"]
        assert result.skipped == ["Bash(helm:*)"]

    def test_does_not_mutate_config_mode(self):
        config_mode = ConfigMode.merge(["Bash(git:*)"])
        merge_permissions([entry("ls")], config_mode)
        assert config_mode.existing == ("Bash(git:*)",)
