"""Reconcile newly selected commands with previously allowed tools."""

import logging
from dataclasses import dataclass
from dataclasses import field
from enum import Enum

from .catalog import CommandEntry

logger = logging.getLogger(__name__)


class MergeMode(str, Enum):
    REPLACE = "replace"
    MERGE = "merge"


@dataclass(frozen=True)
class ConfigMode:
    """How the new selection is combined with what is already allowed.

    Decided once, before the selection is resolved. ``existing`` is only
    consulted in merge mode.
    """

    mode: MergeMode = MergeMode.REPLACE
    existing: tuple[str, ...] = ()

    @classmethod
    def replace(cls) -> "ConfigMode":
        return cls(MergeMode.REPLACE)

    @classmethod
    def merge(cls, existing: list[str]) -> "ConfigMode":
        return cls(MergeMode.MERGE, tuple(existing))


@dataclass
class MergeResult:
    """Final tool list plus a record of what changed."""

    tools: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def to_permission(entry: CommandEntry) -> str:
    """Map an entry to its permission string.

    MCP tool names are used verbatim; everything else is a shell invocation
    wrapped as ``Bash(<name>:*)``.
    """
    if entry.is_wildcard_tool:
        return entry.name
    return f"Bash({entry.name}:*)"


def display_name(tool: str) -> str:
    """Strip the ``Bash(...:*)`` wrapper for display."""
    if tool.startswith("Bash(") and tool.endswith(":*)"):
        return tool[len("Bash(") : -len(":*)")]
    return tool


def merge_permissions(entries: list[CommandEntry], config_mode: ConfigMode) -> MergeResult:
    """Build the tool list to persist.

    Args:
        entries: Selected entries, in resolver order
        config_mode: Replace or merge, with the existing tool list

    Returns:
        MergeResult whose ``tools`` is ready to write
    """
    new_tools = [to_permission(entry) for entry in entries]

    if config_mode.mode == MergeMode.REPLACE:
        return MergeResult(tools=new_tools, added=list(new_tools))

    result = MergeResult(tools=list(config_mode.existing))
    present = set(result.tools)
    for tool in new_tools:
        if tool in present:
            result.skipped.append(tool)
            logger.info(f"Skipping duplicate: {tool}")
            continue
        present.add(tool)
        result.tools.append(tool)
        result.added.append(tool)
        logger.info(f"Adding new permission: {tool}")

    return result
