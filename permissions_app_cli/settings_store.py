"""
Settings persistence for allowed tools.

Reads the ``allowedTools`` list from the JSON settings file, and rewrites it
with a timestamped backup and an atomic replace. Every other field in the
file is preserved.
"""

import contextlib
import json
import logging
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any

from .paths import get_settings_path

logger = logging.getLogger(__name__)

ALLOWED_TOOLS_KEY = "allowedTools"


class SettingsError(Exception):
    """Settings could not be backed up or written. Fatal for the run."""


class MalformedSettingsError(ValueError):
    """Settings file exists but does not hold the expected structure."""


class SettingsStore:
    """
    Manages the allowed-tools settings file.

    Contract:
    - Inputs: settings_file (Path), tool lists (list[str])
    - Outputs: Existing allowed tools, or the written tool list
    - Side Effects: Creates the config directory, backup copies, the settings file
    - Errors: SettingsError for any backup/write failure (original file untouched)
    """

    def __init__(self, settings_file: Path | None = None):
        """Initialize with the settings file location.

        Args:
            settings_file: Settings JSON path. Defaults to the path policy in paths.py
        """
        self.settings_file = settings_file or get_settings_path()
        self.config_dir = self.settings_file.parent

    def exists(self) -> bool:
        return self.settings_file.exists()

    def load_allowed_tools(self) -> tuple[list[str], str | None]:
        """Load the currently allowed tools.

        A missing file means nothing is allowed yet. A malformed file is
        recoverable: the caller gets an empty list and a warning message.

        Returns:
            Tuple of (tools, warning or None)
        """
        if not self.settings_file.exists():
            return [], None

        try:
            settings = self._read_settings()
        except (OSError, MalformedSettingsError) as e:
            message = f"Error reading config: {e}"
            logger.warning(message)
            return [], message

        tools = settings.get(ALLOWED_TOOLS_KEY, [])
        if not isinstance(tools, list) or not all(isinstance(tool, str) for tool in tools):
            message = f"Error reading config: '{ALLOWED_TOOLS_KEY}' is not a list of strings"
            logger.warning(message)
            return [], message

        return list(tools), None

    def backup(self) -> Path | None:
        """Copy the settings file to a timestamped backup beside it.

        Returns:
            Backup path, or None when there was no file to back up

        Raises:
            SettingsError: If the copy fails
        """
        if not self.settings_file.exists():
            return None

        timestamp = datetime.now().isoformat().replace(":", "-").replace(".", "-")
        backup_file = self.settings_file.with_name(f"{self.settings_file.name}.backup.{timestamp}")
        try:
            shutil.copy2(self.settings_file, backup_file)
        except OSError as e:
            raise SettingsError(f"Failed to create backup {backup_file}: {e}") from e

        logger.info(
            f"Backup created: {backup_file}",
            extra={"event": "settings.backup", "backup_file": str(backup_file)},
        )
        return backup_file

    def save(self, tools: list[str]) -> Path | None:
        """Write the allowed tools, backing up any existing file first.

        Args:
            tools: Final tool list to persist

        Returns:
            Backup path, or None when no previous file existed

        Raises:
            SettingsError: If the directory, backup or write fails
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SettingsError(f"Failed to create config directory {self.config_dir}: {e}") from e

        backup_file = self.backup()

        settings: dict[str, Any] = {}
        if self.settings_file.exists():
            try:
                settings = self._read_settings()
            except (OSError, MalformedSettingsError) as e:
                # Previous bytes are in the backup; start from a clean object
                logger.warning(f"Replacing unreadable config: {e}")

        settings[ALLOWED_TOOLS_KEY] = list(tools)
        self._write_settings(settings)
        logger.info(
            f"Wrote {len(tools)} allowed tools to {self.settings_file}",
            extra={"event": "settings.write", "tool_count": len(tools), "backup_file": str(backup_file or "")},
        )
        return backup_file

    def _read_settings(self) -> dict[str, Any]:
        with open(self.settings_file, encoding="utf-8") as f:
            try:
                settings = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MalformedSettingsError(f"Invalid JSON in {self.settings_file}: {e}") from e

        if not isinstance(settings, dict):
            raise MalformedSettingsError(f"Expected a JSON object in {self.settings_file}")
        return settings

    def _write_settings(self, settings: dict[str, Any]) -> None:
        """Write settings with the atomic temp-file-then-rename pattern.

        A symlinked settings file is written through to its target, and an
        existing file keeps its permission bits.
        """
        target = self.settings_file.resolve()
        temp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=target.parent,
                prefix="settings_",
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as tmp_file:
                temp_path = Path(tmp_file.name)
                json.dump(settings, tmp_file, indent=2, ensure_ascii=False)
                tmp_file.write("\n")

            if target.exists():
                shutil.copymode(target, temp_path)
            temp_path.replace(target)
        except (OSError, TypeError, ValueError) as e:
            # Clean up temp file on failure; the original file is untouched
            if temp_path is not None:
                with contextlib.suppress(OSError):
                    temp_path.unlink()
            raise SettingsError(f"Failed to write {self.settings_file}: {e}") from e
