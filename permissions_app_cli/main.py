"""Permissions setup CLI - choose shell commands that run without a permission prompt."""

import logging
import sys

import click
from rich.prompt import Confirm
from rich.prompt import Prompt

from .catalog import Catalog
from .catalog import default_catalog
from .console import console
from .display import print_error
from .display import print_status
from .display import print_success
from .display import print_warning
from .display import show_catalog
from .display import show_existing_tools
from .display import show_header
from .display import show_results
from .display import show_selected
from .display import show_selection_help
from .logging_setup import init_json_logging
from .merger import ConfigMode
from .merger import MergeMode
from .merger import merge_permissions
from .selection import Selection
from .selection import resolve_selection
from .settings_store import SettingsError
from .settings_store import SettingsStore

logger = logging.getLogger(__name__)


def choose_config_mode(store: SettingsStore) -> ConfigMode | None:
    """Decide how the new selection combines with existing permissions.

    Only asks when the settings file already allows something.

    Returns:
        The config mode, or None if the user cancelled
    """
    existing, warning = store.load_allowed_tools()
    if warning:
        print_warning(console, warning)

    if not existing:
        return ConfigMode.replace()

    show_existing_tools(console, existing)
    console.print("[cyan]Do you want to:[/cyan]")
    console.print("  [green]1.[/green] Replace existing permissions (clear and add new)")
    console.print("  [green]2.[/green] Add to existing permissions (merge)")
    console.print("  [green]3.[/green] Cancel")
    console.print()

    choice = Prompt.ask("Enter your choice", choices=["1", "2", "3"], console=console)

    if choice == "1":
        print_status(console, "Will replace existing permissions")
        return ConfigMode.replace()
    if choice == "2":
        print_status(console, "Will add to existing permissions")
        return ConfigMode.merge(existing)
    return None


def prompt_selection(catalog: Catalog) -> Selection:
    """Ask for a selection until something valid is entered."""
    while True:
        text = Prompt.ask("Enter your selection", console=console).strip()
        if not text:
            print_warning(console, "Please enter a selection.")
            continue

        selection = resolve_selection(text, catalog)
        for warning in selection.warnings:
            print_warning(console, warning)

        if selection.custom_entries:
            names = ", ".join(entry.name for entry in selection.custom_entries)
            print_status(console, f"Added {len(selection.custom_entries)} custom commands: {names}")

        if selection:
            return selection
        print_warning(console, "No valid commands selected. Please try again.")


@click.command()
@click.version_option(package_name="allow-permissions")
def cli():
    """Allow common shell commands globally.

    Presents a numbered list of commands, then writes the chosen ones to the
    allowedTools list in the settings file, replacing or merging with what is
    already there. The previous file is backed up first.
    """
    init_json_logging()
    catalog = default_catalog()
    store = SettingsStore()
    logger.info(f"Starting permissions setup for {store.settings_file}")

    show_header(console)
    show_catalog(console, catalog)
    show_selection_help(console, catalog)

    config_mode = choose_config_mode(store)
    if config_mode is None:
        print_warning(console, "Operation cancelled.")
        logger.info("Cancelled at mode prompt")
        return

    selection = prompt_selection(catalog)
    show_selected(console, selection.entries)

    console.print()
    if not Confirm.ask("Proceed with allowing these commands globally?", console=console):
        print_warning(console, "Operation cancelled.")
        logger.info("Cancelled at confirmation")
        return

    console.print()
    print_status(console, "Setting up global permissions...")
    result = merge_permissions(selection.entries, config_mode)
    if config_mode.mode == MergeMode.MERGE:
        for tool in result.added:
            print_status(console, f"Adding new permission: {tool}")
        for tool in result.skipped:
            print_status(console, f"Skipping duplicate: {tool}")

    try:
        backup_file = store.save(result.tools)
    except SettingsError as e:
        logger.error(f"Failed to update configuration: {e}")
        print_error(console, f"Failed to update configuration: {e}")
        sys.exit(1)

    if backup_file is not None:
        print_status(console, f"Backup created: {backup_file.name}")
    print_success(console, "Configuration updated successfully!")

    show_results(console, result, config_mode, store.settings_file)
