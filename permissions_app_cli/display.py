"""Terminal rendering for the permissions menu using Rich."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .catalog import Catalog
from .catalog import CommandEntry
from .catalog import RiskLevel
from .merger import ConfigMode
from .merger import MergeMode
from .merger import MergeResult
from .merger import display_name

RISK_STYLES = {
    RiskLevel.SAFE: "green",
    RiskLevel.CAUTION: "yellow",
    RiskLevel.DANGER: "red",
}

NAME_WIDTH = 12
MIN_COLUMN_WIDTH = 20


def print_status(console: Console, message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def print_success(console: Console, message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}")


def print_warning(console: Console, message: str) -> None:
    console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")


def print_error(console: Console, message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")


def risk_indicator(risk: RiskLevel) -> str:
    """Markup suffix flagging non-safe entries."""
    if risk == RiskLevel.SAFE:
        return ""
    style = RISK_STYLES[risk]
    return f" [{style}]⚠️  {risk.value.upper()}[/{style}]"


def format_entry(entry: CommandEntry) -> str:
    style = RISK_STYLES[entry.risk]
    name = escape(entry.name.ljust(NAME_WIDTH))
    return f"[{style}]{name}[/{style}] - {escape(entry.description)}{risk_indicator(entry.risk)}"


def show_header(console: Console) -> None:
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Permissions Setup[/bold cyan]\n"
            "Allow common commands globally so they stop asking for permission.",
            border_style="cyan",
        )
    )
    console.print()


def show_catalog(console: Console, catalog: Catalog) -> None:
    """List every catalog entry with its 1-based number."""
    console.print("[bold]Available commands to allow globally:[/bold]\n")
    for number, entry in enumerate(catalog, start=1):
        console.print(f"[cyan]{number:>3}.[/cyan] {format_entry(entry)}")


def show_selection_help(console: Console, catalog: Catalog) -> None:
    console.print()
    console.print("[bold]Color legend:[/bold]")
    console.print("  [green]Green[/green]     - Safe commands (low risk)")
    console.print(f"  [yellow]Yellow[/yellow]    - Caution commands (moderate risk){risk_indicator(RiskLevel.CAUTION)}")
    console.print(f"  [red]Red[/red]       - Dangerous commands (high risk){risk_indicator(RiskLevel.DANGER)}")
    console.print()
    console.print("[bold]Selection options:[/bold]")
    console.print("  • Numbers separated by commas or spaces: [cyan]1,3,5[/cyan] or [cyan]1 3 5[/cyan]")
    console.print("  • Ranges with a dash: [cyan]1-10[/cyan] or [cyan]1-5,8-12[/cyan]")
    console.print("  • [cyan]all[/cyan] to select all commands")
    common = min(catalog.common_count, len(catalog))
    console.print(f"  • [cyan]common[/cyan] for the most commonly used commands (1-{common})")
    console.print("  • [cyan]dev[/cyan] for development tools")
    console.print("  • [cyan]system[/cyan] for system administration commands")
    console.print("  • [cyan]safe[/cyan] for safe (green) commands only")
    console.print("  • [cyan]mcp[/cyan] to allow all MCP server tools")
    console.print(
        "  • [cyan]custom:[/cyan] followed by comma-separated commands [dim](e.g. custom:docker,kubectl,helm)[/dim]"
    )
    console.print()


def format_tool_rows(tools: list[str], width: int) -> list[str]:
    """Lay out tool names in fixed-width columns that fit the terminal.

    ``Bash(name:*)`` wrappers are shown as the bare command name.
    """
    if not tools:
        return []

    names = [display_name(tool) for tool in tools]
    column_width = max(max(len(name) for name in names) + 2, MIN_COLUMN_WIDTH)
    per_row = max(1, (width - 4) // column_width)

    rows = []
    for start in range(0, len(names), per_row):
        row = names[start : start + per_row]
        rows.append("".join(name.ljust(column_width) for name in row).rstrip())
    return rows


def show_tools(console: Console, tools: list[str], prefix: str = "→") -> None:
    for row in format_tool_rows(tools, console.width):
        console.print(f"  {prefix} [yellow]{escape(row)}[/yellow]")


def show_existing_tools(console: Console, tools: list[str]) -> None:
    console.print()
    print_warning(console, f"Existing permissions found in config ({len(tools)} tools):")
    show_tools(console, tools)
    console.print()


def show_selected(console: Console, entries: list[CommandEntry]) -> None:
    console.print()
    print_status(console, "Selected commands:")
    for entry in entries:
        console.print(f"  {format_entry(entry)}")


def show_results(console: Console, result: MergeResult, config_mode: ConfigMode, settings_file: Path) -> None:
    """Render the final summary after the settings file was written."""
    console.print()
    console.print(Panel.fit("[bold green]Setup complete![/bold green]", border_style="green"))
    console.print()

    if config_mode.mode == MergeMode.MERGE:
        console.print("Added to existing permissions. All allowed commands:\n")
        show_tools(console, result.tools, prefix="✓")
        console.print()
        console.print(
            f"[green]Summary:[/green] {len(config_mode.existing)} existing + {len(result.added)} new "
            f"= {len(result.tools)} total tools"
        )
    else:
        console.print("Replaced existing permissions. All allowed commands:\n")
        show_tools(console, result.tools, prefix="✓")
        console.print()
        console.print(f"[green]Summary:[/green] {len(result.tools)} tools configured")

    console.print()
    console.print("[dim]These permissions apply globally across all sessions.[/dim]")
    console.print("To modify permissions later:")
    console.print("  1. Run [cyan]allow-permissions[/cyan] again")
    console.print(f"  2. Edit [cyan]{escape(str(settings_file))}[/cyan] manually")
    console.print()
