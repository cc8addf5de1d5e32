# mirror_deploy/cli/utils/output.py
"""Output formatting utilities"""

from typing import Any, Dict

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from ...api.exceptions import MirrorDeployError
from ...constants import EMOJI_ERROR
from ...models import ReleaseResult, ScmConfig
from ...utils.formatting import format_duration, format_path

console = Console()


def format_release_result(result: ReleaseResult) -> None:
    """Format and display a deploy pipeline result"""
    lines = [
        f"[green]✓[/green] {result.message}",
        "",
        f"[bold]Repository:[/bold] {result.repo_url}",
        f"[bold]Mirror:[/bold] {format_path(result.mirror_path or '-')}",
    ]

    if result.mirror_action:
        lines.append(f"[bold]Mirror action:[/bold] {result.mirror_action.value}")

    if result.resolved:
        lines.append(f"[bold]Reference:[/bold] {result.resolved.reference} ({result.resolved.kind.value})")
        lines.append(f"[bold]Checked out:[/bold] {result.resolved.tracking_name}")
        lines.append(f"[bold]Revision:[/bold] {result.resolved.revision}")

    lines.append(f"[bold]Release:[/bold] {format_path(result.release_path or '-')}")
    lines.append(f"[bold]Export:[/bold] {result.export_strategy}")
    lines.append(f"[bold]Duration:[/bold] {format_duration(result.duration)}")

    panel = Panel(
        "\n".join(lines),
        title="Deploy Result",
        border_style="green"
    )
    console.print(panel)


def format_config(config: ScmConfig) -> None:
    """Display effective configuration with secrets masked"""
    table = Table(title="Effective Configuration", box=box.SIMPLE)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    data: Dict[str, Any] = config.to_dict(mask_secrets=True)
    for key, value in data.items():
        if value is None or value == {}:
            display = "[dim]-[/dim]"
        elif isinstance(value, dict):
            display = ", ".join(f"{k}={v}" for k, v in value.items())
        else:
            display = str(value)
        table.add_row(key, display)

    table.add_row("wrapper_path", config.wrapper_path)
    console.print(table)


def print_error(error: MirrorDeployError) -> None:
    """Display an error with its code"""
    code = f" [{error.error_code}]" if error.error_code else ""
    console.print(f"[red]{EMOJI_ERROR} Error{escape(code)}:[/red] {escape(str(error))}", highlight=False)
