"""UI components for the CLI (Rich).

Why keep them separate:
- Avoids mixing command logic with visual details.
- Lets `init` and `doctor` share panels/tables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import DjinitError, ScriptNotFoundError
from core.services.init_pipeline import InitResult


def print_banner(console: Console) -> None:
    title = Text("djinit", style="bold cyan")
    subtitle = Text("Django scaffolding • Docker • docker-compose", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_attempted_paths(paths: Sequence[Path], limit: int) -> list[str]:
    """Render at most `limit` attempted paths plus a trailing count line."""

    lines = [str(p) for p in paths[:limit]]
    hidden = len(paths) - limit
    if hidden > 0:
        lines.append(f"… and {hidden} more")
    return lines


def build_error_panel(error: DjinitError, *, try_limit: int = 200) -> Panel:
    body = Text()
    body.append(error.message, style="bold")
    if isinstance(error, ScriptNotFoundError):
        body.append(" Tried:\n", style="bold")
        for line in format_attempted_paths(error.attempted_paths, try_limit):
            body.append(f"  {line}\n", style="dim")
    return Panel(body, title=Text(f"Failed ({error.step})", style="bold red"), border_style="red")


def build_result_panel(result: InitResult, *, host_port: int = 8000) -> Panel:
    body = Text()
    body.append(f"Project '{result.project_name}' created successfully!\n\n", style="bold green")
    body.append(f"Directory: {result.project_dir}\n")
    body.append(f"Script:    {result.script_path}\n", style="dim")
    if result.container_started:
        body.append(f"\nContainer '{result.project_name}' started and mapped to host port {host_port}.")
    if result.compose_started:
        body.append("\ndocker-compose services are up.")
    return Panel(body, border_style="green")


def build_doctor_table() -> Table:
    table = Table(title="djinit Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
