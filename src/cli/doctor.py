"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil
from pathlib import Path

import typer
from rich.console import Console

from cli.ui_components import build_doctor_table
from core.config import AppSettings, write_user_env_vars
from core.script_locator import default_start_dirs, locate, locate_explicit

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_binary(name: str) -> tuple[bool, str]:
    found = shutil.which(name)
    if found:
        return True, found
    return False, "not found on PATH"


def _check_script(settings: AppSettings) -> tuple[bool, str]:
    if settings.script_path is not None:
        result = locate_explicit(settings.script_path)
    else:
        result = locate(default_start_dirs(), settings.script_candidates)
    if result.match_path is not None:
        return True, str(result.match_path)
    return False, f"not found ({len(result.attempted_paths)} paths tried)"


@app.command()
def run() -> None:
    """Check the tools `init` shells out to and where the setup script resolves."""

    settings = AppSettings()

    table = build_doctor_table()
    failures = 0
    for label, binary, required in (
        ("Shell", settings.shell, True),
        ("Docker", settings.docker_binary, False),
        ("docker-compose", settings.compose_binary, False),
    ):
        ok, detail = _check_binary(binary)
        status = "OK" if ok else ("FAIL" if required else "OPTIONAL")
        failures += 0 if ok or not required else 1
        table.add_row(f"{label} ({binary})", status, detail)

    ok_script, detail_script = _check_script(settings)
    failures += 0 if ok_script else 1
    table.add_row("setup_django_local.sh", "OK" if ok_script else "FAIL", detail_script)

    _console.print(table)

    if not ok_script:
        _console.print(
            "\n[yellow]Note:[/yellow] point `djinit doctor set-script PATH` (or DJINIT_SCRIPT_PATH) at the script."
        )
    if failures:
        raise typer.Exit(code=1)


@app.command(name="set-script")
def set_script(path: Path = typer.Argument(..., help="Path to setup_django_local.sh")) -> None:
    """Store the setup-script location in the user config .env."""

    resolved = path.expanduser().resolve()
    if not resolved.is_file():
        raise typer.BadParameter(f"{resolved} is not a file")

    env_path = write_user_env_vars({"DJINIT_SCRIPT_PATH": str(resolved)})
    _console.print(f"[green]Saved script path to:[/green] {env_path}")
