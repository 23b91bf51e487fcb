"""Typer entry point.

The command layer only collects input (flags + prompts), builds an
`InitPipeline` and renders the outcome. All sequencing lives in
`core.services.init_pipeline`.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from adapters.process_runner import SubprocessRunner
from cli import doctor
from cli.ui_components import build_error_panel, build_result_panel, print_banner
from core.config import AppSettings
from core.domain.errors import DjinitError
from core.domain.models import DbKind, InitOptions
from core.logging_setup import configure_logging
from core.services.init_pipeline import InitPipeline, PipelineHooks, Stage

app = typer.Typer(
    no_args_is_help=True,
    help="Scaffold a Django project, optionally with Docker or docker-compose.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

_STAGE_MESSAGES = {
    Stage.SCAFFOLDING: "Running scaffold script...",
    Stage.DOCKER_BUILDING: "Building Docker image...",
    Stage.DOCKER_RUNNING: "Running Docker container...",
    Stage.DOCKER_WAITING: "Waiting for the container to come up...",
    Stage.COMPOSE_RUNNING: "Running docker-compose up -d ...",
}


def _print_stage(stage: Stage) -> None:
    message = _STAGE_MESSAGES.get(stage)
    if message:
        _console.print(f"[cyan]{message}[/cyan]")


def _print_warning(message: str) -> None:
    _err_console.print(f"[yellow]Warning:[/yellow] {message}")


def build_pipeline(settings: AppSettings) -> InitPipeline:
    hooks = PipelineHooks(stage=_print_stage, warning=_print_warning)
    return InitPipeline(SubprocessRunner(), settings, hooks=hooks)


@app.command()
def init(
    db: DbKind = typer.Option(DbKind.SQLITE, "--db", "-d", case_sensitive=False, help="Database type."),
    dockerfile: bool = typer.Option(
        False, "--dockerfile", "-f", help="Create a Dockerfile and build/run the container."
    ),
    docker_compose: bool = typer.Option(
        False,
        "--dockercompose",
        "--docker-compose",
        "-c",
        help="Create docker-compose.yml and run docker-compose up.",
    ),
    superuser: bool = typer.Option(False, "--superuser", help="Create a Django superuser."),
    name: str | None = typer.Option(None, "--name", "-n", help="Project name (skips the prompt)."),
    cloud_db_url: str | None = typer.Option(
        None, "--cloud-db-url", help="Cloud DB URL for --db cloud (skips the prompt)."
    ),
    script: Path | None = typer.Option(None, "--script", help="Explicit path to setup_django_local.sh."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every external command."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Initialize a Django project with optional DB, Docker, and docker-compose."""

    settings = AppSettings()
    if script is not None:
        settings = settings.model_copy(update={"script_path": script})
    configure_logging("DEBUG" if verbose else settings.log_level)

    if not no_banner:
        print_banner(_console)

    if name is None:
        name = typer.prompt("Enter project name", default="", show_default=False)
    if db is DbKind.CLOUD and cloud_db_url is None:
        cloud_db_url = typer.prompt("Enter cloud DB URL (optional)", default="", show_default=False)

    options = InitOptions(
        project_name=name,
        db=db,
        dockerfile=dockerfile,
        docker_compose=docker_compose,
        superuser=superuser,
        cloud_db_url=cloud_db_url,
    )

    try:
        result = build_pipeline(settings).run(options)
    except DjinitError as exc:
        _err_console.print(build_error_panel(exc, try_limit=settings.script_search_try_limit))
        raise typer.Exit(code=exc.exit_code) from exc

    _console.print(build_result_panel(result, host_port=settings.host_port))


def run() -> None:
    app()
