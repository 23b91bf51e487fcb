"""Project initialization orchestration.

This module owns the whole `init` flow so the CLI layer only collects
input and prints results. Side-effects meant for humans (warnings, stage
changes) go through `PipelineHooks`; everything else is either returned in
`InitResult` or raised as a `DjinitError`.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable

from adapters.docker_cli import DockerCLI
from core.config import AppSettings
from core.domain.errors import DjinitError, ScriptExecutionError, ScriptNotFoundError, ValidationError
from core.domain.models import DockerPlan, HostOS, InitOptions, ScriptArguments
from core.interfaces.process import ProcessRunner
from core.script_locator import default_start_dirs, locate, locate_explicit


logger = logging.getLogger(__name__)


class Stage(str, Enum):
    VALIDATING = "validating"
    LOCATING = "locating"
    SCAFFOLDING = "scaffolding"
    DOCKER_BUILDING = "docker-building"
    DOCKER_RUNNING = "docker-running"
    DOCKER_WAITING = "docker-waiting"
    COMPOSE_RUNNING = "compose-running"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, warnings)."""

    stage: Callable[[Stage], None] | None = None
    warning: Callable[[str], None] | None = None


@dataclass
class InitResult:
    """Output of a successful run."""

    project_name: str
    project_dir: Path
    script_path: Path
    script_args: list[str]
    plan: DockerPlan
    container_started: bool = False
    compose_started: bool = False
    warnings: list[str] = field(default_factory=list)


def validate_project_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Project name is required.")
    if cleaned in (".", "..") or "/" in cleaned or "\\" in cleaned:
        raise ValidationError(f"Invalid project name {cleaned!r}: it must be a plain directory name.")
    return cleaned


class InitPipeline:
    def __init__(
        self,
        runner: ProcessRunner,
        settings: AppSettings | None = None,
        *,
        hooks: PipelineHooks | None = None,
        docker: DockerCLI | None = None,
        sleep: Callable[[float], None] = time.sleep,
        host_os: HostOS | None = None,
        start_dirs: list[Path] | None = None,
    ) -> None:
        self.runner = runner
        self.settings = settings or AppSettings()
        self.hooks = hooks or PipelineHooks()
        self.docker = docker or DockerCLI(runner, self.settings, sleep=sleep)
        self.host_os = host_os or HostOS.from_platform()
        self.start_dirs = start_dirs
        self._warnings: list[str] = []

    def _enter(self, stage: Stage) -> None:
        logger.debug("Stage -> %s", stage.value)
        if self.hooks.stage:
            self.hooks.stage(stage)

    def _warn(self, message: str) -> None:
        logger.info(message)
        self._warnings.append(message)
        if self.hooks.warning:
            self.hooks.warning(message)

    def locate_script(self, cwd: Path) -> Path:
        if self.settings.script_path is not None:
            result = locate_explicit(self.settings.script_path)
        else:
            start_dirs = self.start_dirs if self.start_dirs is not None else default_start_dirs(cwd)
            result = locate(start_dirs, self.settings.script_candidates)
        if result.match_path is None:
            raise ScriptNotFoundError(result.attempted_paths)
        return result.match_path

    def build_script_args(self, options: InitOptions) -> list[str]:
        return ScriptArguments.from_options(options, self.host_os).as_argv()

    def run(self, options: InitOptions, cwd: Path | None = None) -> InitResult:
        cwd = cwd or Path.cwd()
        self._warnings = []
        try:
            return self._run(options, cwd)
        except DjinitError:
            self._enter(Stage.FAILED)
            raise

    def _run(self, options: InitOptions, cwd: Path) -> InitResult:
        self._enter(Stage.VALIDATING)
        project_name = validate_project_name(options.project_name)

        self._enter(Stage.LOCATING)
        script_path = self.locate_script(cwd)

        self._enter(Stage.SCAFFOLDING)
        script_args = self.build_script_args(options)
        command = [self.settings.shell, str(script_path), *script_args]
        logger.info("Running scaffold script: %s", script_path)
        result = self.runner.run(command, cwd=cwd, inherit_io=True)
        if result.returncode != 0:
            raise ScriptExecutionError(result.command, result.returncode)

        project_dir = cwd / project_name
        plan = DockerPlan.from_project(options, project_dir)
        outcome = InitResult(
            project_name=project_name,
            project_dir=project_dir,
            script_path=script_path,
            script_args=script_args,
            plan=plan,
        )

        if plan.build_skip_reason:
            self._warn(f"Skipping docker build/run: {plan.build_skip_reason}.")
        if plan.should_build_and_run:
            self._enter(Stage.DOCKER_BUILDING)
            self.docker.build(project_name, project_dir)
            self.docker.remove_container(project_name)

            self._enter(Stage.DOCKER_RUNNING)
            self.docker.run_detached(project_name, project_name)

            self._enter(Stage.DOCKER_WAITING)
            self.docker.wait_for_container(project_name)
            outcome.container_started = True

        if plan.compose_skip_reason:
            self._warn(f"Skipping docker-compose up: {plan.compose_skip_reason}.")
        if plan.should_compose_up:
            self._enter(Stage.COMPOSE_RUNNING)
            self.docker.compose_up(project_dir)
            outcome.compose_started = True

        outcome.warnings = list(self._warnings)
        self._enter(Stage.DONE)
        return outcome
