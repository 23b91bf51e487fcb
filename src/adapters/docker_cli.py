"""Docker and docker-compose commands used after scaffolding.

Every call goes through a `ProcessRunner`, so nothing here touches
`subprocess` directly and tests can record the exact argv.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable

from core.config import AppSettings
from core.domain.errors import ContainerStartTimeoutError, DjinitError, DockerCommandError
from core.interfaces.process import ProcessResult, ProcessRunner


logger = logging.getLogger(__name__)


class DockerCLI:
    def __init__(
        self,
        runner: ProcessRunner,
        settings: AppSettings | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._runner = runner
        self._settings = settings or AppSettings()
        self._sleep = sleep

    @property
    def port_mapping(self) -> str:
        return f"{self._settings.host_port}:{self._settings.container_port}"

    def _check(self, result: ProcessResult) -> ProcessResult:
        if result.returncode != 0:
            raise DockerCommandError(result.command, result.returncode)
        return result

    def build(self, tag: str, context_dir: Path) -> None:
        docker = self._settings.docker_binary
        self._check(self._runner.run([docker, "build", "-t", tag, "."], cwd=context_dir))

    def remove_container(self, name: str) -> bool:
        """Best-effort `docker rm -f`; the container usually does not exist."""

        try:
            result = self._runner.run([self._settings.docker_binary, "rm", "-f", name], inherit_io=False)
        except DjinitError as exc:
            logger.debug("Ignoring failure while removing container %s: %s", name, exc)
            return False
        if result.returncode != 0:
            logger.debug("No previous container named %s (exit %d)", name, result.returncode)
            return False
        return True

    def run_detached(self, name: str, image: str) -> None:
        docker = self._settings.docker_binary
        self._check(self._runner.run([docker, "run", "-d", "--name", name, "-p", self.port_mapping, image]))

    def is_running(self, name: str) -> bool:
        result = self._runner.run(
            [
                self._settings.docker_binary,
                "ps",
                "--filter",
                f"name=^{name}$",
                "--format",
                "{{.Names}}",
            ],
            inherit_io=False,
        )
        if result.returncode != 0:
            return False
        return name in (line.strip() for line in result.stdout.splitlines())

    def wait_for_container(self, name: str, retries: int | None = None, interval: float | None = None) -> int:
        """Poll `docker ps` until `name` is listed; return the attempt number.

        Raises `ContainerStartTimeoutError` once the retry budget is spent.
        """

        retries = retries if retries is not None else self._settings.readiness_retries
        interval = interval if interval is not None else self._settings.readiness_interval_seconds
        for attempt in range(1, retries + 1):
            if self.is_running(name):
                logger.debug("Container %s running after %d poll(s)", name, attempt)
                return attempt
            if attempt < retries:
                self._sleep(interval)
        raise ContainerStartTimeoutError(name, retries)

    def compose_up(self, project_dir: Path) -> None:
        self._check(self._runner.run([self._settings.compose_binary, "up", "-d"], cwd=project_dir))
