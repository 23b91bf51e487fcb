"""Error taxonomy for the init pipeline.

Every failure the CLI knows how to report derives from `DjinitError`, so the
command layer can catch one type and print one message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class DjinitError(Exception):
    """Base class for user-facing failures."""

    exit_code: int = 1
    step: str = "init"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DjinitError):
    step = "validation"


class ScriptNotFoundError(DjinitError):
    step = "locate"

    def __init__(self, attempted_paths: Sequence[Path], script_name: str = "setup_django_local.sh") -> None:
        super().__init__(f"{script_name} not found.")
        self.script_name = script_name
        self.attempted_paths = list(attempted_paths)


class SpawnError(DjinitError):
    """The external process could not be started at all (missing binary)."""

    step = "spawn"

    def __init__(self, command: Sequence[str], reason: str) -> None:
        super().__init__(f"Could not start `{command[0]}`: {reason}")
        self.command = list(command)
        self.reason = reason


class ExternalCommandError(DjinitError):
    """The external process ran but exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        super().__init__(f"`{' '.join(command)}` exited with code {returncode}")
        self.command = list(command)
        self.returncode = returncode


class ScriptExecutionError(ExternalCommandError):
    step = "scaffold"

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        return self.returncode if self.returncode > 0 else 1


class DockerCommandError(ExternalCommandError):
    step = "docker"


class ContainerStartTimeoutError(DjinitError):
    step = "docker"

    def __init__(self, container_name: str, attempts: int) -> None:
        super().__init__(
            f'Docker container "{container_name}" did not start in time '
            f"(not listed by `docker ps` after {attempts} attempts)"
        )
        self.container_name = container_name
        self.attempts = attempts
