from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

import pytest

from core.config import AppSettings
from core.interfaces.process import ProcessResult


@dataclass
class Call:
    command: list[str]
    cwd: Path | None
    inherit_io: bool


Responder = Callable[[list[str], "Path | None"], ProcessResult]


class FakeRunner:
    """Records every command instead of spawning it."""

    def __init__(self, responder: Responder | None = None) -> None:
        self.calls: list[Call] = []
        self.responder = responder

    def run(self, command: Sequence[str], *, cwd: Path | None = None, inherit_io: bool = True) -> ProcessResult:
        argv = [str(part) for part in command]
        self.calls.append(Call(argv, cwd, inherit_io))
        if self.responder is not None:
            return self.responder(argv, cwd)
        return ProcessResult(command=tuple(argv), returncode=0)

    @property
    def commands(self) -> list[list[str]]:
        return [call.command for call in self.calls]


class FakeSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def tool_dir(tmp_path: Path) -> Path:
    """A checkout containing scripts/django/setup_django_local.sh."""

    root = tmp_path / "tool"
    script = root / "scripts" / "django" / "setup_django_local.sh"
    script.parent.mkdir(parents=True)
    script.write_text("#!/usr/bin/env bash\n", encoding="utf-8")
    return root


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path
