"""External-process contracts.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Tests swap in a recorder that never spawns anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and, when captured, the child's stdout."""

    command: tuple[str, ...]
    returncode: int
    stdout: str = ""


@runtime_checkable
class ProcessRunner(Protocol):
    """Minimal contract for running one external command to completion.

    Design rules:
    - Arguments are always a sequence; nothing is ever joined into a shell string.
    - `inherit_io=True` lets the child talk to the user's terminal directly.
    - `inherit_io=False` captures stdout as text.
    - Failing to start the command raises `SpawnError`; a non-zero exit is
      reported through `ProcessResult.returncode`, never raised.
    """

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        inherit_io: bool = True,
    ) -> ProcessResult:
        ...
