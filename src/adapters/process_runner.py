"""`subprocess` wrapper.

Why a wrapper:
- Standardizes shell=False, stdio policy, logging and spawn-error mapping.
- Makes testing easy: the pipeline only sees the `ProcessRunner` protocol.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from core.domain.errors import SpawnError
from core.interfaces.process import ProcessResult


logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Blocking `ProcessRunner` backed by `subprocess.run`."""

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        inherit_io: bool = True,
    ) -> ProcessResult:
        argv = [str(part) for part in command]
        logger.debug("Running %s (cwd=%s)", argv, cwd or Path.cwd())
        try:
            if inherit_io:
                completed = subprocess.run(argv, cwd=cwd, shell=False, check=False)
                stdout = ""
            else:
                completed = subprocess.run(
                    argv,
                    cwd=cwd,
                    shell=False,
                    check=False,
                    capture_output=True,
                    text=True,
                    errors="replace",
                )
                stdout = completed.stdout or ""
        except FileNotFoundError as exc:
            raise SpawnError(argv, f"executable not found ({exc.filename or argv[0]})") from exc
        except OSError as exc:
            raise SpawnError(argv, str(exc)) from exc

        logger.debug("%s exited with code %d", argv[0], completed.returncode)
        return ProcessResult(command=tuple(argv), returncode=completed.returncode, stdout=stdout)
