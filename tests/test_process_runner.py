from __future__ import annotations

import sys

import pytest

from adapters.process_runner import SubprocessRunner
from core.domain.errors import SpawnError


def test_captured_output_tolerates_undecodable_bytes() -> None:
    command = [sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'caf\\xe9\\xff\\n')"]

    result = SubprocessRunner().run(command, inherit_io=False)

    assert result.returncode == 0
    assert result.stdout.startswith("caf")


def test_non_zero_exit_is_returned_not_raised() -> None:
    result = SubprocessRunner().run([sys.executable, "-c", "raise SystemExit(3)"], inherit_io=False)

    assert result.returncode == 3


def test_missing_executable_raises_spawn_error() -> None:
    with pytest.raises(SpawnError) as excinfo:
        SubprocessRunner().run(["djinit-no-such-binary", "--version"], inherit_io=False)

    assert excinfo.value.command[0] == "djinit-no-such-binary"
