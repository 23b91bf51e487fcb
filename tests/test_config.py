from __future__ import annotations

from pathlib import Path

from core.config import DEFAULT_SCRIPT_CANDIDATES, AppSettings, write_user_env_vars


def test_defaults(settings: AppSettings) -> None:
    assert settings.script_candidates == list(DEFAULT_SCRIPT_CANDIDATES)
    assert settings.script_search_try_limit == 200
    assert (settings.host_port, settings.container_port) == (8000, 8000)
    assert (settings.readiness_retries, settings.readiness_interval_seconds) == (10, 0.5)


def test_env_prefix(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DJINIT_SCRIPT_PATH", str(tmp_path / "setup.sh"))
    monkeypatch.setenv("DJINIT_READINESS_RETRIES", "3")

    settings = AppSettings(_env_file=None)

    assert settings.script_path == tmp_path / "setup.sh"
    assert settings.readiness_retries == 3


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nDJINIT_SHELL='zsh'\n", encoding="utf-8")

    write_user_env_vars({"DJINIT_SCRIPT_PATH": "/opt/setup.sh"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[1:] == ["DJINIT_SCRIPT_PATH=/opt/setup.sh", "DJINIT_SHELL=zsh"]
