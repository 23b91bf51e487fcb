"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (subprocess/Docker) read tool names and timings consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SCRIPT_CANDIDATES: tuple[str, ...] = (
    "src/scripts/django/setup_django_local.sh",
    "scripts/django/setup_django_local.sh",
    "dist/scripts/django/setup_django_local.sh",
    "src/scripts/setup_django_local.sh",
    "scripts/setup_django_local.sh",
)


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "djinit"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "djinit"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "djinit"
    return Path.home() / ".config" / "djinit"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# djinit user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed + validated at the edge (env vars) without leaking into the Core.
    - A single config contract for the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DJINIT_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    script_path: Path | None = Field(
        default=None,
        description="Explicit path to setup_django_local.sh (skips the search).",
    )
    script_candidates: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SCRIPT_CANDIDATES),
        min_length=1,
        description="Relative paths tried at every ancestor of every start directory.",
    )
    script_search_try_limit: int = Field(
        default=200,
        ge=1,
        description="Maximum number of attempted paths shown when the script is missing.",
    )

    shell: str = Field(
        default="bash",
        min_length=1,
        description="Interpreter used to run the setup script.",
    )
    docker_binary: str = Field(default="docker", min_length=1)
    compose_binary: str = Field(default="docker-compose", min_length=1)

    container_port: int = Field(default=8000, ge=1, le=65535)
    host_port: int = Field(default=8000, ge=1, le=65535)

    readiness_retries: int = Field(
        default=10,
        ge=1,
        le=600,
        description="How many times `docker ps` is polled before giving up.",
    )
    readiness_interval_seconds: float = Field(
        default=0.5,
        ge=0,
        description="Pause between two readiness polls (seconds).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ...).",
    )
