"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation plus self-documenting fields (Field) without coupling
  the Core to subprocess or CLI libraries.
- Everything here is transient: nothing outlives one `init` invocation.

Note:
- These models describe *what* a scaffolding run is, not *how* it is executed.
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict


DOCKERFILE_NAME = "Dockerfile"
COMPOSE_FILE_NAME = "docker-compose.yml"


class DbKind(str, Enum):
    """Databases the setup script knows how to wire."""

    SQLITE = "sqlite"
    POSTGRES = "postgres"
    CLOUD = "cloud"


class HostOS(str, Enum):
    """Operating-system family handed to the setup script."""

    LINUX = "linux"
    MAC = "mac"
    WINDOWS = "windows"

    @classmethod
    def from_platform(cls, platform: str | None = None) -> "HostOS":
        """Map a `sys.platform` value to a family; unknown platforms are linux."""

        value = platform if platform is not None else sys.platform
        if value.startswith("win"):
            return cls.WINDOWS
        if value == "darwin":
            return cls.MAC
        return cls.LINUX


class InitOptions(BaseModel):
    """What the user asked for (flags + prompt answers)."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(
        default="",
        description="Name of the Django project; also the directory and image tag.",
    )
    db: DbKind = Field(default=DbKind.SQLITE)
    dockerfile: bool = Field(default=False, description="Generate a Dockerfile and build/run it.")
    docker_compose: bool = Field(default=False, description="Generate docker-compose.yml and bring it up.")
    superuser: bool = Field(default=False, description="Ask the script to create a superuser.")
    cloud_db_url: str | None = Field(
        default=None,
        description="Connection URL, only meaningful when db == cloud.",
    )

    @field_validator("project_name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("cloud_db_url", mode="before")
    @classmethod
    def _blank_url_is_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @model_validator(mode="before")
    @classmethod
    def _cloud_url_only_for_cloud(cls, data: object) -> object:
        if isinstance(data, dict) and data.get("db", DbKind.SQLITE) not in (DbKind.CLOUD, DbKind.CLOUD.value):
            data = {**data, "cloud_db_url": None}
        return data


class ScriptSearchResult(BaseModel):
    """Outcome of a script lookup: a match, or every path that was tried."""

    match_path: Path | None = None
    attempted_paths: list[Path] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.match_path is not None


def _yes_no(flag: bool) -> str:
    return "y" if flag else "n"


class ScriptArguments(BaseModel):
    """Positional contract of `setup_django_local.sh`.

    Order (the script reads `$1..$7`):
    1. project name
    2. db kind
    3. y/n Dockerfile
    4. y/n docker-compose
    5. y/n superuser
    6. host OS (linux/mac/windows)
    7. cloud DB URL, or an empty string
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    db: DbKind
    dockerfile: bool
    docker_compose: bool
    superuser: bool
    host_os: HostOS
    cloud_db_url: str = ""

    @classmethod
    def from_options(cls, options: InitOptions, host_os: HostOS) -> "ScriptArguments":
        return cls(
            project_name=options.project_name,
            db=options.db,
            dockerfile=options.dockerfile,
            docker_compose=options.docker_compose,
            superuser=options.superuser,
            host_os=host_os,
            cloud_db_url=options.cloud_db_url or "",
        )

    def as_argv(self) -> list[str]:
        return [
            self.project_name,
            self.db.value,
            _yes_no(self.dockerfile),
            _yes_no(self.docker_compose),
            _yes_no(self.superuser),
            self.host_os.value,
            self.cloud_db_url,
        ]


class DockerPlan(BaseModel):
    """Which Docker steps to run once the project tree exists.

    Compose supersedes the raw build: when both were requested only compose
    may run (both use the project name as container name and port 8000).
    """

    should_build_and_run: bool = False
    should_compose_up: bool = False
    build_skip_reason: str | None = None
    compose_skip_reason: str | None = None

    @classmethod
    def from_project(cls, options: InitOptions, project_dir: Path) -> "DockerPlan":
        build_skip: str | None = None
        if options.dockerfile:
            if not (project_dir / DOCKERFILE_NAME).exists():
                build_skip = f"{DOCKERFILE_NAME} not found in {project_dir}"
            elif options.docker_compose:
                build_skip = "docker-compose was requested and takes precedence"
            elif options.db is not DbKind.SQLITE:
                build_skip = f"standalone containers only support sqlite (got {options.db.value})"

        compose_skip: str | None = None
        if options.docker_compose:
            if not (project_dir / COMPOSE_FILE_NAME).exists():
                compose_skip = f"{COMPOSE_FILE_NAME} not found in {project_dir}"
            elif options.db is not DbKind.POSTGRES:
                compose_skip = f"docker-compose is only wired for postgres (got {options.db.value})"

        return cls(
            should_build_and_run=options.dockerfile and build_skip is None,
            should_compose_up=options.docker_compose and compose_skip is None,
            build_skip_reason=build_skip,
            compose_skip_reason=compose_skip,
        )
