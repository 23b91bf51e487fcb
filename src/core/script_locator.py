"""Setup-script discovery.

This module lives in `core/` because:
- it centralizes *where* the companion script may live (source checkout,
  installed package, `dist/` bundle) without coupling to the CLI
- a missing script is a normal result here; the caller decides how to fail.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Sequence

from core.domain.models import ScriptSearchResult


logger = logging.getLogger(__name__)


def _package_dir() -> Path:
    # core/script_locator.py -> core
    return Path(__file__).resolve().parent


def _safe_exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def default_start_dirs(cwd: Path | None = None) -> list[Path]:
    """Search roots, in priority order.

    Order:
    1) the installed package directory
    2) the current working directory

    Their parents (`src/` or `site-packages/`, the directory above the cwd)
    are covered by the upward walk in `locate`.
    """

    here = _package_dir()
    cwd = (cwd or Path.cwd()).resolve()
    return [here, cwd]


def _ancestors(start: Path) -> Iterable[Path]:
    directory = start.resolve()
    while True:
        yield directory
        parent = directory.parent
        if parent == directory:
            return
        directory = parent


def locate(
    start_dirs: Sequence[Path],
    candidates: Sequence[str],
    *,
    exists: Callable[[Path], bool] = _safe_exists,
) -> ScriptSearchResult:
    """Return the first existing `<ancestor>/<candidate>`.

    Walks every start directory up to the filesystem root. Nearer ancestors
    win over farther ones; at the same level the first-listed candidate wins.
    Every tested path is recorded in `attempted_paths`, in test order, and
    never twice: a walk stops at the first directory an earlier root already
    covered, since its ancestors were covered too.
    """

    tried: list[Path] = []
    visited: set[Path] = set()
    for root in start_dirs:
        for directory in _ancestors(Path(root)):
            if directory in visited:
                break
            visited.add(directory)
            for rel in candidates:
                candidate = directory / rel
                tried.append(candidate)
                if exists(candidate):
                    logger.debug("Setup script found at %s after %d attempts", candidate, len(tried))
                    return ScriptSearchResult(match_path=candidate, attempted_paths=tried)

    logger.debug("Setup script not found after %d attempts", len(tried))
    return ScriptSearchResult(match_path=None, attempted_paths=tried)


def locate_explicit(path: Path, *, exists: Callable[[Path], bool] = _safe_exists) -> ScriptSearchResult:
    """Check a user-supplied script path (`--script` / `DJINIT_SCRIPT_PATH`)."""

    resolved = path.expanduser().resolve()
    if exists(resolved):
        return ScriptSearchResult(match_path=resolved, attempted_paths=[resolved])
    return ScriptSearchResult(match_path=None, attempted_paths=[resolved])
