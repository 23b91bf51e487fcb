from __future__ import annotations

from pathlib import Path

from core.script_locator import default_start_dirs, locate, locate_explicit


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


def test_nearest_ancestor_wins(tmp_path: Path) -> None:
    near = _touch(tmp_path / "a" / "b" / "scripts" / "setup.sh")
    _touch(tmp_path / "a" / "scripts" / "setup.sh")
    start = tmp_path / "a" / "b" / "c"
    start.mkdir(parents=True)

    result = locate([start], ["scripts/setup.sh"])

    assert result.found
    assert result.match_path == near.resolve()


def test_first_candidate_wins_at_same_level(tmp_path: Path) -> None:
    _touch(tmp_path / "one.sh")
    two = _touch(tmp_path / "two.sh")

    result = locate([tmp_path], ["two.sh", "one.sh"])

    assert result.match_path == two.resolve()
    assert result.attempted_paths == [two.resolve()]


def test_nearer_level_beats_earlier_candidate(tmp_path: Path) -> None:
    _touch(tmp_path / "a" / "first.sh")
    second = _touch(tmp_path / "a" / "b" / "second.sh")

    result = locate([tmp_path / "a" / "b"], ["first.sh", "second.sh"])

    assert result.match_path == second.resolve()


def test_start_dirs_are_tried_in_order(tmp_path: Path) -> None:
    far = _touch(tmp_path / "x" / "setup.sh")
    _touch(tmp_path / "z" / "setup.sh")
    (tmp_path / "x" / "y").mkdir()

    result = locate([tmp_path / "x" / "y", tmp_path / "z"], ["setup.sh"])

    assert result.match_path == far.resolve()


def test_no_match_records_every_attempt_in_order(tmp_path: Path) -> None:
    start = tmp_path.resolve() / "deep" / "er"
    candidates = ["scripts/a.sh", "b.sh"]
    second_start = tmp_path.resolve() / "other"

    result = locate([start, second_start], candidates, exists=lambda _p: False)

    expected: list[Path] = []
    for directory in (start, *start.parents):
        for rel in candidates:
            expected.append(directory / rel)
    # the second walk stops at tmp_path, already covered by the first one
    expected += [second_start / rel for rel in candidates]

    assert not result.found
    assert result.match_path is None
    assert result.attempted_paths == expected


def test_nested_start_dirs_never_repeat_a_path(tmp_path: Path) -> None:
    inner = tmp_path.resolve() / "a" / "b"

    result = locate([inner, inner.parent, tmp_path, inner], ["x.sh"], exists=lambda _p: False)

    assert len(result.attempted_paths) == len(set(result.attempted_paths))
    assert result.attempted_paths == [d / "x.sh" for d in (inner, *inner.parents)]


def test_default_search_never_repeats_a_path(tmp_path: Path) -> None:
    result = locate(default_start_dirs(tmp_path), ["nope/x.sh"], exists=lambda _p: False)

    assert result.attempted_paths
    assert len(result.attempted_paths) == len(set(result.attempted_paths))
    assert tmp_path.resolve() / "nope/x.sh" in result.attempted_paths
    assert tmp_path.resolve().parent / "nope/x.sh" in result.attempted_paths


def test_locate_explicit(tmp_path: Path) -> None:
    script = _touch(tmp_path / "custom.sh")

    hit = locate_explicit(script)
    miss = locate_explicit(tmp_path / "missing.sh")

    assert hit.match_path == script.resolve()
    assert miss.match_path is None
    assert miss.attempted_paths == [(tmp_path / "missing.sh").resolve()]


def test_default_start_dirs_are_package_dir_then_cwd(tmp_path: Path) -> None:
    cwd = tmp_path / "project"
    cwd.mkdir()

    dirs = default_start_dirs(cwd)

    assert len(dirs) == 2
    assert dirs[0].name == "core"
    assert dirs[1] == cwd.resolve()
