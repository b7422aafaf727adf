"""Naming conventions for contest workspaces and problem directories."""

import os
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_PREFIX = "abc"
BUILD_MODES = ("debug", "release")
JUDGE_URL = "https://atcoder.jp/contests/{workspace}/tasks/{workspace}_{problem}"


def is_windows() -> bool:
    return os.name == "nt"


def workspace_name(contest: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Directory name for a contest, e.g. "300" -> "abc300"."""
    return f"{prefix}{contest}"


def workspace_dir(root: Path, contest: str, prefix: str = DEFAULT_PREFIX) -> Path:
    return Path(root) / workspace_name(contest, prefix)


def problem_dir(
    root: Path, contest: str, problem: str, prefix: str = DEFAULT_PREFIX
) -> Path:
    return workspace_dir(root, contest, prefix) / problem


def executable_name(windows: Optional[bool] = None) -> str:
    if windows is None:
        windows = is_windows()
    return "bin.exe" if windows else "bin"


def executable_path(
    problem: Path, mode: str, windows: Optional[bool] = None
) -> Path:
    """
    Path of the compiled solution for a build mode.
    Cargo writes it to <problem>/target/<mode>/bin (bin.exe on Windows).
    """
    if mode not in BUILD_MODES:
        raise ValueError(f"Unknown build mode: {mode}")
    return Path(problem) / "target" / mode / executable_name(windows)


def sample_paths(problem: Path, number: str = "1") -> Tuple[Path, Path]:
    """Input and expected output files of one sample case."""
    tests = Path(problem) / "tests"
    return tests / f"sample-{number}.in", tests / f"sample-{number}.out"


def judge_url(workspace: str, problem: str) -> str:
    return JUDGE_URL.format(workspace=workspace, problem=problem)
