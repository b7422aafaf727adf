"""Reading the task list atcoder-cli writes into a new workspace."""

import json
from pathlib import Path
from typing import List

from ..errors import ErrorKind, KpError
from .models import Task


CONTEST_FILE = "contest.acc.json"


def load_tasks(workspace: Path) -> List[Task]:
    """
    Parse <workspace>/contest.acc.json into the tasks that have a directory.
    Returns an empty list when atcoder-cli did not write one.
    """
    path = workspace / CONTEST_FILE
    if not path.exists():
        return []

    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise KpError(ErrorKind.PARSE, f"Failed to parse '{path}': {e}")
    except OSError as e:
        raise KpError(ErrorKind.IO, f"Failed to read '{path}': {e}")

    tasks = []
    try:
        for entry in data.get("tasks", []):
            # atcoder-cli only records a directory for the tasks it created.
            directory = entry.get("directory")
            if not directory:
                continue
            tasks.append(
                Task(
                    id=entry["id"],
                    label=entry["label"],
                    title=entry.get("title", ""),
                    url=entry.get("url", ""),
                    path=directory["path"],
                    testdir=directory.get("testdir", "tests"),
                    submit=directory.get("submit", "main.rs"),
                )
            )
    except (AttributeError, KeyError, TypeError) as e:
        raise KpError(ErrorKind.PARSE, f"Unexpected task entry in '{path}': {e}")
    return tasks


def problem_dirs(workspace: Path) -> List[Path]:
    """Problem directories of a workspace, in task order when known."""
    tasks = load_tasks(workspace)
    if tasks:
        return [
            workspace / task.path
            for task in tasks
            if (workspace / task.path).is_dir()
        ]

    try:
        entries = sorted(workspace.iterdir())
    except OSError as e:
        raise KpError(
            ErrorKind.IO, f"Failed to read project directory '{workspace}': {e}"
        )
    return [p for p in entries if p.is_dir() and not p.name.startswith(".")]
