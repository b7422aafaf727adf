"""Editor workspace settings (.vscode/settings.json)."""

import json
import os
import shutil
import tempfile
from pathlib import Path

from ..errors import ErrorKind, KpError


LINKED_PROJECTS_KEY = "rust-analyzer.linkedProjects"


def _load(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise KpError(ErrorKind.PARSE, f"Failed to parse '{path}': {e}")
    except OSError as e:
        raise KpError(ErrorKind.IO, f"Failed to read '{path}': {e}")
    if not isinstance(data, dict):
        raise KpError(ErrorKind.PARSE, f"'{path}' must contain a JSON object")
    return data


def _umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_atomic(path: Path, data: dict) -> None:
    """Write JSON to a temporary file next to path, then rename it over path."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(
            dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
                f.write("\n")
            # mkstemp creates 0600; keep the mode a plain open() would give.
            if path.exists():
                shutil.copymode(path, tmp)
            else:
                os.chmod(tmp, 0o666 & ~_umask())
            os.replace(tmp, path)
        except BaseException:
            os.unlink(tmp)
            raise
    except OSError as e:
        raise KpError(ErrorKind.IO, f"Failed to write '{path}': {e}")


def add_linked_project(
    settings: Path, project: str, key: str = LINKED_PROJECTS_KEY
) -> bool:
    """
    Append a manifest path to the linked projects list.
    Returns False when it was already there.
    """
    data = _load(settings)
    linked = data.setdefault(key, [])
    if not isinstance(linked, list):
        raise KpError(ErrorKind.PARSE, f"'{key}' in '{settings}' is not an array")

    if project in linked:
        return False

    linked.append(project)
    write_atomic(settings, data)
    return True
