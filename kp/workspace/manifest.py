"""Keeping the workspace Cargo.toml in step with the contest's tasks."""

from pathlib import Path
from typing import Iterable, List, Tuple

import tomlkit
from tomlkit.exceptions import ParseError
from tomlkit.items import AoT

from ..errors import ErrorKind, KpError
from .models import Task


MANIFEST_FILE = "Cargo.toml"


def bin_entries(workspace_name: str, tasks: Iterable[Task]) -> List[Tuple[str, str]]:
    """(name, path) of the [[bin]] target for each task."""
    return [
        (f"{workspace_name}-{task.path}", f"{task.path}/{task.submit}")
        for task in tasks
    ]


def add_bins(manifest: Path, entries: Iterable[Tuple[str, str]]) -> List[str]:
    """
    Add a [[bin]] table per (name, path) unless one with that name exists.
    Returns the names that were added. The file is left untouched otherwise.
    """
    try:
        doc = tomlkit.parse(manifest.read_text(encoding="utf-8"))
    except ParseError as e:
        raise KpError(ErrorKind.PARSE, f"Failed to parse '{manifest}': {e}")
    except OSError as e:
        raise KpError(ErrorKind.IO, f"Failed to read '{manifest}': {e}")

    bins = doc.get("bin")
    if bins is not None and not isinstance(bins, AoT):
        raise KpError(ErrorKind.PARSE, f"'bin' in '{manifest}' is not a [[bin]] array")

    existing = {str(b.get("name")) for b in bins} if bins is not None else set()
    tables = []
    for name, path in entries:
        if name in existing:
            continue
        table = tomlkit.table()
        table.add("name", name)
        table.add("path", path)
        tables.append(table)
        existing.add(name)

    if not tables:
        return []

    if bins is None:
        bins = tomlkit.aot()
        for table in tables:
            bins.append(table)
        doc["bin"] = bins
    else:
        for table in tables:
            bins.append(table)

    try:
        manifest.write_text(tomlkit.dumps(doc), encoding="utf-8")
    except OSError as e:
        raise KpError(ErrorKind.IO, f"Failed to write '{manifest}': {e}")
    return [str(t["name"]) for t in tables]
