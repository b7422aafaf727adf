"""Data models for contest workspaces."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Task:
    """One problem of a contest, as listed in contest.acc.json."""

    id: str
    label: str
    title: str
    url: str
    path: str
    testdir: str = "tests"
    submit: str = "main.rs"


@dataclass
class SampleCase:
    """A sample input and the output the judge expects for it."""

    name: str
    input_path: Path
    output_path: Path
    input_text: str
    expected_text: str
