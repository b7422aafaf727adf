"""Sample cases and the solution source file of a problem."""

from pathlib import Path
from typing import List

from ..errors import ErrorKind, KpError
from ..paths import judge_url, sample_paths
from .models import SampleCase


BOM = "\ufeff"


def strip_bom(text: str) -> str:
    """Remove one leading byte-order mark, if any."""
    if text.startswith(BOM):
        return text[len(BOM):]
    return text


def outputs_match(actual: str, expected: str) -> bool:
    """Compare program output with the expected output, ignoring outer whitespace."""
    return actual.strip() == expected.strip()


def read_text(path: Path, what: str = "file") -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise KpError(ErrorKind.IO, f"{what} not found: '{path}'")
    except UnicodeDecodeError as e:
        raise KpError(ErrorKind.ENCODING, f"{what} '{path}' is not UTF-8: {e}")
    except OSError as e:
        raise KpError(ErrorKind.IO, f"Failed to read {what} '{path}': {e}")


def _load(name: str, input_path: Path, output_path: Path) -> SampleCase:
    # Both files are checked before anything is read or run.
    for path, what in ((input_path, "sample input"), (output_path, "expected output")):
        if not path.is_file():
            raise KpError(ErrorKind.IO, f"{what} not found: '{path}'")
    return SampleCase(
        name=name,
        input_path=input_path,
        output_path=output_path,
        input_text=strip_bom(read_text(input_path, "sample input")),
        expected_text=strip_bom(read_text(output_path, "expected output")),
    )


def load_sample(problem_dir: Path, number: str = "1") -> SampleCase:
    """Load tests/sample-<number>.in and .out of a problem."""
    input_path, output_path = sample_paths(problem_dir, number)
    return _load(number, input_path, output_path)


def list_samples(problem_dir: Path) -> List[SampleCase]:
    """Load every sample of a problem, sorted by file name."""
    test_dir = problem_dir / "tests"
    inputs = sorted(test_dir.glob("sample-*.in"), key=lambda p: p.name)
    if not inputs:
        raise KpError(ErrorKind.IO, f"No sample cases found in '{test_dir}'")

    return [
        _load(path.stem[len("sample-"):], path, path.with_suffix(".out"))
        for path in inputs
    ]


def add_url_comment(source: Path, workspace: str, problem: str) -> None:
    """Prepend the task URL to a solution file, dropping a leading BOM."""
    content = strip_bom(read_text(source, "solution file"))
    header = f"// {judge_url(workspace, problem)}\n\n\n"
    try:
        with open(source, "w", encoding="utf-8", newline="") as f:
            f.write(header + content)
    except OSError as e:
        raise KpError(ErrorKind.IO, f"Failed to write '{source}': {e}")
