"""online-judge-tools, the sample test runner."""

from pathlib import Path
from typing import Optional

from ..errors import ErrorKind, KpError
from ..paths import executable_name
from .runner import ProcessRunner


class OnlineJudge:
    """Runs a solution against the downloaded samples with `oj test`."""

    def __init__(
        self,
        runner: ProcessRunner,
        command: str = "oj",
        windows: Optional[bool] = None,
    ):
        self.runner = runner
        self.command = command
        self.windows = windows

    def test_command(self, test_dir: str = "./tests") -> str:
        binary = f"target/release/{executable_name(self.windows)}"
        return f'{self.command} test -c "{binary}" -d {test_dir}'

    def run_suite(self, problem_dir: Path, test_dir: str = "./tests") -> bool:
        """
        Test the release binary of a problem.
        Returns False when some sample fails. A missing `oj` raises a SPAWN error.
        """
        try:
            self.runner.run(self.test_command(test_dir), problem_dir)
        except KpError as e:
            if e.kind is ErrorKind.EXIT_STATUS:
                return False
            raise
        return True
