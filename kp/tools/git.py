"""git, used to keep the contest template up to date."""

from pathlib import Path

from .runner import ProcessRunner


class Git:
    def __init__(self, runner: ProcessRunner):
        self.runner = runner

    @staticmethod
    def is_checkout(path: Path) -> bool:
        return (path / ".git").exists()

    def clone(self, url: str, name: str, cwd: Path) -> None:
        self.runner.run(f'git clone "{url}" "{name}"', cwd)

    def pull(self, repo: Path) -> None:
        self.runner.run("git pull", repo)
