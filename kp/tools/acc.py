"""atcoder-cli, the contest scaffolding and submission tool."""

from pathlib import Path

from .runner import ProcessRunner


class AtCoderCli:
    """Thin wrapper over `acc` (or `npx atcoder-cli`)."""

    def __init__(self, runner: ProcessRunner, command: str = "npx atcoder-cli"):
        self.runner = runner
        self.command = command

    def create_workspace(self, name: str, root: Path, template: str) -> None:
        """Download tasks and samples of a contest into root/name."""
        self.runner.run(f"{self.command} new {name} --template {template}", root)

    def submit(self, problem_dir: Path) -> None:
        self.runner.run(f"{self.command} submit", problem_dir)

    def config_dir(self, cwd: Path) -> Path:
        """Directory where atcoder-cli keeps its config and templates."""
        return Path(self.runner.capture(f"{self.command} config-dir", cwd).strip())

    def get_config(self, key: str, cwd: Path) -> str:
        return self.runner.capture(f"{self.command} config {key}", cwd).strip()

    def set_config(self, key: str, value: str, cwd: Path) -> None:
        self.runner.run(f'{self.command} config {key} "{value}"', cwd)
