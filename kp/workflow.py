"""The pipelines behind each kp command."""

import time
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .config import KpConfig
from .errors import ErrorKind, KpError
from .paths import executable_path, problem_dir, workspace_dir
from .tools import AtCoderCli, Cargo, Git, OnlineJudge, ProcessRunner
from .utils.terminal import HighlightMode, banner, paint, write
from .workspace import (
    SampleCase,
    add_bins,
    add_linked_project,
    add_url_comment,
    bin_entries,
    list_samples,
    load_sample,
    load_tasks,
    outputs_match,
    problem_dirs,
)
from .workspace.manifest import MANIFEST_FILE


console = Console(soft_wrap=True)

EXPAND_TOOL = "cargo-expand"
PASSED = "[✅ Complete] Output matches expected output."
FAILED = "[❌ Failed] Output does not match expected output."


class Workflow:
    """Runs one kp command against a root directory holding contest workspaces."""

    def __init__(
        self,
        config: KpConfig,
        root: Path,
        mode: HighlightMode = HighlightMode.TRUECOLOR,
        runner: Optional[ProcessRunner] = None,
        out: Optional[Console] = None,
        windows: Optional[bool] = None,
    ):
        self.config = config
        self.root = Path(root)
        self.mode = mode
        self.console = out or console
        self.runner = runner or ProcessRunner(self.console)
        self.windows = windows

        self.acc = AtCoderCli(self.runner, config.acc_command)
        self.cargo = Cargo(self.runner, windows)
        self.oj = OnlineJudge(self.runner, config.oj_command, windows)
        self.git = Git(self.runner)

    def workspace(self, contest: str) -> Path:
        return workspace_dir(self.root, contest, self.config.contest_prefix)

    def problem(self, contest: str, problem: str) -> Path:
        return problem_dir(self.root, contest, problem, self.config.contest_prefix)

    # new

    def new_contest(self, contest: str) -> None:
        """Scaffold a contest workspace and build every problem in it."""
        self.cargo.install(EXPAND_TOOL, self.root)

        workspace = self.workspace(contest)
        self.acc.create_workspace(workspace.name, self.root, self.config.template)

        self.sync_workspace(workspace)

        for directory in problem_dirs(workspace):
            self.prepare_problem(workspace.name, directory)

    def sync_workspace(self, workspace: Path) -> None:
        """Register the contest's tasks in Cargo.toml and the editor settings."""
        tasks = load_tasks(workspace)
        manifest = workspace / MANIFEST_FILE

        if manifest.exists():
            added = add_bins(manifest, bin_entries(workspace.name, tasks))
            for name in added:
                self.console.print(f"[green]Added bin target:[/green] {escape(name)}")
            manifests = [manifest]
        else:
            manifests = [
                workspace / task.path / MANIFEST_FILE
                for task in tasks
                if (workspace / task.path / MANIFEST_FILE).exists()
            ]

        settings = self.root / self.config.editor_settings
        for path in manifests:
            linked = path.relative_to(self.root).as_posix()
            if add_linked_project(settings, linked):
                self.console.print(f"[green]Linked project:[/green] {escape(linked)}")

    def prepare_problem(self, workspace_name: str, directory: Path) -> None:
        source = directory / self.config.source_file
        if source.exists():
            if self.config.url_comment:
                add_url_comment(source, workspace_name, directory.name)
            (directory / "expand").mkdir(parents=True, exist_ok=True)

        self.console.print(
            f"[cyan]Running cargo build in directory '{escape(str(directory))}'[/cyan]"
        )
        self.cargo.build(directory)
        self.cargo.build(directory, release=True)

    # test / submit

    def build(self, directory: Path) -> None:
        """Expand (when enabled) and build a problem in debug and release mode."""
        if not directory.is_dir():
            raise KpError(ErrorKind.IO, f"Problem directory not found: '{directory}'")
        if self.config.expand:
            self.cargo.expand(directory)
        self.cargo.build(directory)
        self.cargo.build(directory, release=True)

    def test(self, contest: str, problem: str) -> bool:
        """Build a problem and run `oj test`. Returns whether every sample passed."""
        directory = self.problem(contest, problem)
        self.build(directory)
        return self.oj.run_suite(directory)

    def submit(self, contest: str, problem: str) -> None:
        directory = self.problem(contest, problem)
        if not self.test(contest, problem):
            raise KpError(
                ErrorKind.EXIT_STATUS,
                f"Tests failed in directory '{directory}'. Submission aborted.",
            )
        self.acc.submit(directory)

    # debug

    def debug(
        self, contest: str, problem: str, sample: Optional[str] = None
    ) -> List[bool]:
        """
        Build a problem and run it on its samples, printing a report per sample.
        With no sample number every sample is run. Mismatches are only reported.
        """
        directory = self.problem(contest, problem)
        if sample is not None:
            cases = [load_sample(directory, sample)]
        else:
            cases = list_samples(directory)

        self.build(directory)

        results = [self.report(directory, case, len(cases) > 1) for case in cases]
        if len(cases) > 1:
            mode = self.mode
            passed = sum(results)
            color = "lightblue" if passed == len(results) else "red"
            write(
                self.console,
                paint(f"{passed}/{len(results)} samples passed", color, mode, True),
            )
        return results

    def report(self, directory: Path, case: SampleCase, titled: bool = False) -> bool:
        mode = self.mode
        out = self.console

        if titled:
            write(out, banner(f"sample-{case.name}", mode, "pink"))

        write(out, banner("input", mode))
        write(out, case.input_text)

        write(out, banner("debug output", mode))
        debug_binary = executable_path(directory, "debug", self.windows)
        write(out, self.runner.run_binary(debug_binary, case.input_text))

        write(out, banner("output", mode))
        release_binary = executable_path(directory, "release", self.windows)
        start = time.perf_counter()
        output = self.runner.run_binary(release_binary, case.input_text)
        elapsed = time.perf_counter() - start
        write(out, output)
        timing = f"Execution Time: {elapsed * 1000:.3f}ms"
        write(out, paint(timing, "orange", mode, True))

        write(out, banner("expect", mode))
        write(out, case.expected_text)

        write(out, banner("comparison result", mode))
        if outputs_match(output, case.expected_text):
            write(out, paint(PASSED, "lightblue", mode, True))
            return True
        write(out, paint(FAILED, "red", mode, True))
        return False

    # init

    def acc_settings(self) -> List[tuple]:
        return [
            ("default-template", self.config.template),
            ("default-task-dirname-format", self.config.task_dirname_format),
            ("default-task-choice", "all"),
        ]

    def init(self) -> None:
        """Fetch the contest template and point atcoder-cli at it."""
        if not self.config.template_repo:
            raise KpError(
                ErrorKind.CONFIG,
                "template_repo is not set. "
                "Run 'kp config set template_repo <url>' first.",
            )

        config_dir = self.acc.config_dir(self.root)
        template_dir = config_dir / self.config.template
        if Git.is_checkout(template_dir):
            self.git.pull(template_dir)
        else:
            config_dir.mkdir(parents=True, exist_ok=True)
            self.git.clone(self.config.template_repo, self.config.template, config_dir)

        for key, value in self.acc_settings():
            if self.acc.get_config(key, self.root) == value:
                self.console.print(f"[green]{key}[/green] is already {escape(value)}")
                continue
            self.acc.set_config(key, value, self.root)
