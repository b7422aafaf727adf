"""cargo, the Rust build tool."""

from pathlib import Path
from typing import Optional

from ..paths import is_windows
from .runner import ProcessRunner


BACKTRACE_ENV = {"RUST_BACKTRACE": "1"}
EXPAND_DIR = "expand"


class Cargo:
    """Builds problem crates and dumps their macro-expanded source."""

    def __init__(self, runner: ProcessRunner, windows: Optional[bool] = None):
        self.runner = runner
        self.windows = is_windows() if windows is None else windows

    def install(self, crate: str, cwd: Path) -> None:
        self.runner.run(f"cargo install {crate}", cwd)

    def build(self, problem_dir: Path, release: bool = False) -> None:
        command = "cargo build --release" if release else "cargo build"
        self.runner.run(command, problem_dir, env=BACKTRACE_ENV)

    def expand_command(self, release: bool) -> str:
        target = f"{EXPAND_DIR}/main.rs" if release else f"{EXPAND_DIR}/debug.rs"
        command = "cargo expand --release" if release else "cargo expand"
        if self.windows:
            return f"{command} | out-file -filepath {target} -Encoding utf8"
        return f"{command} > {target}"

    def expand(self, problem_dir: Path) -> None:
        """Write expand/debug.rs and expand/main.rs."""
        (problem_dir / EXPAND_DIR).mkdir(parents=True, exist_ok=True)
        for release in (False, True):
            self.runner.run(
                self.expand_command(release), problem_dir, env=BACKTRACE_ENV
            )
