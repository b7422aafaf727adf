"""Running external commands and compiled solutions."""

import os
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from ..errors import ErrorKind, KpError
from ..paths import is_windows


console = Console()

# bash exit status for a command it cannot find
COMMAND_NOT_FOUND = 127


def shell_command(command_line: str, windows: Optional[bool] = None) -> List[str]:
    """Argument list that hands a command line to the host shell."""
    if windows is None:
        windows = is_windows()
    if windows:
        return ["powershell", "-Command", command_line]
    return ["bash", "-c", command_line]


class ProcessRunner:
    """Runs commands one at a time and waits for each to finish."""

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def _env(self, env: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if not env:
            return None
        merged = dict(os.environ)
        merged.update(env)
        return merged

    def _spawn(self, command_line: str, cwd: Path, env=None, capture=False):
        self.console.print(
            f"[cyan]cmd:[/cyan] '{escape(command_line)}' (dir: '{escape(str(cwd))}')"
        )
        try:
            result = subprocess.run(
                shell_command(command_line),
                cwd=str(cwd),
                env=self._env(env),
                stdout=subprocess.PIPE if capture else None,
            )
        except OSError as e:
            raise KpError(
                ErrorKind.SPAWN,
                f"failed to execute '{command_line}' (dir: '{cwd}'): {e}",
            )

        if result.returncode == COMMAND_NOT_FOUND and not is_windows():
            raise KpError(
                ErrorKind.SPAWN,
                f"failed to execute '{command_line}' (dir: '{cwd}'): "
                "command not found",
            )
        if result.returncode != 0:
            raise KpError(
                ErrorKind.EXIT_STATUS,
                f"command '{command_line}' failed with exit status "
                f"{result.returncode} (dir: '{cwd}')",
            )
        return result

    def run(
        self, command_line: str, cwd: Path, env: Optional[Dict[str, str]] = None
    ) -> None:
        """Run a command line through the shell. Raises KpError on failure."""
        self._spawn(command_line, cwd, env)

    def capture(self, command_line: str, cwd: Path) -> str:
        """Run a command line through the shell and return its stdout."""
        result = self._spawn(command_line, cwd, capture=True)
        return _decode(result.stdout, command_line)

    def run_binary(self, binary: Path, stdin_text: str) -> str:
        """
        Run a compiled solution directly with stdin_text as its input.
        Returns whatever it printed, even when it exits abnormally.
        """
        self.console.print(f"[cyan]run bin:[/cyan] {escape(str(binary))}")
        try:
            result = subprocess.run(
                [str(binary)],
                input=stdin_text.encode("utf-8"),
                stdout=subprocess.PIPE,
            )
        except OSError as e:
            raise KpError(ErrorKind.SPAWN, f"failed to execute '{binary}': {e}")

        if result.returncode != 0:
            self.console.print(
                f"[yellow]Warning: '{escape(str(binary))}' exited with status "
                f"{result.returncode}[/yellow]"
            )
        return _decode(result.stdout, str(binary))


def _decode(data: bytes, source: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise KpError(ErrorKind.ENCODING, f"output of '{source}' is not UTF-8: {e}")
