from pathlib import Path

from kp.errors import KpError


class FakeRunner:
    """Records commands instead of running them."""

    def __init__(self):
        self.commands = []
        self.binaries = []
        self.failures = {}
        self.outputs = {}
        self.hooks = {}
        self.program = lambda binary, stdin_text: ""

    def run(self, command_line, cwd, env=None):
        self.commands.append((command_line, Path(cwd)))
        for pattern, hook in self.hooks.items():
            if pattern in command_line:
                hook()
        for pattern, kind in self.failures.items():
            if pattern in command_line:
                raise KpError(kind, f"command '{command_line}' failed with exit status 1")

    def capture(self, command_line, cwd):
        self.run(command_line, cwd)
        return self.outputs.get(command_line, "")

    def run_binary(self, binary, stdin_text):
        self.binaries.append(Path(binary))
        return self.program(Path(binary), stdin_text)

    def command_lines(self):
        return [command for command, _ in self.commands]


def write_sample(problem: Path, number: str, given: str, expected: str) -> None:
    tests = problem / "tests"
    tests.mkdir(parents=True, exist_ok=True)
    (tests / f"sample-{number}.in").write_text(given, encoding="utf-8")
    (tests / f"sample-{number}.out").write_text(expected, encoding="utf-8")


def square(binary, stdin_text):
    return f"{int(stdin_text) ** 2}\n"
