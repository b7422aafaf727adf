import json

import pytest
import tomlkit

from helpers import square, write_sample
from kp.errors import ErrorKind, KpError


def make_problem(tmp_path, problem="a"):
    directory = tmp_path / "abc300" / problem
    directory.mkdir(parents=True)
    return directory


def output_of(workflow):
    return workflow.console.file.getvalue()


BUILD = [
    "cargo expand > expand/debug.rs",
    "cargo expand --release > expand/main.rs",
    "cargo build",
    "cargo build --release",
]


class TestTest:
    def test_builds_then_runs_oj(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        assert workflow.test("300", "a") is True
        assert runner.command_lines() == BUILD + ['oj test -c "target/release/bin" -d ./tests']
        assert all(cwd == directory for _, cwd in runner.commands)

    def test_without_expansion(self, tmp_path, workflow, runner):
        make_problem(tmp_path)
        workflow.config.expand = False
        workflow.test("300", "a")
        assert not any("expand" in c for c in runner.command_lines())

    def test_failing_samples(self, tmp_path, workflow, runner):
        make_problem(tmp_path)
        runner.failures["oj test"] = ErrorKind.EXIT_STATUS
        assert workflow.test("300", "a") is False

    def test_build_failure_stops_before_oj(self, tmp_path, workflow, runner):
        make_problem(tmp_path)
        runner.failures["cargo build"] = ErrorKind.EXIT_STATUS
        with pytest.raises(KpError):
            workflow.test("300", "a")
        assert not any(c.startswith("oj") for c in runner.command_lines())

    def test_missing_problem(self, workflow, runner):
        with pytest.raises(KpError) as exc:
            workflow.test("300", "z")
        assert exc.value.kind is ErrorKind.IO
        assert runner.commands == []


class TestSubmit:
    def test_submits_after_passing_tests(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        workflow.submit("300", "a")
        assert runner.commands[-1] == ("npx atcoder-cli submit", directory)

    def test_never_submits_when_tests_fail(self, tmp_path, workflow, runner):
        make_problem(tmp_path)
        runner.failures["oj test"] = ErrorKind.EXIT_STATUS
        with pytest.raises(KpError) as exc:
            workflow.submit("300", "a")
        assert "Submission aborted" in str(exc.value)
        assert not any("submit" in c for c in runner.command_lines())


class TestDebug:
    def test_matching_sample(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        write_sample(directory, "1", "3\n", "9\n")
        runner.program = square

        assert workflow.debug("300", "a") == [True]

        text = output_of(workflow)
        for title in ("input", "debug output", "output", "expect", "comparison result"):
            assert f"[{title}]" in text
        assert "Execution Time:" in text
        assert "[✅ Complete]" in text
        assert runner.binaries == [
            directory / "target" / "debug" / "bin",
            directory / "target" / "release" / "bin",
        ]
        assert runner.command_lines() == BUILD

    def test_mismatch_is_reported_not_raised(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        write_sample(directory, "1", "3\n", "9\n")
        runner.program = lambda binary, stdin_text: "8\n"

        assert workflow.debug("300", "a") == [False]
        assert "[❌ Failed]" in output_of(workflow)

    def test_compares_release_output(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        write_sample(directory, "1", "3\n", "9\n")
        runner.program = lambda binary, stdin_text: (
            "debug noise\n" if binary.parent.name == "debug" else "9"
        )
        assert workflow.debug("300", "a") == [True]

    def test_input_bom_is_stripped(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        write_sample(directory, "1", "\ufeff3\n", "\ufeff9\n")
        seen = []
        runner.program = lambda binary, stdin_text: seen.append(stdin_text) or "9\n"
        assert workflow.debug("300", "a") == [True]
        assert seen == ["3\n", "3\n"]

    def test_runs_every_sample_in_order(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        write_sample(directory, "2", "2\n", "4\n")
        write_sample(directory, "1", "3\n", "9\n")
        write_sample(directory, "3", "5\n", "26\n")
        runner.program = square

        assert workflow.debug("300", "a") == [True, True, False]
        text = output_of(workflow)
        assert text.index("[sample-1]") < text.index("[sample-2]") < text.index("[sample-3]")
        assert "2/3 samples passed" in text

    def test_selected_sample_only(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        write_sample(directory, "1", "3\n", "9\n")
        write_sample(directory, "2", "4\n", "16\n")
        seen = []
        runner.program = lambda binary, stdin_text: seen.append(stdin_text) or ""
        workflow.debug("300", "a", "2")
        assert seen == ["4\n", "4\n"]

    def test_missing_selected_sample(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        write_sample(directory, "1", "3\n", "9\n")
        with pytest.raises(KpError) as exc:
            workflow.debug("300", "a", "5")
        assert exc.value.kind is ErrorKind.IO
        assert str(directory / "tests" / "sample-5.in") in str(exc.value)
        assert runner.binaries == []

    def test_missing_binary_is_fatal(self, tmp_path, workflow, runner):
        directory = make_problem(tmp_path)
        write_sample(directory, "1", "3\n", "9\n")

        def missing(binary, stdin_text):
            raise KpError(ErrorKind.SPAWN, f"failed to execute '{binary}'")

        runner.program = missing
        with pytest.raises(KpError):
            workflow.debug("300", "a")


CONTEST = {
    "contest": {"id": "abc300"},
    "tasks": [
        {
            "id": "abc300_a",
            "label": "A",
            "title": "A",
            "url": "https://atcoder.jp/contests/abc300/tasks/abc300_a",
            "directory": {"path": "a", "testdir": "tests", "submit": "main.rs"},
        },
        {
            "id": "abc300_b",
            "label": "B",
            "title": "B",
            "url": "https://atcoder.jp/contests/abc300/tasks/abc300_b",
            "directory": {"path": "b", "testdir": "tests", "submit": "main.rs"},
        },
    ],
}


class TestNew:
    def scaffold(self, tmp_path, manifest=True, contest=CONTEST):
        def create():
            workspace = tmp_path / "abc300"
            for task in contest["tasks"]:
                if "directory" not in task:
                    continue
                directory = workspace / task["directory"]["path"]
                directory.mkdir(parents=True)
                (directory / "main.rs").write_text("\ufefffn main() {}\n", encoding="utf-8")
                (directory / "Cargo.toml").write_text("[package]\n", encoding="utf-8")
            (workspace / "contest.acc.json").write_text(json.dumps(contest), encoding="utf-8")
            if manifest:
                (workspace / "Cargo.toml").write_text(
                    '[package]\nname = "abc300"\n', encoding="utf-8"
                )

        return create

    def test_new_contest(self, tmp_path, workflow, runner):
        runner.hooks["atcoder-cli new"] = self.scaffold(tmp_path)
        workflow.new_contest("300")

        workspace = tmp_path / "abc300"
        assert runner.commands[:2] == [
            ("cargo install cargo-expand", tmp_path),
            ("npx atcoder-cli new abc300 --template rust", tmp_path),
        ]
        assert runner.commands[2:] == [
            ("cargo build", workspace / "a"),
            ("cargo build --release", workspace / "a"),
            ("cargo build", workspace / "b"),
            ("cargo build --release", workspace / "b"),
        ]

        source = (workspace / "a" / "main.rs").read_text(encoding="utf-8")
        assert source == (
            "// https://atcoder.jp/contests/abc300/tasks/abc300_a\n\n\nfn main() {}\n"
        )
        assert (workspace / "b" / "expand").is_dir()

        doc = tomlkit.parse((workspace / "Cargo.toml").read_text(encoding="utf-8"))
        assert [b["name"] for b in doc["bin"]] == ["abc300-a", "abc300-b"]

        settings = json.loads((tmp_path / ".vscode" / "settings.json").read_text(encoding="utf-8"))
        assert settings["rust-analyzer.linkedProjects"] == ["abc300/Cargo.toml"]

    def test_sync_twice_changes_nothing(self, tmp_path, workflow, runner):
        runner.hooks["atcoder-cli new"] = self.scaffold(tmp_path)
        workflow.new_contest("300")
        workspace = tmp_path / "abc300"
        manifest = (workspace / "Cargo.toml").read_text(encoding="utf-8")

        workflow.sync_workspace(workspace)

        assert (workspace / "Cargo.toml").read_text(encoding="utf-8") == manifest
        settings = json.loads((tmp_path / ".vscode" / "settings.json").read_text(encoding="utf-8"))
        assert settings["rust-analyzer.linkedProjects"] == ["abc300/Cargo.toml"]

    def test_links_problem_crates_without_workspace_manifest(self, tmp_path, workflow, runner):
        runner.hooks["atcoder-cli new"] = self.scaffold(tmp_path, manifest=False)
        workflow.new_contest("300")
        settings = json.loads((tmp_path / ".vscode" / "settings.json").read_text(encoding="utf-8"))
        assert settings["rust-analyzer.linkedProjects"] == [
            "abc300/a/Cargo.toml",
            "abc300/b/Cargo.toml",
        ]

    def test_skips_tasks_that_were_not_created(self, tmp_path, workflow, runner):
        contest = dict(CONTEST)
        contest["tasks"] = [
            CONTEST["tasks"][0],
            {k: v for k, v in CONTEST["tasks"][1].items() if k != "directory"},
        ]
        runner.hooks["atcoder-cli new"] = self.scaffold(tmp_path, contest=contest)
        workflow.new_contest("300")

        workspace = tmp_path / "abc300"
        assert not (workspace / "b").exists()
        assert all(cwd != workspace / "b" for _, cwd in runner.commands)
        doc = tomlkit.parse((workspace / "Cargo.toml").read_text(encoding="utf-8"))
        assert [(b["name"], b["path"]) for b in doc["bin"]] == [("abc300-a", "a/main.rs")]

    def test_without_url_comment(self, tmp_path, workflow, runner):
        runner.hooks["atcoder-cli new"] = self.scaffold(tmp_path)
        workflow.config.url_comment = False
        workflow.new_contest("300")
        source = (tmp_path / "abc300" / "a" / "main.rs").read_text(encoding="utf-8")
        assert source == "\ufefffn main() {}\n"

    def test_scaffolding_failure_is_fatal(self, workflow, runner):
        runner.failures["atcoder-cli new"] = ErrorKind.EXIT_STATUS
        with pytest.raises(KpError):
            workflow.new_contest("300")
        assert not any(c.startswith("cargo build") for c in runner.command_lines())

    def test_missing_expand_tool_install_is_fatal(self, workflow, runner):
        runner.failures["cargo install"] = ErrorKind.SPAWN
        with pytest.raises(KpError):
            workflow.new_contest("300")
        assert len(runner.commands) == 1


class TestInit:
    def configure(self, tmp_path, workflow, runner, current=None):
        config_dir = tmp_path / "acc"
        workflow.config.template_repo = "https://example.com/template.git"
        runner.outputs["npx atcoder-cli config-dir"] = f"{config_dir}\n"
        for key, value in (current or {}).items():
            runner.outputs[f"npx atcoder-cli config {key}"] = value + "\n"
        return config_dir

    def test_clones_and_sets_options(self, tmp_path, workflow, runner):
        config_dir = self.configure(
            tmp_path, workflow, runner, {"default-template": "rust"}
        )
        workflow.init()

        assert ('git clone "https://example.com/template.git" "rust"', config_dir) in runner.commands
        commands = runner.command_lines()
        assert 'npx atcoder-cli config default-template "rust"' not in commands
        assert 'npx atcoder-cli config default-task-dirname-format "{tasklabel}"' in commands
        assert 'npx atcoder-cli config default-task-choice "all"' in commands

    def test_pulls_existing_checkout(self, tmp_path, workflow, runner):
        config_dir = self.configure(tmp_path, workflow, runner)
        (config_dir / "rust" / ".git").mkdir(parents=True)
        workflow.init()
        assert ("git pull", config_dir / "rust") in runner.commands
        assert not any(c.startswith("git clone") for c in runner.command_lines())

    def test_requires_template_repo(self, workflow, runner):
        with pytest.raises(KpError) as exc:
            workflow.init()
        assert exc.value.kind is ErrorKind.CONFIG
        assert runner.commands == []

    def test_clone_failure_is_fatal(self, tmp_path, workflow, runner):
        self.configure(tmp_path, workflow, runner)
        runner.failures["git clone"] = ErrorKind.EXIT_STATUS
        with pytest.raises(KpError):
            workflow.init()
        assert not any("default-task-choice" in c for c in runner.command_lines())
