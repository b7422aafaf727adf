"""Command-line interface for kp."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import KpConfig
from .config.global_config import DEFAULT_PATH
from .errors import ErrorKind, KpError
from .utils.terminal import HighlightMode
from .workflow import Workflow


console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


class KpGroup(click.Group):
    """Command group that turns a KpError into a message and exit status 1."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KpError as e:
            err_console.print(f"[red]Error:[/red] {escape(e.message)}")
            ctx.exit(1)


def _workflow(ctx: click.Context) -> Workflow:
    obj = ctx.obj
    return Workflow(obj["config"], obj["root"], obj["mode"], out=console)


@click.group(cls=KpGroup)
@click.version_option(version=__version__)
@click.option(
    "-r",
    "--root-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding contest workspaces (default: current directory)",
)
@click.option(
    "--highlight",
    type=click.Choice(["false", "16", "256", "true"]),
    help="Color mode for reports (default: from config)",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Config file (default: {DEFAULT_PATH})",
)
@click.pass_context
def cli(
    ctx: click.Context,
    root_dir: Optional[Path],
    highlight: Optional[str],
    config_path: Optional[Path],
):
    """kp - helper for AtCoder contests with atcoder-cli, oj and cargo."""
    config_path = config_path or DEFAULT_PATH
    config = KpConfig.load(config_path)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["config_path"] = config_path
    ctx.obj["root"] = root_dir or Path.cwd()
    ctx.obj["mode"] = HighlightMode.from_str(highlight or config.highlight)


@cli.command()
@click.pass_context
def init(ctx: click.Context):
    """Fetch the contest template and configure atcoder-cli."""
    _workflow(ctx).init()
    console.print("[green]atcoder-cli is ready.[/green]")


@cli.command()
@click.argument("contest")
@click.pass_context
def new(ctx: click.Context, contest: str):
    """Create the workspace for CONTEST (e.g. 300 -> abc300) and build it."""
    _workflow(ctx).new_contest(contest)


@cli.command()
@click.argument("contest")
@click.argument("problem")
@click.pass_context
def test(ctx: click.Context, contest: str, problem: str):
    """Build PROBLEM and run oj test on its samples."""
    workflow = _workflow(ctx)
    if not workflow.test(contest, problem):
        raise KpError(
            ErrorKind.EXIT_STATUS,
            f"oj test failed in directory '{workflow.problem(contest, problem)}'",
        )


@cli.command()
@click.argument("contest")
@click.argument("problem")
@click.pass_context
def submit(ctx: click.Context, contest: str, problem: str):
    """Test PROBLEM and submit it if every sample passes."""
    _workflow(ctx).submit(contest, problem)


@cli.command()
@click.argument("contest")
@click.argument("problem")
@click.argument("sample", required=False)
@click.pass_context
def debug(ctx: click.Context, contest: str, problem: str, sample: Optional[str]):
    """
    Build PROBLEM and compare its output on the samples.

    Runs only SAMPLE (tests/sample-SAMPLE.in) when given, every sample otherwise.
    """
    _workflow(ctx).debug(contest, problem, sample)


@cli.group(name="config")
def config_group():
    """Show or change kp settings."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx: click.Context):
    """Display current settings."""
    config = ctx.obj["config"]

    path = escape(str(ctx.obj["config_path"]))
    console.print(f"[bold cyan]Config file:[/bold cyan] {path}")
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key in config.keys():
        table.add_row(key, escape(str(getattr(config, key))))

    console.print(table)


@config_group.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str):
    """Change one setting and save it."""
    config = ctx.obj["config"]
    config.set(key, value)
    config.save(ctx.obj["config_path"])
    console.print(f"[green]{key} set to: {escape(str(getattr(config, key)))}[/green]")


@cli.command()
def version():
    """Show version information."""
    console.print(f"[bold cyan]kp[/bold cyan] version [green]{__version__}[/green]")
    console.print("Helper for AtCoder contests")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
