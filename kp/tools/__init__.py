"""Wrappers over the external tools kp drives."""

from .acc import AtCoderCli
from .cargo import Cargo
from .git import Git
from .oj import OnlineJudge
from .runner import ProcessRunner, shell_command

__all__ = [
    "AtCoderCli",
    "Cargo",
    "Git",
    "OnlineJudge",
    "ProcessRunner",
    "shell_command",
]
