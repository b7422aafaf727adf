"""Error type shared by every kp command."""

from enum import Enum


class ErrorKind(Enum):
    """What went wrong, used only to label the message."""

    SPAWN = "spawn"
    EXIT_STATUS = "exit status"
    IO = "io"
    PARSE = "parse"
    ENCODING = "encoding"
    CONFIG = "config"


class KpError(Exception):
    """A failed step. The entry point prints it and exits with status 1."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message
