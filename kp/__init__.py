"""kp - command-line helper for AtCoder contests."""

__version__ = "1.0.0"
