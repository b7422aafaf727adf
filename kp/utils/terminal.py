"""Terminal colors and report banners."""

from enum import Enum

from rich.console import Console


class HighlightMode(Enum):
    """How many colors the terminal can show."""

    NONE = "false"
    COLOR16 = "16"
    COLOR256 = "256"
    TRUECOLOR = "true"

    @classmethod
    def from_str(cls, value: str) -> "HighlightMode":
        """Parse "false", "16", "256" or "true". Anything else disables color."""
        for mode in cls:
            if mode.value == value:
                return mode
        return cls.NONE


RESET = "\x1b[0m"

# (16 colors, 256 colors, true color)
FOREGROUND = {
    "pink": ("\x1b[35m", "\x1b[38;5;207m", "\x1b[38;2;250;105;200m"),
    "blue": ("\x1b[34m", "\x1b[38;5;27m", "\x1b[38;2;50;50;255m"),
    "white": ("\x1b[37m", "\x1b[38;5;15m", "\x1b[38;2;255;255;255m"),
    "green": ("\x1b[32m", "\x1b[38;5;82m", "\x1b[38;2;100;230;60m"),
    "red": ("\x1b[31m", "\x1b[38;5;196m", "\x1b[38;2;250;80;50m"),
    "yellow": ("\x1b[33m", "\x1b[38;5;11m", "\x1b[38;2;240;230;0m"),
    "orange": ("\x1b[33m", "\x1b[38;5;208m", "\x1b[38;2;255;165;0m"),
    "lightblue": ("\x1b[94m", "\x1b[38;5;153m", "\x1b[38;2;53;255;255m"),
}

BACKGROUND = {
    "pink": ("\x1b[45m", "\x1b[48;5;88m", "\x1b[48;2;60;20;60m"),
    "blue": ("\x1b[44m", "\x1b[48;5;18m", "\x1b[48;2;20;40;80m"),
    "white": ("\x1b[47m", "\x1b[48;5;237m", "\x1b[48;2;40;40;40m"),
    "green": ("\x1b[42m", "\x1b[48;5;64m", "\x1b[48;2;40;80;24m"),
    "red": ("\x1b[41m", "\x1b[48;5;90m", "\x1b[48;2;60;20;20m"),
    "yellow": ("\x1b[43m", "\x1b[48;5;100m", "\x1b[48;2;60;60;20m"),
    "orange": ("\x1b[43m", "\x1b[48;5;95m", "\x1b[48;2;70;40;10m"),
    "lightblue": ("\x1b[104m", "\x1b[48;5;20m", "\x1b[48;2;20;30;60m"),
}

_MODE_INDEX = {
    HighlightMode.COLOR16: 0,
    HighlightMode.COLOR256: 1,
    HighlightMode.TRUECOLOR: 2,
}


def _lookup(table: dict, color: str, mode: HighlightMode) -> str:
    if mode is HighlightMode.NONE:
        return ""
    return table[color][_MODE_INDEX[mode]]


def fg(color: str, mode: HighlightMode) -> str:
    """Escape sequence for a foreground color."""
    return _lookup(FOREGROUND, color, mode)


def bg(color: str, mode: HighlightMode) -> str:
    """Escape sequence for a background color."""
    return _lookup(BACKGROUND, color, mode)


def reset(mode: HighlightMode) -> str:
    return "" if mode is HighlightMode.NONE else RESET


def paint(text: str, color: str, mode: HighlightMode, background: bool = False) -> str:
    """Wrap text in a color and a reset."""
    start = bg(color, mode) if background else fg(color, mode)
    return f"{start}{text}{reset(mode)}"


def banner(title: str, mode: HighlightMode, color: str = "green") -> str:
    rule = "=" * 20
    return paint(f"{rule} [{title}] {rule}", color, mode, True)


def write(console: Console, text: str = "") -> None:
    """Write raw text, keeping escape sequences and brackets as they are."""
    console.out(text, highlight=False)
