"""User configuration management (~/.kp.json)."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from ..errors import ErrorKind, KpError


DEFAULT_PATH = Path.home() / ".kp.json"


@dataclass
class KpConfig:
    """
    User settings shared by every contest.
    Stored at ~/.kp.json. A missing file means defaults.
    """

    contest_prefix: str = "abc"
    template: str = "rust"
    template_repo: str = ""
    task_dirname_format: str = "{tasklabel}"
    acc_command: str = "npx atcoder-cli"
    oj_command: str = "oj"
    highlight: str = "true"
    expand: bool = True
    url_comment: bool = True
    source_file: str = "main.rs"
    editor_settings: str = ".vscode/settings.json"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "KpConfig":
        """Load config from file."""
        if path is None:
            path = DEFAULT_PATH

        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise KpError(ErrorKind.PARSE, f"Failed to parse config '{path}': {e}")
        except OSError as e:
            raise KpError(ErrorKind.IO, f"Failed to read config '{path}': {e}")

        if not isinstance(data, dict):
            raise KpError(ErrorKind.PARSE, f"Config '{path}' must be a JSON object")

        unknown = set(data) - set(cls.keys())
        if unknown:
            raise KpError(
                ErrorKind.PARSE,
                f"Unknown keys in config '{path}': {', '.join(sorted(unknown))}",
            )

        for field in fields(cls):
            expected = type(field.default)
            if field.name in data and not isinstance(data[field.name], expected):
                raise KpError(
                    ErrorKind.PARSE,
                    f"'{field.name}' in config '{path}' must be a {expected.__name__}, "
                    f"got {json.dumps(data[field.name])}",
                )
        return cls(**data)

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_PATH

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(asdict(self), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise KpError(ErrorKind.IO, f"Failed to write config '{path}': {e}")

    @classmethod
    def keys(cls) -> list:
        return [f.name for f in fields(cls)]

    def set(self, key: str, value: str) -> None:
        """Set a field from its command-line string form."""
        if key not in self.keys():
            raise KpError(ErrorKind.CONFIG, f"Unknown config key: {key}")

        if isinstance(getattr(self, key), bool):
            lowered = value.lower()
            if lowered not in ("true", "false"):
                raise KpError(
                    ErrorKind.CONFIG, f"'{key}' expects true or false, got '{value}'"
                )
            setattr(self, key, lowered == "true")
        else:
            setattr(self, key, value)
