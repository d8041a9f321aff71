"""Application configuration loaded from environment variables or a .env file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

__all__ = ["Settings", "settings"]

VALID_LOG_LEVELS = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
)


def load_env_file(path: Path) -> None:
    """Load ``NAME=value`` lines from ``path`` into ``os.environ`` if present.

    Variables already in the environment win. An ``export`` prefix and one
    pair of matching quotes around the value are stripped, so the same file
    can be sourced from a shell.
    """
    if not path.exists():
        return
    for raw in path.read_text(encoding="utf-8").splitlines():
        entry = raw.strip()
        if entry.startswith("export "):
            entry = entry[len("export ") :].lstrip()
        if not entry or entry.startswith("#") or "=" not in entry:
            continue
        name, _, value = entry.partition("=")
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        os.environ.setdefault(name.strip(), value)


# Load environment variables from a .env file in the project root.
load_env_file(Path(__file__).resolve().parents[2] / ".env")


@dataclass
class Settings:
    """Application settings."""

    log_level: str = ""
    json_indent: int | str = 2
    sort_extensions: bool = False

    def __post_init__(self):
        """Load values from environment variables after initialization."""
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        raw_indent = os.getenv("GENOME_ANNOTATION_JSON_INDENT", "2")
        try:
            self.json_indent = int(raw_indent)
        except ValueError:
            # Kept as given; validate() reports it.
            self.json_indent = raw_indent
        self.sort_extensions = (
            os.getenv("GENOME_ANNOTATION_SORT_EXTENSIONS", "false").lower() == "true"
        )

    def validate(self) -> None:
        """Validate the settings and raise helpful errors.

        Raises:
            ValueError: If the log level is unknown or the JSON indent is not a
                non-negative integer.
        """
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level!r}. "
                f"Use one of: {', '.join(sorted(VALID_LOG_LEVELS))}."
            )

        if not isinstance(self.json_indent, int):
            raise ValueError(
                f"Invalid GENOME_ANNOTATION_JSON_INDENT value: {self.json_indent!r}. "
                "Must be an integer."
            )

        if self.json_indent < 0:
            raise ValueError(
                f"Invalid JSON indent: {self.json_indent}. Must be zero or positive."
            )


settings = Settings()

# Configure root logging according to the resolved settings.
logging.basicConfig(
    level=settings.log_level if settings.log_level in VALID_LOG_LEVELS else "INFO"
)
