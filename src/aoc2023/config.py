"""Configuration management for aoc2023."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

AOC_HOME = Path(os.environ.get("AOC_HOME", Path.home() / "aoc2023"))
CONFIG_FILE = AOC_HOME / "config" / "aoc.conf"
DEFAULT_INPUT_DIR = AOC_HOME / "inputs"


@dataclass
class Config:
    """aoc2023 configuration."""

    input_dir: str = ""
    # Empty means every registered day
    days: list[int] = field(default_factory=list)

    @property
    def input_path(self) -> Path:
        """Directory holding personal puzzle inputs."""
        if self.input_dir:
            return Path(self.input_dir).expanduser()
        return DEFAULT_INPUT_DIR


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    # Handle quoted values with inline comments: "value" # comment
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def _parse_days(value: str) -> list[int]:
    days = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        try:
            days.append(int(entry))
        except ValueError:
            logger.warning(f"Ignoring invalid day in DAYS: {entry!r}")
    return days


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from aoc.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "input_dir":
                config.input_dir = value
            case "days":
                config.days = _parse_days(value)
            case _:
                logger.warning(f"Unknown config key: {key}")

    return config
