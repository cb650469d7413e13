"""Configuration management for Days."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "days.conf"
EVENTS_FILENAME = "events.csv"


@dataclass
class Config:
    """Days configuration."""

    data_dir: Path
    events_file: Path
    log_level: str = "WARNING"


def home_directory(environ: dict[str, str] | None = None) -> Path | None:
    """Resolve the user's home from HOME, falling back to USERPROFILE (Windows)."""
    environ = os.environ if environ is None else environ
    for name in ("HOME", "USERPROFILE"):
        value = environ.get(name)
        if value:
            return Path(value)
    return None


def data_directory(environ: dict[str, str] | None = None) -> Path | None:
    """The days data directory: $DAYS_HOME, else ~/.days. None if there is no home."""
    environ = os.environ if environ is None else environ
    if environ.get("DAYS_HOME"):
        return Path(environ["DAYS_HOME"]).expanduser()
    home = home_directory(environ)
    if home is None:
        return None
    return home / ".days"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(data_dir: Path) -> Config:
    """Load configuration from days.conf in the data directory, if present."""
    config = Config(data_dir=data_dir, events_file=data_dir / EVENTS_FILENAME)
    config_file = data_dir / CONFIG_FILENAME

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
            case "events_file":
                path = Path(value).expanduser()
                config.events_file = path if path.is_absolute() else data_dir / path
            case "log_level":
                config.log_level = value.upper()
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
