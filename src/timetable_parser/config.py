"""Run configuration loader."""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")

# Keys of older config files
LEGACY_KEYS = {"APIURL": "api_url"}

_PATH_FIELDS = {"downloads_dir", "parsed_dir", "defective_dir", "reports_dir", "log_file"}


@dataclass
class Settings:
    """Settings of a batch run.

    Attributes:
        api_url: Base URL of the catalog service
        downloads_dir: Directory with spreadsheets to parse
        parsed_dir: Archive for successfully parsed spreadsheets
        defective_dir: Archive for spreadsheets that failed to parse
        reports_dir: Directory for per-run report files
        log_file: Log file appended to by every run
        use_active_sheet: Read the active sheet instead of the first one
        request_timeout: Timeout of one submission request, in seconds
    """

    api_url: str = ""
    downloads_dir: Path = Path("cache/downloads")
    parsed_dir: Path = Path("cache/parsed")
    defective_dir: Path = Path("cache/defective")
    reports_dir: Path = Path("reports")
    log_file: Path = Path("log.txt")
    use_active_sheet: bool = True
    request_timeout: float = 30.0


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a JSON file.

    Args:
        path: Config file. If None, ``config.json`` is used when it exists.

    Returns:
        Settings with file values over defaults

    Raises:
        ConfigError: If the file cannot be read or holds invalid values
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.info("No %s found, using default settings", DEFAULT_CONFIG_PATH)
            return Settings()
        path = DEFAULT_CONFIG_PATH

    path = Path(path)
    if not path.exists():
        raise ConfigError(path, "file not found")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(path, "expected a JSON object")

    known = {f.name for f in fields(Settings)}
    values = {}
    for key, value in data.items():
        name = LEGACY_KEYS.get(key, key)
        if name not in known:
            logger.warning("Unknown config key '%s' in %s", key, path)
            continue
        if name in _PATH_FIELDS:
            if not isinstance(value, str):
                raise ConfigError(path, f"'{key}' must be a path string, got {value!r}")
            value = Path(value)
        values[name] = value

    logger.info("Config loaded from %s", path)
    return Settings(**values)
