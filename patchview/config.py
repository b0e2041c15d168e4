import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from patchview.exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "PATCHVIEW_CONFIG"


class ViewerSettings(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
    )

    color: bool = True
    download_name: str = "fix.diff"
    show_line_numbers: bool = True
    log_level: str = "WARNING"


def _env_truthy(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes", "on")


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if _env_truthy("PATCHVIEW_NO_COLOR"):
        overrides["color"] = False
    download_name = os.getenv("PATCHVIEW_DOWNLOAD_NAME")
    if download_name:
        overrides["download_name"] = download_name
    log_level = os.getenv("PATCHVIEW_LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level.upper()
    return overrides


def read_config_file(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise InvalidConfigError(config_path, e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigError(
            config_path, TypeError(f"root must be a mapping, got {type(data).__name__}")
        )
    return data


def load_settings(config_path: Path | None = None) -> ViewerSettings:
    """
    Build settings from defaults, an optional YAML file and the environment.

    The file comes from `config_path` or `PATCHVIEW_CONFIG`. Environment
    variables win over the file.
    """

    if config_path is None and os.getenv(CONFIG_ENV):
        config_path = Path(os.environ[CONFIG_ENV])

    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(read_config_file(Path(config_path)))
        logger.debug("Loaded settings file %s", config_path)
    values.update(_env_overrides())

    try:
        return ViewerSettings(**values)
    except ValidationError as e:
        raise InvalidConfigError(config_path or "environment", e) from e
