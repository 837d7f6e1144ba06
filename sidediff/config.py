import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from sidediff.exceptions import ConfigExistsError, InvalidConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".sidediff.yaml"
DISPLAY_SECTION = "display"


class DisplaySettings(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
    )

    use_colors: bool = True
    side_by_side_diff: bool = True
    # advisory only, the renderer shows whatever context the diff carries
    diff_context_lines: int = 3
    # 0 or negative means "use the terminal width"
    terminal_width: int = 120
    show_line_numbers: bool = True
    # reserved, not implemented by the renderer
    syntax_highlighting: bool = True


def _env_truthy(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes", "on")


def _env_int(name: str) -> int | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, value)
        return None


def default_config_path() -> Path:
    return Path.home() / CONFIG_FILE_NAME


def apply_env_overrides(settings: DisplaySettings) -> DisplaySettings:
    updates: dict[str, object] = {}
    if os.getenv("NO_COLOR") or _env_truthy("SIDEDIFF_NO_COLOR"):
        updates["use_colors"] = False
    width = _env_int("SIDEDIFF_TERMINAL_WIDTH")
    if width is not None:
        updates["terminal_width"] = width
    if not updates:
        return settings
    logger.debug("Applying environment overrides: %s", updates)
    return settings.model_copy(update=updates)


def load_display_settings(config_path: Path | None = None) -> DisplaySettings:
    """
    Read the `display:` section of a YAML config file.

    A missing file gives the defaults. Environment overrides are applied
    on top of whatever the file says.

    Raises:
        InvalidConfigError: the file is not valid YAML, is not a mapping,
            or holds unknown keys or values of the wrong type.
    """

    path = Path(config_path) if config_path is not None else default_config_path()

    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return apply_env_overrides(DisplaySettings())

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise InvalidConfigError(path, e) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfigError(path, TypeError("root must be a mapping"))

    section = data.get(DISPLAY_SECTION) or {}
    if not isinstance(section, dict):
        raise InvalidConfigError(path, TypeError(f"'{DISPLAY_SECTION}' must be a mapping"))

    try:
        settings = DisplaySettings.model_validate(section)
    except ValidationError as e:
        raise InvalidConfigError(path, e) from e

    logger.debug("Loaded display settings from %s", path)
    return apply_env_overrides(settings)


def write_default_config(config_path: Path | None = None, overwrite: bool = False) -> Path:
    path = Path(config_path) if config_path is not None else default_config_path()
    if path.exists() and not overwrite:
        raise ConfigExistsError(path)

    path.parent.mkdir(parents=True, exist_ok=True)
    content = yaml.safe_dump({DISPLAY_SECTION: DisplaySettings().model_dump()}, sort_keys=False)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote default config to %s", path)
    return path
