"""Configuration model and loaders for the project config file."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from .errors import ConfigInvalidError, ConfigMissingError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "spritelab.config.json"


class SpriteLabConfig(BaseModel):
    """Paths and names shared by every command.

    Keys are stored camelCase in the JSON file; attributes are snake_case.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sprite_path: StrictStr = Field(
        alias="spritePath", min_length=1, description="Directory holding the sprite files"
    )
    component_path: StrictStr = Field(
        alias="componentPath", min_length=1, description="Directory of the generated component"
    )
    component_name: StrictStr = Field(
        alias="componentName", min_length=1, description="Name of the generated component"
    )


def config_file(root: Path | None = None) -> Path:
    """Return the location of the config file under root (default: cwd)."""
    return (root or Path.cwd()) / CONFIG_FILE_NAME


def validate_config(data: dict[str, Any]) -> SpriteLabConfig:
    """Validate raw config data, naming the first offending property on failure."""
    try:
        return SpriteLabConfig.model_validate(data)
    except ValidationError as e:
        loc = e.errors()[0]["loc"]
        field = loc[0] if loc else "spritePath"
        raise ConfigInvalidError(
            f"The configuration file must contain a '{field}' property of type string."
        ) from e


def load_config(root: Path | None = None) -> SpriteLabConfig:
    """Load and validate the config file from the project root.

    Args:
        root: Project root directory (default: current working directory)

    Returns:
        Validated, immutable SpriteLabConfig

    Raises:
        ConfigMissingError: If the config file does not exist
        ConfigInvalidError: If the file is not a JSON object with the required fields
    """
    path = config_file(root)
    if not path.exists():
        raise ConfigMissingError(
            f"The configuration file '{CONFIG_FILE_NAME}' does not exist in the current "
            "directory. Please run 'spritelab init' to create the configuration file."
        )

    logger.debug("Loading configuration from %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigInvalidError(
            f"The configuration file '{CONFIG_FILE_NAME}' is not valid JSON: {e}"
        ) from e

    if not isinstance(data, dict):
        raise ConfigInvalidError(
            f"The configuration file '{CONFIG_FILE_NAME}' must contain a JSON object."
        )
    return validate_config(data)


def write_config(config: SpriteLabConfig, root: Path | None = None) -> Path:
    """Write config to the project root with camelCase keys. Returns the path."""
    path = config_file(root)
    path.write_text(config.model_dump_json(by_alias=True, indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote configuration to %s", path)
    return path
