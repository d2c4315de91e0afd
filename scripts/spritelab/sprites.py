"""Sprite repository: maps sprite names to files and loads/saves them."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from .config import SpriteLabConfig
from .errors import SpriteNotFoundError
from .svg import BLANK_SPRITE, parse, serialize
from .svg.utils import load_svg_file, save_svg_file

logger = logging.getLogger(__name__)

DEFAULT_SPRITE_NAME = "default"


def sprite_dir(config: SpriteLabConfig, root: Path | None = None) -> Path:
    """Return the configured sprite directory under root (default: cwd)."""
    return (root or Path.cwd()) / config.sprite_path


def resolve_path(config: SpriteLabConfig, sprite_name: str, root: Path | None = None) -> Path:
    """Return the file path of a sprite: {root}/{spritePath}/{name}.svg."""
    return sprite_dir(config, root) / f"{sprite_name}.svg"


def exists(path: Path) -> bool:
    return path.is_file()


def load(path: Path, sprite_name: str) -> ET.Element:
    """Load a sprite document.

    Args:
        path: Sprite file path
        sprite_name: Sprite name, used for the guidance message

    Returns:
        Root element of the parsed sprite

    Raises:
        SpriteNotFoundError: If the sprite file does not exist
    """
    if not exists(path):
        location = path.parent
        if sprite_name == DEFAULT_SPRITE_NAME:
            raise SpriteNotFoundError(
                f"The default sprite does not exist at '{location}', please run "
                "'spritelab init' to create the default sprite."
            )
        raise SpriteNotFoundError(
            f"The sprite '{sprite_name}' does not exist at '{location}'. Please run "
            f"'spritelab create --name {sprite_name}' to create the sprite."
        )

    logger.debug("Loading sprite %s", path)
    return parse(load_svg_file(path))


def save(path: Path, root: ET.Element) -> None:
    """Overwrite the sprite file with the serialized document."""
    save_svg_file(path, serialize(root))
    logger.debug("Saved sprite %s", path)


def create_blank(path: Path) -> None:
    """Write a fresh sprite with an empty <defs>, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    save_svg_file(path, BLANK_SPRITE)
    logger.debug("Created blank sprite %s", path)


def delete(path: Path, sprite_name: str, base_dir: Path) -> None:
    """Remove a sprite file and prune directories it leaves empty.

    Only directories strictly below base_dir are pruned, so nested sprite
    names (``brand/logos``) do not leave empty folders behind.

    Raises:
        SpriteNotFoundError: If the sprite does not exist (silent)
    """
    if not exists(path):
        raise SpriteNotFoundError(
            f"Sprite '{sprite_name}' does not exist, nothing to delete.", silent=True
        )

    path.unlink()
    logger.debug("Deleted sprite %s", path)

    base = base_dir.resolve()
    parent = path.parent.resolve()
    while parent != base and base in parent.parents and not any(parent.iterdir()):
        parent.rmdir()
        logger.debug("Removed empty directory %s", parent)
        parent = parent.parent
