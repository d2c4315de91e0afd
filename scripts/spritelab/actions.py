"""Command orchestration: init, create, delete, add and remove.

Each command takes validated, immutable options plus the loaded config and
performs its file-system effects in order. Prompt functions are parameters so
callers (and tests) can answer them without a terminal.
"""

import logging
import re
import xml.etree.ElementTree as ET
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from . import prompts, sprites
from .component import component_file, update_component
from .config import SpriteLabConfig, config_file, write_config
from .errors import IconNotFoundError, OperationCancelledError, SpriteLabError
from .icons import load_icon
from .project import Framework, HostProject, detect_project
from .svg import find_or_create_defs, find_symbol_by_id, insert_symbol, normalize, remove_symbol

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[A-Za-z0-9_/-]+$")
COMPONENT_NAME_PATTERN = re.compile(r"^[A-Z][A-Za-z0-9]*$")

DEFAULT_SPRITE_PATH = "./public/sprites"
DEFAULT_COMPONENT_NAME = "Icon"


# --- Options ---


def check_name(value: str | None, option: str, required: bool = True) -> None:
    """Validate a name-like option against NAME_PATTERN.

    Raises:
        SpriteLabError: If the option is missing (when required) or malformed
    """
    if not value:
        if required:
            raise SpriteLabError(
                f"Option '{option}' is required. Please provide a value using --{option}."
            )
        return
    if not NAME_PATTERN.match(value):
        raise SpriteLabError(
            f"Option '{option}' must contain only alphanumeric characters, '-', '_' or '/'."
        )


class InitOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    yes: bool = Field(False, description="Skip prompts and use the computed defaults")


class CreateOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    @classmethod
    def from_args(cls, name: str | None) -> "CreateOptions":
        check_name(name, "name")
        return cls(name=name)


class DeleteOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = sprites.DEFAULT_SPRITE_NAME

    @classmethod
    def from_args(cls, name: str | None) -> "DeleteOptions":
        check_name(name, "name", required=False)
        return cls(name=name or sprites.DEFAULT_SPRITE_NAME)


class AddOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    icon: str
    sprite: str = sprites.DEFAULT_SPRITE_NAME

    @classmethod
    def from_args(cls, name: str | None, icon: str | None, sprite: str | None) -> "AddOptions":
        check_name(name, "name")
        if not icon:
            raise SpriteLabError(
                "Option 'icon' is required. Please provide the icon using --icon."
            )
        check_name(sprite, "sprite", required=False)
        return cls(name=name, icon=icon, sprite=sprite or sprites.DEFAULT_SPRITE_NAME)


class RemoveOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    sprite: str = sprites.DEFAULT_SPRITE_NAME

    @classmethod
    def from_args(cls, name: str | None, sprite: str | None) -> "RemoveOptions":
        check_name(name, "name")
        check_name(sprite, "sprite", required=False)
        return cls(name=name, sprite=sprite or sprites.DEFAULT_SPRITE_NAME)


# --- Shared steps ---


class Collision(Enum):
    """Outcome of adding a symbol whose id may already be taken."""

    ABSENT = "absent"
    OVERWRITE = "overwrite"
    DECLINED = "declined"


def resolve_collision(
    defs: ET.Element, name: str, sprite: str, confirm: prompts.Confirm
) -> tuple[Collision, ET.Element | None]:
    """Look up an existing symbol and ask whether to overwrite it."""
    existing = find_symbol_by_id(defs, name)
    if existing is None:
        return Collision.ABSENT, None
    if confirm(f"The icon '{name}' already exists in the sprite '{sprite}'. Overwrite?"):
        return Collision.OVERWRITE, existing
    return Collision.DECLINED, existing


def regenerate_component(
    config: SpriteLabConfig, root: Path | None = None, project: HostProject | None = None
) -> Path:
    project = project or detect_project(root)
    print(f"Updating '{config.component_name}' component...")
    path = update_component(config, project, root)
    print(f"Component '{config.component_name}' updated successfully.")
    return path


# --- Commands ---


def add_icon(
    options: AddOptions,
    config: SpriteLabConfig,
    root: Path | None = None,
    confirm: prompts.Confirm = prompts.confirm,
    project: HostProject | None = None,
) -> None:
    """Add (or replace) an icon in a sprite and regenerate the component.

    Declining the overwrite prompt leaves the sprite file untouched.
    """
    print(f"Adding icon '{options.name}' to the sprite '{options.sprite}'...")
    path = sprites.resolve_path(config, options.sprite, root)
    document = sprites.load(path, options.sprite)
    defs = find_or_create_defs(document)

    symbol = normalize(load_icon(options.icon, root), options.name)

    collision, existing = resolve_collision(defs, options.name, options.sprite, confirm)
    if collision is Collision.DECLINED:
        raise OperationCancelledError()
    if collision is Collision.OVERWRITE and existing is not None:
        remove_symbol(defs, existing)

    insert_symbol(defs, symbol)
    sprites.save(path, document)
    print(f"Icon '{options.name}' added to the sprite '{options.sprite}'.")

    regenerate_component(config, root, project)


def remove_icon(
    options: RemoveOptions,
    config: SpriteLabConfig,
    root: Path | None = None,
    project: HostProject | None = None,
) -> None:
    """Remove an icon from a sprite and regenerate the component."""
    print(f"Removing icon '{options.name}' from the sprite '{options.sprite}'...")
    path = sprites.resolve_path(config, options.sprite, root)
    document = sprites.load(path, options.sprite)
    defs = find_or_create_defs(document)

    existing = find_symbol_by_id(defs, options.name)
    if existing is None:
        raise IconNotFoundError(
            f"Icon '{options.name}' does not exist in the sprite '{options.sprite}', "
            "nothing to remove."
        )

    remove_symbol(defs, existing)
    sprites.save(path, document)
    print(f"Icon '{options.name}' removed from the sprite '{options.sprite}'.")

    regenerate_component(config, root, project)


def create_sprite(
    options: CreateOptions,
    config: SpriteLabConfig,
    root: Path | None = None,
    confirm: prompts.Confirm = prompts.confirm,
    project: HostProject | None = None,
) -> None:
    """Create a blank sprite, asking before overwriting an existing one.

    Overwriting drops the sprite's icons, so the component is regenerated.
    """
    path = sprites.resolve_path(config, options.name, root)
    overwrite = sprites.exists(path)
    if overwrite and not confirm(
        f"Sprite with the name '{options.name}' already exists. Overwrite?"
    ):
        raise OperationCancelledError()

    print(f"Creating sprite '{options.name}'...")
    sprites.create_blank(path)
    if overwrite:
        regenerate_component(config, root, project)
    print(
        f"Sprite '{options.name}' created successfully.\n\n"
        "Use the following command to add an icon to the sprite:\n\n"
        f"spritelab add --name <icon-name> --icon <url-or-path-to-svg-file> --sprite {options.name}\n"
    )


def delete_sprite(
    options: DeleteOptions,
    config: SpriteLabConfig,
    root: Path | None = None,
    project: HostProject | None = None,
) -> None:
    """Delete a sprite file and regenerate the component."""
    path = sprites.resolve_path(config, options.name, root)
    sprites.delete(path, options.name, sprites.sprite_dir(config, root))
    print(f"Sprite '{options.name}' deleted successfully.")

    regenerate_component(config, root, project)


# --- init ---


def validate_sprite_path(value: str) -> bool | str:
    return (
        True
        if value.startswith("./public")
        else "The path should be within the public directory."
    )


def validate_component_path(value: str) -> bool | str:
    return True if value.startswith("./") else "The path should be relative to the project root."


def validate_component_name(value: str) -> bool | str:
    return (
        True
        if COMPONENT_NAME_PATTERN.match(value)
        else "The component name should start with an uppercase letter and contain "
        "only alphanumeric characters."
    )


def default_config(project: HostProject) -> SpriteLabConfig:
    """Config used by `init --yes`."""
    component_path = "./src/components/icon" if project.has_src else "./components/icon"
    return SpriteLabConfig(
        sprite_path=DEFAULT_SPRITE_PATH,
        component_path=component_path,
        component_name=DEFAULT_COMPONENT_NAME,
    )


def prompt_config(project: HostProject, ask: prompts.Ask = prompts.ask) -> SpriteLabConfig:
    """Ask for the three config values, offering the defaults."""
    defaults = default_config(project)
    return SpriteLabConfig(
        sprite_path=ask(
            "Where would you like to save the sprites?",
            defaults.sprite_path,
            validate_sprite_path,
        ),
        component_path=ask(
            "Where would you like to save the component?",
            defaults.component_path,
            validate_component_path,
        ),
        component_name=ask(
            "What would you like to name the component?",
            defaults.component_name,
            validate_component_name,
        ),
    )


def confirm_overwrites(
    config: SpriteLabConfig,
    project: HostProject,
    root: Path | None,
    confirm: prompts.Confirm,
) -> None:
    """Ask before replacing any file init is about to write."""
    existing = [
        (sprites.resolve_path(config, sprites.DEFAULT_SPRITE_NAME, root), "A sprite"),
        (component_file(config, project, root), "A component"),
        (config_file(root), "A configuration file"),
    ]
    for path, label in existing:
        if path.exists() and not confirm(
            f"{label} already exists at '{path}'. Overwrite?"
        ):
            raise OperationCancelledError()


def init_project(
    options: InitOptions,
    root: Path | None = None,
    ask: prompts.Ask = prompts.ask,
    confirm: prompts.Confirm = prompts.confirm,
    project: HostProject | None = None,
) -> SpriteLabConfig:
    """Set up the default sprite, the component and the config file.

    The three writes are attempted independently; any failures are reported
    together afterwards and files already written are kept.

    Returns:
        The config that was written
    """
    project = project or detect_project(root)
    if project.framework is Framework.OTHER:
        raise SpriteLabError(
            "SpriteLab currently only supports React and Next.js projects.", silent=True
        )

    if options.yes:
        config = default_config(project)
    else:
        config = prompt_config(project, ask)
        if not confirm("Proceed to initialize the icon library?", True):
            raise OperationCancelledError("Initialization cancelled.")

    confirm_overwrites(config, project, root, confirm)

    def create_default_sprite() -> None:
        print(f"Creating sprite at {config.sprite_path}...")
        sprites.create_blank(sprites.resolve_path(config, sprites.DEFAULT_SPRITE_NAME, root))
        print("Sprite created successfully.")

    def create_component() -> None:
        print(f"Creating component at {config.component_path}...")
        update_component(config, project, root)
        print("Component created successfully.")

    def create_config_file() -> None:
        print("Creating configuration file...")
        write_config(config, root)
        print("Configuration file created successfully.")

    steps = [
        (create_default_sprite, f"sprite file at path {config.sprite_path}"),
        (create_component, f"component file at path {config.component_path}"),
        (create_config_file, "config file"),
    ]
    failures = []
    for step, target in steps:
        try:
            step()
        except (OSError, SpriteLabError) as e:
            logger.debug("init step failed: %s", target, exc_info=True)
            failures.append(f"Failed to create {target}: {e}")

    if failures:
        raise SpriteLabError("\n".join(failures))

    print(
        "Icon library initialized successfully.\n\nNext Steps:\n"
        "1. Add icons to your sprite using the 'add' command.\n"
        "2. Use the generated component to display icons in your project.\n"
    )
    return config
