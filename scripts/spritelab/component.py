"""Generation of the icon component from the sprite files on disk."""

import hashlib
import json
import logging
from pathlib import Path

from .config import SpriteLabConfig
from .errors import MalformedInputError
from .project import HostProject
from .sprites import sprite_dir
from .svg import iter_symbol_ids, parse
from .svg.utils import load_svg_file
from .templates import (
    HEADER,
    JSX_TEMPLATE,
    PROP_TYPES_IMPORT,
    PROP_TYPES_TEMPLATE,
    TSX_TEMPLATE,
)

logger = logging.getLogger(__name__)

PUBLIC_DIR = "public"
TOKEN_LENGTH = 8


def _sprite_files(sprite_directory: Path) -> list[Path]:
    if not sprite_directory.is_dir():
        return []
    return sorted(p for p in sprite_directory.glob("*.svg") if p.is_file())


def collect_icon_names(sprite_directory: Path) -> dict[str, list[str]]:
    """Map each sprite in the directory to its symbol ids.

    Only files directly inside sprite_directory are scanned, in file-name
    order. Symbol ids keep document order.

    Args:
        sprite_directory: Directory holding the sprite files

    Returns:
        Dict of sprite name (file stem) -> list of symbol ids
    """
    mapping: dict[str, list[str]] = {}
    for sprite_file in _sprite_files(sprite_directory):
        try:
            root = parse(load_svg_file(sprite_file))
        except MalformedInputError as e:
            raise MalformedInputError(f"Sprite '{sprite_file.name}': {e.message}") from e
        mapping[sprite_file.stem] = iter_symbol_ids(root)
    return mapping


def icon_names(mapping: dict[str, list[str]]) -> list[str]:
    """Flatten a sprite mapping into "{sprite}/{icon}" names."""
    return [f"{sprite}/{icon}" for sprite, icons in mapping.items() for icon in icons]


def render_icon_name_type(mapping: dict[str, list[str]]) -> str:
    """Render the union of icon-name string literal types.

    An empty mapping renders as the empty-string literal type.
    """
    names = icon_names(mapping) or [""]
    return "\n".join(f"  | {json.dumps(name)}" for name in names)


def cache_bust_token(sprite_directory: Path) -> str:
    """Short digest of every sprite file; changes only when a sprite changes."""
    digest = hashlib.sha256()
    for sprite_file in _sprite_files(sprite_directory):
        digest.update(sprite_file.name.encode("utf-8"))
        digest.update(b"\0")
        digest.update(sprite_file.read_bytes())
    return digest.hexdigest()[:TOKEN_LENGTH]


def sprite_base_url(sprite_path: str) -> str:
    """Public URL of the sprite directory: sprite_path without ./public.

    >>> sprite_base_url("./public/sprites")
    '/sprites'
    >>> sprite_base_url("./public")
    '/'
    """
    path = sprite_path.replace("\\", "/")
    if path.startswith("./"):
        path = path[2:]
    if path == PUBLIC_DIR or path.startswith(PUBLIC_DIR + "/"):
        path = path[len(PUBLIC_DIR):]
    path = path.strip("/")
    return f"/{path}" if path else "/"


def render(
    component_name: str,
    sprite_path: str,
    mapping: dict[str, list[str]],
    project: HostProject,
    token: str,
) -> str:
    """Render the full component source.

    Args:
        component_name: Name of the exported component
        sprite_path: Configured sprite directory (relative to the project root)
        mapping: Sprite name -> symbol ids, from collect_icon_names
        project: Host project; selects TypeScript vs JavaScript output
        token: Cache-bust token appended to sprite URLs

    Returns:
        Component source text
    """
    sprite_url = sprite_base_url(sprite_path).rstrip("/")

    if project.typescript:
        return TSX_TEMPLATE.format(
            header=HEADER,
            icon_name_type=render_icon_name_type(mapping),
            name=component_name,
            sprite_url=sprite_url,
            token=token,
        )

    imports = ""
    prop_types = ""
    if project.prop_types:
        imports = PROP_TYPES_IMPORT
        prop_types = PROP_TYPES_TEMPLATE.format(
            name=component_name,
            icon_names="\n".join(f"    {json.dumps(name)}," for name in icon_names(mapping)),
        )
    return JSX_TEMPLATE.format(
        header=HEADER,
        imports=imports,
        name=component_name,
        sprite_url=sprite_url,
        token=token,
        prop_types=prop_types,
    )


def component_file(config: SpriteLabConfig, project: HostProject, root: Path | None = None) -> Path:
    """Return {root}/{componentPath}/{componentName}.tsx|.jsx."""
    return (
        (root or Path.cwd())
        / config.component_path
        / f"{config.component_name}{project.component_extension}"
    )


def update_component(config: SpriteLabConfig, project: HostProject, root: Path | None = None) -> Path:
    """Regenerate the component from the current sprite files.

    The file is always rewritten in full. Returns the component path.
    """
    sprites = sprite_dir(config, root)
    mapping = collect_icon_names(sprites)
    content = render(
        config.component_name,
        config.sprite_path,
        mapping,
        project,
        cache_bust_token(sprites),
    )

    path = component_file(config, project, root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote component %s (%d icons)", path, len(icon_names(mapping)))
    return path
