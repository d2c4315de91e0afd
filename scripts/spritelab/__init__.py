"""
SVG sprite management and icon component generation.

Keeps a set of sprite files (SVG documents of <symbol> definitions) and a
generated React component listing every available icon in sync.

Usage:
    python -m spritelab init --yes
    python -m spritelab create --name notifications
    python -m spritelab add --name bell --icon ./bell.svg --sprite notifications
    python -m spritelab remove --name bell --sprite notifications
    python -m spritelab delete --name notifications
"""

__version__ = "0.1.0"

from .config import SpriteLabConfig, load_config, write_config
from .component import collect_icon_names, render, render_icon_name_type, update_component
from .errors import SpriteLabError
from .project import Framework, HostProject, detect_project

__all__ = [
    "__version__",
    # Config
    "SpriteLabConfig",
    "load_config",
    "write_config",
    # Component
    "collect_icon_names",
    "render_icon_name_type",
    "render",
    "update_component",
    # Errors
    "SpriteLabError",
    # Project
    "Framework",
    "HostProject",
    "detect_project",
]
