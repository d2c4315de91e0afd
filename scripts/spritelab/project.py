"""Host project detection: dialect, framework and optional dependencies.

Everything here reads the host project's files only; nothing in the sprite
or component logic depends on how the answers were obtained.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

PACKAGE_MANIFEST = "package.json"
TYPESCRIPT_CONFIG = "tsconfig.json"
PROP_TYPES_PACKAGE = "prop-types"


class Framework(str, Enum):
    REACT = "react"
    NEXT = "next"
    OTHER = "other"


class HostProject(BaseModel):
    """What spritelab needs to know about the project it runs in."""

    typescript: bool = Field(False, description="tsconfig.json present")
    framework: Framework = Field(Framework.OTHER, description="Detected web framework")
    prop_types: bool = Field(False, description="prop-types is a declared dependency")
    has_src: bool = Field(False, description="Project keeps sources under src/")

    @property
    def component_extension(self) -> str:
        return ".tsx" if self.typescript else ".jsx"


def read_dependencies(root: Path) -> dict[str, Any]:
    """Return dependencies and devDependencies from package.json, merged.

    A missing or unreadable manifest yields no dependencies.
    """
    manifest = root / PACKAGE_MANIFEST
    if not manifest.is_file():
        return {}
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s: %s", manifest, e)
        return {}
    if not isinstance(data, dict):
        return {}

    deps: dict[str, Any] = {}
    for section in ("dependencies", "devDependencies"):
        value = data.get(section)
        if isinstance(value, dict):
            deps.update(value)
    return deps


def detect_framework(deps: dict[str, Any]) -> Framework:
    """Next.js wins over plain React since Next projects also depend on react."""
    if "next" in deps:
        return Framework.NEXT
    if "react" in deps:
        return Framework.REACT
    return Framework.OTHER


def detect_project(root: Path | None = None) -> HostProject:
    """Probe the host project rooted at root (default: cwd)."""
    root = root or Path.cwd()
    deps = read_dependencies(root)
    project = HostProject(
        typescript=(root / TYPESCRIPT_CONFIG).is_file(),
        framework=detect_framework(deps),
        prop_types=PROP_TYPES_PACKAGE in deps,
        has_src=(root / "src").is_dir(),
    )
    logger.debug("Detected host project: %s", project)
    return project
