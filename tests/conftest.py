"""Common fixtures for spritelab tests."""

import json
from pathlib import Path

import pytest

from spritelab import sprites
from spritelab.config import SpriteLabConfig, write_config
from spritelab.project import Framework, HostProject

BELL_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" fill="currentColor" '
    'version="1.1" viewBox="0 0 16 16">'
    '<path d="M8 16a2 2 0 0 0 2-2H6a2 2 0 0 0 2 2z"/>'
    "</svg>"
)

HOME_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">'
    '<path d="M3 10l9-7 9 7v11H3z"/>'
    "</svg>"
)


@pytest.fixture()
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory, also used as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def config() -> SpriteLabConfig:
    return SpriteLabConfig(
        sprite_path="./public/sprites",
        component_path="./src/components/icon",
        component_name="Icon",
    )


@pytest.fixture()
def ts_project() -> HostProject:
    return HostProject(typescript=True, framework=Framework.NEXT, has_src=True)


@pytest.fixture()
def initialized_project(project_root: Path, config: SpriteLabConfig) -> Path:
    """A Next.js + TypeScript project with a config file and a blank default sprite."""
    (project_root / "package.json").write_text(
        json.dumps({"dependencies": {"next": "14.0.0", "react": "18.2.0"}})
    )
    (project_root / "tsconfig.json").write_text("{}")
    (project_root / "src").mkdir()
    write_config(config, project_root)
    sprites.create_blank(sprites.resolve_path(config, "default", project_root))
    return project_root


@pytest.fixture()
def bell_file(project_root: Path) -> Path:
    path = project_root / "bell.svg"
    path.write_text(BELL_SVG)
    return path


@pytest.fixture()
def home_file(project_root: Path) -> Path:
    path = project_root / "home.svg"
    path.write_text(HOME_SVG)
    return path


@pytest.fixture()
def bell_svg() -> str:
    return BELL_SVG
