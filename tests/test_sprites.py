"""Tests for the sprite repository."""

from pathlib import Path

import pytest

from spritelab import sprites
from spritelab.config import SpriteLabConfig
from spritelab.errors import SpriteNotFoundError
from spritelab.svg import BLANK_SPRITE, find_or_create_defs, insert_symbol, iter_symbol_ids, normalize


class TestResolvePath:
    """Test path resolution."""

    def test_resolve_path(self, tmp_path: Path, config: SpriteLabConfig):
        path = sprites.resolve_path(config, "nav", tmp_path)
        assert path == tmp_path / "public" / "sprites" / "nav.svg"

    def test_nested_name(self, tmp_path: Path, config: SpriteLabConfig):
        path = sprites.resolve_path(config, "brand/logos", tmp_path)
        assert path == tmp_path / "public" / "sprites" / "brand" / "logos.svg"

    def test_defaults_to_cwd(self, project_root: Path, config: SpriteLabConfig):
        assert sprites.resolve_path(config, "nav") == project_root / "public/sprites/nav.svg"


class TestLoad:
    """Test loading sprites."""

    def test_missing_default_points_to_init(self, tmp_path: Path):
        with pytest.raises(SpriteNotFoundError) as exc_info:
            sprites.load(tmp_path / "default.svg", "default")
        assert "spritelab init" in exc_info.value.message
        assert exc_info.value.silent is False

    def test_missing_named_points_to_create(self, tmp_path: Path):
        with pytest.raises(SpriteNotFoundError) as exc_info:
            sprites.load(tmp_path / "nav.svg", "nav")
        assert "spritelab create --name nav" in exc_info.value.message

    def test_load_existing(self, tmp_path: Path):
        path = tmp_path / "nav.svg"
        sprites.create_blank(path)
        root = sprites.load(path, "nav")
        assert iter_symbol_ids(root) == []


class TestCreateAndSave:
    """Test create_blank and save."""

    def test_create_blank(self, tmp_path: Path):
        path = tmp_path / "public" / "sprites" / "default.svg"
        sprites.create_blank(path)
        assert path.read_text() == BLANK_SPRITE
        assert "<defs>" in BLANK_SPRITE

    def test_save_persists_symbols(self, tmp_path: Path, bell_svg: str):
        path = tmp_path / "nav.svg"
        sprites.create_blank(path)
        root = sprites.load(path, "nav")
        insert_symbol(find_or_create_defs(root), normalize(bell_svg, "bell"))
        sprites.save(path, root)
        assert iter_symbol_ids(sprites.load(path, "nav")) == ["bell"]


class TestDelete:
    """Test delete."""

    def test_delete(self, tmp_path: Path):
        path = tmp_path / "nav.svg"
        sprites.create_blank(path)
        sprites.delete(path, "nav", tmp_path)
        assert not path.exists()
        assert tmp_path.exists()

    def test_delete_missing_is_silent(self, tmp_path: Path):
        with pytest.raises(SpriteNotFoundError) as exc_info:
            sprites.delete(tmp_path / "nav.svg", "nav", tmp_path)
        assert exc_info.value.silent is True
        assert "nothing to delete" in exc_info.value.message

    def test_prunes_empty_nested_directories(self, tmp_path: Path):
        base = tmp_path / "sprites"
        base.mkdir()
        path = base / "brand" / "logos" / "dark.svg"
        sprites.create_blank(path)
        sprites.delete(path, "brand/logos/dark", base)
        assert list(base.iterdir()) == []
        assert base.exists()

    def test_keeps_non_empty_directories(self, tmp_path: Path):
        base = tmp_path / "sprites"
        sprites.create_blank(base / "brand" / "light.svg")
        sprites.create_blank(base / "brand" / "dark.svg")
        sprites.delete(base / "brand" / "dark.svg", "brand/dark", base)
        assert (base / "brand" / "light.svg").exists()
