"""Tests for the command-line interface."""

from pathlib import Path
from unittest.mock import patch

import pytest

from spritelab import __version__
from spritelab.cli import create_parser, run
from spritelab.config import CONFIG_FILE_NAME


class TestParser:
    """Test argument parsing."""

    @pytest.mark.parametrize(
        "argv, handler",
        [
            (["init", "-y"], "cmd_init"),
            (["i"], "cmd_init"),
            (["add", "-n", "bell", "-i", "./bell.svg"], "cmd_add"),
            (["a", "--name", "bell", "--icon", "./bell.svg"], "cmd_add"),
            (["remove", "-n", "bell"], "cmd_remove"),
            (["r", "-n", "bell"], "cmd_remove"),
            (["create", "-n", "nav"], "cmd_create"),
            (["c", "-n", "nav"], "cmd_create"),
            (["delete"], "cmd_delete"),
            (["d", "-n", "nav"], "cmd_delete"),
        ],
    )
    def test_commands_and_aliases(self, argv: list[str], handler: str):
        args = create_parser().parse_args(argv)
        assert args.handler.__name__ == handler

    def test_defaults(self):
        parser = create_parser()
        assert parser.parse_args(["add", "-n", "bell", "-i", "x.svg"]).sprite == "default"
        assert parser.parse_args(["remove", "-n", "bell"]).sprite == "default"
        assert parser.parse_args(["delete"]).name == "default"
        assert parser.parse_args(["init"]).yes is False

    def test_version(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            run(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestExitCodes:
    """Test error to exit code mapping."""

    def test_missing_config_is_reported(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        assert run(["create", "-n", "nav"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert CONFIG_FILE_NAME in err

    def test_invalid_option_is_reported(self, initialized_project: Path, capsys: pytest.CaptureFixture[str]):
        assert run(["create", "-n", "bad name"]) == 1
        assert "alphanumeric" in capsys.readouterr().err

    def test_silent_error_exits_zero(self, initialized_project: Path, capsys: pytest.CaptureFixture[str]):
        assert run(["delete", "-n", "ghost"]) == 0
        out = capsys.readouterr()
        assert "nothing to delete" in out.out
        assert out.err == ""

    def test_unsupported_project_exits_zero(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        assert run(["init", "-y"]) == 0
        assert "only supports React and Next.js" in capsys.readouterr().out

    def test_unexpected_error(self, initialized_project: Path, capsys: pytest.CaptureFixture[str]):
        with patch("spritelab.cli.create_sprite", side_effect=RuntimeError("boom")):
            assert run(["create", "-n", "nav"]) == 1
        assert "Failed to execute spritelab: boom" in capsys.readouterr().err

    def test_declined_prompt_exits_zero(self, initialized_project: Path, capsys: pytest.CaptureFixture[str]):
        with patch("builtins.input", return_value="n"):
            assert run(["create", "-n", "default"]) == 0
        assert "Operation cancelled." in capsys.readouterr().out


class TestWorkflow:
    """Run whole commands against a project directory."""

    def test_create_add_remove_delete(self, initialized_project: Path, bell_file: Path):
        component = initialized_project / "src" / "components" / "icon" / "Icon.tsx"
        sprite = initialized_project / "public" / "sprites" / "notifications.svg"

        assert run(["c", "-n", "notifications"]) == 0
        assert sprite.exists()

        assert run(["a", "-n", "bell-fill", "-i", "./bell.svg", "-s", "notifications"]) == 0
        assert 'id="bell-fill"' in sprite.read_text()
        assert '"notifications/bell-fill"' in component.read_text()

        assert run(["r", "-n", "bell-fill", "-s", "notifications"]) == 0
        assert 'id="bell-fill"' not in sprite.read_text()
        assert '"notifications/bell-fill"' not in component.read_text()

        assert run(["r", "-n", "bell-fill", "-s", "notifications"]) == 1

        assert run(["d", "-n", "notifications"]) == 0
        assert not sprite.exists()

    def test_init_yes(self, project_root: Path):
        (project_root / "package.json").write_text('{"dependencies": {"react": "18.2.0"}}')
        assert run(["init", "--yes"]) == 0
        assert (project_root / CONFIG_FILE_NAME).exists()
        assert (project_root / "public" / "sprites" / "default.svg").exists()
        assert (project_root / "components" / "icon" / "Icon.jsx").exists()
