"""Command-line interface for managing SVG sprites and the icon component."""

import argparse
import logging
import sys

from . import __version__
from .actions import (
    AddOptions,
    CreateOptions,
    DeleteOptions,
    InitOptions,
    RemoveOptions,
    add_icon,
    create_sprite,
    delete_sprite,
    init_project,
    remove_icon,
)
from .config import load_config
from .errors import SpriteLabError
from .sprites import DEFAULT_SPRITE_NAME

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="spritelab",
        description="Manage SVG sprites and keep the generated icon component in sync",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- init subcommand ---
    init_parser = subparsers.add_parser(
        "init",
        aliases=["i"],
        help="Initialize the icon library",
    )
    init_parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip prompts and use the default paths",
    )
    init_parser.set_defaults(handler=cmd_init)

    # --- add subcommand ---
    add_parser = subparsers.add_parser(
        "add",
        aliases=["a"],
        help="Add an icon to a sprite",
        epilog="Example: spritelab add --name bell --icon ./bell.svg --sprite notifications",
    )
    add_parser.add_argument("-n", "--name", help="Icon name (used as the symbol id)")
    add_parser.add_argument("-i", "--icon", help="URL or path of the SVG icon")
    add_parser.add_argument(
        "-s", "--sprite",
        default=DEFAULT_SPRITE_NAME,
        help=f"Sprite to add the icon to (default: {DEFAULT_SPRITE_NAME})",
    )
    add_parser.set_defaults(handler=cmd_add)

    # --- remove subcommand ---
    remove_parser = subparsers.add_parser(
        "remove",
        aliases=["r"],
        help="Remove an icon from a sprite",
    )
    remove_parser.add_argument("-n", "--name", help="Icon name to remove")
    remove_parser.add_argument(
        "-s", "--sprite",
        default=DEFAULT_SPRITE_NAME,
        help=f"Sprite to remove the icon from (default: {DEFAULT_SPRITE_NAME})",
    )
    remove_parser.set_defaults(handler=cmd_remove)

    # --- create subcommand ---
    create_sprite_parser = subparsers.add_parser(
        "create",
        aliases=["c"],
        help="Create a new sprite",
    )
    create_sprite_parser.add_argument("-n", "--name", help="Sprite name")
    create_sprite_parser.set_defaults(handler=cmd_create)

    # --- delete subcommand ---
    delete_parser = subparsers.add_parser(
        "delete",
        aliases=["d"],
        help="Delete a sprite and all the icons within it",
    )
    delete_parser.add_argument(
        "-n", "--name",
        default=DEFAULT_SPRITE_NAME,
        help=f"Sprite name (default: {DEFAULT_SPRITE_NAME})",
    )
    delete_parser.set_defaults(handler=cmd_delete)

    return parser


def cmd_init(args: argparse.Namespace) -> int:
    """Execute init subcommand."""
    init_project(InitOptions(yes=args.yes))
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    """Execute add subcommand."""
    options = AddOptions.from_args(args.name, args.icon, args.sprite)
    add_icon(options, load_config())
    return 0


def cmd_remove(args: argparse.Namespace) -> int:
    """Execute remove subcommand."""
    options = RemoveOptions.from_args(args.name, args.sprite)
    remove_icon(options, load_config())
    return 0


def cmd_create(args: argparse.Namespace) -> int:
    """Execute create subcommand."""
    options = CreateOptions.from_args(args.name)
    create_sprite(options, load_config())
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    """Execute delete subcommand."""
    options = DeleteOptions.from_args(args.name)
    delete_sprite(options, load_config())
    return 0


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, run the command and map errors to an exit code.

    Silent errors are printed as plain info and exit 0; other expected
    errors go to stderr with exit 1, as does anything unexpected.
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        return args.handler(args)
    except SpriteLabError as e:
        if e.silent:
            print(e.message)
            return 0
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Failed to execute spritelab: {e}", file=sys.stderr)
        return 1


def main() -> None:
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
