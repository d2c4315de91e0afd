"""CLI entry point for the spritelab package.

Usage:
    python -m spritelab init
    python -m spritelab add --name bell --icon ./bell.svg
    python -m spritelab remove --name bell
"""

from .cli import main

if __name__ == "__main__":
    main()
