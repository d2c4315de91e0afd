"""Interactive prompts on stdin."""

import sys
from typing import Callable

from .errors import OperationCancelledError

# Returns True when valid, or an error message to show before asking again
Validator = Callable[[str], bool | str]
# Called with the message and, optionally, the default answer
Confirm = Callable[..., bool]
Ask = Callable[[str, str, Validator | None], str]


def _read(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        print("", file=sys.stderr)
        raise OperationCancelledError("Operation interrupted.") from None


def confirm(message: str, default: bool = False) -> bool:
    """Ask a yes/no question. An empty answer returns default."""
    hint = "[Y/n]" if default else "[y/N]"
    answer = _read(f"{message} {hint}: ").lower()
    if not answer:
        return default
    return answer in ("y", "yes")


def ask(message: str, default: str, validate: Validator | None = None) -> str:
    """Ask for a value, re-asking until validate accepts it."""
    while True:
        answer = _read(f"{message} ({default}): ") or default
        result = validate(answer) if validate else True
        if result is True:
            return answer
        print(f">> {result}", file=sys.stderr)
