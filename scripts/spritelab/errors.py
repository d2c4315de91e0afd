"""Exception hierarchy for spritelab commands.

Every expected failure carries a human-readable message and a ``silent`` flag.
Silent errors are informational (the user cancelled, or there was nothing to
do) and end the process with exit code 0; all others are reported as errors
with exit code 1.

Exception Hierarchy:
    SpriteLabError (Base)
    ├── ConfigurationError
    │   ├── ConfigMissingError
    │   └── ConfigInvalidError
    ├── SpriteNotFoundError
    ├── IconNotFoundError
    ├── MalformedInputError
    │   └── NoSvgElementError
    ├── IconFetchError
    └── OperationCancelledError
"""


class SpriteLabError(Exception):
    """Base exception for all expected spritelab failures.

    Attributes:
        message: Human-readable error description
        silent: Whether the failure should be shown as plain info (exit code 0)
    """

    def __init__(self, message: str, silent: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.silent = silent

    def __str__(self) -> str:
        return self.message


class ConfigurationError(SpriteLabError):
    """Base exception for configuration file problems."""


class ConfigMissingError(ConfigurationError):
    """Raised when the configuration file does not exist."""


class ConfigInvalidError(ConfigurationError):
    """Raised when the configuration file cannot be parsed or misses a field."""


class SpriteNotFoundError(SpriteLabError):
    """Raised when a sprite file does not exist."""


class IconNotFoundError(SpriteLabError):
    """Raised when a symbol id is not present in a sprite."""


class MalformedInputError(SpriteLabError):
    """Raised when SVG text cannot be parsed."""


class NoSvgElementError(MalformedInputError):
    """Raised when an icon document has no <svg> element."""


class IconFetchError(SpriteLabError):
    """Raised when icon content cannot be read from a URL or a file."""


class OperationCancelledError(SpriteLabError):
    """Raised when the user declines or interrupts a prompt. Always silent."""

    def __init__(self, message: str = "Operation cancelled.") -> None:
        super().__init__(message, silent=True)
