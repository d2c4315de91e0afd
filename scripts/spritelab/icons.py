"""Reading icon SVG text from a URL or a local file."""

import logging
from pathlib import Path

import httpx

from .errors import IconFetchError

logger = logging.getLogger(__name__)

URL_PREFIXES = ("http://", "https://")
FETCH_TIMEOUT = 10.0


def is_url(source: str) -> bool:
    return source.startswith(URL_PREFIXES)


def fetch_icon(url: str, timeout: float = FETCH_TIMEOUT) -> str:
    """Download icon text over HTTP(S).

    Raises:
        IconFetchError: On a non-2xx response or a transport error
    """
    logger.debug("Fetching icon from %s", url)
    try:
        response = httpx.get(url, follow_redirects=True, timeout=timeout)
    except httpx.HTTPError as e:
        raise IconFetchError(
            f"Failed to fetch the icon from the provided URL: {url} ({e})."
        ) from e

    if not response.is_success:
        raise IconFetchError(
            f"Failed to fetch the icon from the provided URL: {url} "
            f"(HTTP {response.status_code}). Please make sure the URL points to a valid SVG icon."
        )
    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return response.text


def read_icon_file(path: Path) -> str:
    """Read icon text from a local file.

    Raises:
        IconFetchError: If the file does not exist or cannot be read
    """
    if not path.is_file():
        raise IconFetchError(f"The icon file '{path}' does not exist.")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IconFetchError(f"Failed to read the icon file '{path}': {e}") from e


def load_icon(source: str, root: Path | None = None) -> str:
    """Return icon text from a URL or a path relative to root (default: cwd)."""
    if is_url(source):
        return fetch_icon(source)
    return read_icon_file((root or Path.cwd()) / source)
