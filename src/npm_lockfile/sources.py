"""Read lock file text from a filesystem path or an HTTP(S) URL."""

from __future__ import annotations

import logging
from pathlib import Path

import requests
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

from .errors import SourceError

logger = logging.getLogger(__name__)

USER_AGENT = "npm-lockfile (+https://docs.npmjs.com/cli/configuring-npm/package-lock-json)"


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(url: str, timeout: float) -> Response:
    return requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)


def _check_size(size: int, source: str | Path, max_bytes: int | None) -> None:
    if max_bytes is not None and size > max_bytes:
        raise SourceError(f"{source} is {size} bytes, larger than the {max_bytes} byte limit")


def fetch_lockfile(url: str, *, max_bytes: int | None = None, timeout: float = 30.0) -> str:
    """Return the lock file text served at ``url``."""
    logger.info("Fetching lock file from %s", url)
    try:
        response = _http_get(url, timeout)
    except requests.RequestException as exc:  # pragma: no cover - network failure path
        raise SourceError(f"Failed to fetch {url}: {exc}") from exc

    if response.status_code != 200:
        raise SourceError(f"Unexpected status code {response.status_code} fetching {url}")

    _check_size(len(response.content), url, max_bytes)
    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SourceError(f"{url} did not return UTF-8 text: {exc}") from exc


def read_lockfile(
    source: str | Path, *, max_bytes: int | None = None, timeout: float = 30.0
) -> str:
    """Return lock file text from a path or URL.

    Raises:
        SourceError: If the source cannot be read or exceeds ``max_bytes``.
    """
    if is_url(source):
        return fetch_lockfile(str(source), max_bytes=max_bytes, timeout=timeout)

    path = Path(source)
    try:
        _check_size(path.stat().st_size, path, max_bytes)
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceError(f"Failed to read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SourceError(f"{path} is not UTF-8 text: {exc}") from exc
