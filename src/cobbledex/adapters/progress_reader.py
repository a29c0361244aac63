"""Readers resolving opaque progress locators to raw bytes."""

from __future__ import annotations

import asyncio
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import unquote, urlparse

import httpx
from httpx_retries import Retry, RetryTransport

from cobbledex.config import ProgressSourceConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from cobbledex.domain.ports import ProgressReader

log = getLogger(__name__)

_HTTP_SCHEMES = frozenset({"http", "https"})


class ProgressSourceError(OSError):
    """Raised when a progress locator cannot be read."""

    def __init__(self, message: str, *, locator: str) -> None:
        super().__init__(message)
        self.locator = locator


def _default_retry() -> Retry:
    return Retry(total=3, backoff_factor=0.5, status_forcelist=(429, 500, 502, 503, 504))


def _default_client_factory(config: ProgressSourceConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=config.http_timeout_seconds,
        transport=RetryTransport(retry=_default_retry()),
        follow_redirects=True,
    )


class FileProgressReader:
    """Read progress snapshots from local paths or ``file://`` URIs."""

    async def read(self, locator: str) -> bytes:
        try:
            path = _path_from_locator(locator)
            return await asyncio.to_thread(path.read_bytes)
        except (OSError, ValueError) as exc:
            raise ProgressSourceError(f"Cannot read {locator!r}: {exc}", locator=locator) from exc


class HttpProgressReader:
    """Fetch progress snapshots over HTTP(S)."""

    def __init__(
        self,
        *,
        config: ProgressSourceConfig | None = None,
        client_factory: Callable[[ProgressSourceConfig], httpx.AsyncClient] | None = None,
    ) -> None:
        self._config = config or ProgressSourceConfig()
        self._client_factory = client_factory or _default_client_factory

    async def read(self, locator: str) -> bytes:
        async with self._client_factory(self._config) as client:
            try:
                response = await client.get(locator)
                response.raise_for_status()
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                log.warning("HTTP progress fetch failed for %s: %s", locator, exc)
                message = f"Cannot fetch {locator}: {exc}"
                raise ProgressSourceError(message, locator=locator) from exc
            return response.content


class LocatorProgressReader:
    """Dispatch a locator to the HTTP or file reader based on its scheme."""

    def __init__(
        self,
        *,
        file_reader: ProgressReader | None = None,
        http_reader: ProgressReader | None = None,
    ) -> None:
        self._file_reader = file_reader or FileProgressReader()
        self._http_reader = http_reader or HttpProgressReader()

    async def read(self, locator: str) -> bytes:
        try:
            scheme = urlparse(locator).scheme.lower()
        except ValueError as exc:
            message = f"Invalid locator {locator!r}: {exc}"
            raise ProgressSourceError(message, locator=locator) from exc
        if scheme in _HTTP_SCHEMES:
            return await self._http_reader.read(locator)
        return await self._file_reader.read(locator)


def _path_from_locator(locator: str) -> Path:
    parsed = urlparse(locator)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path)).expanduser()
    return Path(locator).expanduser()


if TYPE_CHECKING:
    _file_check: ProgressReader = FileProgressReader()
    _http_check: ProgressReader = HttpProgressReader()
    _locator_check: ProgressReader = LocatorProgressReader()
