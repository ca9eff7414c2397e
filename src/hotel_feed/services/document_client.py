"""Fetches raw XML/XSD bytes from URLs or local paths."""
from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx

logger = logging.getLogger(__name__)

_HTTP_SCHEMES = {"http", "https"}


class DocumentFetchError(RuntimeError):
    """Raised when a document location cannot be read."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Unable to read '{location}': {reason}")
        self.location = location
        self.reason = reason


class DocumentClient(AbstractContextManager["DocumentClient"]):
    """Thin wrapper around ``httpx.Client`` that also understands file locations."""

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        default_headers = {
            "Accept": "application/xml, text/xml, */*",
            "User-Agent": "hotel-feed/0.1.0",
        }
        if headers:
            default_headers.update(headers)
        self._client = httpx.Client(
            timeout=timeout,
            headers=default_headers,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()

    def fetch(self, location: str) -> bytes:
        try:
            parsed = urlparse(location)
        except ValueError as exc:
            raise DocumentFetchError(location, str(exc)) from exc
        if parsed.scheme.lower() in _HTTP_SCHEMES:
            return self._fetch_http(location)
        return self._read_file(location)

    def _fetch_http(self, location: str) -> bytes:
        logger.debug("GET %s", location)
        try:
            response = self._client.get(location)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise DocumentFetchError(location, f"HTTP {status} {exc.response.reason_phrase}") from exc
        except (httpx.HTTPError, httpx.InvalidURL, httpx.CookieConflict) as exc:
            raise DocumentFetchError(location, str(exc) or type(exc).__name__) from exc
        logger.debug("Fetched %s bytes from %s", len(response.content), location)
        return response.content

    @staticmethod
    def _read_file(location: str) -> bytes:
        parsed = urlparse(location)
        if parsed.scheme.lower() == "file":
            path = Path(url2pathname(parsed.path))
        else:
            path = Path(location).expanduser()
        logger.debug("Reading %s", path)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise DocumentFetchError(location, exc.strerror or str(exc)) from exc
        except ValueError as exc:
            # e.g. embedded NUL characters
            raise DocumentFetchError(location, str(exc)) from exc
