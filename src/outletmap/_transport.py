"""HTTP transport for the outlet and assistant endpoints."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from outletmap.exceptions import OutletMapTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, url: str) -> Any:
        ...

    async def post_form(self, url: str, fields: Mapping[str, str]) -> Any:
        ...


class HttpTransport:
    """aiohttp-backed transport returning decoded JSON bodies."""

    def __init__(
        self,
        http_session: aiohttp.ClientSession,
        *,
        timeout: float | None = None,
    ) -> None:
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def get_json(self, url: str) -> Any:
        _logger.debug("GET %s", url)
        try:
            async with self._http.get(url, timeout=self._timeout) as resp:
                body = await resp.read()
                status = resp.status
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise OutletMapTransportError(f"Request to {url} failed: {exc}", url=url) from exc
        return self._decode(url, status, body)

    async def post_form(self, url: str, fields: Mapping[str, str]) -> Any:
        """POST *fields* as form data."""
        form = aiohttp.FormData()
        for key, value in fields.items():
            form.add_field(key, value)

        _logger.debug("POST %s fields=%s", url, sorted(fields))
        try:
            async with self._http.post(url, data=form, timeout=self._timeout) as resp:
                body = await resp.read()
                status = resp.status
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise OutletMapTransportError(f"Request to {url} failed: {exc}", url=url) from exc
        return self._decode(url, status, body)

    @staticmethod
    def _decode(url: str, status: int, body: bytes) -> Any:
        if not 200 <= status < 300:
            text = body.decode("utf-8", errors="replace")
            raise OutletMapTransportError(
                f"HTTP {status} from {url}: {text[:200]}",
                status_code=status,
                url=url,
            )
        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise OutletMapTransportError(
                f"Invalid JSON from {url}: {body[:200]!r}",
                status_code=status,
                url=url,
            ) from exc
