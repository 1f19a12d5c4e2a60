"""Network backends the clients send their requests through.

Both backends satisfy :class:`Transport`: an awaitable GET that returns the
status code and raw body, or raises :class:`TransportError` when no response
was obtained. Which one runs is decided once, by :func:`default_transport`.
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Protocol

import httpx

from openweathermap_client.errors import TransportError

logger = logging.getLogger("openweathermap.transport")


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    content: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    async def get(self, url: str) -> TransportResponse: ...


class HttpxTransport:
    """Native backend built on httpx"""

    def __init__(
        self,
        timeout: Optional[float] = None,
        verify: bool = True,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self.verify = verify
        self._http_transport = http_transport

    async def get(self, url: str) -> TransportResponse:
        try:
            return await asyncio.wait_for(self._fetch(url), self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning("Request timed out")
            raise TransportError("timeout") from None
        except httpx.HTTPError as e:
            logger.warning(f"Request failed: {type(e).__name__}")
            raise TransportError(f"{type(e).__name__}: {e}") from None

    async def _fetch(self, url: str) -> TransportResponse:
        # The client is closed on every exit path, cancellation included
        async with httpx.AsyncClient(
            timeout=self.timeout,
            verify=self.verify,
            transport=self._http_transport,
        ) as client:
            response = await client.get(url)
            logger.debug(f"Received HTTP {response.status_code} ({len(response.content)} bytes)")
            return TransportResponse(status_code=response.status_code, content=response.content)


class BrowserTransport:
    """Pyodide backend built on the browser's fetch"""

    def __init__(
        self,
        timeout: Optional[float] = None,
        fetch: Optional[Callable[..., Awaitable[Any]]] = None,
    ) -> None:
        if fetch is None:
            from pyodide.http import pyfetch

            fetch = pyfetch
        self.timeout = timeout
        self._fetch = fetch

    async def get(self, url: str) -> TransportResponse:
        try:
            return await asyncio.wait_for(self._request(url), self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Request timed out")
            raise TransportError("timeout") from None
        except Exception as e:
            # fetch failures surface as JsException or OSError depending on the Pyodide release
            if "AbortError" in f"{type(e).__name__} {e}":
                raise TransportError("cancelled") from None
            logger.warning(f"Request failed: {type(e).__name__}")
            raise TransportError(f"{type(e).__name__}: {e}") from None

    async def _request(self, url: str) -> TransportResponse:
        response = await self._fetch(url, method="GET")
        content = await response.bytes()
        logger.debug(f"Received HTTP {response.status} ({len(content)} bytes)")
        return TransportResponse(status_code=response.status, content=bytes(content))


def default_transport(timeout: Optional[float] = None) -> Transport:
    """Backend for the interpreter we are running on"""
    if sys.platform == "emscripten":
        return BrowserTransport(timeout=timeout)
    return HttpxTransport(timeout=timeout)
