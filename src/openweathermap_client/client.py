import asyncio
import logging
from typing import Optional, Type, TypeVar
from urllib.parse import urlencode

from pydantic import BaseModel, ValidationError

from openweathermap_client.errors import ApiError, DecodeError, TransportError, redact
from openweathermap_client.transport import Transport, TransportResponse, default_transport

logger = logging.getLogger("openweathermap.client")

ModelT = TypeVar("ModelT", bound=BaseModel)

# Characters of a non-JSON body quoted in a DecodeError
SNIPPET_LENGTH = 200


class _ProviderErrorBody(BaseModel):
    """Error document the provider sends with non-success statuses"""

    message: Optional[str] = None


class BaseClient:
    """Request pipeline shared by the provider clients.

    Holds the API key and a transport. Each call sends exactly one GET through
    the transport and either returns the decoded model or raises one of
    ``TransportError``, ``ApiError`` or ``DecodeError``. The key is redacted
    from every error at the point the error is built.
    """

    def __init__(self, api_key: str, *, transport: Optional[Transport] = None) -> None:
        self.set_api_key(api_key)
        self.transport = transport if transport is not None else default_transport()

    def set_api_key(self, api_key: str) -> None:
        if not isinstance(api_key, str) or not api_key.strip():
            raise ValueError("API key must be a non-empty string")
        self._api_key = api_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_key='***', transport={self.transport!r})"

    def _url(self, base_url: str, params: dict) -> str:
        query = urlencode({**params, "appid": self._api_key})
        return f"{base_url}?{query}"

    async def _request(self, url: str, model: Type[ModelT], cancel: Optional[asyncio.Event] = None) -> ModelT:
        logger.debug(f"GET {redact(url, self._api_key)}")
        response = await self._send(url, cancel)

        if not response.is_success:
            message = self._provider_message(response.content)
            logger.debug(f"Provider rejected request with HTTP {response.status_code}")
            raise ApiError(response.status_code, message, secret=self._api_key)

        return self._decode(response.content, model)

    async def _send(self, url: str, cancel: Optional[asyncio.Event]) -> TransportResponse:
        try:
            if cancel is None:
                return await self.transport.get(url)
            return await self._send_cancellable(url, cancel)
        except TransportError as e:
            raise TransportError(e.detail, secret=self._api_key) from None
        except Exception as e:
            # A transport outside this package may not translate its own errors
            logger.warning(f"Transport raised {type(e).__name__} instead of TransportError")
            raise TransportError(f"{type(e).__name__}: {e}", secret=self._api_key) from None

    async def _send_cancellable(self, url: str, cancel: asyncio.Event) -> TransportResponse:
        if cancel.is_set():
            logger.debug("Cancel signal already set, request not sent")
            raise TransportError("cancelled")

        request = asyncio.ensure_future(self.transport.get(url))
        cancelled = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait({request, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancelled.cancel()
            if not request.done():
                request.cancel()
                await asyncio.gather(request, return_exceptions=True)

        # A set signal wins over a response that arrived in the same loop iteration
        if cancel.is_set() or request.cancelled():
            logger.debug("Request abandoned on cancel signal")
            raise TransportError("cancelled")
        return request.result()

    def _decode(self, content: bytes, model: Type[ModelT]) -> ModelT:
        try:
            return model.model_validate_json(content)
        except ValidationError as e:
            raise DecodeError(self._describe(e, content), secret=self._api_key) from None

    @staticmethod
    def _describe(error: ValidationError, content: bytes) -> str:
        problems = []
        for item in error.errors(include_url=False):
            if item["type"] == "json_invalid":
                snippet = content[:SNIPPET_LENGTH].decode("utf-8", errors="replace")
                problems.append(f"invalid JSON ({item['msg']}): {snippet!r}")
            else:
                location = ".".join(str(part) for part in item["loc"]) or "<body>"
                problems.append(f"{location}: {item['msg']}")
        return "; ".join(problems)

    @staticmethod
    def _provider_message(content: bytes) -> str:
        """Error text from a structured provider error body, else an empty string"""
        try:
            body = _ProviderErrorBody.model_validate_json(content)
        except ValidationError:
            return ""
        return body.message or ""
