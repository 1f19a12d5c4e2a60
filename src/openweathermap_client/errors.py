from typing import Optional
from urllib.parse import quote, quote_plus

REDACTED = "***"


def redact(text: str, secret: Optional[str]) -> str:
    """Mask every occurrence of ``secret`` (plain or URL-encoded) in ``text``"""
    if not secret or not text:
        return text
    for form in {secret, quote(secret, safe=""), quote_plus(secret)}:
        text = text.replace(form, REDACTED)
    return text


class WeatherError(Exception):
    """Base class for every failure of a provider call.

    Pass the API key as ``secret`` and it is masked out of the detail before
    the exception is built, so nothing that reaches the caller carries it.
    """

    def __init__(self, detail: str, *, secret: Optional[str] = None):
        self.detail = redact(str(detail), secret)
        super().__init__(self.detail)


class TransportError(WeatherError):
    """The request never produced a response (network failure, timeout, cancellation)"""


class ApiError(WeatherError):
    """The provider answered with a non-success status"""

    def __init__(self, status_code: int, message: str = "", *, secret: Optional[str] = None):
        self.status_code = status_code
        self.message = redact(message, secret)
        detail = f"API request failed with status {status_code}"
        if self.message:
            detail = f"{detail}: {self.message}"
        super().__init__(detail, secret=secret)


class DecodeError(WeatherError):
    """The provider answered 2xx but the body does not match the expected schema"""
