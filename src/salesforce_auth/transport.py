"""
HTTP transport used by the OAuth client.

The client only depends on HttpTransport.request returning a TransportResponse
(status, reason phrase, decoded body). HttpxTransport is the default
implementation; errors raised by httpx are not caught here.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import parse_qsl

import httpx

from salesforce_auth.config import http_timeout_from_env

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status code, reason phrase and decoded body of an HTTP response."""

    status_code: int
    body: Any = None
    reason_phrase: str = ""

    @property
    def reason(self) -> str:
        """Reason phrase sent by the server, or the standard one for the status code."""
        return self.reason_phrase or httpx.codes.get_reason_phrase(self.status_code)


def decode_body(response: httpx.Response) -> Any:
    """Decode a JSON or form-encoded body; anything else is returned as text."""
    content_type = response.headers.get("content-type", "")
    if "application/x-www-form-urlencoded" in content_type:
        return dict(parse_qsl(response.text))
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpxTransport:
    """HttpTransport backed by httpx.AsyncClient."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: Optional[float] = None):
        """Use the given client, or open one per request with `timeout` (SALESFORCE_HTTP_TIMEOUT by default)."""
        self._client = client
        self._timeout = timeout if timeout is not None else http_timeout_from_env()

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        data: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        logger.debug("%s %s", method, url)
        if self._client is not None:
            r = await self._client.request(method, url, headers=headers, data=data)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                r = await client.request(method, url, headers=headers, data=data)
        return TransportResponse(
            status_code=r.status_code,
            body=decode_body(r),
            reason_phrase=r.reason_phrase,
        )
