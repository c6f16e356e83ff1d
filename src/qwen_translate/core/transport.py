"""Default HTTP transport built on httpx."""

from typing import Optional

import httpx

from qwen_translate.core.translation.interface import Transport, TransportError
from qwen_translate.core.types import RequestOptions, TransportResponse
from qwen_translate.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 60.0


class HttpxTransport(Transport):
    """Transport that performs the request with ``httpx.AsyncClient``.

    When a client is injected the caller owns its lifecycle; otherwise a
    short-lived client is opened for each request.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client
        self.timeout = timeout

    async def __call__(self, url: str, options: RequestOptions) -> TransportResponse:
        if self._client is not None:
            return await self._send(self._client, url, options)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._send(client, url, options)

    async def _send(
        self, client: httpx.AsyncClient, url: str, options: RequestOptions
    ) -> TransportResponse:
        try:
            response = await client.request(
                options.method,
                url,
                headers=options.headers,
                json=options.body.payload,
            )
        except httpx.HTTPError as e:
            logger.debug("HTTP request failed", url=url, error=str(e))
            raise TransportError(f"Qwen API request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            # Gateways sometimes answer with plain text or HTML
            data = response.text

        return TransportResponse(
            ok=response.is_success,
            status=response.status_code,
            data=data,
        )
