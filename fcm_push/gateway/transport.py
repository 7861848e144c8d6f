"""HTTP transport used to reach the push gateway."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

from fcm_push.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GatewayResponse:
    """Status code and raw body returned by the gateway."""

    status_code: int
    body: bytes


class Transport(Protocol):
    async def post(
        self, url: str, headers: Mapping[str, str], body: str
    ) -> GatewayResponse: ...


class HttpxTransport:
    """POST requests through ``httpx.AsyncClient``.

    A client passed in by the caller is reused and left open; otherwise a
    short-lived client is created for each request.
    """

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout_seconds)
        self._client = client

    async def post(
        self, url: str, headers: Mapping[str, str], body: str
    ) -> GatewayResponse:
        try:
            if self._client is not None:
                response = await self._client.post(
                    url, headers=dict(headers), content=body, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(
                        url, headers=dict(headers), content=body
                    )
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to push gateway timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Push gateway request failed: {str(e)}") from e

        logger.debug(f"Push gateway responded with HTTP {response.status_code}")
        return GatewayResponse(status_code=response.status_code, body=response.content)
