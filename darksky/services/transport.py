import logging
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx

from darksky.config import settings
from darksky.errors import ForecastDecodeError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    async def get(self, url: str, query: Mapping[str, str]) -> Dict[str, Any]:
        ...


class HttpxTransport:
    """GETs a forecast URL and returns the decoded JSON object.

    Non-2xx answers raise httpx.HTTPStatusError and network failures raise
    httpx.RequestError, both untouched. Nothing is retried here.
    """

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.timeout = settings.timeout_seconds if timeout_seconds is None else timeout_seconds
        # An injected client belongs to the caller and is never closed here.
        self.client = client

    async def get(self, url: str, query: Mapping[str, str]) -> Dict[str, Any]:
        if self.client is not None:
            r = await self._send(self.client, url, query)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                r = await self._send(client, url, query)
        return self._decode(r)

    async def _send(self, client: httpx.AsyncClient, url: str, query: Mapping[str, str]) -> httpx.Response:
        try:
            r = await client.get(url, params=dict(query))
            r.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("Forecast request failed with status %s", exc.response.status_code)
            raise
        except httpx.RequestError as exc:
            logger.warning("Forecast request failed: %s", exc.__class__.__name__)
            raise
        logger.debug("Forecast response %s (%d bytes)", r.status_code, len(r.content))
        return r

    @staticmethod
    def _decode(r: httpx.Response) -> Dict[str, Any]:
        try:
            payload = r.json()
        except ValueError as exc:
            raise ForecastDecodeError("Forecast response is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise ForecastDecodeError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )
        return payload
