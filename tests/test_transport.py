"""
Tests for HttpxTransport against httpx.MockTransport, no live endpoint.
"""
import httpx
import pytest

from darksky.errors import ForecastDecodeError
from darksky.services.transport import HttpxTransport

URL = "https://api.darksky.net/forecast/token/42,-42"


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_get_sends_query_and_returns_json():
    seen = {}

    def handler(request):
        seen["url"] = request.url
        return httpx.Response(200, json={"currently": {"temperature": 50}})

    async with _client(handler) as client:
        data = await HttpxTransport(client=client).get(URL, {"exclude": "flags,alerts", "units": "si"})

    assert data == {"currently": {"temperature": 50}}
    assert seen["url"].path == "/forecast/token/42,-42"
    assert seen["url"].params["exclude"] == "flags,alerts"
    assert seen["url"].params["units"] == "si"


@pytest.mark.asyncio
async def test_http_error_is_raised_unchanged():
    async with _client(lambda request: httpx.Response(500, text="boom")) as client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await HttpxTransport(client=client).get(URL, {})
    assert exc_info.value.response.status_code == 500


@pytest.mark.asyncio
async def test_network_error_is_raised_unchanged():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    async with _client(handler) as client:
        with pytest.raises(httpx.ConnectError):
            await HttpxTransport(client=client).get(URL, {})


@pytest.mark.asyncio
async def test_invalid_json_raises_decode_error():
    async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(ForecastDecodeError):
            await HttpxTransport(client=client).get(URL, {})


@pytest.mark.asyncio
async def test_non_object_json_raises_decode_error():
    async with _client(lambda request: httpx.Response(200, json=[1, 2])) as client:
        with pytest.raises(ForecastDecodeError, match="list"):
            await HttpxTransport(client=client).get(URL, {})


def test_timeout_defaults_to_settings():
    from darksky.config import settings

    assert HttpxTransport().timeout == settings.timeout_seconds
    assert HttpxTransport(timeout_seconds=1.5).timeout == 1.5
