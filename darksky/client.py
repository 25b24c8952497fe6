from typing import Any, Dict, Mapping, Optional

from darksky.chain import RequestChain, create_request_chain
from darksky.config import settings
from darksky.errors import ConfigurationError
from darksky.models import (
    Block,
    CurrentForecast,
    DayForecast,
    Forecast,
    HourForecast,
    WeekForecast,
)
from darksky.query import NumberString
from darksky.services.transport import HttpxTransport, Transport
from darksky.shape import narrow


class DarkSky:
    """Client for the Dark Sky forecast API.

    ``params`` are sent with every request; params passed to a single call
    override them key by key. Units and language from settings are only
    chain defaults, so an explicit ``.units()``/``.language()`` call wins.

        darksky = DarkSky("api-token", params={"units": "si"})
        current = await darksky.current(42, -42)
        hourly = await darksky.chain(42, -42).extend_hourly().only_hourly().execute()
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        base_url: Optional[str] = None,
        transport: Optional[Transport] = None,
    ):
        self.token = token or settings.api_key
        if not self.token:
            raise ConfigurationError("A Dark Sky API token is required (DARKSKY_API_KEY)")
        self.base_url = base_url or settings.base_url
        self.transport = transport or HttpxTransport()
        self.request_params: Dict[str, Any] = dict(params or {})
        self.default_units = settings.default_units
        self.default_language = settings.default_language

    def chain(
        self,
        latitude: NumberString,
        longitude: NumberString,
        params: Optional[Mapping[str, Any]] = None,
    ) -> RequestChain:
        chain = create_request_chain(
            self.token,
            latitude,
            longitude,
            self.request_params,
            transport=self.transport,
            base_url=self.base_url,
        )
        if self.default_units:
            chain.units(self.default_units)
        if self.default_language:
            chain.language(self.default_language)
        return chain.params(params)

    async def forecast(self, latitude: NumberString, longitude: NumberString, params=None) -> Forecast:
        return await self.chain(latitude, longitude, params).execute()

    async def current(self, latitude: NumberString, longitude: NumberString, params=None) -> CurrentForecast:
        """Current conditions only. Raises BlockNotFoundError without ``currently``."""
        result = await self.chain(latitude, longitude, params).only_currently().execute()
        return narrow(result, Block.CURRENTLY)

    async def week(self, latitude: NumberString, longitude: NumberString, params=None) -> WeekForecast:
        """Daily forecast for the week. Raises BlockNotFoundError without ``daily``."""
        result = await self.chain(latitude, longitude, params).only_daily().execute()
        return narrow(result, Block.DAILY)

    async def day(self, latitude: NumberString, longitude: NumberString, params=None) -> DayForecast:
        """Hourly forecast. Raises BlockNotFoundError without ``hourly``."""
        result = await self.chain(latitude, longitude, params).only_hourly().execute()
        return narrow(result, Block.HOURLY)

    async def hour(self, latitude: NumberString, longitude: NumberString, params=None) -> HourForecast:
        """Minute-by-minute forecast for the next hour. Raises BlockNotFoundError without ``minutely``."""
        result = await self.chain(latitude, longitude, params).only_minutely().execute()
        return narrow(result, Block.MINUTELY)
