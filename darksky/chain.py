import logging
from typing import Any, Dict, Mapping, Optional, Union

from darksky.config import settings
from darksky.models import ALL_BLOCKS, Block, Extend, Forecast, Language, Units
from darksky.query import ChainState, NumberString, TimeValue, build_url, resolve
from darksky.services.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)


class RequestChain:
    """Fluent builder for a single forecast request.

    Every mutator returns the chain itself::

        forecast = await (
            create_request_chain(token, 42, -42)
            .extend_hourly()
            .only_hourly()
            .units(Units.CA)
            .execute()
        )

    Exclude calls apply in order: an ``only_*`` call resets the exclude set
    to every block but one, a later ``exclude()`` adds to whatever is there.

    A chain can be executed more than once; state is resolved again on every
    ``execute()`` call and nothing is cached between calls.
    """

    def __init__(
        self,
        token: str,
        latitude: NumberString,
        longitude: NumberString,
        params: Optional[Mapping[str, Any]] = None,
        *,
        transport: Optional[Transport] = None,
        base_url: Optional[str] = None,
    ):
        self._state = ChainState(token=token, latitude=latitude, longitude=longitude)
        self._transport = transport or HttpxTransport()
        self._base_url = base_url or settings.base_url
        self.params(params)

    @property
    def state(self) -> ChainState:
        return self._state

    @property
    def url(self) -> str:
        return build_url(self._base_url, self._state)

    def exclude(self, *blocks: Union[Block, str]) -> "RequestChain":
        self._state.exclude.update([Block(b) for b in blocks])
        return self

    def extend_hourly(self) -> "RequestChain":
        self._state.extend.add(Extend.HOURLY)
        return self

    def _only(self, block: Block) -> "RequestChain":
        self._state.exclude = set(ALL_BLOCKS - {block})
        return self

    def only_currently(self) -> "RequestChain":
        return self._only(Block.CURRENTLY)

    def only_minutely(self) -> "RequestChain":
        return self._only(Block.MINUTELY)

    def only_hourly(self) -> "RequestChain":
        return self._only(Block.HOURLY)

    def only_daily(self) -> "RequestChain":
        return self._only(Block.DAILY)

    def only_alerts(self) -> "RequestChain":
        return self._only(Block.ALERTS)

    def only_flags(self) -> "RequestChain":
        return self._only(Block.FLAGS)

    def units(self, value: Union[Units, str]) -> "RequestChain":
        self._state.units = value.value if isinstance(value, Units) else value
        return self

    def language(self, value: Union[Language, str]) -> "RequestChain":
        self._state.language = value.value if isinstance(value, Language) else value
        return self

    def params(self, params: Optional[Mapping[str, Any]] = None) -> "RequestChain":
        if params is not None:
            self._state.extra_params.update(params)
        return self

    def time(self, value: TimeValue) -> "RequestChain":
        """Turn the request into a Time Machine request for ``value``."""
        self._state.time = value
        return self

    def resolve(self) -> Dict[str, str]:
        return resolve(self._state)

    async def execute(self) -> Forecast:
        query = self.resolve()
        logger.debug(
            "Requesting forecast for (%s, %s) query=%s",
            self._state.latitude,
            self._state.longitude,
            query,
        )
        data = await self._transport.get(self.url, query)
        return Forecast.model_validate(data)


def create_request_chain(
    token: str,
    latitude: NumberString,
    longitude: NumberString,
    params: Optional[Mapping[str, Any]] = None,
    *,
    transport: Optional[Transport] = None,
    base_url: Optional[str] = None,
) -> RequestChain:
    return RequestChain(
        token, latitude, longitude, params, transport=transport, base_url=base_url
    )
