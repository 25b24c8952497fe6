from typing import Dict, Literal, Type, Union, overload

from darksky.errors import BlockNotFoundError
from darksky.models import (
    Block,
    CurrentForecast,
    DayForecast,
    Forecast,
    HourForecast,
    WeekForecast,
)

NARROWED: Dict[Block, Type[Forecast]] = {
    Block.CURRENTLY: CurrentForecast,
    Block.DAILY: WeekForecast,
    Block.HOURLY: DayForecast,
    Block.MINUTELY: HourForecast,
}


@overload
def narrow(forecast: Forecast, block: Literal[Block.CURRENTLY]) -> CurrentForecast: ...
@overload
def narrow(forecast: Forecast, block: Literal[Block.DAILY]) -> WeekForecast: ...
@overload
def narrow(forecast: Forecast, block: Literal[Block.HOURLY]) -> DayForecast: ...
@overload
def narrow(forecast: Forecast, block: Literal[Block.MINUTELY]) -> HourForecast: ...
@overload
def narrow(forecast: Forecast, block: Union[Block, str]) -> Forecast: ...


def narrow(forecast: Forecast, block: Union[Block, str]) -> Forecast:
    """Return ``forecast`` as the model that guarantees ``block`` is present.

    Raises BlockNotFoundError when the provider left the block out, which it
    may do even if the request asked only for that block.
    """
    block = Block(block)
    if getattr(forecast, block.value) is None:
        raise BlockNotFoundError(block.value)

    model = NARROWED.get(block)
    if model is None:
        return forecast
    return model.model_validate(forecast.model_dump(by_alias=True))
