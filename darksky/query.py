from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Set, Union

from darksky.models import Block, Extend

NumberString = Union[int, float, str]
TimeValue = Union[int, datetime, str]


@dataclass
class ChainState:
    """Options accumulated by one RequestChain."""

    token: str
    latitude: NumberString
    longitude: NumberString
    exclude: Set[Block] = field(default_factory=set)
    extend: Set[Extend] = field(default_factory=set)
    units: Optional[str] = None
    language: Optional[str] = None
    extra_params: Dict[str, Any] = field(default_factory=dict)
    time: Optional[TimeValue] = None


def _stringify(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_stringify(v) for v in value]
        # sets have no order of their own
        if isinstance(value, (set, frozenset)):
            items.sort()
        return ",".join(items)
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _join(values) -> str:
    return ",".join(sorted(_stringify(v) for v in values))


def resolve(state: ChainState) -> Dict[str, str]:
    """Turn chain state into the query string parameters of a forecast request.

    Derived keys are computed first and caller supplied ``extra_params`` are
    merged last, so an explicit param always wins over the builder's own
    ``exclude``/``extend``/``units``/``lang`` value. ``None`` params are
    dropped. Extend entries for excluded blocks are ignored.
    """
    query: Dict[str, str] = {}

    if state.exclude:
        query["exclude"] = _join(state.exclude)

    excluded = {block.value for block in state.exclude}
    extend = [e for e in state.extend if e.value not in excluded]
    if extend:
        query["extend"] = _join(extend)

    if state.units is not None:
        query["units"] = _stringify(state.units)
    if state.language is not None:
        query["lang"] = _stringify(state.language)

    for key, value in state.extra_params.items():
        if value is None:
            continue
        query[key] = _stringify(value)

    return query


def format_time(value: TimeValue) -> str:
    """Time Machine timestamps go on the path as UNIX seconds or ISO-8601.

    A naive datetime is sent without an offset, which the provider reads as
    local time at the requested location.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.isoformat(timespec="seconds")
        return str(int(value.timestamp()))
    return str(value)


def build_url(base_url: str, state: ChainState) -> str:
    location = f"{state.latitude},{state.longitude}"
    if state.time is not None:
        location = f"{location},{format_time(state.time)}"
    return f"{base_url.rstrip('/')}/{state.token}/{location}"
