from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Block(str, Enum):
    CURRENTLY = "currently"
    MINUTELY = "minutely"
    HOURLY = "hourly"
    DAILY = "daily"
    ALERTS = "alerts"
    FLAGS = "flags"


class Extend(str, Enum):
    HOURLY = "hourly"


class Units(str, Enum):
    AUTO = "auto"
    CA = "ca"
    UK2 = "uk2"
    US = "us"
    SI = "si"


class Language(str, Enum):
    ARABIC = "ar"
    CHINESE = "zh"
    DUTCH = "nl"
    ENGLISH = "en"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    POLISH = "pl"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SPANISH = "es"
    SWEDISH = "sv"
    TURKISH = "tr"
    UKRAINIAN = "uk"


ALL_BLOCKS = frozenset(Block)


class _Payload(BaseModel):
    # Provider adds fields over time; keep whatever it sends.
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class DataPoint(_Payload):
    time: Optional[int] = None
    summary: Optional[str] = None
    icon: Optional[str] = None
    temperature: Optional[float] = None
    apparent_temperature: Optional[float] = Field(default=None, alias="apparentTemperature")
    temperature_high: Optional[float] = Field(default=None, alias="temperatureHigh")
    temperature_low: Optional[float] = Field(default=None, alias="temperatureLow")
    precip_intensity: Optional[float] = Field(default=None, alias="precipIntensity")
    precip_probability: Optional[float] = Field(default=None, alias="precipProbability")
    precip_type: Optional[str] = Field(default=None, alias="precipType")
    humidity: Optional[float] = None
    pressure: Optional[float] = None
    wind_speed: Optional[float] = Field(default=None, alias="windSpeed")
    wind_bearing: Optional[float] = Field(default=None, alias="windBearing")
    cloud_cover: Optional[float] = Field(default=None, alias="cloudCover")
    uv_index: Optional[int] = Field(default=None, alias="uvIndex")
    visibility: Optional[float] = None


class DataBlock(_Payload):
    summary: Optional[str] = None
    icon: Optional[str] = None
    data: List[DataPoint] = Field(default_factory=list)


class Alert(_Payload):
    title: Optional[str] = None
    time: Optional[int] = None
    expires: Optional[int] = None
    description: Optional[str] = None
    uri: Optional[str] = None
    severity: Optional[str] = None
    regions: List[str] = Field(default_factory=list)


class Flags(_Payload):
    sources: List[str] = Field(default_factory=list)
    units: Optional[str] = None
    nearest_station: Optional[float] = Field(default=None, alias="nearest-station")


class Forecast(_Payload):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    offset: Optional[float] = None
    currently: Optional[DataPoint] = None
    minutely: Optional[DataBlock] = None
    hourly: Optional[DataBlock] = None
    daily: Optional[DataBlock] = None
    alerts: Optional[List[Alert]] = None
    flags: Optional[Flags] = None


class CurrentForecast(Forecast):
    currently: DataPoint


class WeekForecast(Forecast):
    daily: DataBlock


class DayForecast(Forecast):
    hourly: DataBlock


class HourForecast(Forecast):
    minutely: DataBlock
