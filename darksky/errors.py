class DarkSkyError(Exception):
    """Base class for errors raised by this library (not by httpx)."""


class ConfigurationError(DarkSkyError):
    pass


class ForecastDecodeError(DarkSkyError, ValueError):
    """Response body was not a JSON object."""


class BlockNotFoundError(DarkSkyError):
    """The provider answered, but without the data block that was asked for.

    Expected when a block is unavailable for a location (minutely coverage,
    no active alerts), so callers should treat it like a 404.
    """

    status_code = 404

    def __init__(self, block: str):
        self.block = block
        super().__init__(f"Forecast has no {block!r} data block")
