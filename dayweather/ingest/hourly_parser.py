"""Parse Open-Meteo archive JSON into an HourlyReading."""

from pydantic import BaseModel, ValidationError

from dayweather.models.reading import HourlyReading


class PayloadError(ValueError):
    """Response body did not match the expected hourly shape."""


class _HourlyBlock(BaseModel):
    model_config = {"extra": "ignore"}

    time: list[str]
    temperature_2m: list[float]


class _ArchiveResponse(BaseModel):
    model_config = {"extra": "ignore"}

    hourly: _HourlyBlock


def parse_hourly(body: str | bytes) -> HourlyReading:
    """Extract ``hourly.time`` and ``hourly.temperature_2m`` from a response body.

    Unknown fields are ignored. Raises PayloadError on malformed JSON, missing
    or mistyped fields, and series of unequal length.
    """
    try:
        parsed = _ArchiveResponse.model_validate_json(body)
    except ValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ()))
        raise PayloadError(
            f"{first.get('msg', 'invalid payload')}" + (f" at {loc}" if loc else "")
        ) from e

    hourly = parsed.hourly
    if len(hourly.time) != len(hourly.temperature_2m):
        raise PayloadError(
            f"time/temperature_2m length mismatch: "
            f"{len(hourly.time)} != {len(hourly.temperature_2m)}"
        )
    return HourlyReading(time=hourly.time, temperature=hourly.temperature_2m)
