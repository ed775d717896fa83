"""Min/max reduction over an hourly temperature series."""

from collections.abc import Sequence

from dayweather.models.reading import HourlyReading, TemperatureSummary


def summarize_temperatures(
    temperatures: Sequence[float], date: str = ""
) -> TemperatureSummary | None:
    """Return the min and max of the series, or None if it is empty.

    NaN values are compared with plain float semantics.
    """
    if not temperatures:
        return None
    return TemperatureSummary(
        min_c=min(temperatures),
        max_c=max(temperatures),
        samples=len(temperatures),
        date=date,
    )


def summarize_reading(reading: HourlyReading, date: str = "") -> TemperatureSummary | None:
    return summarize_temperatures(reading.temperature, date=date)
