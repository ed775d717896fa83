"""Hourly archive readings and the summaries derived from them."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherQuery:
    date: str  # YYYY-MM-DD, used as both start and end of the window
    latitude: float
    longitude: float
    hourly_variable: str = "temperature_2m"

    def params(self) -> dict[str, str | float]:
        """Query parameters for a single-day archive request."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "start_date": self.date,
            "end_date": self.date,
            "hourly": self.hourly_variable,
        }


@dataclass(frozen=True)
class HourlyReading:
    time: list[str]
    temperature: list[float]  # Celsius, time[i] <-> temperature[i]

    def __len__(self) -> int:
        return len(self.time)

    def pairs(self) -> list[tuple[str, float]]:
        return list(zip(self.time, self.temperature, strict=True))


@dataclass(frozen=True)
class TemperatureSummary:
    min_c: float
    max_c: float
    samples: int
    date: str = ""
