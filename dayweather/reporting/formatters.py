"""Output formatters for temperature summaries."""

import json

from dayweather.models.reading import TemperatureSummary

FETCH_FAILED_MESSAGE = "Failed to fetch weather data."


def format_summary_text(s: TemperatureSummary) -> str:
    """Plain text summary, max first."""
    return "\n".join([
        f"Max Temperature: {s.max_c}°C",
        f"Min Temperature: {s.min_c}°C",
    ])


def format_summary_json(s: TemperatureSummary) -> str:
    """JSON summary for programmatic consumption."""
    data = {
        "date": s.date,
        "min_c": s.min_c,
        "max_c": s.max_c,
        "samples": s.samples,
    }
    return json.dumps(data, indent=2)
