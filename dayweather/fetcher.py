"""Caller-facing fetch entry points.

``fetch_weather_data`` keeps the absent-on-failure contract: it returns an
HourlyReading or None and never raises. Use ``fetch_weather_outcome`` when the
failure kind matters.
"""

import asyncio
import logging

from dayweather.config.schema import ArchiveConfig
from dayweather.ingest.archive_client import ArchiveClient
from dayweather.models.outcome import FetchOutcome, reading_or_none
from dayweather.models.reading import HourlyReading

logger = logging.getLogger(__name__)


async def fetch_weather_outcome(
    date: str, client: ArchiveClient | None = None
) -> FetchOutcome:
    client = client or ArchiveClient()
    return await client.fetch(date)


async def fetch_weather_data(
    date: str, client: ArchiveClient | None = None
) -> HourlyReading | None:
    try:
        outcome = await fetch_weather_outcome(date, client)
    except Exception:
        logger.exception("Unexpected failure fetching weather data for %s", date)
        return None
    return reading_or_none(outcome)


def fetch_weather_data_sync(
    date: str, config: ArchiveConfig | None = None
) -> HourlyReading | None:
    """Blocking wrapper for callers without an event loop."""
    return asyncio.run(fetch_weather_data(date, ArchiveClient(config)))
