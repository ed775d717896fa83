"""Open-Meteo ERA5 archive client returning tagged fetch outcomes."""

import logging

import httpx

from dayweather.config.schema import ArchiveConfig
from dayweather.ingest.hourly_parser import PayloadError, parse_hourly
from dayweather.models.outcome import (
    EmptyBody,
    FetchOutcome,
    HttpError,
    ParseError,
    Success,
    TransportError,
)
from dayweather.models.reading import WeatherQuery

logger = logging.getLogger(__name__)


class ArchiveClient:
    def __init__(
        self,
        config: ArchiveConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or ArchiveConfig()
        self.transport = transport

    def query_for(self, date: str) -> WeatherQuery:
        return WeatherQuery(
            date=date,
            latitude=self.config.latitude,
            longitude=self.config.longitude,
            hourly_variable=self.config.hourly_variable,
        )

    def build_url(self, date: str) -> str:
        """Full request URL for a single day. The date is passed through unvalidated."""
        return str(httpx.URL(self.config.base_url, params=self.query_for(date).params()))

    async def fetch(self, date: str) -> FetchOutcome:
        """Fetch one day of hourly temperatures.

        A fresh client is opened per call and closed on every path, so no
        pooled connections outlive the request. Never raises for network,
        status or payload problems.
        """
        url = self.build_url(date)
        headers = {"User-Agent": self.config.user_agent}
        try:
            async with httpx.AsyncClient(
                transport=self.transport, timeout=self.config.timeout_seconds
            ) as client:
                resp = await client.get(url, headers=headers)
                body = resp.content
        except httpx.RequestError as e:
            logger.warning("Archive transport error for %s: %s", date, e)
            return TransportError(detail=str(e) or type(e).__name__)

        if not resp.is_success:
            logger.warning("Archive returned %d for %s", resp.status_code, date)
            return HttpError(status=resp.status_code)
        if not body:
            logger.warning("Archive returned empty body for %s", date)
            return EmptyBody()

        logger.debug("Archive response for %s: %s", date, resp.text)
        try:
            reading = parse_hourly(body)
        except PayloadError as e:
            logger.warning("Archive payload for %s unusable: %s", date, e)
            return ParseError(detail=str(e))

        logger.info("Fetched %d hourly readings for %s", len(reading), date)
        return Success(reading=reading)
