"""Tagged outcome of a single archive fetch.

Callers that only care about success can collapse any outcome with
``reading_or_none``; every failure variant maps to ``None``.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from dayweather.models.reading import HourlyReading


class FailureKind(StrEnum):
    HTTP_ERROR = "http_error"
    EMPTY_BODY = "empty_body"
    PARSE_ERROR = "parse_error"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class Success:
    reading: HourlyReading


@dataclass(frozen=True)
class HttpError:
    status: int
    kind: FailureKind = FailureKind.HTTP_ERROR


@dataclass(frozen=True)
class EmptyBody:
    kind: FailureKind = FailureKind.EMPTY_BODY


@dataclass(frozen=True)
class ParseError:
    detail: str
    kind: FailureKind = FailureKind.PARSE_ERROR


@dataclass(frozen=True)
class TransportError:
    detail: str
    kind: FailureKind = FailureKind.TRANSPORT_ERROR


FetchOutcome: TypeAlias = Success | HttpError | EmptyBody | ParseError | TransportError


def reading_or_none(outcome: FetchOutcome) -> HourlyReading | None:
    if isinstance(outcome, Success):
        return outcome.reading
    return None
