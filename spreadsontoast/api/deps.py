"""Shared FastAPI dependencies: auth headers, dates, clients."""

import re
from datetime import date, datetime

from fastapi import Header, Query, Request

from spreadsontoast.api.errors import APIError, BadRequestError, UnauthorizedError
from spreadsontoast.config import settings
from spreadsontoast.models.enums import Sport
from spreadsontoast.services.mlb.mlb_api import MLBStatsAPIClient

DATE_FORMAT_MESSAGE = "Date must be in YYYY-MM-DD format"
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: str | None) -> date | None:
    """YYYY-MM-DD to date; calendar-invalid values like 2025-13-40 are rejected too."""
    if value is None or value == "":
        return None
    if not _DATE_PATTERN.match(value):
        raise BadRequestError(DATE_FORMAT_MESSAGE)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise BadRequestError(DATE_FORMAT_MESSAGE) from None


def date_query(
    date_str: str | None = Query(default=None, alias="date", description="YYYY-MM-DD"),
) -> date | None:
    return parse_date(date_str)


def get_today() -> date:
    return date.today()


def get_mlb_client(request: Request) -> MLBStatsAPIClient:
    return request.app.state.mlb_client


def require_cron_secret(authorization: str | None = Header(default=None)) -> None:
    """Authorization: Bearer <CRON_SECRET>."""
    if not settings.cron_secret or authorization != f"Bearer {settings.cron_secret}":
        raise UnauthorizedError("Unauthorized")


def require_api_key(x_api_key: str | None = Header(default=None)) -> None:
    if not settings.external_api_key:
        raise APIError("API not configured", 500)
    if not x_api_key or x_api_key != settings.external_api_key:
        raise UnauthorizedError("Unauthorized")


def require_sign_id(x_sign_id: str | None = Header(default=None)) -> str:
    if not x_sign_id:
        raise BadRequestError("X-Sign-Id header is required")
    return x_sign_id


def validate_sport(sport: str | None = Query(default=None, description="Sport, e.g. MLB")) -> str:
    if not sport:
        raise BadRequestError("Sport is required")
    if sport not in {s.value for s in Sport}:
        raise BadRequestError("Invalid sport")
    return sport
