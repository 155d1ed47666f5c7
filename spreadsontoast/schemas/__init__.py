"""Pydantic schemas for API request/response models."""

from spreadsontoast.schemas.standings import (
    DivisionStandingsResponse,
    StandingsBoardResponse,
    TeamDetailResponse,
    SeasonWithDates,
)
from spreadsontoast.schemas.schedule_difficulty import ScheduleDifficultyData
from spreadsontoast.schemas.sign import SignConfig, SignConfigResponse, SIGN_PAYLOAD_VERSION
from spreadsontoast.schemas.slides import SlidesResponse
from spreadsontoast.schemas.catalog import SeasonResponse, TeamResponse

__all__ = [
    "DivisionStandingsResponse",
    "StandingsBoardResponse",
    "TeamDetailResponse",
    "SeasonWithDates",
    "ScheduleDifficultyData",
    "SignConfig",
    "SignConfigResponse",
    "SIGN_PAYLOAD_VERSION",
    "SlidesResponse",
    "SeasonResponse",
    "TeamResponse",
]
