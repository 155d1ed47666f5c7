"""Sign configuration schemas.

Sign config is stored as JSON on the sign row; these models are the
validation boundary for anything read from or written to that column.
"""

import re

from pydantic import Field, field_validator

from spreadsontoast.models.enums import Division
from spreadsontoast.schemas.base import CamelModel

SIGN_PAYLOAD_VERSION = 2

_HH_MM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class SignDisplayConfig(CamelModel):
    brightness: int = Field(default=35, ge=0, le=100)
    rotation_interval_seconds: int = Field(default=10, ge=1)


class SignScheduleConfig(CamelModel):
    enabled: bool = False
    on_time: str = "07:00"
    off_time: str = "23:00"
    timezone: str = "America/Los_Angeles"

    @field_validator("on_time", "off_time")
    @classmethod
    def validate_hh_mm(cls, value: str) -> str:
        if not _HH_MM.match(value):
            raise ValueError("Time must be in HH:mm format")
        return value


class SignContentConfig(CamelModel):
    standings_divisions: list[Division] = []
    last_game_team_ids: list[int] = []
    next_game_team_ids: list[int] = []


class SignConfig(CamelModel):
    display: SignDisplayConfig = Field(default_factory=SignDisplayConfig)
    schedule: SignScheduleConfig = Field(default_factory=SignScheduleConfig)
    content: SignContentConfig = Field(default_factory=SignContentConfig)


class SignConfigResponse(CamelModel):
    payload_version: int = SIGN_PAYLOAD_VERSION
    config: SignConfig
