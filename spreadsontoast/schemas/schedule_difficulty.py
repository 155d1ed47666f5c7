"""Strength-of-schedule schemas."""

from typing import Literal

from spreadsontoast.schemas.base import CamelModel

DifficultyLabel = Literal["Hard", "Average", "Easy"]


class ScheduleDifficultyMetric(CamelModel):
    """Opponent strength for one direction (played or remaining)."""

    avg_opponent_win_pct: float
    games: int
    rank: int  # 1 = hardest
    percentile: float  # 0-100, higher = harder
    label: DifficultyLabel


class ScheduleDifficultyData(CamelModel):
    played: ScheduleDifficultyMetric | None
    remaining: ScheduleDifficultyMetric | None
    team_count: int
