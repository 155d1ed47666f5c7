"""Team standing snapshot database model."""

from datetime import datetime, date
from typing import Any

from sqlalchemy import String, Integer, Float, Boolean, DateTime, Date, JSON, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spreadsontoast.database import Base, utcnow
from spreadsontoast.models.team import Team


class TeamStanding(Base):
    """A team's cumulative record as of one calendar date.

    Exactly one row per (date, season, team); a same-day re-sync
    overwrites the row in place.
    """

    __tablename__ = "team_standings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    date: Mapped[date] = mapped_column(Date, nullable=False)
    season: Mapped[str] = mapped_column(String(4), nullable=False)
    sport: Mapped[str] = mapped_column(String(10), nullable=False, default="MLB")
    team_id: Mapped[int] = mapped_column(ForeignKey("teams.id"), nullable=False)

    # Record
    games_played: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    wins: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    losses: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Projections
    projected_wins: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    pythagorean_wins: Mapped[float | None] = mapped_column(Float, nullable=True)  # scaled to games played
    pythagorean_win_pct: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Rankings
    division_rank: Mapped[int | None] = mapped_column(Integer, nullable=True)
    league_rank: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sport_rank: Mapped[int | None] = mapped_column(Integer, nullable=True)
    wild_card_rank: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Games back ("-" or half-game strings)
    games_back: Mapped[str | None] = mapped_column(String(10), nullable=True)
    division_games_back: Mapped[str | None] = mapped_column(String(10), nullable=True)
    league_games_back: Mapped[str | None] = mapped_column(String(10), nullable=True)
    sport_games_back: Mapped[str | None] = mapped_column(String(10), nullable=True)
    wild_card_games_back: Mapped[str | None] = mapped_column(String(10), nullable=True)

    # Runs
    runs_scored: Mapped[int | None] = mapped_column(Integer, nullable=True)
    runs_allowed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    run_differential: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Streak
    streak_code: Mapped[str | None] = mapped_column(String(5), nullable=True)  # "W3"
    streak_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    streak_type: Mapped[str | None] = mapped_column(String(10), nullable=True)  # wins, losses

    # Playoff status
    clinched: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    clinch_indicator: Mapped[str | None] = mapped_column(String(5), nullable=True)
    division_champ: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    division_leader: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    eliminated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    has_wildcard: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    wild_card_leader: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # Raw records from the API: {"home": {"wins", "losses", "pct"}, ...}
    splits: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    expected_record: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    league_record: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    team: Mapped[Team] = relationship(Team)

    __table_args__ = (
        Index("idx_team_standings_unique", "date", "season", "team_id", unique=True),
        Index("idx_team_standings_season_date", "season", "date"),
        Index("idx_team_standings_team_date", "team_id", "date"),
    )
