"""Game database model."""

from datetime import datetime, date

from sqlalchemy import String, Integer, Boolean, DateTime, Date, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spreadsontoast.database import Base, utcnow
from spreadsontoast.models.enums import GameState, GameType
from spreadsontoast.models.team import Team


class Game(Base):
    """One scheduled or played game, keyed by the MLB game pk."""

    __tablename__ = "games"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    game_pk: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    season: Mapped[str] = mapped_column(String(4), nullable=False)
    sport: Mapped[str] = mapped_column(String(10), nullable=False, default="MLB")
    official_date: Mapped[date] = mapped_column(Date, nullable=False)
    game_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    game_type: Mapped[str] = mapped_column(String(30), nullable=False, default=GameType.REGULAR_SEASON.value)

    # Series
    series_description: Mapped[str | None] = mapped_column(String(100), nullable=True)
    series_game_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    games_in_series: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Teams (internal reference plus MLB team ID)
    home_team_id: Mapped[int | None] = mapped_column(ForeignKey("teams.id"), nullable=True)
    away_team_id: Mapped[int | None] = mapped_column(ForeignKey("teams.id"), nullable=True)
    home_team_mlb_id: Mapped[int] = mapped_column(Integer, nullable=False)
    away_team_mlb_id: Mapped[int] = mapped_column(Integer, nullable=False)
    home_team_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    away_team_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # League record of each side going into the game
    home_wins: Mapped[int | None] = mapped_column(Integer, nullable=True)
    home_losses: Mapped[int | None] = mapped_column(Integer, nullable=True)
    home_win_pct: Mapped[str | None] = mapped_column(String(5), nullable=True)  # ".512"
    away_wins: Mapped[int | None] = mapped_column(Integer, nullable=True)
    away_losses: Mapped[int | None] = mapped_column(Integer, nullable=True)
    away_win_pct: Mapped[str | None] = mapped_column(String(5), nullable=True)

    # Line score
    home_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    away_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    home_hits: Mapped[int | None] = mapped_column(Integer, nullable=True)
    away_hits: Mapped[int | None] = mapped_column(Integer, nullable=True)
    home_errors: Mapped[int | None] = mapped_column(Integer, nullable=True)
    away_errors: Mapped[int | None] = mapped_column(Integer, nullable=True)
    home_is_winner: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    away_is_winner: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # Status
    abstract_game_state: Mapped[str] = mapped_column(String(10), nullable=False, default=GameState.PREVIEW.value)
    detailed_state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status_code: Mapped[str | None] = mapped_column(String(5), nullable=True)

    # Venue
    venue_mlb_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    venue_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    day_night: Mapped[str | None] = mapped_column(String(5), nullable=True)  # day, night
    double_header: Mapped[str] = mapped_column(String(1), nullable=False, default="N")  # N, S, Y
    game_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    scheduled_innings: Mapped[int] = mapped_column(Integer, nullable=False, default=9)
    public_facing: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    tiebreaker: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    if_necessary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    home_team: Mapped[Team | None] = relationship(Team, foreign_keys=[home_team_id])
    away_team: Mapped[Team | None] = relationship(Team, foreign_keys=[away_team_id])

    __table_args__ = (
        Index("idx_games_season_date", "season", "official_date"),
        Index("idx_games_home_team_mlb", "home_team_mlb_id"),
        Index("idx_games_away_team_mlb", "away_team_mlb_id"),
    )

    @property
    def is_final(self) -> bool:
        return self.abstract_game_state == GameState.FINAL.value or self.status_code == "F"

    @property
    def home_runs_hits_errors(self) -> tuple[int, int, int]:
        return (self.home_score or 0, self.home_hits or 0, self.home_errors or 0)

    @property
    def away_runs_hits_errors(self) -> tuple[int, int, int]:
        return (self.away_score or 0, self.away_hits or 0, self.away_errors or 0)
