"""Team win-total line database model."""

from datetime import datetime

from sqlalchemy import String, Float, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spreadsontoast.database import Base, utcnow
from spreadsontoast.models.team import Team


class TeamLine(Base):
    """Preseason over/under win total for a team."""

    __tablename__ = "team_lines"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    season: Mapped[str] = mapped_column(String(4), nullable=False)
    sport: Mapped[str] = mapped_column(String(10), nullable=False, default="MLB")
    team_id: Mapped[int] = mapped_column(ForeignKey("teams.id"), nullable=False)
    line: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    team: Mapped[Team] = relationship(Team)

    __table_args__ = (
        Index("idx_team_lines_unique", "season", "sport", "team_id", unique=True),
    )
