"""Season database model."""

from datetime import datetime, date

from sqlalchemy import String, Date, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from spreadsontoast.database import Base, utcnow


class Season(Base):
    """One row per sport and year; its date window gates the sync jobs."""

    __tablename__ = "seasons"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    season: Mapped[str] = mapped_column(String(4), nullable=False)  # "2026"
    sport: Mapped[str] = mapped_column(String(10), nullable=False, default="MLB")
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    lock_date: Mapped[date] = mapped_column(Date, nullable=False)  # picks lock
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Upcoming")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    __table_args__ = (
        Index("idx_seasons_season_sport", "season", "sport", unique=True),
    )