"""Ballpark database model."""

from datetime import datetime

from sqlalchemy import String, Integer, Float, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spreadsontoast.database import Base, utcnow
from spreadsontoast.models.team import Team


class Ballpark(Base):
    """Home venue of a team."""

    __tablename__ = "ballparks"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    mlb_venue_id: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    sport: Mapped[str] = mapped_column(String(10), nullable=False, default="MLB")
    team_id: Mapped[int] = mapped_column(ForeignKey("teams.id"), nullable=False)
    city: Mapped[str] = mapped_column(String(50), nullable=False)
    state: Mapped[str] = mapped_column(String(2), nullable=False)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)
    elevation: Mapped[int] = mapped_column(Integer, nullable=False)  # feet above sea level
    field_orientation: Mapped[int] = mapped_column(Integer, nullable=False)  # degrees, home plate to CF
    roof_type: Mapped[str] = mapped_column(String(15), nullable=False)  # open, retractable, dome

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    team: Mapped[Team] = relationship(Team)
