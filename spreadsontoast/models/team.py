"""Team database model."""

from datetime import datetime

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from spreadsontoast.database import Base, utcnow


class Team(Base):
    """Static team metadata, created by the seed script."""

    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    sport: Mapped[str] = mapped_column(String(10), nullable=False, default="MLB", index=True)
    abbreviation: Mapped[str] = mapped_column(String(5), unique=True, nullable=False)  # e.g., "NYY"
    city: Mapped[str] = mapped_column(String(50), nullable=False)  # "New York"
    name: Mapped[str] = mapped_column(String(50), nullable=False)  # "Yankees"
    conference: Mapped[str] = mapped_column(String(2), nullable=False)  # "AL", "NL"
    division: Mapped[str] = mapped_column(String(20), nullable=False)  # "AL_East", ...

    # MLB Stats API team ID
    external_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    primary_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    secondary_color: Mapped[str | None] = mapped_column(String(7), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    @property
    def full_name(self) -> str:
        return f"{self.city} {self.name}"

    @property
    def colors(self) -> dict[str, str] | None:
        if not self.primary_color or not self.secondary_color:
            return None
        return {"primary": self.primary_color, "secondary": self.secondary_color}
