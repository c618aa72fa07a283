"""GradationExhibition ORM — the platform's flagship exhibition, one per season.

Invariants:
    - The row with the greatest created_at (then id) is the current exhibition
    - created_at is server-assigned and never edited; `date` is the display date
    - title and date are non-nullable; every other field may be cleared by an edit

Design Decisions:
    - No is_active flag: "current" is an ordering rule in ExhibitionRepository.find_current
    - `date` kept as free text (e.g. "2025-06-01"): only its year prefix is interpreted
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gradation.db.base import Base


class GradationExhibition(Base):
    """Main exhibition record."""
    __tablename__ = "gradation_exhibitions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    art: Mapped[str | None] = mapped_column(String(200), nullable=True)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)
    time: Mapped[str | None] = mapped_column(String(100), nullable=True)
    fee: Mapped[str | None] = mapped_column(String(50), nullable=True)
    tel: Mapped[str | None] = mapped_column(String(30), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[str] = mapped_column(String(30), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
