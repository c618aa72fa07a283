"""Art ORM — artwork owned by the artwork-management subsystem.

Invariants:
    - Read-only from this service: ranked by like count, snapshotted into
      past exhibitions, never written here

Design Decisions:
    - Mapped locally so ranking and archive joins stay in the ORM
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gradation.db.base import Base


class Art(Base):
    __tablename__ = "arts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    art_title: Mapped[str] = mapped_column(String(200), nullable=False)
    art_category: Mapped[str | None] = mapped_column(String(50), nullable=True)
    art_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    art_img_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    art_img_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
