"""UniversityExhibition ORM — an exhibition submitted by a university.

Invariants:
    - Reaches its University through major_id -> majors.university_id
    - request_date is stamped by the service at registration
    - status tracks approval (pending -> approved | rejected); display state
      (upcoming/ongoing) is derived at read time and has no column

Design Decisions:
    - user_id is a plain integer: users live in another subsystem
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gradation.core.domain_types import ApprovalStatus
from gradation.db.base import Base


class UniversityExhibition(Base):
    """University exhibition submission."""
    __tablename__ = "university_exhibitions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    request_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ApprovalStatus.PENDING.value,
    )
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    major_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("majors.id", ondelete="CASCADE"), nullable=False,
    )
