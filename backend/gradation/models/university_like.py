"""UniversityLike ORM — a user's like on a university exhibition.

Invariants:
    - (university_exhibition_id, user_id) is unique: at most one like per pair
    - The unique constraint is the authoritative guard against concurrent
      duplicate likes; the service pre-check only avoids a doomed insert
"""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from gradation.db.base import Base


class UniversityLike(Base):
    __tablename__ = "university_likes"
    __table_args__ = (
        UniqueConstraint(
            "university_exhibition_id", "user_id",
            name="uq_university_likes_exhibition_user",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    university_exhibition_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("university_exhibitions.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
