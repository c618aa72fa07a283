"""ArtLike ORM — a user's like on an artwork (owned by the artwork subsystem)."""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from gradation.db.base import Base


class ArtLike(Base):
    __tablename__ = "art_likes"
    __table_args__ = (
        UniqueConstraint("art_id", "user_id", name="uq_art_likes_art_user"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    art_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("arts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
