"""PastExhibition ORM — artwork snapshotted into a main exhibition at creation.

Invariants:
    - Created only by ExhibitionService.register_main_exhibition, never edited
    - (gradation_exhibition_id, art_id) is unique: an art appears once per exhibition

Design Decisions:
    - Snapshot rows instead of recomputing rankings: likes keep changing after
      an exhibition opens, the archive must not
"""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from gradation.db.base import Base


class PastExhibition(Base):
    """Join row between a main exhibition and an archived artwork."""
    __tablename__ = "past_exhibitions"
    __table_args__ = (
        UniqueConstraint(
            "gradation_exhibition_id", "art_id",
            name="uq_past_exhibitions_exhibition_art",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    gradation_exhibition_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("gradation_exhibitions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    art_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("arts.id", ondelete="CASCADE"), nullable=False,
    )
