"""GradationExhibitionImage ORM — venue photos owned by a main exhibition.

Invariants:
    - Always belongs to a GradationExhibition (FK, ON DELETE CASCADE)
    - Deleted independently by id
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gradation.db.base import Base


class GradationExhibitionImage(Base):
    """Image attached to a main exhibition."""
    __tablename__ = "gradation_exhibition_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    img_name: Mapped[str] = mapped_column(String(255), nullable=False)
    img_path: Mapped[str] = mapped_column(String(500), nullable=False)
    gradation_exhibition_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("gradation_exhibitions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
