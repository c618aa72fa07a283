"""UniversityExhibitionImage ORM — photos attached to a university submission."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gradation.db.base import Base


class UniversityExhibitionImage(Base):
    __tablename__ = "university_exhibition_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    img_name: Mapped[str] = mapped_column(String(255), nullable=False)
    img_path: Mapped[str] = mapped_column(String(500), nullable=False)
    university_exhibition_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("university_exhibitions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
