"""University ORM — deduplicated by exact name.

Invariants:
    - university_name is unique
    - The first submission for a name supplies the logo; later ones reuse it
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gradation.db.base import Base


class University(Base):
    """University that submits exhibitions."""
    __tablename__ = "universities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    university_name: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    logo_img_name: Mapped[str] = mapped_column(String(255), nullable=False)
    logo_img_path: Mapped[str] = mapped_column(String(500), nullable=False)
