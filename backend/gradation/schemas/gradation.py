"""Gradation Schemas — main exhibition, venue image, ranking and archive payloads.

Invariants:
    - GradationCreate and GradationUpdate carry the complete record: an edit
      overwrites every field, absent optional fields become null
    - title is stripped and non-empty; date starts with a 4-digit year
    - TopLikedArt is a read-only projection of the artwork subsystem's data
"""

from datetime import datetime

from pydantic import Field, field_validator

from gradation.schemas.common import CamelModel


class GradationFields(CamelModel):
    """Every editable column of a main exhibition."""
    title: str = Field(min_length=1, max_length=200)
    art: str | None = Field(None, max_length=200)
    category: str | None = Field(None, max_length=50)
    time: str | None = Field(None, max_length=100)
    fee: str | None = Field(None, max_length=50)
    tel: str | None = Field(None, max_length=30)
    address: str | None = None
    date: str = Field(pattern=r"^\d{4}", max_length=30)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class GradationCreate(GradationFields):
    """Main exhibition registration request."""


class GradationUpdate(GradationFields):
    """Full-record replacement; the id comes from the path."""


class GradationRead(GradationFields):
    id: int
    created_at: datetime


class GradationImageCreate(CamelModel):
    gradation_exhibition_id: int = Field(ge=1)
    img_name: str = Field(min_length=1, max_length=255)
    img_path: str = Field(min_length=1, max_length=500)


class GradationImageRead(CamelModel):
    id: int
    img_name: str
    img_path: str
    gradation_exhibition_id: int


class RecentExhibition(CamelModel):
    """Entry of the recent-exhibitions menu, title rendered as '<year> <title>'."""
    id: int
    title: str


class TopLikedArt(CamelModel):
    """Artwork ranked by like count."""
    id: int
    art_title: str
    art_category: str | None = None
    art_img_name: str | None = None
    art_img_path: str | None = None
    user_id: int
    like_count: int = 0


class PastExhibitionSummary(CamelModel):
    """Main exhibition that owns an archive, with its archived art count."""
    id: int
    title: str
    date: str
    art_count: int


class PastArt(CamelModel):
    """One archived artwork of a past exhibition."""
    id: int
    gradation_exhibition_id: int
    art_id: int
    art_title: str
    art_category: str | None = None
    art_img_name: str | None = None
    art_img_path: str | None = None
    user_id: int
