"""University Schemas — submission, listing, image and like payloads.

Invariants:
    - UniversityExhibitionCreate requires the university and major names;
      logo fields are never accepted from the client
    - end_date may not precede start_date; both are stored as UTC, naive
      input read as UTC
    - UniversityExhibitionView.state is derived, never read from storage
"""

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from gradation.core.domain_types import ApprovalStatus, ExhibitionState
from gradation.core.exhibition_rules import as_utc
from gradation.schemas.common import CamelModel


class UniversityExhibitionCreate(CamelModel):
    """University exhibition submission request."""
    university_name: str = Field(min_length=1, max_length=100)
    major_name: str = Field(min_length=1, max_length=100)
    title: str = Field(min_length=1, max_length=200)
    explanation: str | None = None
    location: str | None = Field(None, max_length=255)
    start_date: datetime
    end_date: datetime
    user_id: int = Field(ge=1)

    @field_validator("university_name", "major_name", "title")
    @classmethod
    def strip_names(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        """Read naive timestamps as UTC."""
        return as_utc(v)

    @model_validator(mode="after")
    def validate_schedule(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not precede startDate")
        return self


class UniversityExhibitionRegistered(CamelModel):
    """Submission as stored, echoed back after registration."""
    id: int
    university_id: int
    university_name: str
    logo_img_name: str
    logo_img_path: str
    major_id: int
    major_name: str
    title: str
    explanation: str | None = None
    location: str | None = None
    start_date: datetime
    end_date: datetime
    request_date: datetime
    status: ApprovalStatus
    user_id: int


class UniversityImageCreate(CamelModel):
    """Image for a submission. Missing name or path makes the request a no-op."""
    university_exhibition_id: int = Field(ge=1)
    img_name: str | None = Field(None, max_length=255)
    img_path: str | None = Field(None, max_length=500)


class UniversityImageRead(CamelModel):
    id: int
    img_name: str
    img_path: str
    university_exhibition_id: int


class UniversityListFilter(CamelModel):
    """Optional filters for the submission listing.

    user_id identifies the viewer: it decides each row's `liked` flag and
    never narrows the result.
    """
    user_id: int | None = None
    university_name: str | None = None
    major_name: str | None = None
    keyword: str | None = None
    status: ApprovalStatus | None = None


class UniversityExhibitionSummary(CamelModel):
    """Submission joined to its university and major."""
    id: int
    title: str
    explanation: str | None = None
    location: str | None = None
    start_date: datetime
    end_date: datetime
    request_date: datetime
    status: ApprovalStatus
    user_id: int
    university_id: int
    university_name: str
    logo_img_name: str
    logo_img_path: str
    major_id: int
    major_name: str


class UniversityExhibitionView(UniversityExhibitionSummary):
    """Listing row enriched with images, viewer like flag and display state."""
    images: list[UniversityImageRead] = []
    liked: bool = False
    state: ExhibitionState


class UniversityLikeRequest(CamelModel):
    """(exhibition, user) pair identifying one like."""
    university_exhibition_id: int = Field(ge=1)
    user_id: int = Field(ge=1)
