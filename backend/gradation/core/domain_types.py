"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Entity ids are integer surrogate keys wrapped in NewType
    - All valid states encoded as Enums — no raw string matching
    - ExhibitionState is derived at read time and never persisted

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

GradationExhibitionId = NewType("GradationExhibitionId", int)
UniversityExhibitionId = NewType("UniversityExhibitionId", int)
ArtId = NewType("ArtId", int)
UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ExhibitionState(str, Enum):
    """Display state of a university exhibition relative to the current time."""
    UPCOMING = "upcoming"
    ONGOING = "ongoing"


class ApprovalStatus(str, Enum):
    """Review state of a university submission — maps to DB `status` column."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LikeOutcome(str, Enum):
    """Result of a like registration. Both members are successes."""
    LIKED = "liked"
    ALREADY_LIKED = "already_liked"
