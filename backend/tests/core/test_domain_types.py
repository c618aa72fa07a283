"""Domain Types — verifies identity wrappers and enum values.

Tests:
    - NewType wrappers exist and are callable
    - ExhibitionState has exactly two states (upcoming, ongoing)
    - ApprovalStatus values match the stored `status` column
    - str Enums compare equal to their wire values
"""

from gradation.core.domain_types import (
    ApprovalStatus,
    ArtId,
    ExhibitionState,
    GradationExhibitionId,
    LikeOutcome,
    UniversityExhibitionId,
    UserId,
)


def test_identity_types_wrap_int():
    assert GradationExhibitionId(1) == 1
    assert UniversityExhibitionId(2) == 2
    assert ArtId(4) == 4
    assert UserId(5) == 5


def test_exhibition_state_has_two_states():
    assert set(ExhibitionState) == {
        ExhibitionState.UPCOMING, ExhibitionState.ONGOING,
    }


def test_approval_status_values():
    assert ApprovalStatus.PENDING.value == "pending"
    assert ApprovalStatus.APPROVED.value == "approved"
    assert ApprovalStatus.REJECTED.value == "rejected"


def test_like_outcome_has_two_successes():
    assert set(LikeOutcome) == {LikeOutcome.LIKED, LikeOutcome.ALREADY_LIKED}


def test_enums_compare_to_wire_values():
    assert ExhibitionState.UPCOMING == "upcoming"
    assert ApprovalStatus("approved") is ApprovalStatus.APPROVED
