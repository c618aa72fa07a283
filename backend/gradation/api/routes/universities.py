"""University Routes — submissions, listing, images, likes and per-user views.

Invariants:
    - A failed registration answers 409 and echoes the submission under `status`
    - POST university/like answers 200 for both outcomes; `isLiked` is true when
      the pair was ALREADY liked (nothing written), false when newly stored
    - DELETE university/unlike answers 200 whether or not the like existed
    - POST university/list accepts an empty body (no filters, no viewer)
"""

import logging

from fastapi import APIRouter, Body, Depends

from gradation.api.routes.route_helpers import get_university_service, server_errors
from gradation.core.domain_types import LikeOutcome, UniversityExhibitionId, UserId
from gradation.core.errors import ErrorContext, RegistrationConflictError
from gradation.schemas.university import (
    UniversityExhibitionCreate,
    UniversityImageCreate,
    UniversityImageRead,
    UniversityLikeRequest,
    UniversityListFilter,
)
from gradation.services.university_service import UniversityExhibitionService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/exhibitions/api", tags=["university"])


def _like_context(body: UniversityLikeRequest) -> ErrorContext:
    return ErrorContext(
        university_exhibition_id=UniversityExhibitionId(body.university_exhibition_id),
        user_id=UserId(body.user_id),
    )


@router.post("/university/register")
async def register_university_exhibition(
    body: UniversityExhibitionCreate,
    service: UniversityExhibitionService = Depends(get_university_service),
):
    """Submit a university exhibition (university deduplicated by name)."""
    try:
        registered = await service.register_university_exhibition(body)
    except Exception as e:
        logger.error(f"University registration failed: {e}", exc_info=True)
        raise RegistrationConflictError(
            str(e),
            echo={"status": body.to_wire()},
            context=ErrorContext(user_id=UserId(body.user_id)),
        ) from e
    return {"message": "Registration completed.", "status": registered.to_wire()}


@router.post("/university/image")
async def register_university_image(
    body: UniversityImageCreate,
    service: UniversityExhibitionService = Depends(get_university_service),
):
    with server_errors({"status": body.to_wire()}):
        image = await service.register_university_exhibition_image(body)
    if image is None:
        return {"message": "Image skipped: name and path are required.", "saved": False}
    return {
        "message": "Image registered.",
        "saved": True,
        "image": UniversityImageRead.model_validate(image).to_wire(),
    }


@router.post("/university/list")
async def list_university_exhibitions(
    filters: UniversityListFilter | None = Body(None),
    service: UniversityExhibitionService = Depends(get_university_service),
):
    """Submissions with images, the viewer's like flag and upcoming/ongoing state."""
    with server_errors():
        views = await service.get_university_exhibitions(
            filters or UniversityListFilter(),
        )
    return {
        "university": [v.to_wire() for v in views],
        "message": "University exhibitions loaded.",
    }


@router.get("/university/{university_exhibition_id}/images")
async def get_university_images(
    university_exhibition_id: int,
    service: UniversityExhibitionService = Depends(get_university_service),
):
    target = UniversityExhibitionId(university_exhibition_id)
    with server_errors(context=ErrorContext(university_exhibition_id=target)):
        images = await service.get_university_exhibition_images(target)
    return {
        "images": [UniversityImageRead.model_validate(i).to_wire() for i in images],
        "message": "Images loaded.",
    }


@router.post("/university/like")
async def like_university_exhibition(
    body: UniversityLikeRequest,
    service: UniversityExhibitionService = Depends(get_university_service),
):
    with server_errors({"status": body.to_wire()}, _like_context(body)):
        outcome = await service.register_like(body)
    if outcome is LikeOutcome.ALREADY_LIKED:
        return {"message": "Already liked.", "status": body.to_wire(), "isLiked": True}
    return {"message": "Like registered.", "status": body.to_wire(), "isLiked": False}


@router.post("/liked")
async def is_liked(
    body: UniversityLikeRequest,
    service: UniversityExhibitionService = Depends(get_university_service),
):
    with server_errors({"status": body.to_wire()}, _like_context(body)):
        liked = await service.is_liked(body)
    return {"message": f"Liked: {str(liked).lower()}", "isLiked": liked}


@router.delete("/university/unlike")
async def unlike_university_exhibition(
    body: UniversityLikeRequest,
    service: UniversityExhibitionService = Depends(get_university_service),
):
    with server_errors({"status": body.to_wire()}, _like_context(body)):
        await service.remove_like(body)
    return {"message": "Like removed.", "status": body.to_wire()}


@router.get("/university/{user_id}/exhibition-status")
async def get_exhibition_status(
    user_id: int,
    service: UniversityExhibitionService = Depends(get_university_service),
):
    """Approval status of every submission the user made."""
    owner = UserId(user_id)
    with server_errors(context=ErrorContext(user_id=owner)):
        submissions = await service.get_submission_status(owner)
    return {
        "message": "Submission status loaded.",
        "statusList": [s.to_wire() for s in submissions],
    }


@router.get("/university/{user_id}/liked-exhibitions")
async def get_liked_exhibitions(
    user_id: int,
    service: UniversityExhibitionService = Depends(get_university_service),
):
    owner = UserId(user_id)
    with server_errors(context=ErrorContext(user_id=owner)):
        liked = await service.get_liked_exhibitions(owner)
    return {
        "message": "Liked exhibitions loaded.",
        "likedExhibitions": [s.to_wire() for s in liked],
    }
