"""Gradation Routes — main exhibition, venue images, rankings and past-exhibition archive.

Invariants:
    - No current exhibition → 409 with a message (not 404)
    - Empty top-liked ranking → 404, distinct from a 500 failure
    - PUT modify/{id} answers with the re-fetched CURRENT exhibition, which
      reflects the edit only when the edited id is the newest one
    - Image deletion answers 200 whether or not the id existed

Design Decisions:
    - Envelopes are plain dicts with camelCase keys (schemas' to_wire)
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from gradation.api.routes.route_helpers import get_exhibition_service, server_errors
from gradation.core.domain_types import GradationExhibitionId
from gradation.core.errors import ErrorContext, ExhibitionNotFoundError
from gradation.core.exhibition_rules import format_recent_title
from gradation.schemas.gradation import (
    GradationCreate,
    GradationImageCreate,
    GradationImageRead,
    GradationRead,
    GradationUpdate,
    PastArt,
    PastExhibitionSummary,
    RecentExhibition,
    TopLikedArt,
)
from gradation.services.exhibition_service import ExhibitionService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/exhibitions/api", tags=["gradation"])


@router.get("/gradation/current")
async def get_current_gradation(
    service: ExhibitionService = Depends(get_exhibition_service),
):
    """Current main exhibition with its venue images."""
    with server_errors():
        current = await service.get_current_exhibition()
    if current is None:
        raise ExhibitionNotFoundError()
    exhibition, images = current
    return {
        "gradation": GradationRead.model_validate(exhibition).to_wire(),
        "images": [GradationImageRead.model_validate(i).to_wire() for i in images],
        "message": "Exhibition loaded successfully.",
    }


@router.post("/gradation/registration")
async def register_gradation(
    body: GradationCreate,
    service: ExhibitionService = Depends(get_exhibition_service),
):
    """Publish a new main exhibition and archive the top-liked artworks into it."""
    with server_errors():
        exhibition = await service.register_main_exhibition(body)
    return {
        "message": "Exhibition registered.",
        "gradation": GradationRead.model_validate(exhibition).to_wire(),
    }


@router.post("/gradation/image")
async def register_gradation_image(
    body: GradationImageCreate,
    service: ExhibitionService = Depends(get_exhibition_service),
):
    with server_errors():
        image = await service.register_exhibition_image(body)
    return {
        "message": "Image registered.",
        "image": GradationImageRead.model_validate(image).to_wire(),
    }


@router.put("/modify/{exhibition_id}")
async def modify_gradation(
    exhibition_id: int,
    body: GradationUpdate,
    service: ExhibitionService = Depends(get_exhibition_service),
):
    """Overwrite one exhibition, then return the current exhibition ({} if none)."""
    target = GradationExhibitionId(exhibition_id)
    with server_errors(context=ErrorContext(exhibition_id=target)):
        await service.edit_main_exhibition(target, body)
        current = await service.get_current_exhibition()
    if current is None:
        return {}
    return GradationRead.model_validate(current[0]).to_wire()


@router.delete("/gradation/image/{image_id}")
async def delete_gradation_image(
    image_id: int,
    service: ExhibitionService = Depends(get_exhibition_service),
):
    with server_errors():
        await service.remove_exhibition_image(image_id)
    return {"message": "Image deleted."}


@router.get("/gradation/recent")
async def get_recent_gradations(
    service: ExhibitionService = Depends(get_exhibition_service),
):
    """Three most recent exhibitions, titled '<year> <title>'."""
    with server_errors():
        exhibitions = await service.get_recent_exhibitions()
    return {
        "exhibitions": [
            RecentExhibition(
                id=e.id, title=format_recent_title(e.date, e.title),
            ).to_wire()
            for e in exhibitions
        ],
        "message": "Recent exhibitions loaded.",
    }


@router.get("/gradation/top-liked-art")
async def get_top_liked_arts(
    service: ExhibitionService = Depends(get_exhibition_service),
):
    """Up to 50 artworks ranked by like count; 404 when there is nothing to rank."""
    with server_errors():
        arts = await service.get_top_liked_artworks()
    if not arts:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "No artworks to rank yet."},
        )
    return [TopLikedArt(**art).to_wire() for art in arts]


@router.get("/gradation/past")
async def get_past_gradations(
    service: ExhibitionService = Depends(get_exhibition_service),
):
    with server_errors():
        exhibitions = await service.get_past_exhibitions()
    return {
        "message": "Past exhibitions loaded.",
        "exhibitions": [PastExhibitionSummary(**e).to_wire() for e in exhibitions],
    }


@router.get("/gradation/past/{exhibition_id}/arts")
async def get_past_gradation_arts(
    exhibition_id: int,
    cursor: int = Query(1, ge=1),
    service: ExhibitionService = Depends(get_exhibition_service),
):
    """One page of a past exhibition's archived artworks; `contents` is the total."""
    echo = {"exhibitionId": exhibition_id, "cursor": cursor}
    target = GradationExhibitionId(exhibition_id)
    with server_errors(echo, ErrorContext(exhibition_id=target)):
        arts, total = await service.get_exhibition_artworks(target, cursor)
    return {
        **echo,
        "arts": [PastArt(**art).to_wire() for art in arts],
        "contents": total,
        "message": "Past exhibition artworks loaded.",
    }
