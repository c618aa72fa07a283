"""Exhibition Service — main exhibition workflows: current, registration, edit, archive.

Invariants:
    - register_main_exhibition inserts the exhibition AND its top-50 snapshot in
      one transaction: an exhibition never exists without its archive rows
    - edit_main_exhibition overwrites the full record; absent optional fields become null
    - Image removal is idempotent (deleting a missing id is not an error)
    - Reads never write

Design Decisions:
    - Snapshot ids come from the same ranking query as the top-liked listing,
      so the archive matches what users saw at registration time
    - Services return ORM rows / dicts; routes shape the JSON envelopes
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from gradation.core.domain_types import GradationExhibitionId
from gradation.core.exhibition_rules import (
    PAST_ARTS_PAGE_SIZE, RECENT_EXHIBITION_LIMIT, TOP_LIKED_ART_LIMIT, page_offset,
)
from gradation.infrastructure.database import transaction
from gradation.models.gradation_exhibition import GradationExhibition
from gradation.models.gradation_exhibition_image import GradationExhibitionImage
from gradation.repositories.exhibition_repository import ExhibitionRepository
from gradation.schemas.gradation import (
    GradationCreate, GradationImageCreate, GradationUpdate,
)

logger = logging.getLogger(__name__)


class ExhibitionService:
    """Main exhibition ("gradation") workflows."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.exhibitions = ExhibitionRepository(db)

    async def get_current_exhibition(
        self,
    ) -> tuple[GradationExhibition, list[GradationExhibitionImage]] | None:
        """Newest exhibition with its venue images, or None before the first season."""
        exhibition = await self.exhibitions.find_current()
        if exhibition is None:
            return None
        images = await self.exhibitions.find_images(exhibition.id)
        return exhibition, images

    async def register_main_exhibition(
        self, data: GradationCreate,
    ) -> GradationExhibition:
        """Publish a new season and archive the current top-liked artworks into it."""
        async with transaction(self.db):
            exhibition = await self.exhibitions.save(
                GradationExhibition(**data.model_dump()),
            )
            art_ids = await self.exhibitions.find_top_liked_art_ids(
                TOP_LIKED_ART_LIMIT,
            )
            if art_ids:
                await self.exhibitions.save_past_entries(exhibition.id, art_ids)
        logger.info(
            f"Registered exhibition '{exhibition.title}' with {len(art_ids)} archived arts",
            extra={"exhibition_id": exhibition.id, "art_count": len(art_ids)},
        )
        return exhibition

    async def register_exhibition_image(
        self, data: GradationImageCreate,
    ) -> GradationExhibitionImage:
        async with transaction(self.db):
            image = await self.exhibitions.save_image(
                GradationExhibitionImage(**data.model_dump()),
            )
        return image

    async def edit_main_exhibition(
        self, exhibition_id: GradationExhibitionId, data: GradationUpdate,
    ) -> int:
        """Replace every editable field of one exhibition. Returns rows matched."""
        async with transaction(self.db):
            matched = await self.exhibitions.update(exhibition_id, data.model_dump())
        if not matched:
            logger.warning(
                f"Edit matched no exhibition with id {exhibition_id}",
                extra={"exhibition_id": exhibition_id},
            )
        return matched

    async def remove_exhibition_image(self, image_id: int) -> None:
        async with transaction(self.db):
            await self.exhibitions.delete_image(image_id)

    async def get_recent_exhibitions(self) -> list[GradationExhibition]:
        return await self.exhibitions.find_recent(RECENT_EXHIBITION_LIMIT)

    async def get_top_liked_artworks(self) -> list[dict]:
        return await self.exhibitions.find_top_liked_arts(TOP_LIKED_ART_LIMIT)

    async def get_past_exhibitions(self) -> list[dict]:
        return await self.exhibitions.find_past_exhibitions()

    async def get_exhibition_artworks(
        self, exhibition_id: GradationExhibitionId, cursor: int,
    ) -> tuple[list[dict], int]:
        """One page of an exhibition's archive plus the archive's total size."""
        arts = await self.exhibitions.find_past_arts(
            exhibition_id, page_offset(cursor), PAST_ARTS_PAGE_SIZE,
        )
        total = await self.exhibitions.count_past_arts(exhibition_id)
        return arts, total
