"""University Exhibition Service — submissions, listing enrichment and likes.

Invariants:
    - Registration is all-or-nothing: university (when new), major and
      submission are written in one transaction
    - A known university name reuses its id and logo; an unknown one gets the
      default logo and exactly one new University row
    - The major is always inserted, whichever branch the university took
    - register_like never stores two rows for one (exhibition, user) pair; a
      unique-constraint conflict on insert means another request won the race
      and is reported as ALREADY_LIKED
    - remove_like is idempotent

Design Decisions:
    - Listing enrichment is batched: one listing query (like column joined in)
      plus one image query for all rows, instead of per-row lookups
    - Clock injected (callable) so state derivation is testable without sleeping
"""

import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gradation.core.domain_types import (
    ApprovalStatus, LikeOutcome, UniversityExhibitionId, UserId,
)
from gradation.core.exhibition_rules import (
    DEFAULT_LOGO_IMG_NAME, DEFAULT_LOGO_IMG_PATH, derive_exhibition_state,
)
from gradation.infrastructure.database import transaction
from gradation.models.major import Major
from gradation.models.university import University
from gradation.models.university_exhibition import UniversityExhibition
from gradation.models.university_exhibition_image import UniversityExhibitionImage
from gradation.models.university_like import UniversityLike
from gradation.repositories.university_repository import UniversityRepository
from gradation.schemas.university import (
    UniversityExhibitionCreate,
    UniversityExhibitionRegistered,
    UniversityExhibitionSummary,
    UniversityExhibitionView,
    UniversityImageCreate,
    UniversityImageRead,
    UniversityLikeRequest,
    UniversityListFilter,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UniversityExhibitionService:
    """University submission workflows."""

    def __init__(
        self, db: AsyncSession, clock: Callable[[], datetime] = _utc_now,
    ):
        self.db = db
        self.universities = UniversityRepository(db)
        self._clock = clock

    # ─── Registration ───────────────────────────────────────────

    async def register_university_exhibition(
        self, data: UniversityExhibitionCreate,
    ) -> UniversityExhibitionRegistered:
        async with transaction(self.db):
            university = await self.universities.find_university_by_name(
                data.university_name,
            )
            if university is None:
                university = await self.universities.save_university(University(
                    university_name=data.university_name,
                    logo_img_name=DEFAULT_LOGO_IMG_NAME,
                    logo_img_path=DEFAULT_LOGO_IMG_PATH,
                ))
                logger.info(f"Registered new university '{university.university_name}'")

            major = await self.universities.save_major(Major(
                major_name=data.major_name, university_id=university.id,
            ))
            exhibition = await self.universities.save_exhibition(UniversityExhibition(
                title=data.title,
                explanation=data.explanation,
                location=data.location,
                start_date=data.start_date,
                end_date=data.end_date,
                request_date=self._clock(),
                status=ApprovalStatus.PENDING.value,
                user_id=data.user_id,
                major_id=major.id,
            ))

        logger.info(
            f"University exhibition '{exhibition.title}' submitted",
            extra={
                "university_exhibition_id": exhibition.id,
                "user_id": exhibition.user_id,
            },
        )
        return UniversityExhibitionRegistered(
            id=exhibition.id,
            university_id=university.id,
            university_name=university.university_name,
            logo_img_name=university.logo_img_name,
            logo_img_path=university.logo_img_path,
            major_id=major.id,
            major_name=major.major_name,
            title=exhibition.title,
            explanation=exhibition.explanation,
            location=exhibition.location,
            start_date=exhibition.start_date,
            end_date=exhibition.end_date,
            request_date=exhibition.request_date,
            status=exhibition.status,
            user_id=exhibition.user_id,
        )

    async def register_university_exhibition_image(
        self, data: UniversityImageCreate,
    ) -> UniversityExhibitionImage | None:
        """Store an image when both name and path are given; otherwise do nothing."""
        if not (data.img_name and data.img_path):
            return None
        async with transaction(self.db):
            image = await self.universities.save_image(UniversityExhibitionImage(
                img_name=data.img_name,
                img_path=data.img_path,
                university_exhibition_id=data.university_exhibition_id,
            ))
        return image

    # ─── Listings ───────────────────────────────────────────────

    async def get_university_exhibitions(
        self, filters: UniversityListFilter,
    ) -> list[UniversityExhibitionView]:
        rows = await self.universities.find_exhibitions(
            viewer_id=(
                UserId(filters.user_id) if filters.user_id is not None else None
            ),
            university_name=filters.university_name,
            major_name=filters.major_name,
            keyword=filters.keyword,
            status=filters.status.value if filters.status else None,
        )
        images = await self.universities.find_images_for(
            [UniversityExhibitionId(row["id"]) for row in rows],
        )
        images_by_exhibition: dict[int, list[UniversityImageRead]] = defaultdict(list)
        for image in images:
            images_by_exhibition[image.university_exhibition_id].append(
                UniversityImageRead.model_validate(image),
            )

        now = self._clock()
        views = []
        for row in rows:
            like_id = row.pop("like_id")
            views.append(UniversityExhibitionView(
                **row,
                images=images_by_exhibition[row["id"]],
                liked=like_id is not None,
                state=derive_exhibition_state(row["start_date"], now),
            ))
        return views

    async def get_university_exhibition_images(
        self, exhibition_id: UniversityExhibitionId,
    ) -> list[UniversityExhibitionImage]:
        return await self.universities.find_images(exhibition_id)

    async def get_submission_status(
        self, user_id: UserId,
    ) -> list[UniversityExhibitionSummary]:
        rows = await self.universities.find_by_user(user_id)
        return [UniversityExhibitionSummary(**row) for row in rows]

    async def get_liked_exhibitions(
        self, user_id: UserId,
    ) -> list[UniversityExhibitionSummary]:
        rows = await self.universities.find_liked_by_user(user_id)
        return [UniversityExhibitionSummary(**row) for row in rows]

    # ─── Likes ──────────────────────────────────────────────────

    async def register_like(self, like: UniversityLikeRequest) -> LikeOutcome:
        if await self.is_liked(like):
            return LikeOutcome.ALREADY_LIKED
        try:
            async with transaction(self.db):
                await self.universities.save_like(UniversityLike(
                    university_exhibition_id=like.university_exhibition_id,
                    user_id=like.user_id,
                ))
        except IntegrityError:
            # Unique constraint is the race guard; anything else (FK) propagates
            if await self.is_liked(like):
                logger.info(
                    "Concurrent like resolved as already liked",
                    extra={
                        "university_exhibition_id": like.university_exhibition_id,
                        "user_id": like.user_id,
                    },
                )
                return LikeOutcome.ALREADY_LIKED
            raise
        logger.info(
            "University exhibition liked",
            extra={
                "university_exhibition_id": like.university_exhibition_id,
                "user_id": like.user_id,
            },
        )
        return LikeOutcome.LIKED

    async def is_liked(self, like: UniversityLikeRequest) -> bool:
        return await self.universities.like_exists(
            UniversityExhibitionId(like.university_exhibition_id),
            UserId(like.user_id),
        )

    async def remove_like(self, like: UniversityLikeRequest) -> None:
        async with transaction(self.db):
            removed = await self.universities.delete_like(
                UniversityExhibitionId(like.university_exhibition_id),
                UserId(like.user_id),
            )
        if removed:
            logger.info(
                "University exhibition unliked",
                extra={
                    "university_exhibition_id": like.university_exhibition_id,
                    "user_id": like.user_id,
                },
            )
