"""Exhibition Repository — queries for main exhibitions, venue images, rankings and archive.

Invariants:
    - One method per named query; no business rules, no commits (services own transactions)
    - Writes flush so generated ids are available inside the open transaction
    - "Not found" is None or an empty list, never an exception
    - Current exhibition = ORDER BY created_at DESC, id DESC LIMIT 1
    - Art ranking = like count DESC, art id ASC; unliked arts rank with count 0

Design Decisions:
    - Projections (ranking, archive pages) returned as plain dicts: they span
      several tables and map 1:1 onto response schemas
"""

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gradation.core.domain_types import ArtId, GradationExhibitionId
from gradation.models.art import Art
from gradation.models.art_like import ArtLike
from gradation.models.gradation_exhibition import GradationExhibition
from gradation.models.gradation_exhibition_image import GradationExhibitionImage
from gradation.models.past_exhibition import PastExhibition

_NEWEST_FIRST = (
    GradationExhibition.created_at.desc(), GradationExhibition.id.desc(),
)


class ExhibitionRepository:
    """Data access for the main-exhibition side of the platform."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Main exhibitions ───────────────────────────────────────

    async def find_current(self) -> GradationExhibition | None:
        result = await self.db.execute(
            select(GradationExhibition).order_by(*_NEWEST_FIRST).limit(1),
        )
        return result.scalar_one_or_none()

    async def find_recent(self, limit: int) -> list[GradationExhibition]:
        result = await self.db.execute(
            select(GradationExhibition).order_by(*_NEWEST_FIRST).limit(limit),
        )
        return list(result.scalars().all())

    async def save(self, exhibition: GradationExhibition) -> GradationExhibition:
        self.db.add(exhibition)
        await self.db.flush()
        return exhibition

    async def update(
        self, exhibition_id: GradationExhibitionId, fields: dict,
    ) -> int:
        """Overwrite every given column of one exhibition. Returns rows matched."""
        result = await self.db.execute(
            update(GradationExhibition)
            .where(GradationExhibition.id == exhibition_id)
            .values(**fields)
            .execution_options(synchronize_session="fetch"),
        )
        return result.rowcount

    # ─── Venue images ───────────────────────────────────────────

    async def find_images(
        self, exhibition_id: GradationExhibitionId,
    ) -> list[GradationExhibitionImage]:
        result = await self.db.execute(
            select(GradationExhibitionImage)
            .where(GradationExhibitionImage.gradation_exhibition_id == exhibition_id)
            .order_by(GradationExhibitionImage.id),
        )
        return list(result.scalars().all())

    async def save_image(
        self, image: GradationExhibitionImage,
    ) -> GradationExhibitionImage:
        self.db.add(image)
        await self.db.flush()
        return image

    async def delete_image(self, image_id: int) -> int:
        result = await self.db.execute(
            delete(GradationExhibitionImage)
            .where(GradationExhibitionImage.id == image_id),
        )
        return result.rowcount

    # ─── Art ranking ────────────────────────────────────────────

    def _ranked_arts(self, *columns):
        like_count = func.count(ArtLike.id)
        return (
            select(*columns, like_count.label("like_count"))
            .select_from(Art)
            .outerjoin(ArtLike, ArtLike.art_id == Art.id)
            .group_by(Art.id)
            .order_by(like_count.desc(), Art.id.asc())
        )

    async def find_top_liked_art_ids(self, limit: int) -> list[ArtId]:
        result = await self.db.execute(self._ranked_arts(Art.id).limit(limit))
        return [ArtId(row.id) for row in result]

    async def find_top_liked_arts(self, limit: int) -> list[dict]:
        result = await self.db.execute(
            self._ranked_arts(
                Art.id, Art.art_title, Art.art_category,
                Art.art_img_name, Art.art_img_path, Art.user_id,
            ).limit(limit),
        )
        return [dict(row) for row in result.mappings()]

    # ─── Past exhibition archive ────────────────────────────────

    async def save_past_entries(
        self, exhibition_id: GradationExhibitionId, art_ids: list[ArtId],
    ) -> None:
        self.db.add_all([
            PastExhibition(gradation_exhibition_id=exhibition_id, art_id=art_id)
            for art_id in art_ids
        ])
        await self.db.flush()

    async def find_past_exhibitions(self) -> list[dict]:
        art_count = func.count(PastExhibition.id).label("art_count")
        result = await self.db.execute(
            select(
                GradationExhibition.id, GradationExhibition.title,
                GradationExhibition.date, art_count,
            )
            .join(
                PastExhibition,
                PastExhibition.gradation_exhibition_id == GradationExhibition.id,
            )
            .group_by(
                GradationExhibition.id, GradationExhibition.title,
                GradationExhibition.date, GradationExhibition.created_at,
            )
            .order_by(*_NEWEST_FIRST),
        )
        return [dict(row) for row in result.mappings()]

    async def find_past_arts(
        self, exhibition_id: GradationExhibitionId, offset: int, limit: int,
    ) -> list[dict]:
        result = await self.db.execute(
            select(
                PastExhibition.id, PastExhibition.gradation_exhibition_id,
                PastExhibition.art_id, Art.art_title, Art.art_category,
                Art.art_img_name, Art.art_img_path, Art.user_id,
            )
            .join(Art, Art.id == PastExhibition.art_id)
            .where(PastExhibition.gradation_exhibition_id == exhibition_id)
            .order_by(PastExhibition.id)
            .offset(offset)
            .limit(limit),
        )
        return [dict(row) for row in result.mappings()]

    async def count_past_arts(self, exhibition_id: GradationExhibitionId) -> int:
        result = await self.db.execute(
            select(func.count(PastExhibition.id))
            .where(PastExhibition.gradation_exhibition_id == exhibition_id),
        )
        return result.scalar_one()
