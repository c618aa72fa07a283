"""University Repository — queries for universities, majors, submissions, images and likes.

Invariants:
    - One method per named query; no business rules, no commits
    - University lookup is an exact name match
    - Listings join submission -> major -> university in a single query
    - like_id in a listing row is non-null iff the viewer liked that submission
    - Images for a listing are fetched in one batched query keyed by submission id

Design Decisions:
    - Listing rows flattened to dicts: they combine three entities plus the
      like column and map straight onto UniversityExhibitionSummary
"""

from sqlalchemy import and_, delete, null, select
from sqlalchemy.ext.asyncio import AsyncSession

from gradation.core.domain_types import UniversityExhibitionId, UserId
from gradation.models.major import Major
from gradation.models.university import University
from gradation.models.university_exhibition import UniversityExhibition
from gradation.models.university_exhibition_image import UniversityExhibitionImage
from gradation.models.university_like import UniversityLike

_SUMMARY_COLUMNS = (
    UniversityExhibition.id,
    UniversityExhibition.title,
    UniversityExhibition.explanation,
    UniversityExhibition.location,
    UniversityExhibition.start_date,
    UniversityExhibition.end_date,
    UniversityExhibition.request_date,
    UniversityExhibition.status,
    UniversityExhibition.user_id,
    University.id.label("university_id"),
    University.university_name,
    University.logo_img_name,
    University.logo_img_path,
    Major.id.label("major_id"),
    Major.major_name,
)

_NEWEST_FIRST = (
    UniversityExhibition.request_date.desc(), UniversityExhibition.id.desc(),
)


def _summary_query(*extra_columns):
    return (
        select(*_SUMMARY_COLUMNS, *extra_columns)
        .select_from(UniversityExhibition)
        .join(Major, Major.id == UniversityExhibition.major_id)
        .join(University, University.id == Major.university_id)
    )


class UniversityRepository:
    """Data access for university submissions and their likes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Universities & majors ──────────────────────────────────

    async def find_university_by_name(self, name: str) -> University | None:
        result = await self.db.execute(
            select(University).where(University.university_name == name),
        )
        return result.scalar_one_or_none()

    async def save_university(self, university: University) -> University:
        self.db.add(university)
        await self.db.flush()
        return university

    async def save_major(self, major: Major) -> Major:
        self.db.add(major)
        await self.db.flush()
        return major

    # ─── Submissions ────────────────────────────────────────────

    async def save_exhibition(
        self, exhibition: UniversityExhibition,
    ) -> UniversityExhibition:
        self.db.add(exhibition)
        await self.db.flush()
        return exhibition

    async def find_exhibitions(
        self,
        viewer_id: UserId | None = None,
        university_name: str | None = None,
        major_name: str | None = None,
        keyword: str | None = None,
        status: str | None = None,
    ) -> list[dict]:
        """List submissions, newest request first, with the viewer's like column."""
        if viewer_id is None:
            query = _summary_query(null().label("like_id"))
        else:
            query = _summary_query(UniversityLike.id.label("like_id")).outerjoin(
                UniversityLike,
                and_(
                    UniversityLike.university_exhibition_id == UniversityExhibition.id,
                    UniversityLike.user_id == viewer_id,
                ),
            )
        if university_name:
            query = query.where(University.university_name == university_name)
        if major_name:
            query = query.where(Major.major_name == major_name)
        if keyword:
            query = query.where(UniversityExhibition.title.contains(keyword))
        if status:
            query = query.where(UniversityExhibition.status == status)

        result = await self.db.execute(query.order_by(*_NEWEST_FIRST))
        return [dict(row) for row in result.mappings()]

    async def find_by_user(self, user_id: UserId) -> list[dict]:
        result = await self.db.execute(
            _summary_query()
            .where(UniversityExhibition.user_id == user_id)
            .order_by(*_NEWEST_FIRST),
        )
        return [dict(row) for row in result.mappings()]

    async def find_liked_by_user(self, user_id: UserId) -> list[dict]:
        result = await self.db.execute(
            _summary_query()
            .join(
                UniversityLike,
                UniversityLike.university_exhibition_id == UniversityExhibition.id,
            )
            .where(UniversityLike.user_id == user_id)
            .order_by(UniversityLike.id.desc()),
        )
        return [dict(row) for row in result.mappings()]

    # ─── Images ─────────────────────────────────────────────────

    async def save_image(
        self, image: UniversityExhibitionImage,
    ) -> UniversityExhibitionImage:
        self.db.add(image)
        await self.db.flush()
        return image

    async def find_images(
        self, exhibition_id: UniversityExhibitionId,
    ) -> list[UniversityExhibitionImage]:
        return await self.find_images_for([exhibition_id])

    async def find_images_for(
        self, exhibition_ids: list[UniversityExhibitionId],
    ) -> list[UniversityExhibitionImage]:
        if not exhibition_ids:
            return []
        result = await self.db.execute(
            select(UniversityExhibitionImage)
            .where(UniversityExhibitionImage.university_exhibition_id.in_(exhibition_ids))
            .order_by(UniversityExhibitionImage.id),
        )
        return list(result.scalars().all())

    # ─── Likes ──────────────────────────────────────────────────

    async def like_exists(
        self, exhibition_id: UniversityExhibitionId, user_id: UserId,
    ) -> bool:
        result = await self.db.execute(
            select(UniversityLike.id)
            .where(UniversityLike.university_exhibition_id == exhibition_id)
            .where(UniversityLike.user_id == user_id),
        )
        return result.first() is not None

    async def save_like(self, like: UniversityLike) -> UniversityLike:
        self.db.add(like)
        await self.db.flush()
        return like

    async def delete_like(
        self, exhibition_id: UniversityExhibitionId, user_id: UserId,
    ) -> int:
        result = await self.db.execute(
            delete(UniversityLike)
            .where(UniversityLike.university_exhibition_id == exhibition_id)
            .where(UniversityLike.user_id == user_id),
        )
        return result.rowcount
