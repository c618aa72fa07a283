"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer surrogate keys everywhere; child rows cascade on parent delete
    - Art and ArtLike mirror tables owned by the artwork subsystem (read-only here)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from gradation.models.art import Art  # noqa: F401
from gradation.models.art_like import ArtLike  # noqa: F401
from gradation.models.gradation_exhibition import GradationExhibition  # noqa: F401
from gradation.models.gradation_exhibition_image import GradationExhibitionImage  # noqa: F401
from gradation.models.past_exhibition import PastExhibition  # noqa: F401
from gradation.models.university import University  # noqa: F401
from gradation.models.major import Major  # noqa: F401
from gradation.models.university_exhibition import UniversityExhibition  # noqa: F401
from gradation.models.university_exhibition_image import UniversityExhibitionImage  # noqa: F401
from gradation.models.university_like import UniversityLike  # noqa: F401
