"""Exhibition Rules — pure business rules shared by services and routes.

Invariants:
    - State is UPCOMING iff now < start_date; start_date == now is ONGOING
    - Naive datetimes are interpreted as UTC (SQLite drops tzinfo on read)
    - Cursors are 1-based page numbers, never opaque tokens
    - No IO, no clock reads: callers pass `now` in
"""

from datetime import datetime, timezone

from gradation.core.domain_types import ExhibitionState

TOP_LIKED_ART_LIMIT = 50
RECENT_EXHIBITION_LIMIT = 3
PAST_ARTS_PAGE_SIZE = 12

DEFAULT_LOGO_IMG_NAME = "default-logo.png"
DEFAULT_LOGO_IMG_PATH = "assets/images/university/logo"


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def derive_exhibition_state(
    start_date: datetime, now: datetime,
) -> ExhibitionState:
    """Classify a university exhibition as upcoming or ongoing at `now`."""
    if as_utc(now) < as_utc(start_date):
        return ExhibitionState.UPCOMING
    return ExhibitionState.ONGOING


def format_recent_title(date: str, title: str) -> str:
    """Render a recent exhibition as '<year> <title>' (year = first 4 chars of date)."""
    return f"{date[:4]} {title}"


def page_offset(cursor: int, page_size: int = PAST_ARTS_PAGE_SIZE) -> int:
    """Row offset of a 1-based page. Cursors below 1 clamp to the first page."""
    return (max(cursor, 1) - 1) * page_size
