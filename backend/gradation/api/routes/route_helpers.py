"""Route Helpers — service dependencies and failure surfacing shared by all routers.

Invariants:
    - One service instance per request, bound to the request's AsyncSession
    - server_errors re-raises GradationError untouched and turns anything else
      into ServerError (500) carrying the echoed request input
    - No retries: every failure reaches the caller immediately

Design Decisions:
    - Failures converted inside the route (not left to the catch-all handler) so
      the echoed input is still in scope when the envelope is built
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gradation.core.errors import ErrorContext, GradationError, ServerError
from gradation.infrastructure.database import get_db
from gradation.services.exhibition_service import ExhibitionService
from gradation.services.university_service import UniversityExhibitionService

logger = logging.getLogger(__name__)


def get_exhibition_service(
    db: AsyncSession = Depends(get_db),
) -> ExhibitionService:
    return ExhibitionService(db)


def get_university_service(
    db: AsyncSession = Depends(get_db),
) -> UniversityExhibitionService:
    return UniversityExhibitionService(db)


@contextmanager
def server_errors(
    echo: dict[str, Any] | None = None, context: ErrorContext | None = None,
) -> Iterator[None]:
    """Surface unexpected failures as 500 envelopes with the given input echoed."""
    try:
        yield
    except GradationError:
        raise
    except Exception as e:
        logger.error(
            f"Request failed: {e}",
            exc_info=True,
            extra=context.log_extra() if context else None,
        )
        raise ServerError(str(e), echo=echo, context=context) from e
