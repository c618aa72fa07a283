"""Error Handlers — global exception handlers for the exhibitions API.

Invariants:
    - GradationError → its own status with {"message", ...echoed input}
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500 {"message": "Server error: <description>"}

Design Decisions:
    - Three-layer handler: domain (GradationError), validation (Pydantic), catch-all (Exception)
    - The catch-all carries the failure text: clients of this API display it
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gradation.core.errors import GradationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gradation_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_gradation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(GradationError)
    async def gradation_error_handler(request: Request, exc: GradationError):
        """Handle all gradation business/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"GradationError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                **exc.context.log_extra(),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": f"Server error: {exc}"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "message": "Invalid request data",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
