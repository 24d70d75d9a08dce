from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi import FastAPI, Request

from core.logging import get_logger
from core.settings import settings
from schemas.common import error_response, ApiStatus

log = get_logger("middleware")


def setup_middleware(app: FastAPI):
    """Setup CORS and global exception handlers"""

    # Global exception handler for validation errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log.warning("request_validation_failed", url=str(request.url), errors=jsonable_errors(exc))
        return JSONResponse(
            status_code=422,
            content=error_response(
                message="Request validation failed",
                status=ApiStatus.VALIDATION_ERROR,
                error_code="VALIDATION_ERROR",
                data={"errors": jsonable_errors(exc)},
            ),
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Strip non-serializable context (e.g. raised exceptions) from validation errors."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
