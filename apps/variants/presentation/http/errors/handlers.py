"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
협력자 실패 시에는 부분 결과를 반환하거나 캐시하지 않습니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from variants.application.common.exceptions import (
    ApplicationError,
    CollaboratorError,
    InvalidImageRequestError,
)
from variants.domain.exceptions import DomainError, MalformedKeyError, UnsupportedFormatError
from variants.infrastructure.observability import record_error

logger = logging.getLogger(__name__)

NO_STORE = {"Cache-Control": "no-store"}


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(InvalidImageRequestError)
    async def invalid_image_request_handler(request: Request, exc: InvalidImageRequestError):
        record_error("invalid_request")
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_IMAGE_REQUEST"},
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(request: Request, exc: UnsupportedFormatError):
        record_error("unsupported_format")
        return JSONResponse(
            status_code=400,
            content={
                "detail": exc.message,
                "code": "UNSUPPORTED_FORMAT",
                "supported": list(exc.supported),
            },
        )

    @app.exception_handler(MalformedKeyError)
    async def malformed_key_handler(request: Request, exc: MalformedKeyError):
        record_error("malformed_key")
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "MALFORMED_KEY"},
        )

    @app.exception_handler(CollaboratorError)
    async def collaborator_error_handler(request: Request, exc: CollaboratorError):
        record_error("origin_failure")
        logger.error(
            "Unable to resize image",
            extra={"path": request.url.path, "error": exc.message},
        )
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "code": "ORIGIN_FAILURE"},
            headers=NO_STORE,
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
