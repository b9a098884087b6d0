"""Image Variants API - FastAPI application entry point.

CDN 오리진으로 동작하며, 편집 요청(d/q/f)에 해당하는 파생 이미지를
S3에서 찾거나 생성한 뒤 redirect 또는 직접 반환합니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from variants.core.constants import SERVICE_NAME, SERVICE_VERSION
from variants.infrastructure.observability import (
    instrument_botocore,
    instrument_fastapi,
    setup_tracing,
    shutdown_tracing,
)
from variants.presentation.http.controllers import health_router, variant_router
from variants.presentation.http.errors import register_exception_handlers
from variants.presentation.http.metrics import register_metrics
from variants.setup.config import get_settings
from variants.setup.logging import configure_logging

logger = logging.getLogger(__name__)

# 구조화된 로깅 설정 (ECS JSON 포맷)
configure_logging()

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    logger.info(f"Starting {SERVICE_NAME}")

    if settings.otel_enabled:
        setup_tracing(
            service_name=SERVICE_NAME,
            service_version=SERVICE_VERSION,
            environment=settings.environment,
            endpoint=settings.otel_exporter_otlp_endpoint,
            sampling_rate=settings.otel_sampling_rate,
        )
        instrument_botocore()

    yield

    logger.info(f"Shutting down {SERVICE_NAME}")
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.app_name,
        description="Deterministic image variant origin for the CDN edge",
        version=SERVICE_VERSION,
        docs_url="/api/v1/variants/docs",
        openapi_url="/api/v1/variants/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )

    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    # catch-all 변형 라우트는 반드시 마지막에 등록
    app.include_router(health_router)
    register_metrics(app)
    app.include_router(variant_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
