"""OpenTelemetry Tracing - Variants Service.

Architecture:
  App (OTel SDK) → OTLP/gRPC (4317) → Jaeger Collector
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

logger = logging.getLogger(__name__)

_tracer_provider = None


def setup_tracing(
    service_name: str,
    service_version: str,
    environment: str,
    endpoint: str,
    sampling_rate: float = 1.0,
) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        service_name: 서비스 이름
        service_version: 서비스 버전
        environment: 환경 (dev/staging/prod)
        endpoint: OTLP gRPC 엔드포인트
        sampling_rate: 샘플링 비율 (0.0 ~ 1.0)

    Returns:
        설정 성공 여부
    """
    global _tracer_provider

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": service_version,
            "deployment.environment": environment,
        }
    )
    _tracer_provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(sampling_rate),
    )
    _tracer_provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(endpoint=endpoint, insecure=True),
            max_queue_size=2048,
            max_export_batch_size=512,
            schedule_delay_millis=1000,
        )
    )
    trace.set_tracer_provider(_tracer_provider)

    logger.info(
        "OpenTelemetry tracing configured",
        extra={"service": service_name, "endpoint": endpoint, "sampling_rate": sampling_rate},
    )
    return True


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI 자동 계측 (health/metrics 제외)."""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
    except ImportError:
        logger.warning("FastAPIInstrumentor not available")
        return

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready,metrics")
    logger.info("FastAPI instrumentation enabled")


def instrument_botocore() -> None:
    """boto3/botocore 자동 계측 (S3 호출 추적)."""
    try:
        from opentelemetry.instrumentation.botocore import BotocoreInstrumentor
    except ImportError:
        logger.warning("BotocoreInstrumentor not available")
        return

    BotocoreInstrumentor().instrument()
    logger.info("Botocore instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료 (graceful shutdown)."""
    global _tracer_provider

    if _tracer_provider is not None:
        try:
            _tracer_provider.shutdown()
            logger.info("OpenTelemetry tracing shutdown complete")
        except Exception as e:
            logger.error(f"Error shutting down tracing: {e}")
        _tracer_provider = None
