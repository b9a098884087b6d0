"""Observability - OpenTelemetry Tracing + Prometheus Metrics."""

from variants.infrastructure.observability.metrics import (
    REGISTRY,
    record_decision,
    record_error,
)
from variants.infrastructure.observability.tracing import (
    instrument_botocore,
    instrument_fastapi,
    setup_tracing,
    shutdown_tracing,
)

__all__ = [
    "REGISTRY",
    "instrument_botocore",
    "instrument_fastapi",
    "record_decision",
    "record_error",
    "setup_tracing",
    "shutdown_tracing",
]
