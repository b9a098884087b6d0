"""Variants Metrics - Prometheus 메트릭 정의.

라벨:
- kind: 오리진 결정 (cache_hit, fallback, transformed)
- error_type: 실패 분류 (invalid_request, unsupported_format, origin_failure, ...)
- format: 출력 포맷
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram

REGISTRY = CollectorRegistry(auto_describe=True)

VARIANT_DECISIONS_TOTAL = Counter(
    "variant_decisions_total",
    "Origin decisions by kind",
    ["kind"],
    registry=REGISTRY,
)

VARIANT_ERRORS_TOTAL = Counter(
    "variant_errors_total",
    "Variant request failures by type",
    ["error_type"],
    registry=REGISTRY,
)

VARIANT_TRANSFORM_DURATION = Histogram(
    "variant_transform_duration_seconds",
    "Image transform duration in seconds",
    ["format"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
    registry=REGISTRY,
)


def record_decision(kind: str) -> None:
    VARIANT_DECISIONS_TOTAL.labels(kind=kind).inc()


def record_error(error_type: str) -> None:
    VARIANT_ERRORS_TOTAL.labels(error_type=error_type).inc()
