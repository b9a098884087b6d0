"""
Structured Logging Configuration (ECS-based)

Log Collection Protocol:
- Fluent Bit → Elasticsearch: HTTP (9200)
- OpenTelemetry → Jaeger: gRPC OTLP (4317)

extra 필드 중 S3 버킷/키, 요청 경로, 오류 메시지는 ECS 필드로 올리고
나머지는 labels.* 로 보냅니다.
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from datetime import datetime, timezone
from typing import Any

from opentelemetry import trace

from variants.core.constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    ECS_FIELD_MAP,
    ECS_VERSION,
    ENV_KEY_ENVIRONMENT,
    ENV_KEY_LOG_FORMAT,
    ENV_KEY_LOG_LEVEL,
    EXCLUDED_LOG_RECORD_ATTRS,
    REDACTED,
    SERVICE_NAME,
    SERVICE_VERSION,
    SIGNED_QUERY_PARAMS,
)


SIGNED_PARAM_PATTERN = re.compile(
    r"(" + "|".join(re.escape(p) for p in SIGNED_QUERY_PARAMS) + r")=[^&\s'\"]+"
)


def redact_signed_params(value: Any) -> Any:
    """문자열에 포함된 S3 서명 파라미터 값을 가립니다."""
    if not isinstance(value, str):
        return value
    return SIGNED_PARAM_PATTERN.sub(lambda m: f"{m.group(1)}={REDACTED}", value)


def split_extra_fields(extra: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """extra 필드를 (ECS 필드, labels)로 나눕니다."""
    ecs_fields: dict[str, Any] = {}
    labels: dict[str, Any] = {}
    for key, value in extra.items():
        value = redact_signed_params(value)
        if key in ECS_FIELD_MAP:
            ecs_fields[ECS_FIELD_MAP[key]] = value
        else:
            labels[key] = value
    return ecs_fields, labels


class ECSJsonFormatter(logging.Formatter):
    """Elastic Common Schema (ECS) 기반 JSON 포매터"""

    def __init__(
        self,
        service_name: str = SERVICE_NAME,
        service_version: str = SERVICE_VERSION,
        environment: str = DEFAULT_ENVIRONMENT,
    ):
        super().__init__()
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "@timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "message": record.getMessage(),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "ecs.version": ECS_VERSION,
            "service.name": self.service_name,
            "service.version": self.service_version,
            "service.environment": self.environment,
        }

        ctx = trace.get_current_span().get_span_context()
        if ctx.is_valid:
            log_obj["trace.id"] = format(ctx.trace_id, "032x")
            log_obj["span.id"] = format(ctx.span_id, "016x")

        if record.exc_info:
            log_obj["error.type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
            log_obj["error.message"] = str(record.exc_info[1]) if record.exc_info[1] else None
            log_obj["error.stack_trace"] = self.formatException(record.exc_info)

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in EXCLUDED_LOG_RECORD_ATTRS
        }
        ecs_fields, labels = split_extra_fields(extra_fields)
        log_obj.update(ecs_fields)
        if labels:
            log_obj["labels"] = labels

        return json.dumps(log_obj, ensure_ascii=False, default=str)


def configure_logging(
    service_name: str = SERVICE_NAME,
    service_version: str = SERVICE_VERSION,
    log_level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """애플리케이션 로깅 설정"""
    environment = os.getenv(ENV_KEY_ENVIRONMENT, DEFAULT_ENVIRONMENT)
    level = log_level or os.getenv(ENV_KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    use_json = (
        json_format
        if json_format is not None
        else os.getenv(ENV_KEY_LOG_FORMAT, DEFAULT_LOG_FORMAT) == "json"
    )

    numeric_level = getattr(logging, level.upper(), logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)

    if use_json:
        handler.setFormatter(
            ECSJsonFormatter(
                service_name=service_name,
                service_version=service_version,
                environment=environment,
            )
        )
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(handler)

    for logger_name in (
        "uvicorn.access",
        "botocore",
        "boto3",
        "urllib3",
        "PIL",
    ):
        logging.getLogger(logger_name).setLevel(logging.WARNING)
