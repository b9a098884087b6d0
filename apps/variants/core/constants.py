"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

# Service Identity
SERVICE_NAME = "image-variants"
SERVICE_VERSION = "1.0.0"

# Logging Constants (12-Factor App Compliance)
ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "DEBUG"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# 로그 extra 필드 → ECS 필드 (그 외 필드는 labels.*)
ECS_FIELD_MAP = {
    "path": "url.path",
    "url_path": "url.path",
    "uri": "url.path",
    "bucket": "aws.s3.bucket.name",
    "key": "aws.s3.object.key",
    "content_type": "http.response.mime_type",
    "size_bytes": "http.response.body.bytes",
    "error": "error.message",
}

# 서명된 S3 URL이 오류 메시지에 포함될 때 제거할 쿼리 파라미터
SIGNED_QUERY_PARAMS = ("X-Amz-Signature", "X-Amz-Credential", "X-Amz-Security-Token")
REDACTED = "***REDACTED***"
