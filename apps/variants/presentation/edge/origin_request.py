"""CloudFront Origin Request Handler.

요청의 오리진을 서빙할 S3 객체로 바꿔 CloudFront가 S3에서 직접 응답하도록 합니다.

- 유효하지 않은 요청은 변경 없이 그대로 반환
- 그 외에는 request.uri / origin.s3.domainName / host 헤더를 재작성
- 협력자 실패는 그대로 전파 (CloudFront가 오류 응답)

커스텀 헤더(x-cvt-auto-convert-to-webp)는 origin.s3.customHeaders에서 읽습니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qsl

from variants.application.commands import ResolveVariantCommand
from variants.application.dto import OriginDecision
from variants.domain.services import EditDescriptorParser
from variants.domain.value_objects import HeaderBag
from variants.infrastructure.imaging import PillowImageTransformer
from variants.infrastructure.observability import record_decision
from variants.infrastructure.storage import S3ObjectStore
from variants.setup.config import get_settings
from variants.setup.logging import configure_logging

logger = logging.getLogger(__name__)


class OriginRequestHandler:
    """CloudFront origin-request 이벤트 처리기."""

    def __init__(
        self,
        parser: EditDescriptorParser,
        command: ResolveVariantCommand,
        domain_name: str,
    ) -> None:
        self._parser = parser
        self._command = command
        self._domain_name = domain_name

    async def handle(self, event: dict[str, Any]) -> dict[str, Any]:
        request = event["Records"][0]["cf"]["request"]
        key = request.get("uri", "").lstrip("/")
        query_params = dict(parse_qsl(request.get("querystring", ""), keep_blank_values=True))
        headers = HeaderBag.from_cloudfront(request.get("headers"))
        custom_headers = HeaderBag.from_cloudfront(
            (request.get("origin") or {}).get("s3", {}).get("customHeaders")
        )

        descriptor = self._parser.parse_headers(key, query_params, headers, custom_headers)
        if not descriptor.is_valid:
            logger.info("Invalid request without image hash or extension", extra={"key": key})
            return request

        decision = await self._command.execute(descriptor)
        record_decision(decision.kind.value)
        return self._change_origin(request, decision)

    def _change_origin(self, request: dict[str, Any], decision: OriginDecision) -> dict[str, Any]:
        request["uri"] = f"/{decision.served_key}"
        request.setdefault("origin", {}).setdefault("s3", {})["domainName"] = self._domain_name
        request.setdefault("headers", {})["host"] = [{"key": "host", "value": self._domain_name}]
        logger.info(
            "Origin changed",
            extra={
                "decision": decision.kind.value,
                "domain_name": self._domain_name,
                "uri": request["uri"],
            },
        )
        return request


def build_handler() -> OriginRequestHandler:
    settings = get_settings()
    store = S3ObjectStore(settings.object_store_config())
    command = ResolveVariantCommand(
        object_store=store,
        transform_engine=PillowImageTransformer(),
        cache_policy=settings.cache_policy(),
    )
    return OriginRequestHandler(EditDescriptorParser(), command, store.domain_name)


_handler: OriginRequestHandler | None = None


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Lambda 진입점."""
    global _handler  # noqa: PLW0603
    if _handler is None:
        configure_logging()
        _handler = build_handler()
    return asyncio.run(_handler.handle(event))
