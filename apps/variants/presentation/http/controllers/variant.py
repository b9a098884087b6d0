"""Variant Controller.

CDN 오리진으로 동작하는 catch-all 엔드포인트.

- CACHE_HIT / FALLBACK: 서빙할 객체 URL로 307 redirect
- TRANSFORMED: 변환된 바이트를 직접 반환
- 자동 webp 변환 대상이면 Vary: Accept
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import RedirectResponse

from variants.application.commands import ResolveVariantCommand
from variants.application.common.exceptions import InvalidImageRequestError
from variants.application.dto import OriginDecision
from variants.domain.constants import FORMAT_PARAM
from variants.domain.services import EditDescriptorParser
from variants.domain.value_objects import EditDescriptor, HeaderBag
from variants.infrastructure.observability import record_decision
from variants.setup.config import Settings, get_settings
from variants.setup.dependencies import get_edit_parser, get_resolve_variant_command

logger = logging.getLogger(__name__)

ORIGIN_KEY_HEADER = "x-origin-key"

router = APIRouter(tags=["variants"])


def origin_base_url(settings: Settings) -> str:
    """Redirect 대상 도메인 (CDN 우선, 없으면 버킷 도메인)."""
    if settings.cdn_domain is not None:
        return str(settings.cdn_domain).rstrip("/")
    return f"https://{settings.object_store_config().domain_name}"


@router.get("/{path:path}", summary="Serve image variant")
async def serve_variant(
    path: str,
    request: Request,
    parser: Annotated[EditDescriptorParser, Depends(get_edit_parser)],
    command: Annotated[ResolveVariantCommand, Depends(get_resolve_variant_command)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    headers = HeaderBag.from_mapping(request.headers)
    descriptor = parser.parse_headers(path, request.query_params, headers)
    if not descriptor.is_valid:
        logger.info("Invalid request without image hash or extension", extra={"path": path})
        raise InvalidImageRequestError(path)

    decision = await command.execute(descriptor)
    record_decision(decision.kind.value)
    response = _to_response(decision, origin_base_url(settings), settings.cache_control)
    if _negotiates_format(parser, request, descriptor):
        # 같은 URL이 Accept에 따라 webp 또는 원본 포맷을 반환
        response.headers["Vary"] = "Accept"
    return response


def _negotiates_format(
    parser: EditDescriptorParser,
    request: Request,
    descriptor: EditDescriptor,
) -> bool:
    return (
        descriptor.auto_convert_to_webp
        and parser.get_param(request.query_params, FORMAT_PARAM) is None
    )


def _to_response(decision: OriginDecision, base_url: str, cache_control: str) -> Response:
    if decision.has_payload:
        return Response(
            content=decision.payload,
            media_type=decision.content_type,
            headers={
                ORIGIN_KEY_HEADER: decision.served_key,
                "Cache-Control": cache_control,
            },
        )
    return RedirectResponse(
        url=f"{base_url}/{decision.served_key}",
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        headers={ORIGIN_KEY_HEADER: decision.served_key},
    )
