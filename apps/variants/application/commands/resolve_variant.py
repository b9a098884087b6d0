"""Resolve Variant Command.

Cache-aside 오케스트레이션:

    VALIDATE → (invalid) → InvalidImageRequestError
    VALIDATE → (valid, 편집 없음) → FALLBACK(master_key)
    PROBE_PROCESSED --exists--> CACHE_HIT(processed_key)
    PROBE_PROCESSED --absent--> PROBE_MASTER
    PROBE_MASTER --absent--> FALLBACK(master_key)
    PROBE_MASTER --exists--> FETCH → TRANSFORM → STORE → TRANSFORMED(processed_key)

상태를 보관하지 않습니다 (요청마다 처음부터 계산). 동일 키에 대한 동시 miss는
각각 변환/저장하며, 결과가 결정적이므로 마지막 쓰기가 남아도 무방합니다.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from variants.application.common.exceptions import InvalidImageRequestError
from variants.application.dto import OriginDecision
from variants.domain.services import derive_processed_key

if TYPE_CHECKING:
    from variants.application.ports import CachePolicy, ImageTransformPort, ObjectStorePort
    from variants.domain.value_objects import EditDescriptor

logger = logging.getLogger(__name__)


class ResolveVariantCommand:
    """편집 요청에 대한 오리진 결정 Command."""

    def __init__(
        self,
        object_store: "ObjectStorePort",
        transform_engine: "ImageTransformPort",
        cache_policy: "CachePolicy",
    ) -> None:
        self._store = object_store
        self._engine = transform_engine
        self._cache_policy = cache_policy

    async def execute(self, descriptor: "EditDescriptor") -> OriginDecision:
        """오리진 결정을 반환합니다.

        Args:
            descriptor: 파싱된 편집 요청 (유효해야 함)

        Returns:
            OriginDecision

        Raises:
            InvalidImageRequestError: 유효하지 않은 descriptor
            MalformedKeyError: master_key에 확장자가 없음
            ObjectStoreError, ImageTransformError: 협력자 실패 (그대로 전파)
        """
        if not descriptor.is_valid:
            raise InvalidImageRequestError(descriptor.url_path)

        master_key = descriptor.master_key

        if not descriptor.needs_image_edits:
            # 파생 키가 원본 키와 같으므로 조회할 필요 없음
            logger.info("No image edits requested", extra={"master_key": master_key})
            return OriginDecision.fallback(master_key)

        processed_key = derive_processed_key(master_key, descriptor, descriptor.new_format)

        if await self._store.exists(processed_key):
            logger.info("Processed image cache hit", extra={"processed_key": processed_key})
            return OriginDecision.cache_hit(processed_key)

        if not await self._store.exists(master_key):
            logger.info("Master image not found", extra={"master_key": master_key})
            return OriginDecision.fallback(master_key)

        master = await self._store.get(master_key)

        start = time.perf_counter()
        processed = await self._engine.transform(master, descriptor.transform_spec())
        elapsed_ms = (time.perf_counter() - start) * 1000

        content_type = descriptor.content_type
        await self._store.put(
            processed_key,
            content_type,
            processed,
            self._cache_policy.metadata(),
        )
        logger.info(
            "Processed image stored",
            extra={
                "master_key": master_key,
                "processed_key": processed_key,
                "content_type": content_type,
                "size_bytes": len(processed),
                "transform_ms": round(elapsed_ms, 2),
            },
        )
        return OriginDecision.transformed(processed_key, content_type, processed)
