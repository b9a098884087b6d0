"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from variants.application.commands import ResolveVariantCommand
from variants.application.ports import ImageTransformPort, ObjectStorePort
from variants.domain.services import EditDescriptorParser
from variants.infrastructure.imaging import PillowImageTransformer
from variants.infrastructure.storage import S3ObjectStore
from variants.setup.config import Settings, get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_object_store() -> S3ObjectStore:
    """S3 Object Store 싱글톤 (boto3 클라이언트는 thread-safe)."""
    config = get_settings().object_store_config()
    logger.info(
        "S3 object store created",
        extra={"bucket": config.bucket, "region": config.region},
    )
    return S3ObjectStore(config)


@lru_cache
def get_transform_engine() -> PillowImageTransformer:
    return PillowImageTransformer()


@lru_cache
def get_edit_parser() -> EditDescriptorParser:
    return EditDescriptorParser()


def get_resolve_variant_command(
    settings: Annotated[Settings, Depends(get_settings)],
    object_store: Annotated[ObjectStorePort, Depends(get_object_store)],
    transform_engine: Annotated[ImageTransformPort, Depends(get_transform_engine)],
) -> ResolveVariantCommand:
    """ResolveVariantCommand를 주입합니다."""
    return ResolveVariantCommand(
        object_store=object_store,
        transform_engine=transform_engine,
        cache_policy=settings.cache_policy(),
    )
