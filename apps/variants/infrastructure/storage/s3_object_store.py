"""S3 Object Store Adapter.

boto3 동기 클라이언트를 thread pool에서 실행합니다 (이벤트 루프 블로킹 방지).
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from variants.application.common.exceptions import ObjectStoreError
from variants.application.ports import CacheMetadata, ObjectStorePort

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)

NOT_FOUND_ERROR_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


@dataclass(frozen=True, slots=True)
class ObjectStoreConfig:
    """Object Store 연결 설정 (Settings에서 생성)."""

    bucket: str
    region: str
    endpoint_url: str | None = None

    def __post_init__(self) -> None:
        if not self.bucket or not self.bucket.strip():
            raise ValueError("Could not get S3 bucket name from region")

    @property
    def domain_name(self) -> str:
        return f"{self.bucket}.s3.amazonaws.com"


def _is_not_found(error: ClientError) -> bool:
    code = str(error.response.get("Error", {}).get("Code", ""))
    status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return code in NOT_FOUND_ERROR_CODES or status == 404


class S3ObjectStore(ObjectStorePort):
    """S3 기반 Object Store."""

    def __init__(
        self,
        config: ObjectStoreConfig,
        s3_client: "BaseClient | None" = None,
    ) -> None:
        """Initialize.

        Args:
            config: 버킷/리전 설정
            s3_client: boto3 S3 클라이언트 (테스트 주입용)
        """
        self._config = config
        self._s3 = s3_client or boto3.client(
            "s3",
            region_name=config.region,
            endpoint_url=config.endpoint_url,
        )

    @property
    def bucket(self) -> str:
        return self._config.bucket

    @property
    def domain_name(self) -> str:
        return self._config.domain_name

    async def exists(self, key: str) -> bool:
        logger.debug("Checking object existence", extra={"bucket": self.bucket, "key": key})
        try:
            response = await asyncio.to_thread(
                self._s3.head_object,
                Bucket=self.bucket,
                Key=key,
            )
        except ClientError as e:
            if _is_not_found(e):
                return False
            logger.error(
                "Object existence check failed",
                extra={"bucket": self.bucket, "key": key, "error": str(e)},
            )
            raise ObjectStoreError("exists", key, str(e)) from e
        except BotoCoreError as e:
            raise ObjectStoreError("exists", key, str(e)) from e
        return response.get("ETag") is not None

    async def get(self, key: str) -> bytes:
        logger.debug("Getting object", extra={"bucket": self.bucket, "key": key})
        try:
            return await asyncio.to_thread(self._read_body, key)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Failed to get object",
                extra={"bucket": self.bucket, "key": key, "error": str(e)},
            )
            raise ObjectStoreError("get", key, str(e)) from e

    async def put(
        self,
        key: str,
        content_type: str,
        body: bytes,
        metadata: CacheMetadata,
    ) -> None:
        start = time.perf_counter()
        try:
            await asyncio.to_thread(
                self._s3.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
                CacheControl=metadata.cache_control,
                Expires=metadata.expires,
                Tagging=metadata.tagging,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Failed to put object",
                extra={"bucket": self.bucket, "key": key, "error": str(e)},
            )
            raise ObjectStoreError("put", key, str(e)) from e

        logger.info(
            "Object written",
            extra={
                "bucket": self.bucket,
                "key": key,
                "content_type": content_type,
                "size_bytes": len(body),
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )

    def _read_body(self, key: str) -> bytes:
        response = self._s3.get_object(Bucket=self.bucket, Key=key)
        body = response["Body"]
        try:
            return body.read()
        finally:
            body.close()
