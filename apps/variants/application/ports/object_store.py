"""Object Store Port.

Infrastructure Layer에서 구현합니다 (S3, MinIO).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True, slots=True)
class CacheMetadata:
    """파생 이미지 저장 시 캐시 메타데이터.

    파생 이미지는 원본이 아닌 캐시 엔트리이므로 보존 태그로 수명 정책을 적용합니다.
    """

    cache_control: str
    expires: datetime
    tagging: str


class ObjectStorePort(ABC):
    """Object Store 포트."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """키 존재 여부. Not found는 False (예외 아님)."""
        ...

    @abstractmethod
    async def get(self, key: str) -> bytes:
        """객체 본문을 반환합니다."""
        ...

    @abstractmethod
    async def put(
        self,
        key: str,
        content_type: str,
        body: bytes,
        metadata: CacheMetadata,
    ) -> None:
        """객체를 저장합니다."""
        ...


@dataclass(frozen=True, slots=True)
class CachePolicy:
    """저장 시점마다 CacheMetadata를 만드는 정책 (설정에서 주입)."""

    cache_control: str
    expires_seconds: int
    tagging: str

    def metadata(self, now: datetime | None = None) -> CacheMetadata:
        now = now or datetime.now(timezone.utc)
        return CacheMetadata(
            cache_control=self.cache_control,
            expires=now + timedelta(seconds=self.expires_seconds),
            tagging=self.tagging,
        )
