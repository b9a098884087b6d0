"""이미지 편집 요청 관련 도메인 예외."""

from __future__ import annotations

from typing import Iterable

from variants.domain.exceptions.base import DomainError


class UnsupportedFormatError(DomainError):
    """요청된 출력 포맷을 지원하지 않음."""

    def __init__(self, image_format: str, supported: Iterable[str]) -> None:
        self.image_format = image_format
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported image format:{image_format}. Supported: {','.join(self.supported)}"
        )


class MalformedKeyError(DomainError):
    """마스터 이미지 키에 확장자가 없음."""

    def __init__(self, master_key: str) -> None:
        self.master_key = master_key
        super().__init__(f"Master image key {master_key} has no extension")
