"""Image Transform Engine Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from variants.domain.value_objects import TransformSpec


class ImageTransformPort(ABC):
    """이미지 변환 포트.

    Infrastructure Layer에서 구현합니다 (Pillow).
    """

    @abstractmethod
    async def transform(self, source: bytes, spec: TransformSpec) -> bytes:
        """원본 바이트에 resize/reformat을 적용합니다.

        Raises:
            ImageTransformError: 코덱 오류 등 변환 실패
        """
        ...
