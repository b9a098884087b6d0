"""Edit Descriptor Value Object.

요청 URL/헤더에서 파싱된, 정규화된 이미지 편집 요청.
요청당 한 번 생성되며 이후 변경되지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from variants.domain.constants import FORMAT_ALIASES
from variants.domain.value_objects.transform_spec import (
    FitMode,
    ReformatSpec,
    ResizeSpec,
    TransformSpec,
)


@dataclass(frozen=True, slots=True)
class EditDescriptor:
    """정규화된 이미지 편집 요청.

    Attributes:
        url_path: 요청 경로 원문
        image_hash: 경로에 포함된 콘텐츠 해시 (유효성 필수)
        master_key: 해시를 제거한 원본 이미지 S3 키
        original_format: 원본 확장자 (소문자)
        width: 요청 너비
        height: 요청 높이 (width와 함께일 때만 의미 있음)
        quality: 요청 품질
        auto_convert_to_webp: WebP 자동 변환 허용 여부
        new_format: 최종 출력 포맷 (외부 요청 토큰, jpg 별칭 미적용)
    """

    url_path: str
    image_hash: str | None = None
    master_key: str | None = None
    original_format: str | None = None
    width: int | None = None
    height: int | None = None
    quality: int | None = None
    auto_convert_to_webp: bool = False
    new_format: str | None = None

    def __post_init__(self) -> None:
        if self.height is not None and self.width is None:
            raise ValueError("height requires width")

    @property
    def is_valid(self) -> bool:
        return bool(self.image_hash and self.master_key and self.original_format)

    @property
    def needs_resize(self) -> bool:
        return self.width is not None

    @property
    def needs_quality_reduction(self) -> bool:
        return self.quality is not None

    @property
    def needs_reformat(self) -> bool:
        return self.new_format != self.original_format

    @property
    def needs_image_edits(self) -> bool:
        return self.needs_resize or self.needs_quality_reduction or self.needs_reformat

    @property
    def output_format(self) -> str | None:
        """Transform Engine / Content-Type 경계에서 사용하는 포맷 이름."""
        if self.new_format is None:
            return None
        return FORMAT_ALIASES.get(self.new_format, self.new_format)

    @property
    def content_type(self) -> str:
        return f"image/{self.output_format}"

    def resize_spec(self) -> ResizeSpec | None:
        # fit 모드는 height 유무로만 결정됨 (캐시 키에 포함되지 않으므로)
        if not self.needs_resize:
            return None
        fit = FitMode.FILL if self.height is not None else FitMode.INSIDE
        return ResizeSpec(width=self.width, height=self.height, fit=fit)

    def transform_spec(self) -> TransformSpec:
        reformat = None
        if self.needs_reformat or self.needs_quality_reduction:
            reformat = ReformatSpec(format=self.output_format, quality=self.quality)
        return TransformSpec(resize=self.resize_spec(), reformat=reformat)
