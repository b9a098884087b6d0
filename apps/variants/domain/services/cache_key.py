"""Processed Image Key Deriver.

결정적(deterministic) S3 키 생성 - CDN/오리진 캐시 적중률의 핵심.

규칙:
- 편집 파라미터는 알파벳 순서 (d → q)
- 파라미터 토큰은 모두 소문자
- 확장자는 외부에서 요청한 포맷 토큰 그대로 (jpg → jpeg 별칭 미적용)

Examples:
    images/abc.jpg + d=400x300&q=80  →  images/abc_d400x300_q80.jpg
    images/abc.jpg + d=400           →  images/abc_d400.jpg
"""

from __future__ import annotations

from variants.domain.constants import DIMENSIONS_PARAM, KEY_PARAM_SEPARATOR, QUALITY_PARAM
from variants.domain.exceptions import MalformedKeyError
from variants.domain.value_objects import EditDescriptor


def derive_processed_key(
    master_key: str,
    descriptor: EditDescriptor,
    resolved_format: str,
) -> str:
    ext_index = master_key.rfind(".")
    if ext_index < 0:
        raise MalformedKeyError(master_key)

    key = master_key[:ext_index]

    if descriptor.needs_resize:
        key += f"{KEY_PARAM_SEPARATOR}{DIMENSIONS_PARAM}{descriptor.width}"
        if descriptor.height is not None:
            key += f"x{descriptor.height}"

    if descriptor.needs_quality_reduction:
        key += f"{KEY_PARAM_SEPARATOR}{QUALITY_PARAM}{descriptor.quality}"

    return f"{key}.{resolved_format}"
