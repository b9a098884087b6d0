"""Edit Descriptor Parser.

요청 경로 + 쿼리 파라미터 + 헤더를 정규화된 EditDescriptor로 변환합니다.

경로 규약::

    <prefix>!_!<hash>.<ext>   →   master_key = <prefix>.<ext>

쿼리 파라미터:
- d: WIDTH 또는 WIDTHxHEIGHT
- q: 품질 (숫자만)
- f: 출력 포맷
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from variants.domain.constants import (
    ACCEPT_HEADER,
    AUTO_WEBP_HEADER,
    DIMENSIONS_PARAM,
    FORMAT_PARAM,
    HASH_SEPARATOR,
    QUALITY_PARAM,
    SUPPORTED_IMAGE_FORMATS,
    WEBP,
    WEBP_CONTENT_TYPE,
)
from variants.domain.exceptions import UnsupportedFormatError
from variants.domain.value_objects import EditDescriptor, HeaderBag

logger = logging.getLogger(__name__)

DIMENSIONS_PATTERN = re.compile(r"^(\d+)(?:x(\d+))?$")
QUALITY_PATTERN = re.compile(r"^\d+$")
MIN_QUALITY = 1
MAX_QUALITY = 100


class EditDescriptorParser:
    """URL/헤더 → EditDescriptor 파서.

    잘못된 경로는 예외 대신 identity 필드가 비어 있는(invalid) descriptor로 표현합니다.
    지원하지 않는 출력 포맷만 UnsupportedFormatError를 발생시킵니다.
    """

    def __init__(self, supported_formats: tuple[str, ...] = SUPPORTED_IMAGE_FORMATS) -> None:
        self._supported_formats = supported_formats

    def parse(
        self,
        path: str,
        query_params: Mapping[str, str],
        accept_header: str,
        feature_headers: Mapping[str, str],
    ) -> EditDescriptor:
        image_hash, master_key, original_format = self.parse_image_path(path)
        width, height = self.get_dimensions(query_params)
        quality = self.get_quality(query_params)

        features = (
            feature_headers
            if isinstance(feature_headers, HeaderBag)
            else HeaderBag.from_mapping(feature_headers)
        )
        # 대소문자 구분 비교 ("True"는 비활성)
        auto_convert_to_webp = features.get(AUTO_WEBP_HEADER) == "true"

        new_format = self.get_output_format(
            query_params,
            accept_header or "",
            original_format,
            auto_convert_to_webp,
        )

        descriptor = EditDescriptor(
            url_path=path,
            image_hash=image_hash,
            master_key=master_key,
            original_format=original_format,
            width=width,
            height=height,
            quality=quality,
            auto_convert_to_webp=auto_convert_to_webp,
            new_format=new_format,
        )
        logger.debug(
            "Edit descriptor parsed",
            extra={
                "url_path": path,
                "master_key": master_key,
                "width": width,
                "height": height,
                "quality": quality,
                "new_format": new_format,
                "valid": descriptor.is_valid,
            },
        )
        return descriptor

    def parse_headers(
        self,
        path: str,
        query_params: Mapping[str, str],
        headers: HeaderBag,
        feature_headers: HeaderBag | None = None,
    ) -> EditDescriptor:
        """HeaderBag에서 Accept를 읽어 parse()를 호출합니다.

        feature_headers가 없으면 요청 헤더에서 기능 플래그를 읽습니다.
        """
        return self.parse(
            path,
            query_params,
            headers.get(ACCEPT_HEADER),
            feature_headers if feature_headers is not None else headers,
        )

    @staticmethod
    def parse_image_path(path: str) -> tuple[str | None, str | None, str | None]:
        """경로에서 (image_hash, master_key, original_format)을 추출합니다."""
        hash_index = path.rfind(HASH_SEPARATOR)
        ext_index = path.rfind(".")
        if hash_index < 0 or ext_index < 0:
            return None, None, None
        ext = path[ext_index + 1 :].lower()
        image_hash = path[hash_index + len(HASH_SEPARATOR) : ext_index]
        master_key = f"{path[:hash_index]}.{ext}"
        return image_hash, master_key, ext

    @staticmethod
    def get_param(params: Mapping[str, str], name: str) -> str | None:
        """소문자 키 → 대문자 키 순으로 조회. 공백뿐인 값은 없는 것으로 취급."""
        value = params.get(name)
        if value and value.strip():
            return value.strip()
        value = params.get(name.upper())
        if value and value.strip():
            return value.strip()
        return None

    @classmethod
    def get_dimensions(cls, params: Mapping[str, str]) -> tuple[int | None, int | None]:
        raw = cls.get_param(params, DIMENSIONS_PARAM)
        if raw is None:
            return None, None
        match = DIMENSIONS_PATTERN.match(raw)
        if match is None:
            return None, None
        width = int(match.group(1))
        height = int(match.group(2)) if match.group(2) is not None else None
        if width == 0 or height == 0:
            return None, None
        return width, height

    @classmethod
    def get_quality(cls, params: Mapping[str, str]) -> int | None:
        raw = cls.get_param(params, QUALITY_PARAM)
        if raw is None or not QUALITY_PATTERN.match(raw):
            return None
        quality = int(raw)
        if not MIN_QUALITY <= quality <= MAX_QUALITY:
            return None
        return quality

    def get_output_format(
        self,
        params: Mapping[str, str],
        accept_header: str,
        original_format: str | None,
        auto_convert_to_webp: bool,
    ) -> str | None:
        if original_format is None:
            return None

        requested = self.get_param(params, FORMAT_PARAM)
        if requested is not None:
            new_format = requested.lower()
        elif auto_convert_to_webp and WEBP_CONTENT_TYPE in accept_header:
            logger.debug("Auto converting to webp")
            new_format = WEBP
        else:
            new_format = original_format

        if new_format != original_format and new_format not in self._supported_formats:
            raise UnsupportedFormatError(new_format, self._supported_formats)
        return new_format
