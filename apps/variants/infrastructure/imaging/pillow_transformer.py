"""Pillow Image Transform Engine.

Pillow 동기 API를 thread pool에서 실행합니다.

Fit 모드:
- fill: 정확히 width x height (비율 무시)
- inside: 비율 유지, 원본보다 크게 확대하지 않음

raw 출력은 컨테이너 없는 픽셀 바이트 (mode 순서, 행 우선)입니다.
"""

from __future__ import annotations

import asyncio
import logging
import time
from io import BytesIO

from PIL import Image, UnidentifiedImageError
from pillow_heif import register_heif_opener

from variants.application.common.exceptions import ImageTransformError
from variants.application.ports import ImageTransformPort
from variants.domain.value_objects import FitMode, ResizeSpec, TransformSpec
from variants.infrastructure.observability.metrics import VARIANT_TRANSFORM_DURATION

logger = logging.getLogger(__name__)

# HEIF encoder/decoder 등록
register_heif_opener()

# 출력 포맷 → Pillow encoder 이름
PILLOW_FORMATS = {
    "jpeg": "JPEG",
    "png": "PNG",
    "webp": "WEBP",
    "tiff": "TIFF",
    "heif": "HEIF",
}

# 압축 없이 픽셀 바이트만 출력
RAW_FORMAT = "raw"

# encoder별 허용 모드 (그 외 모드는 첫 번째 모드로 변환)
_ENCODER_MODES = {
    "JPEG": ("RGB", "L"),
    "HEIF": ("RGB", "RGBA"),
}


class PillowImageTransformer(ImageTransformPort):
    """Pillow 기반 이미지 변환기."""

    async def transform(self, source: bytes, spec: TransformSpec) -> bytes:
        start = time.perf_counter()
        output = await asyncio.to_thread(self._transform_sync, source, spec)
        fmt = spec.reformat.format if spec.reformat else "original"
        VARIANT_TRANSFORM_DURATION.labels(format=fmt).observe(time.perf_counter() - start)
        return output

    def _transform_sync(self, source: bytes, spec: TransformSpec) -> bytes:
        try:
            with Image.open(BytesIO(source)) as img:
                img.load()
                source_format = img.format
                result = self._resize(img, spec.resize) if spec.resize else img
                return self._encode(result, spec, source_format)
        except ImageTransformError:
            raise
        except (UnidentifiedImageError, OSError, ValueError, KeyError) as e:
            logger.error("Failed to process master image", extra={"error": str(e)})
            raise ImageTransformError(str(e)) from e

    @staticmethod
    def _resize(img: Image.Image, resize: ResizeSpec) -> Image.Image:
        if resize.fit is FitMode.FILL:
            logger.debug(f"Resizing image to fill {resize.width}x{resize.height}")
            return img.resize((resize.width, resize.height), Image.Resampling.LANCZOS)

        width, height = img.size
        scale = min(
            resize.width / width,
            (resize.height / height) if resize.height else resize.width / width,
            1.0,
        )
        if scale >= 1.0:
            return img
        target = (max(1, round(width * scale)), max(1, round(height * scale)))
        logger.debug(f"Resizing image inside {target[0]}x{target[1]}")
        return img.resize(target, Image.Resampling.LANCZOS)

    @staticmethod
    def _encode(img: Image.Image, spec: TransformSpec, source_format: str | None) -> bytes:
        if spec.reformat is not None and spec.reformat.format == RAW_FORMAT:
            return img.tobytes()

        if spec.reformat is not None:
            encoder = PILLOW_FORMATS.get(spec.reformat.format)
            if encoder is None:
                raise ImageTransformError(f"no encoder for {spec.reformat.format}")
            quality = spec.reformat.quality
        else:
            if source_format is None:
                raise ImageTransformError("unknown source format")
            encoder = source_format
            quality = None

        modes = _ENCODER_MODES.get(encoder)
        if modes is not None and img.mode not in modes:
            img = img.convert("RGBA" if "A" in img.getbands() and "RGBA" in modes else modes[0])

        save_kwargs = {}
        if quality is not None:
            save_kwargs["quality"] = quality

        buffer = BytesIO()
        img.save(buffer, format=encoder, **save_kwargs)
        return buffer.getvalue()
