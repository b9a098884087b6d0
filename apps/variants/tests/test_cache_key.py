"""Processed key 파생 테스트."""

from __future__ import annotations

import pytest

from variants.domain.exceptions import MalformedKeyError
from variants.domain.services import EditDescriptorParser, derive_processed_key
from variants.domain.value_objects import EditDescriptor

PATH = "images/abc!_!h1.jpg"
MASTER_KEY = "images/abc.jpg"


def _descriptor(
    width: int | None = None,
    height: int | None = None,
    quality: int | None = None,
    new_format: str = "jpg",
) -> EditDescriptor:
    return EditDescriptor(
        url_path=PATH,
        image_hash="h1",
        master_key=MASTER_KEY,
        original_format="jpg",
        width=width,
        height=height,
        quality=quality,
        new_format=new_format,
    )


class TestDeriveProcessedKey:
    """derive_processed_key 테스트."""

    def test_dimensions_and_quality(self) -> None:
        """d400x300 + q80."""
        key = derive_processed_key(MASTER_KEY, _descriptor(400, 300, 80), "jpg")

        assert key == "images/abc_d400x300_q80.jpg"

    def test_width_only(self) -> None:
        key = derive_processed_key(MASTER_KEY, _descriptor(400), "jpg")

        assert key == "images/abc_d400.jpg"

    def test_quality_only(self) -> None:
        key = derive_processed_key(MASTER_KEY, _descriptor(quality=60), "jpg")

        assert key == "images/abc_q60.jpg"

    def test_reformat_only(self) -> None:
        key = derive_processed_key(MASTER_KEY, _descriptor(new_format="webp"), "webp")

        assert key == "images/abc.webp"

    def test_no_edits_equals_master(self) -> None:
        key = derive_processed_key(MASTER_KEY, _descriptor(), "jpg")

        assert key == MASTER_KEY

    def test_jpg_token_is_not_aliased(self) -> None:
        """키에는 외부 요청 토큰 그대로 (jpg → jpeg 미적용)."""
        key = derive_processed_key(MASTER_KEY, _descriptor(400), "jpg")

        assert key.endswith(".jpg")
        assert not key.endswith(".jpeg")

    def test_dimensions_before_quality(self) -> None:
        """알파벳 순서: d → q."""
        key = derive_processed_key(MASTER_KEY, _descriptor(10, 20, 30), "png")

        assert key.index("_d10x20") < key.index("_q30")

    def test_only_last_extension_stripped(self) -> None:
        key = derive_processed_key("a/b.c/photo.v2.png", _descriptor(100), "png")

        assert key == "a/b.c/photo.v2_d100.png"

    def test_master_without_extension_raises(self) -> None:
        with pytest.raises(MalformedKeyError) as exc_info:
            derive_processed_key("images/abc", _descriptor(400), "jpg")

        assert "images/abc" in exc_info.value.message

    def test_repeated_calls_are_identical(self) -> None:
        descriptor = _descriptor(400, 300, 80)

        keys = {derive_processed_key(MASTER_KEY, descriptor, "jpg") for _ in range(5)}

        assert keys == {"images/abc_d400x300_q80.jpg"}


class TestKeyDeterminismAcrossRequests:
    """요청 표기가 달라도 같은 의미면 같은 키."""

    @pytest.mark.parametrize(
        ("query", "accept", "features"),
        [
            ({"d": "400x300", "q": "80", "f": "webp"}, "", {}),
            ({"D": "400x300", "Q": "80", "F": "WEBP"}, "", {}),
            ({"q": " 80 ", "d": "400x300"}, "image/webp", {"x-cvt-auto-convert-to-webp": "true"}),
            ({"q": "80", "d": "400x300"}, "image/webp", {"X-CVT-AUTO-CONVERT-TO-WEBP": "true"}),
        ],
    )
    def test_same_key(
        self,
        parser: EditDescriptorParser,
        query: dict[str, str],
        accept: str,
        features: dict[str, str],
    ) -> None:
        descriptor = parser.parse(PATH, query, accept, features)

        key = derive_processed_key(descriptor.master_key, descriptor, descriptor.new_format)

        assert key == "images/abc_d400x300_q80.webp"
