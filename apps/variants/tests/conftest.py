"""Test fixtures for variants tests."""

from __future__ import annotations

from io import BytesIO
from unittest.mock import AsyncMock

import pytest
from PIL import Image

from variants.application.ports import CachePolicy
from variants.domain.services import EditDescriptorParser


@pytest.fixture
def parser() -> EditDescriptorParser:
    return EditDescriptorParser()


@pytest.fixture
def cache_policy() -> CachePolicy:
    return CachePolicy(
        cache_control="no-transform, max-age=31536000, s-maxage=2592000, immutable",
        expires_seconds=31536000,
        tagging="x-cvt-retention=30",
    )


@pytest.fixture
def mock_object_store() -> AsyncMock:
    """ObjectStorePort mock. 기본값: 아무 키도 없음."""
    store = AsyncMock()
    store.exists = AsyncMock(return_value=False)
    store.get = AsyncMock(return_value=b"master-bytes")
    store.put = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_transform_engine() -> AsyncMock:
    engine = AsyncMock()
    engine.transform = AsyncMock(return_value=b"processed-bytes")
    return engine


@pytest.fixture
def jpeg_bytes() -> bytes:
    """800x600 JPEG 원본."""
    buffer = BytesIO()
    Image.new("RGB", (800, 600), color=(200, 30, 30)).save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def rgba_png_bytes() -> bytes:
    buffer = BytesIO()
    Image.new("RGBA", (200, 100), color=(0, 128, 0, 128)).save(buffer, format="PNG")
    return buffer.getvalue()
