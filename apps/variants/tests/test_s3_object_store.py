"""S3ObjectStore 단위 테스트."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from variants.application.common.exceptions import ObjectStoreError
from variants.application.ports import CacheMetadata
from variants.infrastructure.storage import ObjectStoreConfig, S3ObjectStore

pytestmark = pytest.mark.asyncio


def _client_error(code: str, status: int, operation: str = "HeadObject") -> ClientError:
    return ClientError(
        {
            "Error": {"Code": code, "Message": code},
            "ResponseMetadata": {"HTTPStatusCode": status},
        },
        operation,
    )


@pytest.fixture
def mock_s3_client() -> MagicMock:
    client = MagicMock()
    client.head_object = MagicMock(return_value={"ETag": '"abc"'})
    body = MagicMock()
    body.read = MagicMock(return_value=b"image-bytes")
    client.get_object = MagicMock(return_value={"Body": body})
    client.put_object = MagicMock(return_value={})
    return client


@pytest.fixture
def store(mock_s3_client: MagicMock) -> S3ObjectStore:
    return S3ObjectStore(
        ObjectStoreConfig(bucket="test-bucket", region="us-east-1"),
        s3_client=mock_s3_client,
    )


class TestExists:
    """exists 테스트."""

    async def test_existing_key(self, store: S3ObjectStore, mock_s3_client: MagicMock) -> None:
        assert await store.exists("images/abc.jpg") is True
        mock_s3_client.head_object.assert_called_once_with(
            Bucket="test-bucket", Key="images/abc.jpg"
        )

    @pytest.mark.parametrize(
        ("code", "status"),
        [("404", 404), ("NoSuchKey", 404), ("NotFound", 404), ("Unknown", 404)],
    )
    async def test_not_found_is_false(
        self, store: S3ObjectStore, mock_s3_client: MagicMock, code: str, status: int
    ) -> None:
        """Not found는 예외가 아니라 False."""
        mock_s3_client.head_object.side_effect = _client_error(code, status)

        assert await store.exists("missing.jpg") is False

    async def test_other_client_error_propagates(
        self, store: S3ObjectStore, mock_s3_client: MagicMock
    ) -> None:
        mock_s3_client.head_object.side_effect = _client_error("AccessDenied", 403)

        with pytest.raises(ObjectStoreError) as exc_info:
            await store.exists("secret.jpg")

        assert exc_info.value.operation == "exists"
        assert exc_info.value.key == "secret.jpg"

    async def test_connection_error_propagates(
        self, store: S3ObjectStore, mock_s3_client: MagicMock
    ) -> None:
        mock_s3_client.head_object.side_effect = EndpointConnectionError(
            endpoint_url="https://s3.amazonaws.com"
        )

        with pytest.raises(ObjectStoreError):
            await store.exists("images/abc.jpg")


class TestGet:
    """get 테스트."""

    async def test_returns_body(self, store: S3ObjectStore, mock_s3_client: MagicMock) -> None:
        assert await store.get("images/abc.jpg") == b"image-bytes"
        mock_s3_client.get_object.assert_called_once_with(
            Bucket="test-bucket", Key="images/abc.jpg"
        )
        mock_s3_client.get_object.return_value["Body"].close.assert_called_once()

    async def test_failure_propagates(
        self, store: S3ObjectStore, mock_s3_client: MagicMock
    ) -> None:
        mock_s3_client.get_object.side_effect = _client_error("NoSuchKey", 404, "GetObject")

        with pytest.raises(ObjectStoreError) as exc_info:
            await store.get("images/abc.jpg")

        assert exc_info.value.operation == "get"


class TestPut:
    """put 테스트."""

    async def test_writes_with_cache_metadata(
        self, store: S3ObjectStore, mock_s3_client: MagicMock
    ) -> None:
        expires = datetime(2030, 1, 1, tzinfo=timezone.utc)
        metadata = CacheMetadata(
            cache_control="max-age=31536000, immutable",
            expires=expires,
            tagging="x-cvt-retention=30",
        )

        await store.put("images/abc_d400.jpg", "image/jpeg", b"processed", metadata)

        mock_s3_client.put_object.assert_called_once_with(
            Bucket="test-bucket",
            Key="images/abc_d400.jpg",
            Body=b"processed",
            ContentType="image/jpeg",
            CacheControl="max-age=31536000, immutable",
            Expires=expires,
            Tagging="x-cvt-retention=30",
        )

    async def test_failure_propagates(
        self, store: S3ObjectStore, mock_s3_client: MagicMock
    ) -> None:
        mock_s3_client.put_object.side_effect = _client_error("AccessDenied", 403, "PutObject")
        metadata = CacheMetadata(
            cache_control="immutable",
            expires=datetime(2030, 1, 1, tzinfo=timezone.utc),
            tagging="x-cvt-retention=30",
        )

        with pytest.raises(ObjectStoreError):
            await store.put("k.jpg", "image/jpeg", b"x", metadata)


class TestObjectStoreConfig:
    """ObjectStoreConfig 테스트."""

    async def test_domain_name(self) -> None:
        config = ObjectStoreConfig(bucket="downloads.example.com", region="us-east-1")

        assert config.domain_name == "downloads.example.com.s3.amazonaws.com"

    async def test_blank_bucket_rejected(self) -> None:
        with pytest.raises(ValueError, match="S3 bucket"):
            ObjectStoreConfig(bucket="  ", region="us-east-1")
