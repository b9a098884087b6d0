"""Object Store Adapters."""

from variants.infrastructure.storage.s3_object_store import ObjectStoreConfig, S3ObjectStore

__all__ = ["ObjectStoreConfig", "S3ObjectStore"]
