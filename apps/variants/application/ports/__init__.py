"""Application Ports."""

from variants.application.ports.object_store import CacheMetadata, CachePolicy, ObjectStorePort
from variants.application.ports.transform_engine import ImageTransformPort

__all__ = ["CacheMetadata", "CachePolicy", "ImageTransformPort", "ObjectStorePort"]
