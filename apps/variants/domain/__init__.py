"""Variants Domain Layer."""

from variants.domain.services import EditDescriptorParser, derive_processed_key
from variants.domain.value_objects import EditDescriptor, HeaderBag, TransformSpec

__all__ = [
    "EditDescriptor",
    "EditDescriptorParser",
    "HeaderBag",
    "TransformSpec",
    "derive_processed_key",
]
